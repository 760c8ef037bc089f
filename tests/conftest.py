# Pytest looks here for fixtures

import pytest

from scriptsim import ExecutionState, SimulatorFlags, SimulatorPolicy, ScriptSession


policies = [
    SimulatorPolicy.DEFAULT,
    SimulatorPolicy(flags=SimulatorFlags.REJECT_UNKNOWN_OPCODES),
    SimulatorPolicy(flags=SimulatorFlags.REQUIRE_BALANCED_CONDITIONALS),
    SimulatorPolicy(flags=SimulatorFlags.REJECT_UNKNOWN_OPCODES
                    | SimulatorFlags.REQUIRE_BALANCED_CONDITIONALS),
]


# Most opcode tests run under every policy; their results must not depend on it
@pytest.fixture(params=policies)
def policy(request):
    yield request.param


@pytest.fixture
def state(policy):
    yield ExecutionState(policy=policy)


@pytest.fixture
def strict_policy():
    yield SimulatorPolicy(flags=SimulatorFlags.REJECT_UNKNOWN_OPCODES)


@pytest.fixture
def balanced_policy():
    yield SimulatorPolicy(flags=SimulatorFlags.REQUIRE_BALANCED_CONDITIONALS)


@pytest.fixture
def session():
    yield ScriptSession()
