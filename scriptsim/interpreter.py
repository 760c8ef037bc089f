# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Script simulator.'''

__all__ = (
    'SimulatorFlags', 'SimulatorPolicy', 'Condition', 'ExecutionState',
    'Rendered', 'Failed', 'BlockResult',
    'opcode_semantics', 'push_number', 'push_bytes', 'execute_instruction', 'evaluate_block',
)


import logging
import math
import operator
from enum import IntFlag
from functools import partial

import attr

from .errors import (
    ScriptError, StackUnderflow, InsufficientDeclaredOperands, VerifyFailed,
    EqualVerifyFailed, NumEqualVerifyFailed, CheckSigVerifyFailed, CheckMultiSigVerifyFailed,
    UnbalancedConditional, ElseWithoutIf, DivisionByZero, OpReturnError, InvalidOpcode,
    NumericOverflow,
)
from .misc import line_label
from .script import (
    Canonical, MAX_LITERAL_BITS, normalize_opcode, extract_token, is_ignorable_line,
)
from .source import parse_stack_header
from .stack import Stack
from .values import to_number, cast_to_bool, display_value


logger = logging.getLogger('interpreter')


class SimulatorFlags(IntFlag):
    # Fail on executed opcodes the simulator does not model instead of ignoring them
    REJECT_UNKNOWN_OPCODES = 1 << 0
    # Fail on OP_ENDIF without OP_IF, and on conditions left open at the end of a block
    REQUIRE_BALANCED_CONDITIONALS = 1 << 1


@attr.s(slots=True)
class SimulatorPolicy:
    '''Simulation rules.  The default policy is permissive: unknown opcodes are no-ops and
    conditionals need not balance.'''
    flags = attr.ib(default=SimulatorFlags(0), converter=SimulatorFlags)
    # Numeric literals wider than this are rejected
    max_literal_bits = attr.ib(default=MAX_LITERAL_BITS)
    # Lines starting with this are not instructions
    comment_marker = attr.ib(default='//')


SimulatorPolicy.DEFAULT = SimulatorPolicy()


@attr.s(slots=True)
class Condition:
    '''Represents an open condition block whilst executing.'''
    opcode = attr.ib()       # OP_IF or OP_NOTIF
    condition = attr.ib()    # The branch flag; False if the block was not evaluated
    execute = attr.ib()      # True or False; flips on OP_ELSE
    seen_else = attr.ib(default=False)


class ExecutionState:
    '''Interpreter state: the main and alt stacks and the open condition blocks.

    States are values.  execute() returns a new state and never modifies its receiver, so
    a state remains valid after a later instruction fails.
    '''

    def __init__(self, main=(), alt=(), conditions=(), policy=None):
        self.main = Stack(main, 'main')
        self.alt = Stack(alt, 'alt')
        self.conditions = [attr.evolve(condition) for condition in conditions]
        self.policy = policy or SimulatorPolicy.DEFAULT
        # The opcode that produced this state
        self.last_op = None

    @classmethod
    def from_lists(cls, main, alt=(), policy=None):
        return cls(main, alt, policy=policy)

    @classmethod
    def from_header(cls, text, policy=None):
        '''Construct the initial state from a header such as "[3, 4] [C]".'''
        main, alt = parse_stack_header(text)
        return cls(main, alt, policy=policy)

    def __eq__(self, other):
        if not isinstance(other, ExecutionState):
            return NotImplemented
        return (self.main == other.main and self.alt == other.alt
                and self.conditions == other.conditions)

    def __repr__(self):
        return (f'ExecutionState(main={self.main.to_display_string()}, '
                f'alt={self.alt.to_display_string()}, conditions={self.conditions!r})')

    def copy(self):
        return ExecutionState(self.main, self.alt, self.conditions, self.policy)

    @property
    def branch_condition(self):
        '''The flag of the innermost open IF / NOTIF, or None outside conditionals.

        A block opened inside a branch not taken reports False.
        '''
        return self.conditions[-1].condition if self.conditions else None

    @property
    def should_continue(self):
        return all(condition.execute for condition in self.conditions)

    def snapshot(self):
        return self.main.to_display_string(), self.alt.to_display_string()

    def will_execute(self, instruction):
        '''True if executing instruction runs its body rather than skipping it.'''
        op = instruction.op
        if op is None:
            return False
        return op.is_conditional() or self.should_continue

    def execute(self, instruction):
        '''Return the state after executing instruction.

        Raises a ScriptError subclass on failure; self is unchanged either way.
        '''
        op = instruction.op
        if op is None:
            if (self.should_continue
                    and self.policy.flags & SimulatorFlags.REJECT_UNKNOWN_OPCODES):
                raise InvalidOpcode(f'invalid opcode {instruction.token}')
            return self
        if not self.will_execute(instruction):
            return self
        return opcode_semantics(op, instruction.immediate)(self)

    def op_name(self):
        return self.last_op.name if self.last_op else 'operation'

    def require_stack_depth(self, depth):
        if len(self.main) < depth:
            raise StackUnderflow(self.op_name(), depth, len(self.main), 'main')

    def require_alt_stack(self):
        if not self.alt:
            raise StackUnderflow(self.op_name(), 1, 0, 'alt')

    def require_true(self, exception):
        # (true -- ) or (false -- false) and raise
        if not cast_to_bool(self.main.peek()):
            raise exception
        self.main.pop()

    #
    # Control
    #
    def on_NOP(self):
        pass

    def on_IF(self, op):
        condition = False
        if self.should_continue:
            self.require_stack_depth(1)
            condition = cast_to_bool(self.main.pop())
            if op == Canonical.OP_NOTIF:
                condition = not condition
        self.conditions.append(Condition(op, condition, condition))

    def on_ELSE(self):
        if not self.conditions:
            raise ElseWithoutIf('OP_ELSE without matching OP_IF')
        top_condition = self.conditions[-1]
        top_condition.execute = not top_condition.execute
        top_condition.seen_else = True

    def on_ENDIF(self):
        if not self.conditions:
            if self.policy.flags & SimulatorFlags.REQUIRE_BALANCED_CONDITIONALS:
                raise UnbalancedConditional('unexpected OP_ENDIF')
            return
        self.conditions.pop()

    def on_VERIFY(self):
        self.require_stack_depth(1)
        self.require_true(VerifyFailed())

    def on_RETURN(self):
        raise OpReturnError('OP_RETURN encountered')

    #
    # Stack operations
    #
    def on_TOALTSTACK(self):
        self.require_stack_depth(1)
        self.alt.push(self.main.pop())

    def on_FROMALTSTACK(self):
        self.require_alt_stack()
        self.main.push(self.alt.pop())

    def on_DROP(self):
        # (x -- )
        self.require_stack_depth(1)
        self.main.pop()

    def on_2DROP(self):
        # (x1 x2 -- )
        self.require_stack_depth(2)
        self.main.pop()
        self.main.pop()

    def on_nDUP(self, n):
        # (x -- x x) or (x1 x2 -- x1 x2 x1 x2) or (x1 x2 x3 -- x1 x2 x3 x1 x2 x3)
        self.require_stack_depth(n)
        self.main.extend(self.main[-n:])

    def on_OVER(self):
        # (x1 x2 -- x1 x2 x1)
        self.require_stack_depth(2)
        self.main.push(self.main.peek_nth(1))

    def on_2OVER(self):
        # (x1 x2 x3 x4 -- x1 x2 x3 x4 x1 x2)
        self.require_stack_depth(4)
        self.main.extend(self.main[-4: -2])

    def on_ROT(self):
        # (x1 x2 x3 -- x2 x3 x1)
        self.require_stack_depth(3)
        self.main.push(self.main.pop_nth(2))

    def on_2ROT(self):
        # (x1 x2 x3 x4 x5 x6 -- x3 x4 x5 x6 x1 x2)
        self.require_stack_depth(6)
        self.main.extend([self.main.pop_nth(5), self.main.pop_nth(4)])

    def on_SWAP(self):
        # ( x1 x2 -- x2 x1 )
        self.require_stack_depth(2)
        self.main.push(self.main.pop_nth(1))

    def on_2SWAP(self):
        # (x1 x2 x3 x4 -- x3 x4 x1 x2)
        self.require_stack_depth(4)
        self.main.extend([self.main.pop_nth(3), self.main.pop_nth(2)])

    def on_IFDUP(self):
        # (x - 0 | x x)
        self.require_stack_depth(1)
        last = self.main.peek()
        if cast_to_bool(last):
            self.main.push(last)

    def on_DEPTH(self):
        # ( -- stacksize)
        self.main.push(len(self.main))

    def on_NIP(self):
        # (x1 x2 -- x2)
        self.require_stack_depth(2)
        self.main.pop_nth(1)

    def on_TUCK(self):
        # ( x1 x2 -- x2 x1 x2 )
        self.require_stack_depth(2)
        self.main.insert(2, self.main.peek())

    def on_PICK_ROLL(self, op):
        # pick: (xn ... x2 x1 x0 n - xn ... x2 x1 x0 xn)
        # roll: (xn ... x2 x1 x0 n - ... x2 x1 x0 xn)
        self.require_stack_depth(1)
        n = int(to_number(self.main.peek()))
        self.main.pop()
        depth = len(self.main)
        if not 0 <= n < depth:
            raise StackUnderflow(op.name, max(n, 0) + 1, depth, 'main')
        if op == Canonical.OP_PICK:
            self.main.push(self.main.peek_nth(n))
        else:
            self.main.push(self.main.pop_nth(n))

    #
    # String operations
    #
    def on_CAT(self):
        # (x1 x2 -- x2||x1)
        self.require_stack_depth(2)
        x2 = self.main.pop()
        x1 = self.main.pop()
        self.main.push(f'{display_value(x2)}||{display_value(x1)}')

    def on_SIZE(self):
        # ( x -- x size(x) )
        self.require_stack_depth(1)
        self.main.push(len(display_value(self.main.peek())))

    def on_EQUAL(self):
        # (x1 x2 -- bool).   Structural equality without numeric coercion
        self.require_stack_depth(2)
        self.main.push(int(self.main.pop() == self.main.pop()))

    def on_EQUALVERIFY(self):
        # (x1 x2 -- )
        self.on_EQUAL()
        self.require_true(EqualVerifyFailed('OP_EQUALVERIFY failed'))

    #
    # Numeric
    #
    def on_unary_numeric(self, unary_op):
        # (x -- out)
        self.require_stack_depth(1)
        value = to_number(self.main.peek())
        result = checked_result(unary_op, value)
        self.main.pop()
        self.main.push(result)

    def on_binary_numeric(self, binary_op):
        # (x1 x2 -- out)
        self.require_stack_depth(2)
        x1 = to_number(self.main.peek_nth(1))
        x2 = to_number(self.main.peek())
        try:
            result = checked_result(binary_op, x1, x2)
        except ZeroDivisionError:
            raise DivisionByZero('division by zero' if binary_op is bitcoin_div
                                 else 'modulo by zero') from None
        self.main.pop()
        self.main.pop()
        self.main.push(result)

    def on_NUMEQUALVERIFY(self):
        # (x1 x2 -- )
        self.on_binary_numeric(numeric_eq)
        self.require_true(NumEqualVerifyFailed('OP_NUMEQUALVERIFY failed'))

    def on_WITHIN(self):
        # (x min max -- out)    True if x is >= min and < max.
        self.require_stack_depth(3)
        x = to_number(self.main.peek_nth(2))
        mn = to_number(self.main.peek_nth(1))
        mx = to_number(self.main.peek())
        for _ in range(3):
            self.main.pop()
        self.main.push(int(mn <= x < mx))

    #
    # Simulated crypto
    #
    def on_HASH(self):
        # (x -- Hash(x))
        self.require_stack_depth(1)
        self.main.push(f'Hash({display_value(self.main.pop())})')

    def on_CHECKSIG(self):
        # (sig pubkey -- 1)   Signatures always check
        self.require_stack_depth(2)
        self.main.pop()
        self.main.pop()
        self.main.push(1)

    def on_CHECKSIGVERIFY(self):
        # (sig pubkey -- )
        self.on_CHECKSIG()
        self.require_true(CheckSigVerifyFailed('OP_CHECKSIGVERIFY failed'))

    def on_CHECKSIGADD(self):
        # (n sig pubkey -- n+1)
        self.require_stack_depth(3)
        count = to_number(self.main.peek_nth(2))
        for _ in range(3):
            self.main.pop()
        self.main.push(count + 1)

    def pop_declared_count(self, what):
        count = int(to_number(self.main.pop()))
        if not 0 <= count <= len(self.main):
            raise InsufficientDeclaredOperands(self.op_name(), what, count, len(self.main))
        return count

    def on_CHECKMULTISIG(self):
        # (dummy [sig ...] sig_count [pubkey ...] pubkey_count -- 1)
        self.require_stack_depth(1)
        key_count = self.pop_declared_count('public keys')
        for _ in range(key_count):
            self.main.pop()
        self.require_stack_depth(1)
        sig_count = self.pop_declared_count('signatures')
        for _ in range(sig_count):
            self.main.pop()
        # An old CHECKMULTISIG bug consumes an extra argument
        self.require_stack_depth(1)
        self.main.pop()
        self.main.push(1)

    def on_CHECKMULTISIGVERIFY(self):
        self.on_CHECKMULTISIG()
        self.require_true(CheckMultiSigVerifyFailed('OP_CHECKMULTISIGVERIFY failed'))

    #
    # Pushes
    #
    def on_push(self, value):
        self.main.push(value)

    @classmethod
    def bind_handlers(cls):
        handlers = {}

        #
        # Control
        #
        handlers[Canonical.OP_NOP] = cls.on_NOP
        handlers[Canonical.OP_IF] = partial(cls.on_IF, op=Canonical.OP_IF)
        handlers[Canonical.OP_NOTIF] = partial(cls.on_IF, op=Canonical.OP_NOTIF)
        handlers[Canonical.OP_ELSE] = cls.on_ELSE
        handlers[Canonical.OP_ENDIF] = cls.on_ENDIF
        handlers[Canonical.OP_VERIFY] = cls.on_VERIFY
        handlers[Canonical.OP_RETURN] = cls.on_RETURN

        #
        # Stack operations
        #
        handlers[Canonical.OP_TOALTSTACK] = cls.on_TOALTSTACK
        handlers[Canonical.OP_FROMALTSTACK] = cls.on_FROMALTSTACK
        handlers[Canonical.OP_DROP] = cls.on_DROP
        handlers[Canonical.OP_2DROP] = cls.on_2DROP
        handlers[Canonical.OP_DUP] = partial(cls.on_nDUP, n=1)
        handlers[Canonical.OP_2DUP] = partial(cls.on_nDUP, n=2)
        handlers[Canonical.OP_3DUP] = partial(cls.on_nDUP, n=3)
        handlers[Canonical.OP_OVER] = cls.on_OVER
        handlers[Canonical.OP_2OVER] = cls.on_2OVER
        handlers[Canonical.OP_2ROT] = cls.on_2ROT
        handlers[Canonical.OP_2SWAP] = cls.on_2SWAP
        handlers[Canonical.OP_IFDUP] = cls.on_IFDUP
        handlers[Canonical.OP_DEPTH] = cls.on_DEPTH
        handlers[Canonical.OP_NIP] = cls.on_NIP
        handlers[Canonical.OP_PICK] = partial(cls.on_PICK_ROLL, op=Canonical.OP_PICK)
        handlers[Canonical.OP_ROLL] = partial(cls.on_PICK_ROLL, op=Canonical.OP_ROLL)
        handlers[Canonical.OP_ROT] = cls.on_ROT
        handlers[Canonical.OP_SWAP] = cls.on_SWAP
        handlers[Canonical.OP_TUCK] = cls.on_TUCK

        #
        # String operations
        #
        handlers[Canonical.OP_CAT] = cls.on_CAT
        handlers[Canonical.OP_SIZE] = cls.on_SIZE
        handlers[Canonical.OP_EQUAL] = cls.on_EQUAL
        handlers[Canonical.OP_EQUALVERIFY] = cls.on_EQUALVERIFY

        #
        # Numeric
        #
        handlers[Canonical.OP_1ADD] = partial(cls.on_unary_numeric, unary_op=lambda x: x + 1)
        handlers[Canonical.OP_1SUB] = partial(cls.on_unary_numeric, unary_op=lambda x: x - 1)
        handlers[Canonical.OP_2MUL] = partial(cls.on_unary_numeric, unary_op=lambda x: x * 2)
        handlers[Canonical.OP_2DIV] = partial(cls.on_unary_numeric,
                                              unary_op=lambda x: bitcoin_div(x, 2))
        handlers[Canonical.OP_NEGATE] = partial(cls.on_unary_numeric, unary_op=operator.neg)
        handlers[Canonical.OP_ABS] = partial(cls.on_unary_numeric, unary_op=operator.abs)
        handlers[Canonical.OP_NOT] = partial(cls.on_unary_numeric, unary_op=logical_not)
        handlers[Canonical.OP_0NOTEQUAL] = partial(cls.on_unary_numeric, unary_op=logical_truth)
        handlers[Canonical.OP_ADD] = partial(cls.on_binary_numeric, binary_op=operator.add)
        handlers[Canonical.OP_SUB] = partial(cls.on_binary_numeric, binary_op=operator.sub)
        handlers[Canonical.OP_MUL] = partial(cls.on_binary_numeric, binary_op=operator.mul)
        handlers[Canonical.OP_DIV] = partial(cls.on_binary_numeric, binary_op=bitcoin_div)
        handlers[Canonical.OP_MOD] = partial(cls.on_binary_numeric, binary_op=bitcoin_mod)
        handlers[Canonical.OP_BOOLAND] = partial(cls.on_binary_numeric, binary_op=logical_and)
        handlers[Canonical.OP_BOOLOR] = partial(cls.on_binary_numeric, binary_op=logical_or)
        handlers[Canonical.OP_NUMEQUAL] = partial(cls.on_binary_numeric, binary_op=numeric_eq)
        handlers[Canonical.OP_NUMEQUALVERIFY] = cls.on_NUMEQUALVERIFY
        handlers[Canonical.OP_NUMNOTEQUAL] = partial(cls.on_binary_numeric,
                                                     binary_op=comparison(operator.ne))
        handlers[Canonical.OP_LESSTHAN] = partial(cls.on_binary_numeric,
                                                  binary_op=comparison(operator.lt))
        handlers[Canonical.OP_GREATERTHAN] = partial(cls.on_binary_numeric,
                                                     binary_op=comparison(operator.gt))
        handlers[Canonical.OP_LESSTHANOREQUAL] = partial(cls.on_binary_numeric,
                                                         binary_op=comparison(operator.le))
        handlers[Canonical.OP_GREATERTHANOREQUAL] = partial(cls.on_binary_numeric,
                                                            binary_op=comparison(operator.ge))
        handlers[Canonical.OP_MIN] = partial(cls.on_binary_numeric, binary_op=min)
        handlers[Canonical.OP_MAX] = partial(cls.on_binary_numeric, binary_op=max)
        handlers[Canonical.OP_WITHIN] = cls.on_WITHIN

        #
        # Simulated crypto
        #
        handlers[Canonical.OP_HASH] = cls.on_HASH
        handlers[Canonical.OP_CHECKSIG] = cls.on_CHECKSIG
        handlers[Canonical.OP_CHECKSIGVERIFY] = cls.on_CHECKSIGVERIFY
        handlers[Canonical.OP_CHECKSIGADD] = cls.on_CHECKSIGADD
        handlers[Canonical.OP_CHECKMULTISIG] = cls.on_CHECKMULTISIG
        handlers[Canonical.OP_CHECKMULTISIGVERIFY] = cls.on_CHECKMULTISIGVERIFY

        missing = set(Canonical) - set(handlers) - set(immediate_constructors)
        if missing:
            names = ', '.join(sorted(op.name for op in missing))
            raise RuntimeError(f'no handler bound for {names}')

        cls._handlers = handlers


def _transformer(op, handler):
    def transform(state):
        result = state.copy()
        result.last_op = op
        handler(result)
        return result
    return transform


def push_number(value):
    '''Return a state transformer that pushes value, for OP_0 ... OP_16 and OP_1NEGATE.'''
    return _transformer(Canonical.OP_NUMBER, partial(ExecutionState.on_push, value=value))


def push_bytes(value):
    '''Return a state transformer that pushes the value of a numeric literal.'''
    return _transformer(Canonical.OP_PUSHBYTES, partial(ExecutionState.on_push, value=value))


immediate_constructors = {
    Canonical.OP_NUMBER: push_number,
    Canonical.OP_PUSHBYTES: push_bytes,
}


def opcode_semantics(op, immediate=None):
    '''Return the semantics of a canonical opcode as a function from state to new state.

    The function raises ScriptError subclasses on failure without modifying its argument.
    '''
    constructor = immediate_constructors.get(op)
    if constructor is not None:
        if immediate is None:
            raise ValueError(f'{op.name} requires an immediate value')
        return constructor(immediate)
    return _transformer(op, ExecutionState._handlers[op])


def execute_instruction(state, instruction):
    '''Execute one instruction.  Returns a (state, error) pair: the new state and None on
    success, otherwise the unmodified original state and the ScriptError raised.'''
    try:
        return state.execute(instruction), None
    except ScriptError as e:
        return state, e


#
# Outcomes
#

@attr.s(slots=True, frozen=True)
class Rendered:
    '''A successfully processed instruction line and the snapshot after it.

    executed is False if the instruction was skipped or is not modelled; active is False
    while inside a branch that is not taken.
    '''
    line = attr.ib()
    token = attr.ib()
    main = attr.ib()
    alt = attr.ib()
    executed = attr.ib(default=True)
    active = attr.ib(default=True)

    is_error = False

    def __str__(self):
        return f'main={self.main} alt={self.alt}'


@attr.s(slots=True, frozen=True)
class Failed:
    '''The terminal outcome of a block.  main and alt are the last good snapshot.'''
    line = attr.ib()
    token = attr.ib()
    error = attr.ib()
    main = attr.ib()
    alt = attr.ib()

    is_error = True

    @property
    def message(self):
        return str(self.error)

    @property
    def kind(self):
        return type(self.error).__name__

    def __str__(self):
        return self.message


@attr.s(slots=True)
class BlockResult:
    outcomes = attr.ib()
    # The last good state
    state = attr.ib()

    @property
    def failed(self):
        return bool(self.outcomes) and self.outcomes[-1].is_error

    @property
    def error(self):
        return self.outcomes[-1].error if self.failed else None

    @property
    def open_conditions(self):
        return len(self.state.conditions)


def evaluate_block(lines, state, *, first_line=0):
    '''Evaluate the instruction lines of a script block starting from state.

    Returns a BlockResult with one outcome per instruction line, stopping at the first
    failure.  Blank and comment lines produce no outcome.
    '''
    policy = state.policy
    outcomes = []
    line_number = first_line - 1
    for line_number, text in enumerate(lines, start=first_line):
        if is_ignorable_line(text, policy.comment_marker):
            continue

        token = extract_token(text)
        if token is None:
            main, alt = state.snapshot()
            outcomes.append(Rendered(line_number, None, main, alt, False, state.should_continue))
            continue

        try:
            instruction = normalize_opcode(token, policy.max_literal_bits)
        except ScriptError as e:
            new_state, error = state, e
        else:
            executed = state.will_execute(instruction)
            if instruction.op is None:
                logger.debug(f'{line_label(line_number)}: unmodelled opcode {token}')
            elif not executed:
                logger.debug(f'{line_label(line_number)}: skipped {token}')
            new_state, error = execute_instruction(state, instruction)

        if error is not None:
            logger.info(f'{line_label(line_number)}: {token} failed: {error}')
            main, alt = state.snapshot()
            outcomes.append(Failed(line_number, token, error, main, alt))
            return BlockResult(outcomes, state)

        state = new_state
        main, alt = state.snapshot()
        outcomes.append(Rendered(line_number, token, main, alt, executed,
                                 state.should_continue))

    if state.conditions and policy.flags & SimulatorFlags.REQUIRE_BALANCED_CONDITIONALS:
        error = UnbalancedConditional(f'unterminated {state.conditions[-1].opcode.name} '
                                      'at end of script')
        main, alt = state.snapshot()
        outcomes.append(Failed(line_number, None, error, main, alt))

    return BlockResult(outcomes, state)


def checked_result(func, *args):
    '''Apply a numeric operation, raising NumericOverflow if its result is not a finite
    number.'''
    try:
        result = func(*args)
    except OverflowError as e:
        raise NumericOverflow(f'numeric overflow: {e}') from None
    if isinstance(result, float) and not math.isfinite(result):
        raise NumericOverflow('numeric overflow: result is not finite')
    return result


def bitcoin_div(a, b):
    # In bitcoin script division is rounded towards zero
    result = abs(a) // abs(b)
    return -result if (a >= 0) ^ (b >= 0) else result


def bitcoin_mod(a, b):
    # In bitcoin script a % b is abs(a) % abs(b) with the sign of a.
    # Then (a % b) * b + a == a
    result = abs(a) % abs(b)
    return result if a >= 0 else -result


def comparison(compare):
    return lambda x1, x2: 1 if compare(x1, x2) else 0


numeric_eq = comparison(operator.eq)


def logical_and(x1, x2):
    return 1 if (x1 and x2) else 0


def logical_or(x1, x2):
    return 1 if (x1 or x2) else 0


def logical_not(x):
    return 0 if x else 1


def logical_truth(x):
    return 1 if x else 0


ExecutionState.bind_handlers()
