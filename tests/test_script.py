import pytest

from scriptsim.errors import UnrecognizedLiteral
from scriptsim.script import *


class TestCanonical:

    def test_closed_set(self):
        assert len(Canonical) == 62
        assert all(op.name == op.value for op in Canonical)

    @pytest.mark.parametrize('op', Canonical)
    def test_is_conditional(self, op):
        assert op.is_conditional() == (op.name in ('OP_IF', 'OP_NOTIF', 'OP_ELSE', 'OP_ENDIF'))


class TestInstruction:

    def test_name(self):
        assert Instruction('OP_DUP', Canonical.OP_DUP).name == 'OP_DUP'
        assert Instruction('OP_NOP5', None).name == 'OP_NOP5'

    def test_str(self):
        assert str(Instruction('OP_5', Canonical.OP_NUMBER, 5)) == 'OP_NUMBER 5'
        assert str(Instruction('OP_SHA256', Canonical.OP_HASH)) == 'OP_HASH'


class TestOps:

    def test_small_numbers_contiguous(self):
        assert [Ops.OP_1 + n for n in range(16)] == list(range(0x51, 0x61))
        assert Ops.OP_TRUE is Ops.OP_1
        assert Ops.OP_FALSE is Ops.OP_0

    @pytest.mark.parametrize('name', ('OP_DUP', 'OP_LSHIFT', 'OP_SPLIT', 'OP_NOP10', 'OP_VER'))
    def test_only_folded_opcodes(self, name):
        assert name not in Ops.__members__


class TestNormalizeOpcode:

    @pytest.mark.parametrize('token', (
        'OP_CHECKLOCKTIMEVERIFY', 'OP_CHECKSEQUENCEVERIFY', 'OP_NOP2', 'OP_NOP3',
        'OP_PUSHDATA1', 'OP_PUSHDATA2', 'OP_PUSHDATA4', 'OP_CODESEPARATOR',
    ))
    def test_ignorable(self, token):
        assert normalize_opcode(token) == Instruction(token, Canonical.OP_NOP)

    @pytest.mark.parametrize('token', (
        'OP_RIPEMD160', 'OP_SHA1', 'OP_SHA256', 'OP_HASH160', 'OP_HASH256',
    ))
    def test_hash_family(self, token):
        assert normalize_opcode(token) == Instruction(token, Canonical.OP_HASH)

    @pytest.mark.parametrize('token, value', (
        ('OP_0', 0),
        ('OP_FALSE', 0),
        ('OP_1NEGATE', -1),
        ('OP_1', 1),
        ('OP_TRUE', 1),
        ('OP_2', 2),
        ('OP_10', 10),
        ('OP_16', 16),
    ))
    def test_small_numbers(self, token, value):
        instruction = normalize_opcode(token)
        assert instruction.op is Canonical.OP_NUMBER
        assert instruction.immediate == value

    @pytest.mark.parametrize('token, value', (
        ('0x1f', 31),
        ('0XFF', 255),
        ('0o17', 15),
        ('256', 256),
        ('0', 0),
        ('077', 77),
    ))
    def test_literals(self, token, value):
        assert normalize_opcode(token) == Instruction(token, Canonical.OP_PUSHBYTES, value)

    def test_leading_zero_is_decimal(self):
        assert normalize_opcode('077').immediate == 77
        assert normalize_opcode('0o77').immediate == 63
        assert normalize_opcode('0077').immediate == 77

    def test_literal_limit(self):
        token = str(2 ** MAX_LITERAL_BITS - 1)
        assert normalize_opcode(token).immediate == 2 ** MAX_LITERAL_BITS - 1
        with pytest.raises(UnrecognizedLiteral) as e:
            normalize_opcode(str(2 ** MAX_LITERAL_BITS))
        assert 'exceeds the limit of 4,160 bits' in str(e.value)

    def test_literal_limit_configured(self):
        assert normalize_opcode('255', max_literal_bits=8).immediate == 255
        with pytest.raises(UnrecognizedLiteral):
            normalize_opcode('256', max_literal_bits=8)

    @pytest.mark.parametrize('op', [op for op in Canonical
                                    if op not in (Canonical.OP_NUMBER, Canonical.OP_PUSHBYTES)])
    def test_canonical(self, op):
        assert normalize_opcode(op.name) == Instruction(op.name, op)

    @pytest.mark.parametrize('token', (
        'OP_NOP1', 'OP_NOP10', 'OP_VER', 'OP_LSHIFT', 'OP_FOO', 'OP_NUMBER', 'OP_PUSHBYTES',
        'DUP',
    ))
    def test_unmodelled(self, token):
        instruction = normalize_opcode(token)
        assert instruction.op is None
        assert instruction.name == token
        assert instruction.immediate is None

    def test_strips(self):
        assert normalize_opcode('  OP_DUP ').op is Canonical.OP_DUP


class TestLines:

    @pytest.mark.parametrize('line, token', (
        ('OP_DUP', 'OP_DUP'),
        ('    OP_ADD // add them', 'OP_ADD'),
        ('OP_1ADD,', 'OP_1ADD'),
        ('0x1f,', '0x1f'),
        ('    0o17', '0o17'),
        ('  256, // push', '256'),
        ('let x = 12;', '12'),
        ('}', None),
        ('script! {', None),
        ('foo bar', None),
    ))
    def test_extract_token(self, line, token):
        assert extract_token(line) == token

    @pytest.mark.parametrize('line, result', (
        ('', True),
        ('    ', True),
        ('// comment OP_DUP', True),
        ('   // comment', True),
        ('OP_DUP // comment', False),
        ('}', False),
    ))
    def test_is_ignorable_line(self, line, result):
        assert is_ignorable_line(line) is result

    def test_comment_marker(self):
        assert is_ignorable_line('# OP_DUP', comment_marker='#')
        assert not is_ignorable_line('# OP_DUP')
