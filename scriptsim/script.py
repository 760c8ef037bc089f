# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Script opcodes and their normalization to the canonical simulator instruction set.'''


__all__ = (
    'Ops', 'Canonical', 'Instruction', 'MAX_LITERAL_BITS',
    'normalize_opcode', 'extract_token', 'is_ignorable_line',
)

import re
from enum import Enum, IntEnum

import attr

from .errors import UnrecognizedLiteral


# Numeric literals wider than this many bits are rejected
MAX_LITERAL_BITS = 4160


class Ops(IntEnum):
    '''Bitcoin opcodes the normalizer folds into simulated instructions: the pushes, the
    hash family and the opcodes a simulation ignores.  Aliases resolve to the same member.
    '''
    OP_0 = 0x00
    OP_FALSE = OP_0
    OP_PUSHDATA1 = 0x4c
    OP_PUSHDATA2 = 0x4d
    OP_PUSHDATA4 = 0x4e
    OP_1NEGATE = 0x4f
    OP_1 = 0x51
    OP_TRUE = OP_1
    OP_2 = 0x52
    OP_3 = 0x53
    OP_4 = 0x54
    OP_5 = 0x55
    OP_6 = 0x56
    OP_7 = 0x57
    OP_8 = 0x58
    OP_9 = 0x59
    OP_10 = 0x5a
    OP_11 = 0x5b
    OP_12 = 0x5c
    OP_13 = 0x5d
    OP_14 = 0x5e
    OP_15 = 0x5f
    OP_16 = 0x60

    # crypto
    OP_RIPEMD160 = 0xa6
    OP_SHA1 = 0xa7
    OP_SHA256 = 0xa8
    OP_HASH160 = 0xa9
    OP_HASH256 = 0xaa
    OP_CODESEPARATOR = 0xab

    # expansion
    OP_CHECKLOCKTIMEVERIFY = 0xb1
    OP_NOP2 = OP_CHECKLOCKTIMEVERIFY
    OP_CHECKSEQUENCEVERIFY = 0xb2
    OP_NOP3 = OP_CHECKSEQUENCEVERIFY


class Canonical(Enum):
    '''The closed set of instructions the simulator gives semantics to.'''
    # control
    OP_NOP = 'OP_NOP'
    OP_IF = 'OP_IF'
    OP_NOTIF = 'OP_NOTIF'
    OP_ELSE = 'OP_ELSE'
    OP_ENDIF = 'OP_ENDIF'
    OP_VERIFY = 'OP_VERIFY'
    OP_RETURN = 'OP_RETURN'

    # stack ops
    OP_TOALTSTACK = 'OP_TOALTSTACK'
    OP_FROMALTSTACK = 'OP_FROMALTSTACK'
    OP_2DROP = 'OP_2DROP'
    OP_2DUP = 'OP_2DUP'
    OP_3DUP = 'OP_3DUP'
    OP_2OVER = 'OP_2OVER'
    OP_2ROT = 'OP_2ROT'
    OP_2SWAP = 'OP_2SWAP'
    OP_IFDUP = 'OP_IFDUP'
    OP_DEPTH = 'OP_DEPTH'
    OP_DROP = 'OP_DROP'
    OP_DUP = 'OP_DUP'
    OP_NIP = 'OP_NIP'
    OP_OVER = 'OP_OVER'
    OP_PICK = 'OP_PICK'
    OP_ROLL = 'OP_ROLL'
    OP_ROT = 'OP_ROT'
    OP_SWAP = 'OP_SWAP'
    OP_TUCK = 'OP_TUCK'

    # string ops
    OP_CAT = 'OP_CAT'
    OP_SIZE = 'OP_SIZE'
    OP_EQUAL = 'OP_EQUAL'
    OP_EQUALVERIFY = 'OP_EQUALVERIFY'

    # numeric
    OP_1ADD = 'OP_1ADD'
    OP_1SUB = 'OP_1SUB'
    OP_2MUL = 'OP_2MUL'
    OP_2DIV = 'OP_2DIV'
    OP_NEGATE = 'OP_NEGATE'
    OP_ABS = 'OP_ABS'
    OP_NOT = 'OP_NOT'
    OP_0NOTEQUAL = 'OP_0NOTEQUAL'
    OP_ADD = 'OP_ADD'
    OP_SUB = 'OP_SUB'
    OP_MUL = 'OP_MUL'
    OP_DIV = 'OP_DIV'
    OP_MOD = 'OP_MOD'
    OP_BOOLAND = 'OP_BOOLAND'
    OP_BOOLOR = 'OP_BOOLOR'
    OP_NUMEQUAL = 'OP_NUMEQUAL'
    OP_NUMEQUALVERIFY = 'OP_NUMEQUALVERIFY'
    OP_NUMNOTEQUAL = 'OP_NUMNOTEQUAL'
    OP_LESSTHAN = 'OP_LESSTHAN'
    OP_GREATERTHAN = 'OP_GREATERTHAN'
    OP_LESSTHANOREQUAL = 'OP_LESSTHANOREQUAL'
    OP_GREATERTHANOREQUAL = 'OP_GREATERTHANOREQUAL'
    OP_MIN = 'OP_MIN'
    OP_MAX = 'OP_MAX'
    OP_WITHIN = 'OP_WITHIN'

    # simulated crypto
    OP_HASH = 'OP_HASH'
    OP_CHECKSIG = 'OP_CHECKSIG'
    OP_CHECKSIGVERIFY = 'OP_CHECKSIGVERIFY'
    OP_CHECKSIGADD = 'OP_CHECKSIGADD'
    OP_CHECKMULTISIG = 'OP_CHECKMULTISIG'
    OP_CHECKMULTISIGVERIFY = 'OP_CHECKMULTISIGVERIFY'

    # pushes carrying an immediate
    OP_NUMBER = 'OP_NUMBER'
    OP_PUSHBYTES = 'OP_PUSHBYTES'

    def is_conditional(self):
        return self in _conditionals


_conditionals = frozenset((Canonical.OP_IF, Canonical.OP_NOTIF, Canonical.OP_ELSE,
                           Canonical.OP_ENDIF))


@attr.s(slots=True, frozen=True)
class Instruction:
    '''A normalized instruction.  op is None for opcodes the simulator does not model.'''
    token = attr.ib()
    op = attr.ib()
    immediate = attr.ib(default=None)

    @property
    def name(self):
        return self.token if self.op is None else self.op.name

    def __str__(self):
        if self.immediate is None:
            return self.name
        return f'{self.name} {self.immediate}'


# Opcodes that need more study or can be ignored in a simulation
_nop_ops = frozenset((
    Ops.OP_CHECKLOCKTIMEVERIFY, Ops.OP_CHECKSEQUENCEVERIFY, Ops.OP_PUSHDATA1,
    Ops.OP_PUSHDATA2, Ops.OP_PUSHDATA4, Ops.OP_CODESEPARATOR,
))
_hash_ops = frozenset((
    Ops.OP_RIPEMD160, Ops.OP_SHA1, Ops.OP_SHA256, Ops.OP_HASH160, Ops.OP_HASH256,
))
_immediate_ops = frozenset((Canonical.OP_NUMBER, Canonical.OP_PUSHBYTES))
_number_ops = {Ops.OP_0: 0, Ops.OP_1NEGATE: -1}
_number_ops.update((Ops(Ops.OP_1 + n), n + 1) for n in range(16))

_hex_re = re.compile(r'0[xX]([0-9a-fA-F]+)')
_octal_re = re.compile(r'0[oO]([0-7]+)')
_decimal_re = re.compile(r'\d+')
_token_re = re.compile(r'(OP_\w+|\b0[oO][0-7]+\b|\b0[xX][0-9a-fA-F]+\b|\b\d+\b)')


def _parse_literal_token(token):
    '''Return the value of a bare numeric literal token, or None.'''
    for regex, base in ((_hex_re, 16), (_octal_re, 8)):
        match = regex.fullmatch(token)
        if match:
            return int(match.group(1), base)
    if _decimal_re.fullmatch(token):
        return int(token, 10)
    return None


def normalize_opcode(token, max_literal_bits=MAX_LITERAL_BITS):
    '''Map a raw instruction token to an Instruction.

    Ignorable opcodes become OP_NOP, the hash family OP_HASH, small-number opcodes OP_NUMBER
    and numeric literals OP_PUSHBYTES.  Numeric literals wider than max_literal_bits raise
    UnrecognizedLiteral.  Other tokens map to their Canonical member if there is one;
    otherwise op is None.
    '''
    token = token.strip()
    op = Ops.__members__.get(token)
    if op in _nop_ops:
        return Instruction(token, Canonical.OP_NOP)
    if op in _hash_ops:
        return Instruction(token, Canonical.OP_HASH)
    if op in _number_ops:
        return Instruction(token, Canonical.OP_NUMBER, _number_ops[op])

    value = _parse_literal_token(token)
    if value is not None:
        if value.bit_length() > max_literal_bits:
            raise UnrecognizedLiteral(f'literal of {value.bit_length():,d} bits exceeds the '
                                      f'limit of {max_literal_bits:,d} bits')
        return Instruction(token, Canonical.OP_PUSHBYTES, value)

    op = Canonical.__members__.get(token)
    if op in _immediate_ops:
        op = None
    return Instruction(token, op)


def extract_token(line):
    '''Return the first opcode mnemonic or numeric literal on a line, or None.'''
    match = _token_re.search(line)
    return match.group(0) if match else None


def is_ignorable_line(line, comment_marker='//'):
    '''Blank lines and comment lines are not instructions.'''
    line = line.strip()
    return not line or line.startswith(comment_marker)
