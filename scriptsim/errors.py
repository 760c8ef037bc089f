# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Exception hierarchy.'''

__all__ = (
    'ScriptError', 'HeaderError', 'InterpreterError',
    'StackUnderflow', 'InsufficientDeclaredOperands', 'NotANumber',
    'VerifyFailed', 'VerificationFailed', 'EqualVerifyFailed', 'NumEqualVerifyFailed',
    'CheckSigVerifyFailed', 'CheckMultiSigVerifyFailed',
    'UnbalancedConditional', 'ElseWithoutIf', 'UnrecognizedLiteral', 'DivisionByZero',
    'OpReturnError', 'InvalidOpcode', 'NumericOverflow',
)


#
# Exception Hierarchy
#


class ScriptError(Exception):
    '''Base class for script errors.'''


class HeaderError(ScriptError):
    '''Raised when a script block has no parseable initial-stack header.'''


class InterpreterError(ScriptError):
    '''Base class for interpreter errors.'''


class StackUnderflow(InterpreterError):
    '''Raised when an opcode wants to access items beyond the stack depth.'''

    def __init__(self, op, required, available, stack_name='stack'):
        super().__init__(op, required, available, stack_name)
        self.op = op
        self.required = required
        self.available = available
        self.stack_name = stack_name

    def __str__(self):
        return (f'{self.op} requires {self.stack_name} depth of {self.required:,d} but '
                f'depth is {self.available:,d}')


class InsufficientDeclaredOperands(StackUnderflow):
    '''Raised when a multisig count declares more operands than the stack holds.'''

    def __init__(self, op, what, required, available):
        super().__init__(op, required, available)
        self.what = what

    def __str__(self):
        if self.required < 0:
            return f'{self.op} declared a negative number of {self.what}: {self.required:,d}'
        return (f'{self.op} declared {self.required:,d} {self.what} but only '
                f'{self.available:,d} stack items remain')


class NotANumber(InterpreterError):
    '''Raised when a stack value used as a number does not parse as one.'''

    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return f'invalid number: {self.value!r}'


class VerifyFailed(InterpreterError):
    '''OP_VERIFY was executed and the top of stack was zero.'''

    def __str__(self):
        return super().__str__() or 'verification failed'


# The name used by the editor-facing documentation
VerificationFailed = VerifyFailed


class EqualVerifyFailed(VerifyFailed):
    '''OP_EQUALVERIFY was executed and it failed.'''


class NumEqualVerifyFailed(VerifyFailed):
    '''OP_NUMEQUALVERIFY was executed and it failed.'''


class CheckSigVerifyFailed(VerifyFailed):
    '''OP_CHECKSIGVERIFY was executed and it failed.'''


class CheckMultiSigVerifyFailed(VerifyFailed):
    '''OP_CHECKMULTISIGVERIFY was executed and it failed.'''


class UnbalancedConditional(InterpreterError):
    '''Raised when a script contains unexpected OP_ELSE, OP_ENDIF conditionals, or if
    open condition blocks are unterminated and balance is required.'''


class ElseWithoutIf(UnbalancedConditional):
    '''Raised when OP_ELSE is encountered outside an OP_IF or OP_NOTIF block.'''


class UnrecognizedLiteral(InterpreterError):
    '''Raised when a numeric literal lies outside the representable bound.'''


class DivisionByZero(InterpreterError):
    '''Raised when a division or modulo by zero is executed.'''


class OpReturnError(InterpreterError):
    '''OP_RETURN was encountered.'''


class InvalidOpcode(InterpreterError):
    '''Raised when an unmodelled opcode is encountered and unknown opcodes are rejected.'''


class NumericOverflow(InterpreterError):
    '''Raised when a numeric result cannot be represented.'''
