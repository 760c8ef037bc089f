# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Stack values.

A stack value is either a number (an int or a float) or text (a str).  Text is produced by
header literals, OP_CAT and simulated hashing; arithmetic funnels every operand through
to_number().
'''

__all__ = (
    'to_number', 'cast_to_bool', 'is_zero', 'display_value', 'parse_literal',
)

import math
import re

from .errors import NotANumber

_int_re = re.compile(r'[+-]?\d+')
_prefixed_re = re.compile(r'([+-]?)0([xXoObB])([0-9a-fA-F]+)')
_float_re = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')
_bases = {'x': 16, 'o': 8, 'b': 2}


def _parse_number(text):
    '''Return the number text represents, or None.'''
    text = text.strip()
    if _int_re.fullmatch(text):
        return int(text, 10)
    match = _prefixed_re.fullmatch(text)
    if match:
        sign, base, digits = match.groups()
        try:
            value = int(digits, _bases[base.lower()])
        except ValueError:
            return None
        return -value if sign == '-' else value
    if _float_re.fullmatch(text):
        value = float(text)
        # '1e400' parses to inf
        if math.isfinite(value):
            return value
    return None


def to_number(value):
    '''Return value as a number, raising NotANumber if it is text that is not numeric.'''
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise NotANumber(value)
        return value
    number = _parse_number(str(value))
    if number is None:
        raise NotANumber(value)
    return number


def is_zero(value):
    return to_number(value) == 0


def cast_to_bool(value):
    '''Cast a value to a Python boolean.  Text that is not numeric raises NotANumber.'''
    return not is_zero(value)


def display_value(value):
    '''The form of a value shown in stack snapshots.'''
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def parse_literal(text):
    '''Convert a header literal to a value: numeric literals become numbers, anything else
    stays text.'''
    text = text.strip()
    number = _parse_number(text)
    if number is None or isinstance(number, float):
        return text
    return number
