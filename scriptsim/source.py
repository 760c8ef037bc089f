# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Locating script blocks in source documents and parsing their stack headers.

A script block starts with a header line giving the initial stacks, e.g.

    // [3, 4] [C]

followed by one instruction per line.  In a bitcoinscript document the whole document is
one block with the header on its first line.  In a rust document blocks are script! { ... }
macros or regions between // btcscript and // end-btcscript marker comments, with the
header on the line after the block start.
'''

__all__ = (
    'ScriptBlock', 'LANGUAGES', 'parse_stack_header', 'parse_stack_literal',
    'find_script_blocks',
)

import re

import attr

from .errors import HeaderError
from .values import parse_literal


LANGUAGES = ('bitcoinscript', 'rust')

_two_stacks_re = re.compile(r'\s*(\[[^\]]*])(?:,)?\s*(\[[^\]]*])')
_one_stack_re = re.compile(r'\s*(\[[^\]]*])')
_stack_contents_re = re.compile(r'\[([^\]]*)\]')
_item_separator_re = re.compile(r'\s*,\s*')
_markers = r'(?:bscript|btc-script|btcscript)'
_rust_block_re = re.compile(
    r'script!\s*{[\s\S]*?}'
    rf'|//\s*(?:start-)?{_markers}(?:-start)?[\s\S]*?//\s*(?:end-)?{_markers}(?:-end)?'
)


@attr.s(slots=True, frozen=True)
class ScriptBlock:
    # Zero-based line numbers in the document
    start_line = attr.ib()
    header_line = attr.ib()
    # Exclusive
    end_line = attr.ib()
    header = attr.ib()
    # The instruction lines header_line + 1 ... end_line - 1
    lines = attr.ib(converter=tuple)

    @property
    def first_line(self):
        return self.header_line + 1


def parse_stack_literal(text):
    '''Parse a bracketed stack literal like "[1, 0x10, foo]" into a list of values, bottom
    first.  Empty items are dropped.'''
    match = _stack_contents_re.search(text)
    if match is None:
        raise HeaderError(f'not a stack literal: {text!r}')
    contents = match.group(1)
    if not contents.strip():
        return []
    return [parse_literal(item) for item in _item_separator_re.split(contents)
            if item.strip()]


def parse_stack_header(text):
    '''Parse a header line into (main_items, alt_items).

    Accepts "[A, B] [C]", "[A, B], [C]" and "[A, B]"; the alt stack defaults to empty.
    Raises HeaderError if the line has no bracketed list.
    '''
    match = _two_stacks_re.search(text)
    if match:
        return parse_stack_literal(match.group(1)), parse_stack_literal(match.group(2))
    match = _one_stack_re.search(text)
    if match:
        return parse_stack_literal(match.group(1)), []
    raise HeaderError(f'no initial stack in header {text.strip()!r}')


def _line_number(text, offset):
    return text.count('\n', 0, offset)


def find_script_blocks(text, language):
    '''Return the list of ScriptBlocks in a document of the given language.'''
    document_lines = text.split('\n')

    def block(start_line, header_line, end_line):
        header = document_lines[header_line] if header_line < len(document_lines) else ''
        return ScriptBlock(start_line, header_line, end_line, header,
                           document_lines[header_line + 1: end_line])

    if language == 'bitcoinscript':
        return [block(0, 0, len(document_lines))]
    if language == 'rust':
        return [block(_line_number(text, match.start()), _line_number(text, match.start()) + 1,
                      _line_number(text, match.end()))
                for match in _rust_block_re.finditer(text)]
    raise ValueError(f'unsupported language {language!r}; expected one of '
                     f'{", ".join(LANGUAGES)}')
