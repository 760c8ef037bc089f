import pytest

from scriptsim.errors import HeaderError
from scriptsim.source import *


RUST_DOCUMENT = '''fn main() {
    let s = script! {
        // [1, 2]
        OP_ADD
    };
    // btcscript
    // [5] [A]
    OP_VERIFY
    // end-btcscript
}
'''


class TestParseStackHeader:

    @pytest.mark.parametrize('text, main, alt', (
        ('[3, 4] [C]', [3, 4], ['C']),
        ('[A, B], [C]', ['A', 'B'], ['C']),
        ('// [A, B]', ['A', 'B'], []),
        ('// [3,4]', [3, 4], []),
        ('[]', [], []),
        ('[] []', [], []),
        ('[ , 1, ]', [1], []),
        ('  // start [0x10, foo] [sig]', [16, 'foo'], ['sig']),
    ))
    def test_good(self, text, main, alt):
        assert parse_stack_header(text) == (main, alt)

    @pytest.mark.parametrize('text', ('', 'foo', '// 3, 4', 'OP_DUP', '[3, 4'))
    def test_bad(self, text):
        with pytest.raises(HeaderError) as e:
            parse_stack_header(text)
        assert 'no initial stack in header' in str(e.value)


class TestParseStackLiteral:

    def test_good(self):
        assert parse_stack_literal('[1, 0x10, foo]') == [1, 16, 'foo']
        assert parse_stack_literal('[  ]') == []

    def test_bad(self):
        with pytest.raises(HeaderError):
            parse_stack_literal('1, 2')


class TestFindScriptBlocks:

    def test_bitcoinscript(self):
        blocks = find_script_blocks('// [3, 4]\nOP_DUP\nOP_ADD', 'bitcoinscript')
        assert len(blocks) == 1
        block = blocks[0]
        assert block.start_line == block.header_line == 0
        assert block.end_line == 3
        assert block.header == '// [3, 4]'
        assert block.lines == ('OP_DUP', 'OP_ADD')
        assert block.first_line == 1

    def test_bitcoinscript_empty(self):
        block, = find_script_blocks('', 'bitcoinscript')
        assert block.header == ''
        assert block.lines == ()

    def test_rust(self):
        first, second = find_script_blocks(RUST_DOCUMENT, 'rust')
        assert (first.start_line, first.header_line, first.end_line) == (1, 2, 4)
        assert first.header.strip() == '// [1, 2]'
        assert [line.strip() for line in first.lines] == ['OP_ADD']
        assert (second.start_line, second.header_line, second.end_line) == (5, 6, 8)
        assert [line.strip() for line in second.lines] == ['OP_VERIFY']

    @pytest.mark.parametrize('start, end', (
        ('// bscript', '// end-bscript'),
        ('// btc-script', '// btc-script-end'),
        ('//start-btcscript', '//end-btcscript'),
        ('// btcscript-start', '// btcscript-end'),
    ))
    def test_rust_markers(self, start, end):
        text = '\n'.join(('fn f() {}', start, '// [1]', 'OP_DUP', end, ''))
        block, = find_script_blocks(text, 'rust')
        assert block.start_line == 1
        assert block.lines == ('OP_DUP', )

    def test_rust_no_blocks(self):
        assert find_script_blocks('fn main() {}\n', 'rust') == []

    def test_unsupported_language(self):
        with pytest.raises(ValueError) as e:
            find_script_blocks('', 'python')
        assert 'unsupported language' in str(e.value)
