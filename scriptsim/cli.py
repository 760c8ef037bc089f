# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Command-line interface: annotate a script file on the terminal.'''

import logging
import sys
from collections import defaultdict
from pathlib import Path

import click

from .interpreter import SimulatorFlags, SimulatorPolicy
from .script import MAX_LITERAL_BITS
from .session import ScriptSession
from .source import LANGUAGES


def language_for_path(path):
    return 'rust' if path.suffix == '.rs' else 'bitcoinscript'


def policy_from_options(strict, balanced, max_literal_bits):
    flags = SimulatorFlags(0)
    if strict:
        flags |= SimulatorFlags.REJECT_UNKNOWN_OPCODES
    if balanced:
        flags |= SimulatorFlags.REQUIRE_BALANCED_CONDITIONALS
    return SimulatorPolicy(flags=flags, max_literal_bits=max_literal_bits)


@click.command()
@click.version_option(package_name='scriptsim')
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--language',
    type=click.Choice(LANGUAGES),
    default=None,
    help='Source language; inferred from the file suffix by default',
)
@click.option('--strict', is_flag=True, help='Fail on opcodes the simulator does not model')
@click.option('--balanced', is_flag=True, help='Require every OP_IF to have an OP_ENDIF')
@click.option(
    '--max-literal-bits',
    type=int,
    default=MAX_LITERAL_BITS,
    show_default=True,
    help='Widest numeric literal accepted',
)
@click.option('-v', '--verbose', count=True, help='Log progress; repeat for more detail')
def main(path, language, strict, balanced, max_literal_bits, verbose):
    '''Simulate the script blocks in PATH and print each annotated line.'''
    logging.basicConfig(level=(logging.WARNING, logging.INFO, logging.DEBUG)[min(verbose, 2)],
                        format='%(levelname)s:%(name)s:%(message)s')
    language = language or language_for_path(path)
    text = path.read_text()

    session = ScriptSession(policy_from_options(strict, balanced, max_literal_bits))
    by_line = defaultdict(list)
    for annotation in session.evaluate(str(path), text, language):
        by_line[annotation.line].append(annotation)

    for line_number, source in enumerate(text.split('\n')):
        for annotation in by_line.get(line_number, ()):
            click.echo(f'{line_number + 1:>4}: {source.strip()}', nl=False)
            color = 'red' if annotation.is_error else 'bright_black'
            click.echo(click.style(annotation.text, fg=color))

    if session.failed(str(path)):
        sys.exit(1)


if __name__ == '__main__':
    main()
