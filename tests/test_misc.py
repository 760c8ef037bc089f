import logging
from pathlib import Path

import pytest

from scriptsim.misc import *


def test_prefixed_logger(caplog):
    logger = prefixed_logger('session', 'doc.rs')
    assert isinstance(logger, PrefixedLogger)
    with caplog.at_level(logging.INFO):
        logger.info('evaluated')
    assert caplog.records[0].getMessage() == '[doc.rs] evaluated'
    assert caplog.records[0].name == 'session'


def test_line_label():
    assert line_label(0) == 'line 1'
    assert line_label(1233) == 'line 1,234'


root_dir = Path(__file__).parent.parent
sources = sorted(path for path in (root_dir / 'scriptsim').glob('*.py')
                 if path.name != '__init__.py')


@pytest.mark.parametrize('path', sources, ids=lambda path: path.name)
def test_licence_header(path):
    header = path.read_text().splitlines()[:3]
    assert header[0] == '# Copyright (c) 2021, the scriptsim developers'
    assert header[2] == '# Licensed under the MIT License; see LICENCE for details.'


def test_licence_shipped():
    licence = root_dir / 'LICENCE'
    assert licence.read_text().startswith('MIT License')
