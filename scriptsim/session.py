# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Per-document evaluation for editors.

A ScriptSession evaluates every script block of a document from its header and keeps the
resulting line annotations until the document is re-evaluated or forgotten.
'''

__all__ = ('Annotation', 'ScriptSession', 'annotation_for')

import attr

from .errors import HeaderError
from .interpreter import ExecutionState, SimulatorPolicy, evaluate_block
from .misc import prefixed_logger, line_label
from .source import find_script_blocks


@attr.s(slots=True, frozen=True)
class Annotation:
    line = attr.ib()
    text = attr.ib()
    is_error = attr.ib(default=False)


def annotation_for(outcome):
    '''Return the Annotation to show for an outcome, or None for lines inside a branch not
    taken.'''
    if outcome.is_error:
        return Annotation(outcome.line, f' => {outcome.message} ', True)
    if outcome.active:
        return Annotation(outcome.line, f' =>  {outcome.main} {outcome.alt}')
    return None


class ScriptSession:

    def __init__(self, policy=None):
        self.policy = policy or SimulatorPolicy.DEFAULT
        self._annotations = {}
        self._results = {}

    def evaluate(self, document_id, text, language):
        '''Evaluate all script blocks of a document and return its annotations.  Any earlier
        evaluation of the document is replaced.'''
        logger = prefixed_logger('session', document_id)
        annotations = []
        results = []
        for block in find_script_blocks(text, language):
            try:
                state = ExecutionState.from_header(block.header, self.policy)
            except HeaderError as e:
                logger.debug(f'skipping block at {line_label(block.start_line)}: {e}')
                continue
            result = evaluate_block(block.lines, state, first_line=block.first_line)
            if result.failed:
                failure = result.outcomes[-1]
                logger.info(f'block at {line_label(block.start_line)} failed at '
                            f'{line_label(failure.line)}: {failure.message}')
            results.append(result)
            annotations.extend(annotation for annotation in map(annotation_for, result.outcomes)
                               if annotation is not None)

        self._annotations[document_id] = annotations
        self._results[document_id] = results
        return annotations

    def annotations(self, document_id):
        return self._annotations.get(document_id, [])

    def results(self, document_id):
        '''The BlockResults of the last evaluation of a document.'''
        return self._results.get(document_id, [])

    def failed(self, document_id):
        return any(result.failed for result in self.results(document_id))

    def forget(self, document_id):
        self._annotations.pop(document_id, None)
        self._results.pop(document_id, None)
