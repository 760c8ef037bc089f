# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Miscellaneous functions.'''

__all__ = ('PrefixedLogger', 'prefixed_logger', 'line_label')

import logging


class PrefixedLogger(logging.LoggerAdapter):
    '''Prepends a document identifier to a logging message.'''

    def process(self, msg, kwargs):
        return f'[{self.extra}] {msg}', kwargs


def prefixed_logger(name, text):
    extra = text
    return PrefixedLogger(logging.getLogger(name), extra)


def line_label(line_number):
    '''Line numbers are zero-based internally and one-based for people.'''
    return f'line {line_number + 1:,d}'
