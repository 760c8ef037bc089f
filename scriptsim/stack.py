# Copyright (c) 2021, the scriptsim developers
#
# Licensed under the MIT License; see LICENCE for details.
#

'''Simulator value stack with bounds-checked access.'''

__all__ = ('Stack', )


from .errors import StackUnderflow
from .values import display_value


class Stack:
    '''A LIFO container of values.  Index 0 is the bottom; peek_nth(0) is the top.

    Reads beyond the stack depth raise StackUnderflow rather than truncating.
    '''

    def __init__(self, items=(), name='stack'):
        self.name = name
        self._items = list(items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __getitem__(self, x):
        return self._items[x]

    def __eq__(self, other):
        if isinstance(other, Stack):
            other = other._items
        return self._items == other

    def __repr__(self):
        return f'Stack({self._items!r}, name={self.name!r})'

    def __str__(self):
        return self.to_display_string()

    def _require(self, depth, op):
        if len(self._items) < depth:
            raise StackUnderflow(op, depth, len(self._items), self.name)

    def size(self):
        return len(self._items)

    def is_empty(self):
        return not self._items

    def copy(self):
        return Stack(self._items, self.name)

    def push(self, item):
        self._items.append(item)

    def extend(self, items):
        for item in items:
            self.push(item)

    def pop(self, op='pop'):
        self._require(1, op)
        return self._items.pop()

    def peek(self, op='peek'):
        return self.peek_nth(0, op)

    def peek_nth(self, n, op='peek'):
        '''Return the item at depth n without removing it.'''
        if n < 0:
            raise StackUnderflow(op, n + 1, len(self._items), self.name)
        self._require(n + 1, op)
        return self._items[-(n + 1)]

    def pop_nth(self, n, op='pop'):
        '''Remove and return the item at depth n.'''
        if n < 0:
            raise StackUnderflow(op, n + 1, len(self._items), self.name)
        self._require(n + 1, op)
        return self._items.pop(-(n + 1))

    def insert(self, n, item):
        '''Insert item so that it ends up at depth n.'''
        self._require(n, 'insert')
        self._items.insert(len(self._items) - n, item)

    def clear(self):
        self._items.clear()

    def to_display_string(self):
        return '[' + ', '.join(display_value(item) for item in self._items) + ']'
