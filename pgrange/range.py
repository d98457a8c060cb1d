# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
from enum import Enum

from .exceptions import EmptyBoundError, InfiniteBoundError, InvalidRangeError

__all__ = ['BoundType', 'Range']


class BoundType(Enum):
    INCLUSIVE = 'i'
    EXCLUSIVE = 'e'
    UNBOUNDED = 'u'
    EMPTY = 'empty'


INCLUSIVE = BoundType.INCLUSIVE
EXCLUSIVE = BoundType.EXCLUSIVE
UNBOUNDED = BoundType.UNBOUNDED
EMPTY = BoundType.EMPTY

_LOWER_BOUNDS = {'[': INCLUSIVE, '(': EXCLUSIVE}
_UPPER_BOUNDS = {']': INCLUSIVE, ')': EXCLUSIVE}


class Range(object):
    '''
    A range value with two bounds

    Unbounded sides and empty ranges store None as value.
    An invalid range stands for a range which was never built, like the SQL
    NULL.
    '''
    __slots__ = ('lower', 'lower_type', 'upper', 'upper_type', 'valid')

    def __init__(self, lower, lower_type, upper, upper_type, valid=True):
        lower_type = BoundType(lower_type)
        upper_type = BoundType(upper_type)
        if (lower_type == EMPTY) != (upper_type == EMPTY):
            raise ValueError(
                "Both bounds must be empty: %s, %s"
                % (lower_type.name, upper_type.name))
        if lower_type in {UNBOUNDED, EMPTY}:
            lower = None
        if upper_type in {UNBOUNDED, EMPTY}:
            upper = None
        set_ = super().__setattr__
        set_('lower', lower)
        set_('lower_type', lower_type)
        set_('upper', upper)
        set_('upper_type', upper_type)
        set_('valid', bool(valid))

    def __setattr__(self, name, value):
        raise AttributeError("Range is immutable")

    def __delattr__(self, name):
        raise AttributeError("Range is immutable")

    @classmethod
    def closed(cls, lower, upper):
        return cls(lower, INCLUSIVE, upper, INCLUSIVE)

    @classmethod
    def open(cls, lower, upper):
        return cls(lower, EXCLUSIVE, upper, EXCLUSIVE)

    @classmethod
    def closed_open(cls, lower, upper):
        return cls(lower, INCLUSIVE, upper, EXCLUSIVE)

    @classmethod
    def open_closed(cls, lower, upper):
        return cls(lower, EXCLUSIVE, upper, INCLUSIVE)

    @classmethod
    def at_least(cls, lower):
        return cls(lower, INCLUSIVE, None, UNBOUNDED)

    @classmethod
    def greater_than(cls, lower):
        return cls(lower, EXCLUSIVE, None, UNBOUNDED)

    @classmethod
    def at_most(cls, upper):
        return cls(None, UNBOUNDED, upper, INCLUSIVE)

    @classmethod
    def less_than(cls, upper):
        return cls(None, UNBOUNDED, upper, EXCLUSIVE)

    @classmethod
    def unbounded(cls):
        return cls(None, UNBOUNDED, None, UNBOUNDED)

    @classmethod
    def empty(cls):
        return cls(None, EMPTY, None, EMPTY)

    @classmethod
    def invalid(cls):
        return cls(None, EMPTY, None, EMPTY, valid=False)

    @classmethod
    def from_bounds(cls, lower, upper, bounds='[)'):
        '''Build a range the way psycopg does

        None as lower or upper means the side is unbounded.'''
        if bounds not in {'()', '(]', '[)', '[]'}:
            raise ValueError("Invalid bounds: %r" % (bounds,))
        lower_type = UNBOUNDED if lower is None else _LOWER_BOUNDS[bounds[0]]
        upper_type = UNBOUNDED if upper is None else _UPPER_BOUNDS[bounds[1]]
        return cls(lower, lower_type, upper, upper_type)

    @property
    def is_empty_type(self):
        return self.lower_type == EMPTY

    @property
    def lower_inf(self):
        return self.lower_type == UNBOUNDED

    @property
    def upper_inf(self):
        return self.upper_type == UNBOUNDED

    @property
    def lower_inc(self):
        return self.lower_type == INCLUSIVE

    @property
    def upper_inc(self):
        return self.upper_type == INCLUSIVE

    @property
    def bounds(self):
        if not self.valid or self.is_empty_type:
            return None
        return (('[' if self.lower_inc else '(')
            + (']' if self.upper_inc else ')'))

    def _bound_value(self, value, type_, name):
        if not self.valid:
            raise InvalidRangeError("The range is not valid")
        if type_ == UNBOUNDED:
            raise InfiniteBoundError("The %s bound is infinite" % name)
        if type_ == EMPTY:
            raise EmptyBoundError("The %s bound is empty" % name)
        return value

    def lower_value(self):
        return self._bound_value(self.lower, self.lower_type, 'lower')

    def upper_value(self):
        return self._bound_value(self.upper, self.upper_type, 'upper')

    def edge(self, lower):
        "Return the value and the type of the lower or upper bound"
        if lower:
            return self.lower, self.lower_type
        return self.upper, self.upper_type

    def _key(self):
        return (self.lower, self.lower_type, self.upper, self.upper_type,
            self.valid)

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        if not self.valid:
            return 'NULL'
        if self.is_empty_type:
            return 'empty'
        lower = '' if self.lower_inf else self.lower
        upper = '' if self.upper_inf else self.upper
        return '%s%s,%s%s' % (
            '[' if self.lower_inc else '(', lower,
            upper, ']' if self.upper_inc else ')')

    def __repr__(self):
        if not self.valid:
            return '%s.invalid()' % self.__class__.__name__
        if self.is_empty_type:
            return '%s.empty()' % self.__class__.__name__
        return '%s(%r, %s, %r, %s)' % (
            self.__class__.__name__,
            self.lower, self.lower_type.name, self.upper, self.upper_type.name)
