# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
import datetime as dt

from sql import Cast, Literal, Null
from sql.functions import Function

from pgrange.operator_ import date, integer

__all__ = ['Int4Range', 'Int8Range', 'NumRange', 'TSRange', 'TSTZRange',
    'DateRange', 'as_sql']


class Range(Function):
    '''
    A range built by PostgreSQL from lower, upper and bounds

    Discrete ranges define _step, the distance between two consecutive
    elements, and _range_operator, the operator which computes on their
    values.
    '''
    __slots__ = ()
    _step = None
    _range_operator = None

    def __init__(self, lower, upper, bounds='[)'):
        assert bounds in {'()', '(]', '[)', '[]'}
        super().__init__(lower, upper, bounds)


class Int4Range(Range):
    __slots__ = ()
    _function = 'INT4RANGE'
    _step = 1
    _range_operator = integer


class Int8Range(Range):
    __slots__ = ()
    _function = 'INT8RANGE'
    _step = 1
    _range_operator = integer


class NumRange(Range):
    __slots__ = ()
    _function = 'NUMRANGE'


class TSRange(Range):
    __slots__ = ()
    _function = 'TSRANGE'


class TSTZRange(Range):
    __slots__ = ()
    _function = 'TSTZRANGE'


class DateRange(Range):
    __slots__ = ()
    _function = 'DATERANGE'
    _step = dt.timedelta(days=1)
    _range_operator = date


def as_sql(value, function=Int8Range, operator=None):
    '''Convert a pgrange.range.Range into a SQL expression

    The value is first rewritten by operator, by default the operator of the
    discrete function, so an empty value gives the empty range.'''
    if not value.valid:
        return Null
    if operator is None:
        operator = function._range_operator
    if operator is not None:
        value = operator.rewrite(value)
    if value.is_empty_type:
        return Cast(Literal('empty'), function._function)
    return function(value.lower, value.upper, value.bounds)
