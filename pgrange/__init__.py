# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
from .comparator import DATE, INTEGER, TIMESTAMP, Comparator
from .exceptions import (
    BoundOverflowError, EmptyBoundError, InfiniteBoundError,
    InternalInvariantError, InvalidRangeError, NonContiguousError,
    RangeException, UnboundedRangeError)
from .operator_ import RangeOperator, date, integer, timestamp
from .range import BoundType, Range

__version__ = "0.1.0"

__all__ = [
    'BoundOverflowError',
    'BoundType',
    'Comparator',
    'DATE',
    'EmptyBoundError',
    'INTEGER',
    'InfiniteBoundError',
    'InternalInvariantError',
    'InvalidRangeError',
    'NonContiguousError',
    'Range',
    'RangeException',
    'RangeOperator',
    'TIMESTAMP',
    'UnboundedRangeError',
    'date',
    'integer',
    'timestamp',
    ]
