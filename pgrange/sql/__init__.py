# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
from .functions import (
    DateRange, Int4Range, Int8Range, NumRange, Range, TSRange, TSTZRange,
    as_sql)
from .operators import (
    RangeAdjacent, RangeContain, RangeDifference, RangeIn, RangeIntersect,
    RangeLeftOf, RangeMerge, RangeNotExtendLeft, RangeNotExtendRight,
    RangeOverlap, RangeRightOf, RangeUnion)

__all__ = [
    'DateRange',
    'Int4Range',
    'Int8Range',
    'NumRange',
    'Range',
    'RangeAdjacent',
    'RangeContain',
    'RangeDifference',
    'RangeIn',
    'RangeIntersect',
    'RangeLeftOf',
    'RangeMerge',
    'RangeNotExtendLeft',
    'RangeNotExtendRight',
    'RangeOverlap',
    'RangeRightOf',
    'RangeUnion',
    'TSRange',
    'TSTZRange',
    'as_sql',
    ]
