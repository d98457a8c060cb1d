# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.

__all__ = [
    'RangeException',
    'InvalidRangeError',
    'UnboundedRangeError',
    'EmptyBoundError',
    'InfiniteBoundError',
    'NonContiguousError',
    'BoundOverflowError',
    'InternalInvariantError',
    ]


class RangeException(Exception):
    pass


class InvalidRangeError(RangeException, ValueError):
    "The range was never successfully constructed"


class UnboundedRangeError(RangeException, ValueError):
    "The measure of a range with an infinite bound is undefined"


class EmptyBoundError(RangeException, ValueError):
    "The bound of an empty range has no value"


class InfiniteBoundError(RangeException, ValueError):
    "The bound is infinite so it has no finite value"


class NonContiguousError(RangeException, ValueError):
    "The result would be made of two disjoint ranges"


class BoundOverflowError(RangeException, OverflowError):
    "The successor of a bound is outside the domain of the elements"


class InternalInvariantError(RangeException, RuntimeError):
    "A case that canonical ranges can not reach has been reached"
