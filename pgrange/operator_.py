# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
import logging

from .comparator import DATE, INTEGER, TIMESTAMP
from .exceptions import (
    BoundOverflowError, InternalInvariantError, InvalidRangeError,
    NonContiguousError, UnboundedRangeError)
from .range import EMPTY, EXCLUSIVE, INCLUSIVE, UNBOUNDED, Range

__all__ = ['RangeOperator', 'integer', 'timestamp', 'date']
logger = logging.getLogger(__name__)


def _check_valid(first, second=None):
    if not first.valid:
        if second is None:
            raise InvalidRangeError("The range is not valid")
        raise InvalidRangeError("The first range is not valid")
    if second is not None and not second.valid:
        raise InvalidRangeError("The second range is not valid")


class RangeOperator(object):
    '''
    Operators and functions of PostgreSQL on the ranges of one element type

    The comparator gives the ordering, the successor and the distance of the
    elements. Every operator works on the canonical form of its operands:
    inclusive lower bound and exclusive upper bound.
    '''
    __slots__ = ('comparator',)

    def __init__(self, comparator):
        super().__setattr__('comparator', comparator)

    def __setattr__(self, name, value):
        raise AttributeError("RangeOperator is immutable")

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.comparator)

    def _successor(self, value):
        try:
            return self.comparator.successor(value)
        except OverflowError as exception:
            raise BoundOverflowError(
                "The successor of %s is out of range"
                % (value,)) from exception

    def _canonical_bounds(self, range_):
        successor = self._successor
        lower, lower_type = range_.lower, range_.lower_type
        upper, upper_type = range_.upper, range_.upper_type
        if lower_type == EXCLUSIVE:
            lower, lower_type = successor(lower), INCLUSIVE
        if upper_type == INCLUSIVE:
            upper, upper_type = successor(upper), EXCLUSIVE
        return Range(lower, lower_type, upper, upper_type)

    def rewrite(self, range_):
        "Return the range in the form [lower, upper) or the empty range"
        _check_valid(range_)
        result = self._canonical_bounds(range_)
        if self.isempty(result):
            return Range.empty()
        return result

    def isempty(self, range_):
        "Is the range empty?"
        _check_valid(range_)
        if range_.lower_type == UNBOUNDED or range_.upper_type == UNBOUNDED:
            return False
        if range_.lower_type == EMPTY or range_.upper_type == EMPTY:
            return True
        return self.size(range_) <= self.comparator.zero_measure

    def size(self, range_):
        "Return the measure of the elements in the range"
        _check_valid(range_)
        if range_.lower_type == UNBOUNDED or range_.upper_type == UNBOUNDED:
            raise UnboundedRangeError("The range %s is unbounded" % range_)
        if range_.lower_type == EMPTY:
            return self.comparator.zero_measure
        range_ = self._canonical_bounds(range_)
        return self.comparator.distance(range_.upper, range_.lower)

    def _compare_bounds(self, first, second, first_lower, second_lower):
        '''Compare a bound of first with a bound of second

        first_lower and second_lower select the lower or the upper bound of
        each range.'''
        value1, type1 = first.edge(first_lower)
        value2, type2 = second.edge(second_lower)

        if type1 == UNBOUNDED and type2 == UNBOUNDED:
            if first_lower == second_lower:
                return 0
            return -1 if first_lower else 1
        elif type1 == UNBOUNDED:
            return -1 if first_lower else 1
        elif type2 == UNBOUNDED:
            return 1 if second_lower else -1

        result = self.comparator.compare(value1, value2)
        if result:
            return result
        if type1 != INCLUSIVE and type2 != INCLUSIVE:
            if first_lower == second_lower:
                return 0
            return 1 if first_lower else -1
        elif type1 != INCLUSIVE:
            return 1 if first_lower else -1
        elif type2 != INCLUSIVE:
            return -1 if second_lower else 1
        return 0

    def compare(self, first, second):
        '''Return -1, 0 or 1 as first sorts before, with or after second

        The empty range sorts before any other range.'''
        _check_valid(first, second)
        first = self.rewrite(first)
        second = self.rewrite(second)
        first_empty = self.isempty(first)
        second_empty = self.isempty(second)
        if first_empty and second_empty:
            return 0
        elif first_empty:
            return -1
        elif second_empty:
            return 1
        result = self._compare_bounds(first, second, True, True)
        if not result:
            result = self._compare_bounds(first, second, False, False)
        return result

    def equal(self, first, second):
        "anyrange = anyrange"
        _check_valid(first, second)
        first_empty = self.isempty(first)
        second_empty = self.isempty(second)
        if first_empty or second_empty:
            return first_empty and second_empty
        first = self.rewrite(first)
        second = self.rewrite(second)
        return (self._compare_bounds(first, second, True, True) == 0
            and self._compare_bounds(first, second, False, False) == 0)

    def less_than(self, first, second):
        "anyrange < anyrange"
        return self.compare(first, second) < 0

    def less_than_or_equal(self, first, second):
        "anyrange <= anyrange"
        return self.compare(first, second) <= 0

    def greater_than(self, first, second):
        "anyrange > anyrange"
        return self.compare(first, second) > 0

    def greater_than_or_equal(self, first, second):
        "anyrange >= anyrange"
        return self.compare(first, second) >= 0

    def contain(self, first, second):
        "anyrange @> anyrange"
        return self.equal(self.intersect(first, second), second)

    def contain_element(self, range_, element):
        "anyrange @> anyelement"
        return self.contain(range_, Range.closed(element, element))

    def _canonical_pair(self, first, second):
        "Return both ranges rewritten or None if one of them is empty"
        _check_valid(first, second)
        if self.isempty(first) or self.isempty(second):
            return None
        return self.rewrite(first), self.rewrite(second)

    def overlap(self, first, second):
        "anyrange && anyrange"
        pair = self._canonical_pair(first, second)
        if pair is None:
            return False
        first, second = pair
        compare = self._compare_bounds
        if (compare(first, second, True, True) >= 0
                and compare(first, second, True, False) <= 0):
            return True
        if (compare(second, first, True, True) >= 0
                and compare(second, first, True, False) <= 0):
            return True
        return False

    def left_of(self, first, second):
        "anyrange << anyrange"
        pair = self._canonical_pair(first, second)
        if pair is None:
            return False
        first, second = pair
        return self._compare_bounds(first, second, False, True) < 0

    def right_of(self, first, second):
        "anyrange >> anyrange"
        return self.left_of(second, first)

    def not_extend_right(self, first, second):
        "anyrange &< anyrange"
        pair = self._canonical_pair(first, second)
        if pair is None:
            return False
        first, second = pair
        return self._compare_bounds(first, second, False, False) <= 0

    def not_extend_left(self, first, second):
        "anyrange &> anyrange"
        pair = self._canonical_pair(first, second)
        if pair is None:
            return False
        first, second = pair
        return self._compare_bounds(first, second, True, True) >= 0

    def adjacent(self, first, second):
        "anyrange -|- anyrange"
        pair = self._canonical_pair(first, second)
        if pair is None:
            return False
        first, second = pair
        compare = self.comparator.compare
        openness = {(INCLUSIVE, EXCLUSIVE), (EXCLUSIVE, INCLUSIVE)}
        if ((first.upper_type, second.lower_type) in openness
                and compare(first.upper, second.lower) == 0):
            return True
        if ((first.lower_type, second.upper_type) in openness
                and compare(first.lower, second.upper) == 0):
            return True
        return False

    def union(self, first, second):
        "anyrange + anyrange"
        return self._union(first, second, strict=True)

    def merge(self, first, second):
        '''range_merge(anyrange, anyrange)

        Return the smallest range which includes both ranges, even if they
        are not contiguous.'''
        return self._union(first, second, strict=False)

    def _union(self, first, second, strict):
        _check_valid(first, second)
        first = self.rewrite(first)
        second = self.rewrite(second)

        first_empty = self.isempty(first)
        second_empty = self.isempty(second)
        if first_empty and second_empty:
            return Range.empty()
        elif first_empty:
            return second
        elif second_empty:
            return first

        if (not self.overlap(first, second)
                and not self.adjacent(first, second)):
            if strict:
                logger.debug(
                    'union of %s and %s is not contiguous', first, second)
                raise NonContiguousError(
                    "The union of %s and %s would not be contiguous"
                    % (first, second))

        if self._compare_bounds(first, second, True, True) < 0:
            lower, lower_type = first.lower, first.lower_type
        else:
            lower, lower_type = second.lower, second.lower_type
        if self._compare_bounds(first, second, False, False) > 0:
            upper, upper_type = first.upper, first.upper_type
        else:
            upper, upper_type = second.upper, second.upper_type
        return self.rewrite(Range(lower, lower_type, upper, upper_type))

    def intersect(self, first, second):
        "anyrange * anyrange"
        _check_valid(first, second)
        first = self.rewrite(first)
        second = self.rewrite(second)

        if (self.isempty(first) or self.isempty(second)
                or not self.overlap(first, second)):
            return Range.empty()

        if self._compare_bounds(first, second, True, True) >= 0:
            lower, lower_type = first.lower, first.lower_type
        else:
            lower, lower_type = second.lower, second.lower_type
        if self._compare_bounds(first, second, False, False) <= 0:
            upper, upper_type = first.upper, first.upper_type
        else:
            upper, upper_type = second.upper, second.upper_type
        return self.rewrite(Range(lower, lower_type, upper, upper_type))

    def difference(self, first, second):
        "anyrange - anyrange"
        _check_valid(first, second)
        if self.isempty(first):
            return Range.empty()
        if self.isempty(second):
            return self.rewrite(first)

        first = self.rewrite(first)
        second = self.rewrite(second)

        compare = self._compare_bounds
        l1l2 = compare(first, second, True, True)
        l1u2 = compare(first, second, True, False)
        u1l2 = compare(first, second, False, True)
        u1u2 = compare(first, second, False, False)

        if l1l2 < 0 and u1u2 > 0:
            logger.debug('%s splits %s', second, first)
            raise NonContiguousError(
                "The difference of %s and %s would not be contiguous"
                % (first, second))
        elif l1u2 > 0 or u1l2 < 0:
            return first
        elif l1l2 >= 0 and u1u2 <= 0:
            return Range.empty()
        elif l1l2 <= 0 and u1l2 >= 0 and u1u2 <= 0:
            upper_type = (
                INCLUSIVE if second.lower_type == EXCLUSIVE else EXCLUSIVE)
            return self.rewrite(Range(
                    first.lower, first.lower_type, second.lower, upper_type))
        elif l1l2 >= 0 and u1u2 >= 0 and l1u2 <= 0:
            lower_type = (
                INCLUSIVE if second.upper_type == EXCLUSIVE else EXCLUSIVE)
            return self.rewrite(Range(
                    second.upper, lower_type, first.upper, first.upper_type))
        logger.error(
            'unexpected bounds in difference of %s and %s: %s',
            first, second, (l1l2, l1u2, u1l2, u1u2))
        raise InternalInvariantError(
            "Unexpected case in the difference of %s and %s"
            % (first, second))


integer = RangeOperator(INTEGER)
timestamp = RangeOperator(TIMESTAMP)
date = RangeOperator(DATE)
