# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.

from sql import Cast, Expression, Literal, Null
from sql.conditionals import Case
from sql.functions import Function
from sql.operators import BinaryOperator

from pgrange.config import config

from .functions import Range

__all__ = ['RangeContain', 'RangeIn', 'RangeOverlap', 'RangeLeftOf',
    'RangeRightOf', 'RangeNotExtendRight', 'RangeNotExtendLeft',
    'RangeAdjacent', 'RangeUnion', 'RangeIntersect', 'RangeDifference',
    'RangeMerge']


def _has_range():
    return config.getboolean('sql', 'range', default=True)


def _literal(value):
    if not isinstance(value, Expression):
        value = Literal(value)
    return value


def _is_empty(expression):
    return (isinstance(expression, Cast)
        and isinstance(expression.expression, Literal)
        and expression.expression.value == 'empty')


def _is_range(expression):
    return isinstance(expression, Range) or _is_empty(expression)


def _bounds(expression):
    '''Return lower, upper and bounds of the range expression or None if it
    is empty

    The bounds of a discrete range are rewritten as [lower, upper).'''
    if _is_empty(expression):
        return None
    if not isinstance(expression, Range):
        raise NotImplementedError(
            "Can not compare the bounds of %s"
            % expression.__class__.__name__)
    lower, upper, bounds = expression.args
    step = expression._step
    if step is not None:
        if bounds[0] == '(' and lower is not None:
            lower = lower + step
        if bounds[1] == ']' and upper is not None:
            upper = upper + step
        bounds = '[)'
    if (lower is not None and upper is not None
            and not isinstance(lower, Expression)
            and not isinstance(upper, Expression)):
        if lower > upper or (lower == upper and bounds != '[]'):
            return None
    return _literal(lower), _literal(upper), bounds


class RangeOperator(BinaryOperator):
    __slots__ = ()

    def __str__(self):
        if not _has_range():
            return str(self._sql_expression)
        return super().__str__()

    @property
    def params(self):
        if not _has_range():
            return self._sql_expression.params
        return super().params

    @property
    def _sql_expression(self):
        raise NotImplementedError(
            "%s requires a database with range types"
            % self.__class__.__name__)


class RangeContain(RangeOperator):
    __slots__ = ()
    _operator = '@>'

    @property
    def _sql_expression(self):
        if self.left is Null or self.right is Null:
            return Literal(Null)
        range1 = _bounds(self.left)
        if _is_range(self.right):
            range2 = _bounds(self.right)
            if range2 is None:
                return Literal(True)
        else:
            range2 = _literal(self.right), _literal(self.right), '[]'
        if range1 is None:
            return Literal(False)
        lower1, upper1, bounds1 = range1
        lower2, upper2, bounds2 = range2

        if bounds1[0] == '(' and bounds2[0] == '[':
            expression1 = lower1 < lower2
        else:
            expression1 = lower1 <= lower2
        expression1 = Case(
            ((lower1 == Null), True),
            ((lower2 == Null), False),
            else_=expression1)
        if bounds1[1] == ')' and bounds2[1] == ']':
            expression2 = upper1 > upper2
        else:
            expression2 = upper1 >= upper2
        expression2 = Case(
            ((upper1 == Null), True),
            ((upper2 == Null), False),
            else_=expression2)
        return (expression1) & (expression2)


class RangeIn(RangeOperator):
    __slots__ = ()
    _operator = '<@'

    @property
    def _sql_expression(self):
        return RangeContain(self.right, self.left)._sql_expression


class RangeOverlap(RangeOperator):
    __slots__ = ()
    _operator = '&&'

    @property
    def _sql_expression(self):
        if self.left is Null or self.right is Null:
            return Literal(Null)
        range1, range2 = _bounds(self.left), _bounds(self.right)
        if range1 is None or range2 is None:
            return Literal(False)
        lower1, upper1, bounds1 = range1
        lower2, upper2, bounds2 = range2

        if bounds1[0] == '[' and bounds2[1] == ']':
            expression1 = lower1 <= upper2
        else:
            expression1 = lower1 < upper2
        expression1 = Case(
            ((lower1 == Null) | (upper2 == Null), True),
            else_=expression1)
        if bounds1[1] == ']' and bounds2[0] == '[':
            expression2 = lower2 <= upper1
        else:
            expression2 = lower2 < upper1
        expression2 = Case(
            ((lower2 == Null) | (upper1 == Null), True),
            else_=expression2)
        return (expression1) & (expression2)


class RangeLeftOf(RangeOperator):
    __slots__ = ()
    _operator = '<<'

    @property
    def _sql_expression(self):
        if self.left is Null or self.right is Null:
            return Literal(Null)
        range1, range2 = _bounds(self.left), _bounds(self.right)
        if range1 is None or range2 is None:
            return Literal(False)
        _, upper1, bounds1 = range1
        lower2, _, bounds2 = range2

        if bounds1[1] == ']' and bounds2[0] == '[':
            expression = upper1 < lower2
        else:
            expression = upper1 <= lower2
        return Case(
            ((upper1 == Null) | (lower2 == Null), False),
            else_=expression)


class RangeRightOf(RangeOperator):
    __slots__ = ()
    _operator = '>>'

    @property
    def _sql_expression(self):
        return RangeLeftOf(self.right, self.left)._sql_expression


class RangeNotExtendRight(RangeOperator):
    __slots__ = ()
    _operator = '&<'


class RangeNotExtendLeft(RangeOperator):
    __slots__ = ()
    _operator = '&>'


class RangeAdjacent(RangeOperator):
    __slots__ = ()
    _operator = '-|-'


class RangeUnion(RangeOperator):
    __slots__ = ()
    _operator = '+'


class RangeIntersect(RangeOperator):
    __slots__ = ()
    _operator = '*'


class RangeDifference(RangeOperator):
    __slots__ = ()
    _operator = '-'


class RangeMerge(Function):
    __slots__ = ()
    _function = 'RANGE_MERGE'
