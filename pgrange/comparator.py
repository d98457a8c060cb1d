# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
import datetime as dt

from .config import config

__all__ = ['Comparator', 'natural_compare', 'timestamp_comparator',
    'INTEGER', 'TIMESTAMP', 'DATE']


def natural_compare(a, b):
    "Compare a and b using their Python ordering"
    return (a > b) - (a < b)


class Comparator(object):
    '''
    Operations on the elements of a range type

    distance(a, b) returns the measure of a - b, successor(a) returns the
    element following a in a discrete domain, zero is an element used to
    build the zero measure and compare(a, b) returns -1, 0 or 1.
    '''
    __slots__ = ('compare', 'distance', 'successor', 'zero')

    def __init__(self, distance, successor, zero, compare=natural_compare):
        super().__setattr__('compare', compare)
        super().__setattr__('distance', distance)
        super().__setattr__('successor', successor)
        super().__setattr__('zero', zero)

    def __setattr__(self, name, value):
        raise AttributeError("Comparator is immutable")

    @property
    def zero_measure(self):
        return self.distance(self.zero, self.zero)

    def __repr__(self):
        return '%s(zero=%r)' % (self.__class__.__name__, self.zero)


def _timestamp_tick():
    return dt.timedelta(
        microseconds=config.getint('timestamp', 'tick', default=1))


def timestamp_comparator(tick=None):
    if tick is None:
        tick = _timestamp_tick()
    if tick <= dt.timedelta(0):
        raise ValueError("Timestamp tick must be positive: %s" % tick)
    return Comparator(
        distance=lambda a, b: a - b,
        successor=lambda a: a + tick,
        zero=dt.datetime.min)


INTEGER = Comparator(
    distance=lambda a, b: a - b,
    successor=lambda a: a + 1,
    zero=0)
TIMESTAMP = timestamp_comparator()
DATE = Comparator(
    distance=lambda a, b: (a - b).days,
    successor=lambda a: a + dt.timedelta(days=1),
    zero=dt.date.min)
