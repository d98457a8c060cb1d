# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
import datetime as dt
import unittest
from unittest.mock import patch

from pgrange.comparator import (
    DATE, INTEGER, TIMESTAMP, Comparator, natural_compare,
    timestamp_comparator)


class ComparatorTestCase(unittest.TestCase):
    "Test Comparator"

    def test_natural_compare(self):
        "Test natural_compare"
        self.assertEqual(natural_compare(1, 2), -1)
        self.assertEqual(natural_compare(2, 2), 0)
        self.assertEqual(natural_compare(3, 2), 1)

    def test_integer(self):
        "Test integer comparator"
        self.assertEqual(INTEGER.compare(1, 2), -1)
        self.assertEqual(INTEGER.distance(7, 3), 4)
        self.assertEqual(INTEGER.successor(3), 4)
        self.assertEqual(INTEGER.zero_measure, 0)

    def test_timestamp(self):
        "Test timestamp comparator"
        start = dt.datetime(2024, 1, 1)
        end = dt.datetime(2024, 1, 1, 1)
        self.assertEqual(TIMESTAMP.compare(end, start), 1)
        self.assertEqual(TIMESTAMP.distance(end, start), dt.timedelta(hours=1))
        self.assertEqual(
            TIMESTAMP.successor(start), start + dt.timedelta(microseconds=1))
        self.assertEqual(TIMESTAMP.zero_measure, dt.timedelta(0))

    def test_timestamp_tick(self):
        "Test timestamp comparator with a tick"
        start = dt.datetime(2024, 1, 1)
        comparator = timestamp_comparator(dt.timedelta(seconds=1))
        self.assertEqual(
            comparator.successor(start), dt.datetime(2024, 1, 1, 0, 0, 1))

    def test_timestamp_tick_configured(self):
        "Test timestamp comparator with configured tick"
        start = dt.datetime(2024, 1, 1)
        with patch('pgrange.comparator.config') as config:
            config.getint.return_value = 5
            comparator = timestamp_comparator()
        config.getint.assert_called_once_with('timestamp', 'tick', default=1)
        self.assertEqual(
            comparator.successor(start), start + dt.timedelta(microseconds=5))

    def test_timestamp_tick_invalid(self):
        "Test timestamp comparator with invalid tick"
        with self.assertRaises(ValueError):
            timestamp_comparator(dt.timedelta(0))

    def test_date(self):
        "Test date comparator"
        self.assertEqual(DATE.distance(
                dt.date(2024, 3, 1), dt.date(2024, 2, 1)), 29)
        self.assertEqual(
            DATE.successor(dt.date(2024, 2, 29)), dt.date(2024, 3, 1))
        self.assertEqual(DATE.zero_measure, 0)

    def test_custom(self):
        "Test custom comparator"
        comparator = Comparator(
            distance=lambda a, b: len(a) - len(b),
            successor=lambda a: a + 'a',
            zero='',
            compare=lambda a, b: natural_compare(len(a), len(b)))
        self.assertEqual(comparator.compare('aa', 'b'), 1)
        self.assertEqual(comparator.successor('a'), 'aa')
        self.assertEqual(comparator.zero_measure, 0)

    def test_immutable(self):
        "Test comparator is immutable"
        with self.assertRaises(AttributeError):
            INTEGER.zero = 1
