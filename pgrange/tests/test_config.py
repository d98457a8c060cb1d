# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
import os
import tempfile
import unittest

from pgrange.config import RangeConfigParser


class ConfigTestCase(unittest.TestCase):
    "Test configuration"

    def setUp(self):
        self.config = RangeConfigParser()
        # the process environment may carry options
        self.config.remove_section('timestamp')
        self.config.remove_section('sql')
        self.config.add_section('timestamp')
        self.config.set('timestamp', 'tick', '1')
        self.config.add_section('sql')
        self.config.set('sql', 'range', 'True')

    def test_defaults(self):
        "Test default values"
        self.assertEqual(self.config.getint('timestamp', 'tick'), 1)
        self.assertTrue(self.config.getboolean('sql', 'range'))

    def test_missing(self):
        "Test missing options return default"
        for getter in [self.config.get, self.config.getint,
                self.config.getfloat, self.config.getboolean]:
            with self.subTest(getter=getter.__name__):
                self.assertIsNone(getter('foo', 'bar'))
                self.assertEqual(getter('foo', 'bar', default=42), 42)
                self.assertEqual(
                    getter('timestamp', 'bar', default=42), 42)

    def test_update_environ(self):
        "Test update from environment"
        self.config.update_environ({
                'PGRANGE_TIMESTAMP__TICK': '5',
                'PGRANGE_SQL__RANGE': 'false',
                'PGRANGE_FOO': 'ignored',
                'OTHER_SQL__RANGE': 'true',
                })
        self.assertEqual(self.config.getint('timestamp', 'tick'), 5)
        self.assertFalse(self.config.getboolean('sql', 'range'))
        self.assertFalse(self.config.has_section('foo'))

    def test_update_environ_new_section(self):
        "Test update from environment with new section"
        self.config.update_environ({'PGRANGE_FOO__BAR': 'baz'})
        self.assertEqual(self.config.get('foo', 'bar'), 'baz')

    def test_update_etc(self):
        "Test update from configuration file"
        with tempfile.NamedTemporaryFile(
                'w', suffix='.conf', delete=False) as fp:
            fp.write('[timestamp]\ntick = 10\n')
        self.addCleanup(os.unlink, fp.name)

        with self.assertLogs('pgrange.config', 'INFO'):
            self.config.update_etc(fp.name)
        self.assertEqual(self.config.getint('timestamp', 'tick'), 10)

    def test_update_etc_missing(self):
        "Test update from missing configuration file"
        with self.assertLogs('pgrange.config', 'ERROR'):
            self.config.update_etc('/nonexistent/pgrange.conf')
        self.assertEqual(self.config.getint('timestamp', 'tick'), 1)

    def test_update_etc_empty(self):
        "Test update without configuration file"
        self.assertEqual(self.config.update_etc(''), [])
