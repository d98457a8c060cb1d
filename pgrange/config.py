# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.
import configparser
import logging
import os

__all__ = ['config']
logger = logging.getLogger(__name__)

_ENV_PREFIX = 'PGRANGE_'


class RangeConfigParser(configparser.ConfigParser):

    def __init__(self):
        super().__init__(interpolation=None)
        self.add_section('timestamp')
        self.set('timestamp', 'tick', '1')
        self.add_section('sql')
        self.set('sql', 'range', 'True')
        self.update_environ()
        self.update_etc()

    def update_environ(self, environ=None):
        if environ is None:
            environ = os.environ
        for key, value in environ.items():
            if not key.startswith(_ENV_PREFIX):
                continue
            try:
                section, option = key[len(_ENV_PREFIX):].lower().split('__', 1)
            except ValueError:
                continue
            if not self.has_section(section):
                self.add_section(section)
            self.set(section, option, value)

    def update_etc(self, configfile=os.environ.get('PGRANGE_CONFIG')):
        if not configfile:
            return []
        if isinstance(configfile, str):
            configfile = configfile.split(',')
        configfile = [os.path.expanduser(f.strip()) for f in configfile]
        read_files = self.read(configfile)
        if read_files:
            logger.info('using %s as configuration files',
                ', '.join(read_files))
        if configfile != read_files:
            logger.error('could not load %s',
                ', '.join(set(configfile) - set(read_files)))
        return configfile

    def get(self, section, option, *args, **kwargs):
        default = kwargs.pop('default', None)
        try:
            return super().get(section, option, *args, **kwargs)
        except (configparser.NoOptionError, configparser.NoSectionError):
            return default

    def getint(self, section, option, *args, **kwargs):
        default = kwargs.pop('default', None)
        try:
            return super().getint(section, option, *args, **kwargs)
        except (configparser.NoOptionError, configparser.NoSectionError,
                TypeError):
            return default

    def getfloat(self, section, option, *args, **kwargs):
        default = kwargs.pop('default', None)
        try:
            return super().getfloat(section, option, *args, **kwargs)
        except (configparser.NoOptionError, configparser.NoSectionError,
                TypeError):
            return default

    def getboolean(self, section, option, *args, **kwargs):
        default = kwargs.pop('default', None)
        try:
            return super().getboolean(section, option, *args, **kwargs)
        except (configparser.NoOptionError, configparser.NoSectionError,
                AttributeError):
            return default


config = RangeConfigParser()
