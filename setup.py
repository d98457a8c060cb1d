#!/usr/bin/env python3
# This file is part of pgrange.  The COPYRIGHT file at the top level of
# this repository contains the full copyright notices and license terms.

import io
import os
import re

from setuptools import find_packages, setup


def read(fname):
    return io.open(
        os.path.join(os.path.dirname(__file__), fname),
        'r', encoding='utf-8').read()


def get_version():
    init = read(os.path.join('pgrange', '__init__.py'))
    return re.search('__version__ = "([0-9.]*)"', init).group(1)


version = get_version()
name = 'pgrange'

tests_require = ['hypothesis']

setup(name=name,
    version=version,
    description='PostgreSQL range operators in Python',
    long_description=read('README.rst'),
    keywords='PostgreSQL range interval',
    packages=find_packages(include=['pgrange', 'pgrange.*']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: '
        'GNU General Public License v3 or later (GPLv3+)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Database',
        'Topic :: Software Development :: Libraries :: Python Modules',
        ],
    platforms='any',
    license='GPL-3',
    python_requires='>=3.8',
    install_requires=[
        'python-sql >= 1.4',
        ],
    extras_require={
        'test': tests_require,
        },
    zip_safe=False,
    )
