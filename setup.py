#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup
import imgdelegate
import os


VERSION = imgdelegate.__version__


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


# We use requirements.txt so we can provide a deterministic set of packages
# to be installed, not the latest version that happens to be available.
with open(local_file('requirements.txt')) as f:
    install_requires = list(f)


def _read(fname):
    with open(local_file(fname)) as f:
        return f.read()


setup(
    name='imgdelegate',
    description = ('Meta-identifier codec and script delegates for IIIF image servers'),
    long_description=_read('README.md'),
    long_description_content_type='text/markdown',
    license='Simplified BSD',
    version=VERSION,
    packages=['imgdelegate'],
    package_data={'imgdelegate': ['data/*']},
    install_requires=install_requires,
    extras_require={
        'test': ['pytest', 'hypothesis', 'mock'],
    },
)
