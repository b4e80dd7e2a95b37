#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDELTA_PATH = HERE / "jsondelta"


def get_version(path):
    """Read __version__ from a _version.py file without importing the package."""
    with open(path) as f:
        match = re.search(r'^__version__\s*=\s*[\'"]([^\'"]+)[\'"]', f.read(), re.M)
    return match.group(1)


VERSION = get_version(JSONDELTA_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='jsondelta',
      version=VERSION,
      description='Structural diff and JSON Patch for JSON documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      author='Jupyter Development Team',
      license='BSD',
      python_requires='>=3.6',
      packages=find_packages(exclude=['jsondelta.tests', 'jsondelta.tests.*']),
      package_data={
          'jsondelta': ['*.schema.json'],
      },
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'jsondelta = jsondelta.__main__:main_dispatch',
              'jsondelta-diff = jsondelta.jsondiffapp:main',
              'jsondelta-patch = jsondelta.jsonpatchapp:main',
          ],
      },
      classifiers=[
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
      )
