#!/usr/bin/env python
# -*- coding: UTF-8 -*-

## NZTM coordinate conversion
## URL: https://github.com/anakhanz/nzrepeaters
## Copyright (C) 2011, Rob Wallace rob[at]wallace[dot]gen[dot]nz
## Converts coordinates between the New Zealand Transverse Mercator grid
## and latitude and longitude.
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public Licence as published by
## the Free Software Foundation; either version 3 of the Licence, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
## GNU General Public Licence for more details.
##
## You should have received a copy of the GNU General Public Licence
## along with this program. If not, see <http://www.gnu.org/licences/>.

import re
from setuptools import setup

# Read without importing, the package loads its settings on import
with open('nztm/nztm.py', encoding='utf-8') as f:
    __version__ = re.search(r"^__version__ = '([^']+)'", f.read(), re.M).group(1)

LONG_DESCRIPTION="""Converts coordinates between latitude and longitude and Transverse Mercator grid coordinates using Redfearn's series, with a preset for the New Zealand Transverse Mercator 2000 (NZTM) projection.

Provides:
 * A general TM projection definition for any ellipsoid
 * Forward (latitude/longitude to easting/northing) and inverse conversions
 * NZTM wrappers working in northing, easting order"""

setup(name = 'NZTM',
      version = __version__,
      author = 'Rob Wallace ZL2WAL',
      author_email = 'rob@wallace.gen.nz',
      maintainer = 'Rob Wallace ZL2WAL',
      maintainer_email = 'rob@wallace.gen.nz',
      url="https://github.com/anakhanz/nzrepeaters",
      description = 'NZ Transverse Mercator coordinate conversion',
      long_description = LONG_DESCRIPTION,
      # classifiers see http://pypi.python.org/pypi?%3Aaction=list_classifiers
      classifiers = [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: GIS'],
      license = 'GPL-3',
      packages = ['nztm'],
      python_requires = '>=3.7',
      install_requires = ['python-dotenv'],
      extras_require = {'test': ['pytest']})
