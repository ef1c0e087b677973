# -*- coding: UTF-8 -*-

## NZTM coordinate conversion
## URL: https://github.com/anakhanz/nzrepeaters
## Copyright (C) 2010, Rob Wallace rob[at]wallace[dot]gen[dot]nz
## Converts coordinates between the New Zealand Transverse Merctator and
## latitude and longitude on the New Zealand Geodetic Datum 2000
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation; either version 3 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License
## along with this program. If not, see <http://www.gnu.org/licenses/>.

__version__ = '1.0.0'

from math import radians
from .tm import TMProjection, make_projection, tm_geod, geod_tm

NZTM_A  = 6378137.0
NZTM_RF = 298.257222101

NZTM_CM =     173.0
NZTM_OLAT =     0.0
NZTM_SF =       0.9996
NZTM_FE =     1600000.0
NZTM_FN =     10000000.0

def get_nztm_projection() -> TMProjection:
    '''
    Define NZTM Projection parameters

    Every call builds an identical projection, use the module level nztm
    rather than calling this per conversion.
    '''
    return make_projection(NZTM_A, NZTM_RF, radians(NZTM_CM), NZTM_SF,
                           radians(NZTM_OLAT), NZTM_FE, NZTM_FN, 1.0)

nztm = get_nztm_projection()

def nztm_geod(n: float, e: float) -> tuple:
    '''
    Wrapper function to convert from NZTM to latitude and longitude.

    Arguments:
    n - input northing (metres)
    e - input easting (metres)

    Returns
    lt - output latitude (radians)
    ln - output longitude (radians)
    '''
    return tm_geod(nztm, e, n)

def geod_nztm(lt: float, ln: float) -> tuple:
    '''
    Wrapper function to convert from latitude and longitude to NZTM.

    Arguments:
    lt - input latitude (radians)
    ln - input longitude (radians)

    Returns:
    n - output northing (metres)
    e - output easting  (metres)
    '''
    e, n = geod_tm(nztm, lt, ln)
    return (n, e)

def format_nztm(n: float, e: float) -> str:
    return "%i mE %i mN" % (e, n)
