# -*- coding: UTF-8 -*-

## NZTM coordinate conversion
## URL: https://github.com/anakhanz/nzrepeaters
## Copyright (C) 2024, Rob Wallace rob[at]wallace[dot]kiwi
## Settings shared by the Transverse Mercator conversion modules, read from
## the environment or a .env file
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

from os import getenv
from dotenv import load_dotenv

load_dotenv()

# Degrees either side of the central meridian treated as the valid-use
# envelope of the series, conversions outside it are logged at debug level
tmEnvelope = float(getenv('TM_ENVELOPE', '3.0'))
