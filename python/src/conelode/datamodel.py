# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of conelode.

# conelode is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# conelode is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with conelode.  If not, see <https://www.gnu.org/licenses/>.

"""
Conelode Open Data Model

Provides a consistent schema for CPT data handling throughout the library.

GEF files declare their own column layout in the header, so the data row parser
never relies on fixed positions. Columns are resolved once through ColumnRole,
and tables handed to downstream code always use the names below.
"""

from enum import IntEnum


class ColumnRole(IntEnum):
    """Semantic column roles, valued by their GEF quantity number."""

    DEPTH = 1
    CONE_RESISTANCE = 2
    SLEEVE_FRICTION = 3
    PORE_PRESSURE = 6


# Corrected penetration depth is stored in the same slot as plain depth
CORRECTED_DEPTH_CODE = 11

# Procedure/report code fragment that marks a borehole description file
BOREHOLE_MARKER = "BORE"

# MEASUREMENTVAR number carrying the pre-excavated depth
PRE_EXCAVATED_DEPTH_VAR = "13"

DEPTH = "depth"
CONE_RESISTANCE = "qc"
SLEEVE_FRICTION = "fs"
FRICTION_RATIO = "fr"
PORE_PRESSURE = "u"

NAME = "name"
EASTING = "x"
NORTHING = "y"
TOP = "top"
BOTTOM = "bottom"
DATE = "date"
FILENAME = "filename"

# Column order of Profile.to_frame
PROFILE_COLUMNS = [DEPTH, CONE_RESISTANCE, SLEEVE_FRICTION, FRICTION_RATIO, PORE_PRESSURE]

# Column order of the location table, geometry is appended by geopandas
LOCATION_COLUMNS = [NAME, EASTING, NORTHING, TOP, BOTTOM, DATE, FILENAME]
