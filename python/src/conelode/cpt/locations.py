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

"""Location table for a set of parsed CPT profiles."""

import geopandas as gpd
import pandas as pd

from conelode.datamodel import (
    BOTTOM,
    DATE,
    EASTING,
    FILENAME,
    LOCATION_COLUMNS,
    NAME,
    NORTHING,
    TOP,
)


def cpt_locations(profiles, crs=None):
    """Collect test locations into a GeoDataFrame of points.

    Parameters
    ----------
    profiles : iterable of Profile
        Parsed soundings.
    crs : optional
        Coordinate reference system of the header XYID coordinates, passed
        through to geopandas (GEF files usually use EPSG:28992).

    Returns
    -------
    geopandas.GeoDataFrame
        One row per profile with name, x, y, top, bottom, date and filename.
        Profiles without a date get an empty string.
    """
    records = []
    for profile in profiles:
        records.append({
            NAME: profile.name,
            EASTING: profile.x,
            NORTHING: profile.y,
            TOP: profile.top,
            BOTTOM: profile.bottom,
            DATE: profile.start_date or profile.file_date,
            FILENAME: profile.filename,
        })

    df = pd.DataFrame.from_records(records, columns=LOCATION_COLUMNS)
    geom = gpd.points_from_xy(df[EASTING], df[NORTHING])
    return gpd.GeoDataFrame(df, geometry=geom, crs=crs)
