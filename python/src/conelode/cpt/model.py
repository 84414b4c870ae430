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

"""Immutable CPT profile container.

A Profile keeps the five index-aligned sample arrays together with the header
scalars of one sounding. Arrays are stored read-only so a parsed profile can be
shared between threads without copying.
"""

from dataclasses import dataclass

import numpy as np
import pandas as pd

from conelode.datamodel import (
    CONE_RESISTANCE,
    DEPTH,
    FRICTION_RATIO,
    PORE_PRESSURE,
    PROFILE_COLUMNS,
    SLEEVE_FRICTION,
)

from .errors import MissingDateError


def _frozen_array(values):
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Profile:
    depth: np.ndarray
    qc: np.ndarray
    fs: np.ndarray
    fr: np.ndarray
    u: np.ndarray
    x: float = 0.0
    y: float = 0.0
    top: float = 0.0
    bottom: float = 0.0
    pre_excavated_depth: float = 0.0
    name: str = ""
    file_date: str = ""
    start_date: str = ""
    filename: str = ""

    def __post_init__(self):
        lengths = set()
        for field_name in ("depth", "qc", "fs", "fr", "u"):
            arr = _frozen_array(getattr(self, field_name))
            lengths.add(arr.shape[0])
            object.__setattr__(self, field_name, arr)
        if len(lengths) > 1:
            raise ValueError(f"Profile arrays must have equal length, got {sorted(lengths)}")

    def __len__(self):
        return self.depth.shape[0]

    @property
    def xy(self):
        return self.x, self.y

    @property
    def length(self):
        return self.top - self.bottom

    @property
    def date(self):
        """Start date if present, else file date."""
        if self.start_date:
            return self.start_date
        if self.file_date:
            return self.file_date
        raise MissingDateError("This CPT file has no valid date information.")

    @property
    def has_pore_pressure(self):
        return bool(np.any(self.u > 0) or np.any(self.u < 0))

    def to_frame(self):
        """Return the samples as a DataFrame, one row per depth."""
        return pd.DataFrame(
            {
                DEPTH: self.depth,
                CONE_RESISTANCE: self.qc,
                SLEEVE_FRICTION: self.fs,
                FRICTION_RATIO: self.fr,
                PORE_PRESSURE: self.u,
            },
            columns=PROFILE_COLUMNS,
        )
