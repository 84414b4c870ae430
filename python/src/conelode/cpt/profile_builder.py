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

"""Data section ingestion and post-processing.

Rows are read positionally through the header's column mapping. Depth is
rebased to elevation against the header top level, and non-positive cone
resistance / sleeve friction are replaced by small guard values so the
friction ratio stays finite. Post-processing then derives the friction ratio,
drops rows without a depth and fixes the top/bottom levels.
"""

import logging

import numpy as np

from conelode.datamodel import ColumnRole

from .config import resolve
from .errors import DataLineError, EmptyProfileError
from .header import round_half_up
from .model import Profile

logger = logging.getLogger(__name__)


def _to_float(token):
    try:
        return float(token)
    except ValueError:
        return None


def split_data_line(line, metadata):
    """Split a data row into floats; unparseable tokens become None."""
    if metadata.record_separator:
        line = line.replace(metadata.record_separator, "")
    line = line.strip()
    sep = metadata.column_separator
    tokens = line.split() if not sep.strip() else line.split(sep)
    return [_to_float(tok.strip()) for tok in tokens if tok.strip()]


def _is_void(values, metadata):
    for col, void in metadata.column_voids.items():
        if col < len(values) and values[col] == void:
            return True
    return False


def _required(values, metadata, role):
    col = metadata.column(role)
    if col is None:
        raise KeyError(f"no column declared for {role.name.lower()}")
    if col < 0 or col >= len(values):
        raise IndexError(f"column {col + 1} ({role.name.lower()}) out of range, row has {len(values)} values")
    value = values[col]
    if value is None:
        raise ValueError(f"column {col + 1} ({role.name.lower()}) is not numeric")
    return value


def read_data_line(line, metadata, config=None):
    """Parse one data row into ``(depth, qc, fs, u)``.

    Returns None for rows that are blank or hold a void value.
    """
    config = resolve(config)
    if not line.strip():
        return None
    try:
        values = split_data_line(line, metadata)
        if _is_void(values, metadata):
            logger.debug("Dropping void row '%s'", line.strip())
            return None

        depth = metadata.top - abs(_required(values, metadata, ColumnRole.DEPTH))

        qc = _required(values, metadata, ColumnRole.CONE_RESISTANCE)
        if qc <= 0:
            qc = config.qc_min

        fs = _required(values, metadata, ColumnRole.SLEEVE_FRICTION)
        if fs <= 0:
            fs = config.fs_min

        if metadata.column(ColumnRole.PORE_PRESSURE) is not None:
            u = _required(values, metadata, ColumnRole.PORE_PRESSURE)
        else:
            u = 0.0
    except (KeyError, IndexError, ValueError) as exc:
        raise DataLineError(line, exc) from exc
    return depth, qc, fs, u


def _zero_nan(values):
    return np.where(np.isnan(values), 0.0, values)


def compute_friction_ratio(qc, fs, fr_max=10.0):
    """Friction ratio in percent; ``fr_max`` where cone resistance is exactly zero."""
    qc = np.asarray(qc, dtype=float)
    fs = np.asarray(fs, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = fs / qc * 100.0
    return np.where(qc == 0.0, fr_max, ratio)


def post_process(depth, qc, fs, u, top, config=None):
    """Derive friction ratio, filter rows and fix the top/bottom levels.

    Returns a dict with keys depth, qc, fs, fr, u, top, bottom.
    Raises EmptyProfileError when no row has a valid depth.
    """
    config = resolve(config)
    depth = np.asarray(depth, dtype=float)
    qc = np.asarray(qc, dtype=float)
    fs = np.asarray(fs, dtype=float)
    u = np.asarray(u, dtype=float)

    fr = compute_friction_ratio(qc, fs, fr_max=config.fr_max)

    keep = ~np.isnan(depth)
    dropped = int((~keep).sum())
    if dropped:
        logger.debug("Dropping %d rows without depth", dropped)

    out = {
        "depth": depth[keep],
        "qc": _zero_nan(qc[keep]),
        "fs": _zero_nan(fs[keep]),
        "fr": _zero_nan(fr[keep]),
        "u": _zero_nan(u[keep]),
    }
    if out["depth"].size == 0:
        raise EmptyProfileError("CPT file contains no data rows with a valid depth")

    out["top"] = round_half_up(top)
    out["bottom"] = round_half_up(out["depth"][-1])
    return out


def build_profile(lines, metadata, filename="", config=None):
    """Ingest data lines and post-process them into a Profile."""
    config = resolve(config)
    depth, qc, fs, u = [], [], [], []
    for line in lines:
        row = read_data_line(line, metadata, config=config)
        if row is None:
            continue
        depth.append(row[0])
        qc.append(row[1])
        fs.append(row[2])
        u.append(row[3])

    processed = post_process(depth, qc, fs, u, metadata.top, config=config)
    profile = Profile(
        depth=processed["depth"],
        qc=processed["qc"],
        fs=processed["fs"],
        fr=processed["fr"],
        u=processed["u"],
        x=metadata.x,
        y=metadata.y,
        top=processed["top"],
        bottom=processed["bottom"],
        pre_excavated_depth=metadata.pre_excavated_depth,
        name=metadata.name,
        file_date=metadata.file_date,
        start_date=metadata.start_date,
        filename=filename,
    )
    return profile
