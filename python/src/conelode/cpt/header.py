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

"""GEF header parsing.

The header is a list of ``#KEYWORD=param,param,...`` records terminated by the
``#EOH`` marker. Column semantics are declared here rather than fixed by the
format, so the parser builds a role -> column index mapping that the data row
pass resolves against. Unknown keywords are ignored.
"""

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from conelode.datamodel import (
    BOREHOLE_MARKER,
    CORRECTED_DEPTH_CODE,
    PRE_EXCAVATED_DEPTH_VAR,
    ColumnRole,
)

from .config import resolve
from .errors import HeaderError, WrongFileTypeError

logger = logging.getLogger(__name__)


def round_half_up(value, places=2):
    """Round to ``places`` decimals with exact binary ties going away from zero."""
    value = float(value)
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class HeaderMetadata:
    """Read-only header record handed to the profile builder."""

    record_separator: str
    column_separator: str
    column_voids: MappingProxyType
    column_index: MappingProxyType
    x: float
    y: float
    top: float
    pre_excavated_depth: float
    name: str
    file_date: str
    start_date: str

    def column(self, role):
        return self.column_index.get(role)


class RawMetadata:
    """Header values accumulated while scanning, consumed by the profile builder."""

    def __init__(self, column_separator=" "):
        self.record_separator = ""
        self.column_separator = column_separator
        self.column_voids = {}
        self.column_index = {}
        self.x = 0.0
        self.y = 0.0
        self.top = 0.0
        self.pre_excavated_depth = 0.0
        self.name = ""
        self.file_date = ""
        self.start_date = ""

    def column(self, role):
        return self.column_index.get(role)

    def to_dict(self):
        return {
            "record_separator": self.record_separator,
            "column_separator": self.column_separator,
            "column_voids": dict(self.column_voids),
            "column_index": {role.name: idx for role, idx in self.column_index.items()},
            "x": self.x,
            "y": self.y,
            "top": self.top,
            "pre_excavated_depth": self.pre_excavated_depth,
            "name": self.name,
            "file_date": self.file_date,
            "start_date": self.start_date,
        }

    def freeze(self):
        return HeaderMetadata(
            record_separator=self.record_separator,
            column_separator=self.column_separator,
            column_voids=MappingProxyType(dict(self.column_voids)),
            column_index=MappingProxyType(dict(self.column_index)),
            x=self.x,
            y=self.y,
            top=self.top,
            pre_excavated_depth=self.pre_excavated_depth,
            name=self.name,
            file_date=self.file_date,
            start_date=self.start_date,
        )


def parse_date(params):
    """Encode year, month, day params as ``YYYYMMDD``; any failure gives ``""``."""
    try:
        yyyy, mm, dd = (int(p.strip()) for p in params[:3])
    except ValueError as exc:
        logger.debug("Ignoring unreadable date %s: %s", params, exc)
        return ""
    if not (1900 <= yyyy <= 2100 and 1 <= mm <= 12 and 1 <= dd <= 31):
        logger.debug("Ignoring out of range date %s-%s-%s", yyyy, mm, dd)
        return ""
    return f"{yyyy:04d}{mm:02d}{dd:02d}"


def _column_role(code):
    if code == CORRECTED_DEPTH_CODE:
        return ColumnRole.DEPTH
    try:
        return ColumnRole(code)
    except ValueError:
        return None


def _split_record(line):
    keyword, sep, argline = line.partition("=")
    if not sep:
        raise ValueError("missing '=' between keyword and parameters")
    keyword = keyword.strip().replace("#", "", 1)
    return keyword, argline.strip().split(",")


def parse_header_line(line, metadata):
    """Apply one header record to ``metadata``.

    Raises WrongFileTypeError for borehole files and HeaderError for any
    malformed record.
    """
    try:
        keyword, params = _split_record(line)

        if keyword in ("PROCEDURECODE", "REPORTCODE"):
            if BOREHOLE_MARKER in params[0].upper():
                raise WrongFileTypeError(params[0].strip())
        elif keyword == "RECORDSEPARATOR":
            metadata.record_separator = params[0]
        elif keyword == "COLUMNSEPARATOR":
            metadata.column_separator = params[0]
        elif keyword == "COLUMNINFO":
            column = int(params[0].strip())
            role = _column_role(int(params[3].strip()))
            if role is not None:
                metadata.column_index[role] = column - 1
        elif keyword == "XYID":
            metadata.x = round_half_up(params[1].strip())
            metadata.y = round_half_up(params[2].strip())
        elif keyword == "ZID":
            metadata.top = float(params[1].strip())
        elif keyword == "MEASUREMENTVAR":
            if params[0].strip() == PRE_EXCAVATED_DEPTH_VAR:
                metadata.pre_excavated_depth = float(params[1].strip())
        elif keyword == "COLUMNVOID":
            metadata.column_voids[int(params[0].strip()) - 1] = float(params[1].strip())
        elif keyword == "TESTID":
            metadata.name = params[0].strip()
        elif keyword == "FILEDATE":
            metadata.file_date = parse_date(params)
        elif keyword == "STARTDATE":
            metadata.start_date = parse_date(params)
        else:
            logger.debug("Skipping header keyword %s", keyword)
    except WrongFileTypeError:
        raise
    except (ValueError, IndexError) as exc:
        raise HeaderError(line, exc) from exc


def parse_header(lines, config=None):
    """Scan header lines into a read-only HeaderMetadata record.

    Returns ``(metadata, offset)`` where ``offset`` is the index of the first
    data line, i.e. the line after the end-of-header marker. Without a marker
    the whole input is treated as header and ``offset == len(lines)``.
    """
    config = resolve(config)
    metadata = RawMetadata(column_separator=config.column_separator)
    offset = len(lines)
    for idx, line in enumerate(lines):
        if config.end_of_header in line:
            offset = idx + 1
            break
        if not line.strip():
            continue
        parse_header_line(line, metadata)
    else:
        logger.warning("No %s marker found, file has no data section", config.end_of_header)
    logger.debug("Header scanned: %s", metadata.to_dict())
    return metadata.freeze(), offset
