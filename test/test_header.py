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

"""Tests for GEF header parsing."""

import dataclasses
import math

import pytest

from conelode.cpt.config import ParserConfig
from conelode.cpt.errors import HeaderError, WrongFileTypeError
from conelode.cpt.header import (
    HeaderMetadata,
    RawMetadata,
    parse_date,
    parse_header,
    parse_header_line,
    round_half_up,
)
from conelode.datamodel import ColumnRole


def _parse(*lines):
    metadata = RawMetadata()
    for line in lines:
        parse_header_line(line, metadata)
    return metadata


# ---------------------------------------------------------------------------
# Header scanning
# ---------------------------------------------------------------------------

def test_parse_header_returns_offset_after_eoh():
    lines = ["#GEFID= 1, 1, 0", "#TESTID= CPT-9", "#EOH=", "1.0 2.0 3.0", "2.0 3.0 4.0"]
    metadata, offset = parse_header(lines)
    assert offset == 3
    assert lines[offset] == "1.0 2.0 3.0"
    assert metadata.name == "CPT-9"


def test_parse_header_without_eoh_consumes_everything():
    lines = ["#GEFID= 1, 1, 0", "#TESTID= CPT-9"]
    _, offset = parse_header(lines)
    assert offset == len(lines)


def test_parse_header_skips_blank_lines():
    metadata, offset = parse_header(["#TESTID= A", "", "   ", "#EOH="])
    assert metadata.name == "A"
    assert offset == 4


def test_parse_header_uses_configured_separator_default():
    metadata, _ = parse_header(["#EOH="], config=ParserConfig(column_separator=";"))
    assert metadata.column_separator == ";"


def test_unknown_keywords_are_ignored():
    metadata = _parse("#FILEOWNER= Someone", "#COMPANYID= ACME, 1, 31")
    assert metadata.column_index == {}
    assert metadata.name == ""


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

def test_columninfo_maps_roles_zero_based():
    metadata = _parse(
        "#COLUMNINFO= 1, m, penetration length, 1",
        "#COLUMNINFO= 2, MPa, cone resistance, 2",
        "#COLUMNINFO= 3, MPa, sleeve friction, 3",
        "#COLUMNINFO= 4, %, friction ratio, 4",
        "#COLUMNINFO= 5, MPa, pore pressure u2, 6",
    )
    assert metadata.column_index == {
        ColumnRole.DEPTH: 0,
        ColumnRole.CONE_RESISTANCE: 1,
        ColumnRole.SLEEVE_FRICTION: 2,
        ColumnRole.PORE_PRESSURE: 4,
    }


def test_corrected_depth_shares_depth_slot_last_wins():
    metadata = _parse("#COLUMNINFO= 1, m, length, 1", "#COLUMNINFO= 6, m, corrected depth, 11")
    assert metadata.column(ColumnRole.DEPTH) == 5

    metadata = _parse("#COLUMNINFO= 6, m, corrected depth, 11", "#COLUMNINFO= 1, m, length, 1")
    assert metadata.column(ColumnRole.DEPTH) == 0


def test_separators():
    metadata = _parse("#COLUMNSEPARATOR= ;", "#RECORDSEPARATOR= !")
    assert metadata.column_separator == ";"
    assert metadata.record_separator == "!"


def test_xyid_rounds_to_two_decimals():
    metadata = _parse("#XYID= 31000, 155000.1234, 463000.9876, 0.01, 0.01")
    assert metadata.x == 155000.12
    assert metadata.y == 463000.99


def test_zid_keeps_full_precision():
    metadata = _parse("#ZID= 31000, -1.234, 0.01")
    assert metadata.top == -1.234


def test_measurementvar_13_sets_pre_excavated_depth():
    metadata = _parse("#MEASUREMENTVAR= 12, 2.00, m, other", "#MEASUREMENTVAR= 13, 1.50, m, pre-excavated")
    assert metadata.pre_excavated_depth == 1.5


def test_columnvoid_is_stored_zero_based():
    metadata = _parse("#COLUMNVOID= 3, -9999")
    assert metadata.column_voids == {2: -9999.0}


def test_testid_is_trimmed():
    assert _parse("#TESTID=  DKM-01  ").name == "DKM-01"


def test_startdate_and_filedate():
    metadata = _parse("#STARTDATE= 2023, 5, 7, 10, 30, 0", "#FILEDATE= 2023, 12, 31")
    assert metadata.start_date == "20230507"
    assert metadata.file_date == "20231231"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def test_parse_date_rejects_out_of_range_values():
    assert parse_date(["1899", "5", "7"]) == ""
    assert parse_date(["2101", "5", "7"]) == ""
    assert parse_date(["2023", "13", "7"]) == ""
    assert parse_date(["2023", "5", "32"]) == ""
    assert parse_date(["2023", "0", "7"]) == ""


def test_parse_date_failures_are_silent():
    assert parse_date(["2023", "may", "7"]) == ""
    assert parse_date(["2023"]) == ""
    metadata = _parse("#STARTDATE= 1899, 5, 7")
    assert metadata.start_date == ""


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("line", [
    "#PROCEDURECODE= GEF-BORE-Report, 1, 0, 0",
    "#REPORTCODE= sikb0101_borehole",
])
def test_borehole_codes_raise_wrong_file_type(line):
    with pytest.raises(WrongFileTypeError, match="borehole"):
        _parse(line)


def test_cpt_procedure_code_is_accepted():
    _parse("#PROCEDURECODE= GEF-CPT-Report, 1, 1, 0, -")


def test_borehole_rejected_before_data():
    lines = ["#PROCEDURECODE=SIKB0101_BOREHOLE", "#EOH=", "this is not data"]
    with pytest.raises(WrongFileTypeError):
        parse_header(lines)


@pytest.mark.parametrize("line", [
    "#COLUMNINFO",
    "#COLUMNINFO= 1, m, length",
    "#COLUMNINFO= one, m, length, 1",
    "#XYID= 31000, abc, 1.0",
    "#ZID= 31000",
    "#COLUMNVOID= 3",
])
def test_malformed_lines_raise_header_error(line):
    with pytest.raises(HeaderError) as excinfo:
        _parse(line)
    assert excinfo.value.line == line
    assert excinfo.value.cause is not None
    assert line in str(excinfo.value)


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def test_xyid_exact_ties_round_away_from_zero():
    metadata = _parse("#XYID= 31000, 120000.125, 450000.375, 0.01, 0.01")
    assert metadata.x == 120000.13
    assert metadata.y == 450000.38


def test_round_half_up():
    assert round_half_up(-0.125) == -0.13
    assert round_half_up(2.675) == 2.67
    assert round_half_up("1.005") == 1.0
    assert math.isnan(round_half_up(float("nan")))


# ---------------------------------------------------------------------------
# Frozen header record
# ---------------------------------------------------------------------------

def test_parse_header_returns_read_only_record():
    lines = [
        "#COLUMNINFO= 1, m, length, 1",
        "#COLUMNVOID= 1, -9999",
        "#TESTID= CPT-9",
        "#EOH=",
    ]
    metadata, _ = parse_header(lines)
    assert isinstance(metadata, HeaderMetadata)
    assert metadata.column(ColumnRole.DEPTH) == 0
    assert metadata.column_voids[0] == -9999.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        metadata.top = 3.0
    with pytest.raises(TypeError):
        metadata.column_voids[1] = 0.0
    with pytest.raises(TypeError):
        metadata.column_index[ColumnRole.CONE_RESISTANCE] = 1


def test_freeze_copies_accumulated_values():
    raw = _parse("#COLUMNINFO= 2, MPa, qc, 2", "#ZID= 31000, 1.5")
    frozen = raw.freeze()
    raw.column_index[ColumnRole.DEPTH] = 0
    assert frozen.column(ColumnRole.DEPTH) is None
    assert frozen.top == 1.5
    assert raw.to_dict()["column_index"] == {"DEPTH": 0, "CONE_RESISTANCE": 1}
