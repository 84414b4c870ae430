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

"""CPT reader exception hierarchy."""


class CptError(Exception):
    """Base exception for all CPT reading errors."""


class CptReadError(CptError):
    """A file could not be read; wraps the underlying error."""

    def __init__(self, fmt, cause=None, message=None):
        self.fmt = fmt
        self.cause = cause
        if message is None:
            message = f"Error reading {fmt.upper()} CPT data; '{cause}'"
        super().__init__(message)


class UnsupportedFormatError(CptReadError):
    """The file extension is not one the reader knows about."""

    def __init__(self, suffix, supported):
        self.suffix = suffix
        self.supported = tuple(supported)
        listing = ", ".join(f"*.{ext}" for ext in self.supported)
        super().__init__(
            suffix,
            message=f"Invalid or unsupported filetype '{suffix}', supported are {listing}",
        )


class WrongFileTypeError(CptError):
    """The header declares a borehole file instead of a CPT."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"This is a borehole file instead of a CPT file (code '{code}')")


class HeaderError(CptError):
    """A header keyword line could not be parsed."""

    def __init__(self, line, cause):
        self.line = line
        self.cause = cause
        super().__init__(f"Error reading header line '{line}' -> {cause}")


class DataLineError(CptError):
    """A data row is missing a column required by the header mapping."""

    def __init__(self, line, cause):
        self.line = line
        self.cause = cause
        super().__init__(f"Error reading data line '{line}' -> {cause}")


class EmptyProfileError(CptError):
    """No data rows survived ingestion and filtering."""


class MissingDateError(CptError, ValueError):
    """Neither a start date nor a file date was found in the header."""
