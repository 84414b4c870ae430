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

"""Format dispatch for CPT buffers.

The reader never touches the file system: callers hand in the file content
(text or bytes) together with its extension, and receive a Profile or a
CptReadError carrying the underlying cause.
"""

import logging

from .config import resolve
from .errors import CptError, CptReadError, UnsupportedFormatError
from .header import parse_header
from .profile_builder import build_profile

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("gef", "xml")


def _normalize_suffix(suffix):
    return str(suffix or "").strip().lower().lstrip(".")


def _decode(data, encoding):
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode(encoding)
    return data


def parse_gef(text, filename="", config=None):
    """Run the GEF header and data passes over ``text``.

    Component errors (HeaderError, WrongFileTypeError, DataLineError,
    EmptyProfileError) are raised as-is.
    """
    config = resolve(config)
    lines = text.split("\n")
    metadata, offset = parse_header(lines, config=config)
    profile = build_profile(lines[offset:], metadata, filename=filename, config=config)
    logger.info(
        "Read CPT '%s': %d samples, top %.2f, bottom %.2f",
        profile.name or filename,
        len(profile),
        profile.top,
        profile.bottom,
    )
    return profile


def parse_xml(text, filename="", config=None):
    raise NotImplementedError("XML parsing not implemented")


_READERS = {
    "gef": parse_gef,
    "xml": parse_xml,
}


def parse_cpt(data, suffix, filename="", encoding=None, config=None):
    """Parse a CPT buffer, dispatching on the (case-insensitive) file extension.

    Bytes are decoded with ``encoding``, falling back to ``config.encoding``
    (utf-8 by default).

    Raises UnsupportedFormatError for unknown extensions and CptReadError for
    every failure while reading a supported format.
    """
    config = resolve(config)
    fmt = _normalize_suffix(suffix)
    reader = _READERS.get(fmt)
    if reader is None:
        raise UnsupportedFormatError(suffix, SUPPORTED_FORMATS)

    try:
        text = _decode(data, encoding or config.encoding)
        return reader(text, filename=filename, config=config)
    except (CptError, NotImplementedError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read %s CPT '%s': %s", fmt, filename, exc)
        raise CptReadError(fmt, exc) from exc
