# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import config, errors, header, locations, model, profile_builder, reader, validate
from .errors import (
	CptError,
	CptReadError,
	DataLineError,
	EmptyProfileError,
	HeaderError,
	MissingDateError,
	UnsupportedFormatError,
	WrongFileTypeError,
)
from .model import Profile
from .reader import SUPPORTED_FORMATS, parse_cpt, parse_gef

__all__ = [
	"config",
	"errors",
	"header",
	"locations",
	"model",
	"profile_builder",
	"reader",
	"validate",
	"CptError",
	"CptReadError",
	"DataLineError",
	"EmptyProfileError",
	"HeaderError",
	"MissingDateError",
	"UnsupportedFormatError",
	"WrongFileTypeError",
	"Profile",
	"SUPPORTED_FORMATS",
	"parse_cpt",
	"parse_gef",
]
