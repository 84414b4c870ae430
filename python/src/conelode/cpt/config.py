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

"""Reader settings shared by the header parser and the profile builder."""


class ParserConfig:
    def __init__(self,
        qc_min=1e-3,
        fs_min=1e-6,
        fr_max=10.0,
        end_of_header="#EOH",
        column_separator=" ",
        encoding="utf-8"):
        # guard values replacing non-positive cone resistance / sleeve friction
        self.qc_min = qc_min
        self.fs_min = fs_min
        # friction ratio reported where cone resistance is exactly zero
        self.fr_max = fr_max
        self.end_of_header = end_of_header
        self.column_separator = column_separator
        self.encoding = encoding

    def update(self, **kwargs):
        for key, val in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown parser setting: {key}")
            setattr(self, key, val)
        return self

    def copy(self):
        return ParserConfig(**self.to_dict())

    def to_dict(self):
        return {
            "qc_min": self.qc_min,
            "fs_min": self.fs_min,
            "fr_max": self.fr_max,
            "end_of_header": self.end_of_header,
            "column_separator": self.column_separator,
            "encoding": self.encoding,
        }


def resolve(config):
    """Return the given config, or the defaults when None."""
    return config if config is not None else ParserConfig()
