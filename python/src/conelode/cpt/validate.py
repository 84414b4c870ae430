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

"""QA/QC helpers for parsed CPT profiles."""

import numpy as np


def validate_profile(profile):
    """Report non-fatal problems with a profile.

    Returns a list of issue dicts: inverted profile (top below bottom),
    depth increasing with sample index, no date, and a pre-excavated depth
    larger than the sounding length.
    """
    issues = []
    if profile.top < profile.bottom:
        issues.append({"type": "inverted_profile", "top": profile.top, "bottom": profile.bottom})

    steps = np.diff(profile.depth)
    if steps.size and np.any(steps > 0):
        first = int(np.argmax(steps > 0)) + 1
        issues.append({"type": "non_monotonic_depth", "row_index": first, "value": float(profile.depth[first])})

    if not (profile.start_date or profile.file_date):
        issues.append({"type": "missing_date"})

    if profile.pre_excavated_depth > 0 and profile.pre_excavated_depth > profile.length:
        issues.append({
            "type": "pre_excavation_below_bottom",
            "value": profile.pre_excavated_depth,
            "length": profile.length,
        })
    return issues


def validate_profiles(profiles):
    issues = []
    for profile in profiles:
        for issue in validate_profile(profile):
            issues.append({"name": profile.name or profile.filename, **issue})
    return issues
