# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Tabplot Contributors
#
# This file is part of Tabplot.
#
# Tabplot is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Tabplot is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from tabplot.text.ansi import (
    COLOR_CYCLE,
    RESET,
    Color,
    color_for,
    pad_center,
    pad_start,
    strip_ansi,
    visible_width,
)
from tabplot.text.values import display_value, format_number

__all__ = [
    "COLOR_CYCLE",
    "RESET",
    "Color",
    "color_for",
    "display_value",
    "format_number",
    "pad_center",
    "pad_start",
    "strip_ansi",
    "visible_width",
]
