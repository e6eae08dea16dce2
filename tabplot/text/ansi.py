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

"""
Terminal colors and display-width helpers.

All knowledge about escape sequences lives here: renderers colorize through
`Color.wrap` and measure through `visible_width`, never by inspecting escapes.
"""

import re
from collections.abc import Sequence
from enum import Enum

RESET = "\x1b[0m"

# ESC [ <numeric params> <final letter>
_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


class Color(Enum):
    BLUE = 34
    GREEN = 32
    RED = 31
    YELLOW = 33
    MAGENTA = 35
    CYAN = 36

    @property
    def escape(self) -> str:
        return f"\x1b[{self.value}m"

    def wrap(self, text: str) -> str:
        return f"{self.escape}{text}{RESET}"

    @classmethod
    def from_name(cls, name: str) -> "Color":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown color: {name!r}") from None


COLOR_CYCLE: tuple[Color, ...] = (
    Color.BLUE,
    Color.GREEN,
    Color.RED,
    Color.YELLOW,
    Color.MAGENTA,
    Color.CYAN,
)


def color_for(index: int, cycle: Sequence[Color] = COLOR_CYCLE) -> Color:
    """Color assigned to the series at `index`."""
    return cycle[index % len(cycle)]


def strip_ansi(text: str) -> str:
    return _ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Number of characters a terminal displays for `text`."""
    return len(strip_ansi(text))


def pad_center(text: str, width: int) -> str:
    """
    Center `text` in `width` visible columns.

    Never truncates: when the text is already wider, it is returned as is.
    """
    text_width = visible_width(text)
    left = max(0, (width - text_width) // 2)
    right = max(0, width - text_width - left)
    return " " * left + text + " " * right


def pad_start(text: str, width: int) -> str:
    """Right-align `text` in `width` visible columns."""
    return " " * max(0, width - visible_width(text)) + text
