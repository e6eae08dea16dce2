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

from dataclasses import dataclass

from tabplot.text.ansi import COLOR_CYCLE, Color


@dataclass(frozen=True)
class RenderConfig:
    tick_width: int = 8
    value_gutter: int = 20  # columns reserved for the line plot's value labels
    height_ratio: float = 0.25
    fallback_width: int = 80
    label_precision: int = 2
    colors: tuple[Color, ...] = COLOR_CYCLE
    bar_glyph: str = "█"
    date_formats: tuple[str, ...] = ("%d/%m/%Y", "%d/%m/%y")


DEFAULT_CONFIG = RenderConfig()
