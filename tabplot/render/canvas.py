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
Character-cell line plotting backed by asciichartpy.

asciichartpy draws the value gutter, the y-axis and the line glyphs. This
module fixes the label width so every row's axis lines up, then reports
where the data columns start instead of leaving callers to guess from the
label text.
"""

import math
from collections.abc import Sequence

import asciichartpy

from tabplot.render.types import PlotCanvas
from tabplot.text.ansi import COLOR_CYCLE, Color, strip_ansi
from tabplot.text.values import format_number

# y-axis glyphs asciichartpy puts right after each value label
_AXIS_GLYPHS = ("┼", "┤")

EMPTY_CANVAS = PlotCanvas(text="", gutter_width=0, data_width=0)


def draw_series(
    series: Sequence[Sequence[float]],
    *,
    height: int,
    colors: Sequence[Color] = COLOR_CYCLE,
    precision: int = 2,
) -> PlotCanvas:
    """Overlay equal-length series on one chart, `height` rows above the bottom row."""
    data_width = max((len(s) for s in series), default=0)
    if data_width == 0:
        return EMPTY_CANVAS

    # infinities are drawn as gaps, the same as NaN
    cleaned = [[v if math.isfinite(v) else math.nan for v in s] for s in series]
    finite = [v for s in cleaned for v in s if not math.isnan(v)]
    if not finite:
        return EMPTY_CANVAS

    low, high = min(finite), max(finite)
    label_width = max(len(format_number(low, precision)), len(format_number(high, precision)))

    text = asciichartpy.plot(
        cleaned,
        {
            "min": low,
            "max": high,
            "height": max(0, height),
            "format": f"{{:{label_width}.{precision}f}} ",
            "colors": [c.escape for c in colors],
        },
    )
    return PlotCanvas(text=text, gutter_width=_gutter_width(text), data_width=data_width)


def _gutter_width(text: str) -> int:
    first_line = strip_ansi(text.split("\n", 1)[0])
    positions = [first_line.find(g) for g in _AXIS_GLYPHS if g in first_line]
    if not positions:
        return 0
    return min(positions) + 1
