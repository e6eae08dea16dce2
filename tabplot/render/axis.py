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

from collections.abc import Sequence

from tabplot.text.ansi import pad_center
from tabplot.text.values import format_number


def tick_rule(indent: int, ticks: int, tick_width: int = 8) -> str:
    """
    Axis line: a start junction followed by `ticks` segments of `tick_width` columns.

        ├───────┬───────┬
    """
    ticks = max(0, ticks)
    segment = "─" * max(0, tick_width - 1) + "┬"
    return " " * max(0, indent) + "├" + segment * ticks


def tick_labels(values: Sequence[float], indent: int, tick_width: int = 8, precision: int = 2) -> str:
    """
    One label per value, each centered in a `tick_width` cell.

    A negative indent shifts the cells left by eating their leading padding,
    never the label text itself.
    """
    cells = "".join(pad_center(format_number(v, precision), tick_width) for v in values)
    if indent >= 0:
        return " " * indent + cells
    padding = len(cells) - len(cells.lstrip(" "))
    return cells[min(-indent, padding) :]


def linear_ticks(start: float, stop: float, ticks: int, tick_width: int, span_width: int) -> list[float]:
    """
    Values under each junction of a rule of `ticks` segments.

    Junction i sits `i * tick_width` columns into a span of `span_width`
    columns covering [start, stop].
    """
    ticks = max(0, ticks)
    if span_width <= 0:
        return [start for _ in range(ticks + 1)]
    return [start + (i * tick_width / span_width) * (stop - start) for i in range(ticks + 1)]
