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

import math
from collections.abc import Sequence

from tabplot.core.config import DEFAULT_CONFIG, RenderConfig
from tabplot.errors import EmptyInputError
from tabplot.render._columns import cell, numeric_value, select_series
from tabplot.render.axis import linear_ticks, tick_labels, tick_rule
from tabplot.render.terminal import resolve_width
from tabplot.render.types import TableView
from tabplot.stats import round_half_up
from tabplot.text.ansi import color_for, pad_center, pad_start, visible_width
from tabplot.text.values import display_value

SEPARATOR = " |"


def bar_length(value: float, max_value: float, bar_width: int) -> int:
    """Bar length on a shared scale where `max_value` fills `bar_width` columns."""
    if bar_width <= 0 or max_value <= 0 or not math.isfinite(value):
        return 0
    return min(bar_width, max(0, round_half_up(value / max_value * bar_width)))


class BarChartRenderer:
    """
    Horizontal bar chart, one group of bars per row and one bar per series.

    All series share a single scale so bars are comparable across rows
    and series. Pure rendering: returns text, does not print.
    """

    def __init__(self, config: RenderConfig = DEFAULT_CONFIG):
        self.config = config

    def render(
        self,
        table: TableView,
        x: str,
        ys: Sequence[str] | None = None,
        *,
        width: int | None = None,
    ) -> str:
        cfg = self.config
        series = select_series(table, x, ys)
        rows = table.rows
        if not rows:
            raise EmptyInputError("Cannot draw a bar chart of an empty table.")

        width = resolve_width(width, cfg.fallback_width)
        labels = [display_value(cell(row, x)) for row in rows]
        text_width = max(visible_width(label) for label in labels)
        bar_width = max(0, width - text_width - len(SEPARATOR))

        values = [[numeric_value(row, y) for y in series] for row in rows]
        max_value = max((v for vals in values for v in vals if math.isfinite(v)), default=0.0)

        lines = [pad_center(self._title(x, series), width)]

        for i, (label, vals) in enumerate(zip(labels, values)):
            for j, value in enumerate(vals):
                gutter = pad_start(label, text_width) if j == 0 else " " * text_width
                bar = cfg.bar_glyph * bar_length(value, max_value, bar_width)
                lines.append(gutter + SEPARATOR + color_for(j, cfg.colors).wrap(bar))
            if len(series) > 1 and i < len(rows) - 1:
                lines.append(" " * (text_width + 1) + "|")

        tw = cfg.tick_width
        ticks = bar_width // tw if tw > 0 else 0
        lines.append(tick_rule(text_width + 1, ticks, tw))
        lines.append(
            tick_labels(
                linear_ticks(0.0, max_value, ticks, tw, bar_width),
                text_width + 1 - tw // 2,
                tw,
                cfg.label_precision,
            )
        )
        lines.append("")
        return "\n".join(lines) + "\n"

    def _title(self, x: str, series: Sequence[str]) -> str:
        names = ", ".join(color_for(i, self.config.colors).wrap(name) for i, name in enumerate(series))
        return f"Graph of {names} with respect to {x}"


def render_bars(
    table: TableView,
    x: str,
    ys: Sequence[str] | None = None,
    *,
    width: int | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    return BarChartRenderer(config).render(table, x, ys, width=width)
