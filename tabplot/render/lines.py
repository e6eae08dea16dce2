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
from tabplot.render._columns import numeric_value, select_series
from tabplot.render.axis import linear_ticks, tick_labels, tick_rule
from tabplot.render.canvas import draw_series
from tabplot.render.resample import resample
from tabplot.render.terminal import resolve_width
from tabplot.render.types import TableView
from tabplot.stats import round_half_up
from tabplot.text.ansi import color_for, pad_center


class LinePlotRenderer:
    """
    Overlaid line plot of one or more series against a shared x axis.

    Rows are sorted by x and resampled onto one sample per available data
    column, so the chart width does not depend on the number of rows.
    Layout, top to bottom: legend, chart body, tick rule, tick labels, blank line.
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
        if not table.rows:
            raise EmptyInputError("Cannot plot an empty table.")

        # Validate before sorting so a bad x column reports the column, not a comparison error.
        for row in table.rows:
            numeric_value(row, x, finite=True)

        width = resolve_width(width, cfg.fallback_width)
        sample_count = max(0, width - cfg.value_gutter)
        height = round_half_up(sample_count * cfg.height_ratio)

        ordered = table.sort_by(x)
        grid = resample(ordered.rows, x, series, sample_count)
        x_min = numeric_value(ordered.rows[0], x)
        x_max = numeric_value(ordered.rows[-1], x)

        canvas = draw_series(grid.all_series(), height=height, colors=cfg.colors, precision=cfg.label_precision)
        offset = canvas.gutter_width
        data_width = canvas.data_width

        # The grid includes both ends: data column j sits at x_min + j / (data_width - 1) of the span.
        tw = cfg.tick_width
        ticks = math.ceil(data_width / tw) if tw > 0 and data_width > 0 else 0

        lines = [pad_center(self._legend(x, series), canvas.width or width)]
        if not canvas.is_empty:
            lines.append(canvas.text)
        lines.append(tick_rule(offset - 1, ticks, tw))
        lines.append(
            tick_labels(
                linear_ticks(x_min, x_max, ticks, tw, data_width - 1),
                offset - tw // 2,
                tw,
                cfg.label_precision,
            )
        )
        lines.append("")
        return "\n".join(lines) + "\n"

    def _legend(self, x: str, series: Sequence[str]) -> str:
        names = ", ".join(color_for(i, self.config.colors).wrap(name) for i, name in enumerate(series))
        return f"Plot of {names} with respect to {x}"


def render_plot(
    table: TableView,
    x: str,
    ys: Sequence[str] | None = None,
    *,
    width: int | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    return LinePlotRenderer(config).render(table, x, ys, width=width)
