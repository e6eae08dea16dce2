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

from tabplot.render.bars import BarChartRenderer, bar_length, render_bars
from tabplot.render.canvas import draw_series
from tabplot.render.lines import LinePlotRenderer, render_plot
from tabplot.render.resample import resample
from tabplot.render.terminal import resolve_width, terminal_width
from tabplot.render.types import GridPoint, PlotCanvas, ResampledGrid, TableView

__all__ = [
    "BarChartRenderer",
    "GridPoint",
    "LinePlotRenderer",
    "PlotCanvas",
    "ResampledGrid",
    "TableView",
    "bar_length",
    "draw_series",
    "render_bars",
    "render_plot",
    "resample",
    "resolve_width",
    "terminal_width",
]
