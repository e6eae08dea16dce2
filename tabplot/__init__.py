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

from tabplot import stats
from tabplot._version import __version__
from tabplot.core.config import DEFAULT_CONFIG, RenderConfig
from tabplot.core.loader import load_config
from tabplot.errors import (
    ColumnTypeError,
    ConfigError,
    CsvParseError,
    DuplicateColumnError,
    EmptyInputError,
    MissingColumnError,
    RowLengthMismatchError,
    TabplotError,
)
from tabplot.render import (
    BarChartRenderer,
    LinePlotRenderer,
    ResampledGrid,
    render_bars,
    render_plot,
    resample,
)
from tabplot.table import Table
from tabplot.text import COLOR_CYCLE, Color, pad_center, visible_width

__all__ = [
    "__version__",
    "stats",
    "Table",
    "RenderConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "Color",
    "COLOR_CYCLE",
    "visible_width",
    "pad_center",
    "resample",
    "ResampledGrid",
    "BarChartRenderer",
    "LinePlotRenderer",
    "render_bars",
    "render_plot",
    "TabplotError",
    "EmptyInputError",
    "MissingColumnError",
    "DuplicateColumnError",
    "RowLengthMismatchError",
    "ColumnTypeError",
    "CsvParseError",
    "ConfigError",
]
