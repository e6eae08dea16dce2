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
Linear resampling of irregularly spaced rows onto an even x grid.

For each grid position the "bigger" row is the first row whose x strictly
exceeds the target (the last row when none does) and the "smaller" row is
the one right before it. With

    t = (bigger_x - target_x) / (bigger_x - smaller_x)

each value is t * smaller + (1 - t) * bigger. When both rows share an x
value the bigger row's value is used as is.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from tabplot.errors import EmptyInputError
from tabplot.render._columns import numeric_value
from tabplot.render.types import GridPoint, ResampledGrid


def resample(
    rows: Sequence[Mapping[str, Any]],
    x_column: str,
    y_columns: Sequence[str],
    sample_count: int,
    *,
    endpoint: bool = True,
) -> ResampledGrid:
    """
    Interpolate `y_columns` at `sample_count` evenly spaced x positions.

    `rows` must already be sorted ascending by `x_column`. With `endpoint`
    the grid spans [x_min, x_max] inclusive; without it the step is
    (x_max - x_min) / sample_count and x_max itself is not sampled.

    Raises:
        EmptyInputError: `rows` is empty
        MissingColumnError: a row lacks `x_column` or one of `y_columns`
        ColumnTypeError: a value used for interpolation is not numeric
    """
    if not rows:
        raise EmptyInputError("Cannot resample an empty table.")

    y_columns = tuple(y_columns)
    if sample_count <= 0:
        return ResampledGrid(x_column=x_column, y_columns=y_columns, points=())

    xs = [numeric_value(row, x_column) for row in rows]
    x_min, x_max = xs[0], xs[-1]
    span = x_max - x_min
    divisor = sample_count - 1 if endpoint else sample_count
    last = len(rows) - 1

    points: list[GridPoint] = []
    cursor = 0  # first row with x > previous target; targets only grow
    for i in range(sample_count):
        if divisor <= 0:
            target = x_min
        elif endpoint and i == divisor:
            target = x_max
        else:
            target = x_min + span * i / divisor

        while cursor <= last and xs[cursor] <= target:
            cursor += 1

        bigger = min(cursor, last)
        smaller = max(bigger - 1, 0)

        values = tuple(
            _interpolate(rows[smaller], rows[bigger], xs[smaller], xs[bigger], target, column) for column in y_columns
        )
        points.append(GridPoint(x=target, values=values))

    return ResampledGrid(x_column=x_column, y_columns=y_columns, points=tuple(points))


def _interpolate(
    smaller_row: Mapping[str, Any],
    bigger_row: Mapping[str, Any],
    smaller_x: float,
    bigger_x: float,
    target: float,
    column: str,
) -> float:
    bigger_val = numeric_value(bigger_row, column)
    if bigger_x == smaller_x:
        return bigger_val
    smaller_val = numeric_value(smaller_row, column)
    t = (bigger_x - target) / (bigger_x - smaller_x)
    return t * smaller_val + (1 - t) * bigger_val

