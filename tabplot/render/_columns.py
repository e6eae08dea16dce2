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
from collections.abc import Mapping, Sequence
from typing import Any

from tabplot.errors import ColumnTypeError, MissingColumnError
from tabplot.render.types import TableView


def select_series(table: TableView, x: str, ys: Sequence[str] | None) -> tuple[str, ...]:
    """Requested y columns, or every column except `x` in table order."""
    headers = tuple(table.headers)
    if x not in headers:
        raise MissingColumnError(x, details={"headers": list(headers)})
    if ys is None:
        return tuple(h for h in headers if h != x)
    for y in ys:
        if y not in headers:
            raise MissingColumnError(y, details={"headers": list(headers)})
    return tuple(ys)


def cell(row: Mapping[str, Any], column: str) -> Any:
    try:
        return row[column]
    except KeyError:
        raise MissingColumnError(column) from None


def numeric_value(row: Mapping[str, Any], column: str, *, finite: bool = False) -> float:
    value = cell(row, column)
    if isinstance(value, (int, float)):
        if finite and not math.isfinite(value):
            raise ColumnTypeError(column, value, expected="finite numeric")
        return float(value)
    raise ColumnTypeError(column, value)
