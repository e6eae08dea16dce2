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

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from tabplot.errors import MissingColumnError


class TableView(Protocol):
    """
    What the renderers need from a table.

    Implementations are treated as immutable snapshots: renderers never
    modify rows and `sort_by` must return a new view.
    """

    @property
    def rows(self) -> Sequence[Mapping[str, Any]]: ...

    @property
    def headers(self) -> Sequence[str]: ...

    def sort_by(self, column: str) -> "TableView": ...


@dataclass(frozen=True, slots=True)
class GridPoint:
    x: float
    values: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class ResampledGrid:
    """Evenly spaced x positions with one interpolated value per requested series."""

    x_column: str
    y_columns: tuple[str, ...]
    points: tuple[GridPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    @property
    def xs(self) -> list[float]:
        return [p.x for p in self.points]

    def series(self, name: str) -> list[float]:
        try:
            idx = self.y_columns.index(name)
        except ValueError:
            raise MissingColumnError(name) from None
        return [p.values[idx] for p in self.points]

    def all_series(self) -> list[list[float]]:
        return [self.series(name) for name in self.y_columns]


@dataclass(frozen=True, slots=True)
class PlotCanvas:
    """
    Output of the character plotting primitive.

    `gutter_width` is the number of columns before the first data column,
    including the value labels and the y-axis glyph.
    """

    text: str
    gutter_width: int
    data_width: int

    @property
    def width(self) -> int:
        return self.gutter_width + self.data_width

    @property
    def is_empty(self) -> bool:
        return not self.text
