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

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

from tabplot.core.config import DEFAULT_CONFIG, RenderConfig
from tabplot.errors import DuplicateColumnError, EmptyInputError, MissingColumnError, RowLengthMismatchError
from tabplot.render.bars import BarChartRenderer
from tabplot.render.lines import LinePlotRenderer
from tabplot.table._grid import format_table
from tabplot.table.ingest import parse_csv_string

Row = Mapping[str, Any]


class Table:
    """
    Immutable ordered rows with a fixed, ordered list of column names.

    Every derivation (adding a column, sorting) returns a new Table. Rows are
    read-only mappings and are shared between tables when unchanged.
    """

    __slots__ = ("_rows", "_headers")

    _rows: tuple[Row, ...]
    _headers: tuple[str, ...]

    def __init__(self, rows: Iterable[Mapping[str, Any]], headers: Sequence[str] | None = None) -> None:
        frozen = tuple(MappingProxyType(dict(r)) for r in rows)

        if headers is None:
            if not frozen:
                raise EmptyInputError("Cannot infer headers from an empty table; pass headers explicitly.")
            headers = tuple(frozen[0].keys())

        header_tuple = tuple(headers)
        if len(set(header_tuple)) != len(header_tuple):
            raise DuplicateColumnError(next(h for h in header_tuple if header_tuple.count(h) > 1))

        for i, row in enumerate(frozen):
            for h in header_tuple:
                if h not in row:
                    raise MissingColumnError(h, details={"row": i})

        self._rows = frozen
        self._headers = header_tuple

    @classmethod
    def _trusted(cls, rows: tuple[Row, ...], headers: tuple[str, ...]) -> "Table":
        table = cls.__new__(cls)
        table._rows = rows
        table._headers = headers
        return table

    # ----------------------------
    # Constructors
    # ----------------------------

    @classmethod
    def from_array(cls, values: Iterable[Any], name: str) -> "Table":
        return cls(({name: v} for v in values), headers=(name,))

    @classmethod
    def from_columns(
        cls,
        columns: Mapping[str, Sequence[Any]],
        headers: Sequence[str] | None = None,
    ) -> "Table":
        names = tuple(headers) if headers is not None else tuple(columns.keys())
        for name in names:
            if name not in columns:
                raise MissingColumnError(name)

        length = len(columns[names[0]]) if names else 0
        for name in names:
            if len(columns[name]) != length:
                raise RowLengthMismatchError(length, len(columns[name]), column=name)

        rows = ({name: columns[name][i] for name in names} for i in range(length))
        return cls(rows, headers=names)

    @classmethod
    def from_csv_string(cls, content: str, *, config: RenderConfig = DEFAULT_CONFIG) -> "Table":
        headers, columns = parse_csv_string(content, date_formats=config.date_formats)
        return cls.from_columns(columns, headers)

    @classmethod
    def from_csv(cls, path: str | Path, *, config: RenderConfig = DEFAULT_CONFIG) -> "Table":
        content = Path(path).read_text(encoding="utf-8")
        return cls.from_csv_string(content, config=config)

    # ----------------------------
    # Access
    # ----------------------------

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def headers(self) -> tuple[str, ...]:
        return self._headers

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def columns(self) -> dict[str, list[Any]]:
        return {h: [row[h] for row in self._rows] for h in self._headers}

    def column(self, name: str) -> list[Any]:
        self._require(name)
        return [row[name] for row in self._rows]

    def row(self, index: int) -> Row:
        return self._rows[index]

    def find(self, predicate: Callable[[Row], bool]) -> Row | None:
        return next((row for row in self._rows if predicate(row)), None)

    def find_index(self, predicate: Callable[[Row], bool]) -> int:
        return next((i for i, row in enumerate(self._rows) if predicate(row)), -1)

    # ----------------------------
    # Derivation
    # ----------------------------

    def add_computed_column(self, name: str, fn: Callable[[Row], Any]) -> "Table":
        if name in self._headers:
            raise DuplicateColumnError(name)
        rows = tuple(MappingProxyType({**row, name: fn(row)}) for row in self._rows)
        return Table._trusted(rows, (*self._headers, name))

    def add_column(self, name: str, values: Sequence[Any]) -> "Table":
        if len(values) != len(self._rows):
            raise RowLengthMismatchError(len(self._rows), len(values), column=name)
        if name in self._headers:
            raise DuplicateColumnError(name)
        rows = tuple(MappingProxyType({**row, name: v}) for row, v in zip(self._rows, values))
        return Table._trusted(rows, (*self._headers, name))

    def sort(self, key: Callable[[Row], Any], reverse: bool = False) -> "Table":
        """Stable sort; rows comparing equal keep their original order."""
        return Table._trusted(tuple(sorted(self._rows, key=key, reverse=reverse)), self._headers)

    def sort_by(self, column: str, reverse: bool = False) -> "Table":
        self._require(column)
        return self.sort(lambda row: row[column], reverse=reverse)

    # ----------------------------
    # Rendering
    # ----------------------------

    def bar(
        self,
        x: str | None = None,
        ys: Sequence[str] | None = None,
        *,
        width: int | None = None,
        config: RenderConfig = DEFAULT_CONFIG,
    ) -> None:
        """Print a horizontal bar chart of `ys` per value of `x` (default: first column)."""
        text = BarChartRenderer(config).render(self, self._default_x(x), ys, width=width)
        print(text, end="")

    def plot(
        self,
        x: str | None = None,
        ys: Sequence[str] | None = None,
        *,
        width: int | None = None,
        config: RenderConfig = DEFAULT_CONFIG,
    ) -> None:
        """Print an overlaid line plot of `ys` against `x` (default: first column)."""
        text = LinePlotRenderer(config).render(self, self._default_x(x), ys, width=width)
        print(text, end="")

    def __str__(self) -> str:
        return format_table(self._headers, self._rows)

    def __repr__(self) -> str:
        return f"Table(headers={list(self._headers)!r}, rows={len(self._rows)})"

    def _default_x(self, x: str | None) -> str:
        if x is not None:
            return x
        if not self._headers:
            raise MissingColumnError("<x>", details={"reason": "table has no columns"})
        return self._headers[0]

    def _require(self, name: str) -> None:
        if name not in self._headers:
            raise MissingColumnError(name, details={"headers": list(self._headers)})
