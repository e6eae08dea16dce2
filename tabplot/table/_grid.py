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
from typing import Any

from tabplot.text.ansi import pad_center, visible_width
from tabplot.text.values import display_value

INDEX_HEADER = "(index)"


def format_cell(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return display_value(value)


def format_table(headers: Sequence[str], rows: Sequence[Mapping[str, Any]]) -> str:
    """
    Render rows as a boxed grid with a leading index column.

    Cells are centered with one column of breathing room on each side.
    """
    titles = [INDEX_HEADER, *headers]
    body = [[str(i), *(format_cell(row[h]) for h in headers)] for i, row in enumerate(rows)]

    widths = [max(visible_width(cell) for cell in column) + 2 for column in zip(titles, *body)]

    def rule(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * w for w in widths) + right

    def line(cells: Sequence[str]) -> str:
        return "│" + "│".join(pad_center(c, w) for c, w in zip(cells, widths)) + "│"

    lines = [rule("┌", "┬", "┐"), line(titles), rule("├", "┼", "┤")]
    lines.extend(line(cells) for cells in body)
    lines.append(rule("└", "┴", "┘"))
    return "\n".join(lines) + "\n"
