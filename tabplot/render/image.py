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
Matplotlib rendering for image export.

This module requires matplotlib (install with `pip install tabplot[viz]`).
"""

from collections.abc import Sequence
from pathlib import Path

from tabplot.core.config import DEFAULT_CONFIG, RenderConfig
from tabplot.errors import EmptyInputError
from tabplot.render._columns import numeric_value, select_series
from tabplot.render.types import TableView
from tabplot.text.ansi import Color, color_for

# Terminal colors mapped onto matplotlib's tab palette
_MPL_COLORS = {
    Color.BLUE: "tab:blue",
    Color.GREEN: "tab:green",
    Color.RED: "tab:red",
    Color.YELLOW: "tab:olive",
    Color.MAGENTA: "tab:purple",
    Color.CYAN: "tab:cyan",
}


def export_plot_image(
    table: TableView,
    x: str,
    ys: Sequence[str] | None = None,
    *,
    output_path: str | Path,
    title: str | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> Path:
    """
    Draw the same series as the terminal line plot into an image file.

    Args:
        table: Source table
        x: Column for the x axis
        ys: Series to draw (default: every other column)
        output_path: Path to save the image (PNG, SVG, PDF supported)
        title: Optional chart title

    Raises:
        ImportError: If matplotlib is not installed
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError as e:
        raise ImportError("matplotlib is required for image export. Install it with: pip install tabplot[viz]") from e

    series = select_series(table, x, ys)
    if not table.rows:
        raise EmptyInputError("Cannot plot an empty table.")

    ordered = table.sort_by(x)
    xs = [numeric_value(row, x) for row in ordered.rows]
    columns = {name: [numeric_value(row, name) for row in ordered.rows] for name in series}
    output = Path(output_path)

    fig, ax = plt.subplots(figsize=(10, 6))
    try:
        for i, name in enumerate(series):
            ax.plot(xs, columns[name], linewidth=2, label=name, color=_MPL_COLORS[color_for(i, config.colors)])

        ax.set_xlabel(x, fontsize=12)
        ax.set_title(title or f"Plot of {', '.join(series)} with respect to {x}", fontsize=14, fontweight="bold")
        if series:
            ax.legend()

        ax.grid(True, alpha=0.3)
        ax.set_axisbelow(True)
        fig.tight_layout()
        fig.savefig(output, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output


def is_matplotlib_available() -> bool:
    """Check if matplotlib is installed."""
    try:
        import matplotlib  # noqa: F401

        return True
    except ImportError:
        return False
