from collections.abc import Sequence

from tabplot.cli._io import ensure_file
from tabplot.cli.exitcodes import EXIT_OK
from tabplot.core.config import DEFAULT_CONFIG, RenderConfig
from tabplot.render.bars import BarChartRenderer
from tabplot.render.image import export_plot_image
from tabplot.render.lines import LinePlotRenderer
from tabplot.table import Table


def bar(
    *,
    file: str,
    x: str | None = None,
    ys: Sequence[str] | None = None,
    width: int | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> int:
    """
    Print a bar chart of a CSV file.

    Args:
        file: CSV file path
        x: Label column (default: first column)
        ys: Series columns (default: all other columns)
        width: Chart width (default: terminal width)
    """
    table = Table.from_csv(ensure_file(file), config=config)
    text = BarChartRenderer(config).render(table, x or table.headers[0], ys, width=width)
    print(text, end="")
    return EXIT_OK


def plot(
    *,
    file: str,
    x: str | None = None,
    ys: Sequence[str] | None = None,
    width: int | None = None,
    output: str | None = None,
    config: RenderConfig = DEFAULT_CONFIG,
) -> int:
    """
    Print a line plot of a CSV file, or save it as an image.

    Args:
        file: CSV file path
        x: X-axis column (default: first column)
        ys: Series columns (default: all other columns)
        width: Chart width (default: terminal width)
        output: Image file for export (PNG/SVG/PDF), requires matplotlib
    """
    table = Table.from_csv(ensure_file(file), config=config)
    x = x or table.headers[0]

    if output:
        export_plot_image(table, x, ys, output_path=output, config=config)
        print(f"Saved plot to {output}")
        return EXIT_OK

    text = LinePlotRenderer(config).render(table, x, ys, width=width)
    print(text, end="")
    return EXIT_OK
