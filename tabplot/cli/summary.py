import json
import math

from tabplot.cli._io import ensure_file
from tabplot.cli.exitcodes import EXIT_OK
from tabplot.core.config import DEFAULT_CONFIG, RenderConfig
from tabplot.errors import ColumnTypeError
from tabplot.stats import avg_and_stddev, quartiles
from tabplot.table import Table
from tabplot.text.values import format_number


def show(*, file: str, config: RenderConfig = DEFAULT_CONFIG) -> int:
    """Print a CSV file as a boxed table."""
    table = Table.from_csv(ensure_file(file), config=config)
    print(table, end="")
    return EXIT_OK


def stats(
    *,
    file: str,
    column: str,
    format: str = "text",
    config: RenderConfig = DEFAULT_CONFIG,
) -> int:
    """
    Print order statistics, mean and standard deviation of one column.

    Args:
        file: CSV file path
        column: Numeric column to summarize
        format: Output format (text or json)
    """
    table = Table.from_csv(ensure_file(file), config=config)
    values = table.column(column)
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ColumnTypeError(column, v)
        if not math.isfinite(v):
            raise ColumnTypeError(column, v, expected="finite numeric")

    low, q1, median, q3, high = quartiles(values)
    avg, stddev = avg_and_stddev(values)
    stddev_pct = stddev / avg * 100 if avg else math.nan

    result = {
        "column": column,
        "count": len(values),
        "min": low,
        "q1": q1,
        "median": median,
        "q3": q3,
        "max": high,
        "avg": avg,
        "stddev": stddev,
        "stddev_pct": stddev_pct,
    }

    if format == "json":
        print(json.dumps(result, indent=2))
        return EXIT_OK

    p = config.label_precision
    print(f"Statistics for {column} ({len(values)} values)")
    print("=" * 60)
    print(f"Min:    {format_number(low, p)}")
    print(f"Q1:     {format_number(q1, p)}")
    print(f"Median: {format_number(median, p)}")
    print(f"Q3:     {format_number(q3, p)}")
    print(f"Max:    {format_number(high, p)}")
    print()
    print(f"Average: {format_number(avg, p)}")
    print(f"Stddev:  {format_number(stddev, p)} ({format_number(stddev_pct, p)}%)")
    return EXIT_OK
