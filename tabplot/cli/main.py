import argparse
import logging
import sys

from tabplot.cli import chart, summary
from tabplot.cli._io import resolve_config
from tabplot.cli.exitcodes import EXIT_DATA_ERROR, EXIT_ERROR
from tabplot.errors import TabplotError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tabplot", description="Tabplot: terminal charts for tabular data")
    p.add_argument("--config", default=None, help="Render config file (default: ./tabplot.yaml if present).")
    p.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # show
    show_p = sub.add_parser("show", help="Print a CSV file as a table.")
    show_p.add_argument("file", help="CSV file.")

    # bar / plot
    bar_p = sub.add_parser("bar", help="Horizontal bar chart, one bar group per row.")
    plot_p = sub.add_parser("plot", help="Line plot of series against an x column.")
    for chart_p in (bar_p, plot_p):
        chart_p.add_argument("file", help="CSV file.")
        chart_p.add_argument("--x", default=None, help="X column (default: first column).")
        chart_p.add_argument(
            "--y", dest="ys", action="append", default=None, help="Series column (repeatable, default: all others)."
        )
        chart_p.add_argument("--width", type=int, default=None, help="Chart width (default: terminal width).")
    plot_p.add_argument("--output", "-o", default=None, help="Save as image instead (PNG/SVG, needs matplotlib).")

    # stats
    stats_p = sub.add_parser("stats", help="Quartiles, mean and standard deviation of a column.")
    stats_p.add_argument("file", help="CSV file.")
    stats_p.add_argument("--column", required=True, help="Numeric column to summarize.")
    stats_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args.config)

        if args.cmd == "show":
            return summary.show(file=args.file, config=config)

        if args.cmd == "bar":
            return chart.bar(file=args.file, x=args.x, ys=args.ys, width=args.width, config=config)

        if args.cmd == "plot":
            return chart.plot(
                file=args.file,
                x=args.x,
                ys=args.ys,
                width=args.width,
                output=args.output,
                config=config,
            )

        if args.cmd == "stats":
            return summary.stats(file=args.file, column=args.column, format=args.format, config=config)

        print("Unknown command.", file=sys.stderr)
        return EXIT_ERROR

    except TabplotError as e:
        print(f"tabplot: error: {e}", file=sys.stderr)
        return EXIT_DATA_ERROR
    except Exception as e:
        print(f"tabplot: error: {e}", file=sys.stderr)
        return EXIT_ERROR
