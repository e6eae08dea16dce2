"""
Monte-Carlo price paths with quartile overlays.

Simulates monthly prices over ten years for a thousand runs, plots the
first ten runs together with the quartiles and mean of the final prices.
"""

import random

from tabplot import Table, stats

YEARS = 10
RUNS = 1000
PERIODS_PER_YEAR = 12

ANNUAL_RETURN = 1.1072
ANNUAL_STDDEV = 0.1529

RET = ANNUAL_RETURN ** (1 / PERIODS_PER_YEAR)
STDDEV = ANNUAL_STDDEV / PERIODS_PER_YEAR**0.5
TIME = PERIODS_PER_YEAR * YEARS


def create_sequence(time: int, expret: float, stddev: float) -> list[float]:
    price = [1.0]
    for _ in range(1, time):
        price.append(price[-1] * random.gauss(expret, stddev))
    return price


def main() -> None:
    runs = [create_sequence(TIME, RET, STDDEV) for _ in range(RUNS)]
    columns = {f"price {i + 1}": run for i, run in enumerate(runs)}
    columns["year"] = [i / PERIODS_PER_YEAR for i in range(TIME)]
    table = Table.from_columns(columns)

    returns = [run[-1] for run in runs]
    low, q1, q2, q3, high = stats.quartiles(returns)
    avg, stddev = stats.avg_and_stddev(returns)

    table = (
        table.add_computed_column("q1", lambda _: q1)
        .add_computed_column("med", lambda _: q2)
        .add_computed_column("q3", lambda _: q3)
        .add_computed_column("avg", lambda _: avg)
    )

    table.plot("year", [*(f"price {i + 1}" for i in range(10)), "q1", "med", "q3", "avg"])

    summary = Table(
        [{"min": low, "q1": q1, "q2": q2, "q3": q3, "max": high, "avg": avg, "stddev": f"{stddev / avg * 100:.2f}%"}]
    )
    print(summary)
    losses = sum(1 for r in returns if r < 1)
    print(f"runs with loss: {losses / len(returns) * 100}%")


if __name__ == "__main__":
    main()
