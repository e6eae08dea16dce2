"""Sine, cosine and identity over 1000 points, then a bar chart from CSV."""

import math
from pathlib import Path

from tabplot import Table

HERE = Path(__file__).parent

table = Table.from_array(range(1000), "x")
table = table.add_computed_column("sin(x)", lambda row: math.sin(row["x"] / 100 * math.pi) * 1000)
table = table.add_computed_column("cos(x)", lambda row: math.cos(row["x"] / 100 * math.pi) * 1000)
table = table.add_computed_column("id(x)", lambda row: row["x"])

table.plot("x")

csv_table = Table.from_csv(HERE / "sales.csv")
print(csv_table)
csv_table.bar("date", ["online", "retail"])

# Ten rows stretched over the whole terminal width
small = Table.from_array(range(10), "x").add_computed_column("sin(x)", lambda row: math.sin(row["x"] / 2 * math.pi) * 10)
small.plot("x")
