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
import statistics
from collections.abc import Sequence

from tabplot.errors import EmptyInputError


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def quartiles(numbers: Sequence[float]) -> tuple[float, float, float, float, float]:
    """
    Return (min, q1, median, q3, max) using nearest-rank positions.

    The i-th quartile is the sorted value at index round((n - 1) * i / 4),
    so every result is an observed value.
    """
    if not numbers:
        raise EmptyInputError("Cannot compute quartiles of an empty sequence.")
    ordered = sorted(numbers)
    last = len(ordered) - 1
    q = [ordered[round_half_up(last * i / 4)] for i in range(5)]
    return q[0], q[1], q[2], q[3], q[4]


def avg_and_stddev(numbers: Sequence[float]) -> tuple[float, float]:
    """Mean and population standard deviation."""
    if not numbers:
        raise EmptyInputError("Cannot compute the mean of an empty sequence.")
    return statistics.fmean(numbers), statistics.pstdev(numbers)
