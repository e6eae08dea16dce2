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
CSV ingestion with per-column type inference.

A column takes the first type every one of its cells parses as:
integer, float, date, boolean. Columns matching none stay as strings.
"""

import csv
import io
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from tabplot.core.config import DEFAULT_CONFIG
from tabplot.errors import CsvParseError

logger = logging.getLogger(__name__)


def parse_csv_string(
    content: str,
    *,
    date_formats: Sequence[str] = DEFAULT_CONFIG.date_formats,
) -> tuple[list[str], dict[str, list[Any]]]:
    """
    Split CSV text into headers and typed columns.

    Data lines whose field count differs from the header are skipped.
    """
    records = [r for r in csv.reader(io.StringIO(content)) if r]
    if not records:
        raise CsvParseError("CSV input is empty.")

    headers = records[0]
    if len(set(headers)) != len(headers):
        raise CsvParseError("CSV header contains duplicate column names.", details={"headers": headers})

    data: list[list[str]] = []
    for line_no, record in enumerate(records[1:], start=2):
        if len(record) != len(headers):
            logger.debug("skipping CSV record %d: %d fields, expected %d", line_no, len(record), len(headers))
            continue
        data.append(record)

    if not data:
        raise CsvParseError("CSV input has no data rows.", details={"headers": headers})

    columns: dict[str, list[Any]] = {}
    for i, name in enumerate(headers):
        raw = [record[i] for record in data]
        columns[name] = infer_column(raw, date_formats=date_formats, name=name)
    return headers, columns


def infer_column(values: Sequence[str], *, date_formats: Sequence[str] = (), name: str = "?") -> list[Any]:
    parsers: list[tuple[str, Callable[[str], Any]]] = [
        ("int", _parse_int),
        ("float", _parse_float),
        ("date", lambda s: _parse_date(s, date_formats)),
        ("bool", _parse_bool),
    ]
    for type_name, parser in parsers:
        try:
            parsed = [parser(v) for v in values]
        except ValueError:
            continue
        logger.debug("column %r inferred as %s", name, type_name)
        return parsed

    logger.debug("column %r kept as str", name)
    return list(values)


def _parse_int(text: str) -> int:
    return int(_plain_number(text))


def _parse_float(text: str) -> float:
    return float(_plain_number(text))


def _plain_number(text: str) -> str:
    # Python literals allow digit grouping with underscores, CSV numbers do not
    text = text.strip()
    if "_" in text:
        raise ValueError(f"not a plain number: {text!r}")
    return text


def _parse_date(text: str, formats: Sequence[str]) -> datetime:
    text = text.strip()
    if not text:
        raise ValueError("empty date")
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"not a date: {text!r}")


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")
