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

from collections.abc import Mapping
from typing import Any


class TabplotError(Exception):
    """
    Base class for all tabplot errors.

    These errors describe problems with the data or configuration handed to
    the library, not internal crashes. The CLI maps them to a data-error exit code.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "tabplot_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class EmptyInputError(TabplotError):
    """Raised when an operation needs at least one row or value and got none."""

    def __init__(self, message: str = "Input contains no rows.", details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, code="empty_input", details=details)


class MissingColumnError(TabplotError):
    """Raised when a column is requested that a row or table does not carry."""

    column: str

    def __init__(self, column: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(f"Missing column: {column!r}", code="missing_column", details=details)
        self.column = column


class DuplicateColumnError(TabplotError):
    """Raised when adding a column whose name already exists."""

    def __init__(self, column: str) -> None:
        super().__init__(f"Column already exists: {column!r}", code="duplicate_column", details={"column": column})
        self.column = column


class RowLengthMismatchError(TabplotError):
    """Raised when column values do not line up with the table's rows."""

    def __init__(self, expected: int, actual: int, column: str | None = None) -> None:
        where = f" for column {column!r}" if column is not None else ""
        super().__init__(
            f"Row length mismatch{where}: expected {expected} values, got {actual}",
            code="row_length_mismatch",
            details={"expected": expected, "actual": actual, "column": column},
        )


class CsvParseError(TabplotError):
    """Raised when CSV text cannot be turned into a table."""

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, code="csv_parse_error", details=details)


class ConfigError(TabplotError):
    """Raised when a render configuration file is missing or malformed."""

    def __init__(self, message: str, code: str = "config_error", details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, code=code, details=details)


class ColumnTypeError(TabplotError):
    """Raised when a column used as a numeric axis holds non-numeric (or non-finite) values."""

    def __init__(self, column: str, value: Any, expected: str = "numeric") -> None:
        super().__init__(
            f"Column {column!r} must be {expected}, got {type(value).__name__} value {value!r}",
            code="column_type",
            details={"column": column},
        )
        self.column = column
