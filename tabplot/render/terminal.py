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

import logging
import shutil

logger = logging.getLogger(__name__)


def terminal_width(fallback: int = 80) -> int:
    """Columns of the attached terminal, or `fallback` when unknown."""
    try:
        columns = shutil.get_terminal_size((fallback, 24)).columns
    except (OSError, ValueError):
        columns = 0
    if columns <= 0:
        logger.debug("terminal width unavailable, using fallback of %d", fallback)
        return fallback
    return columns


def resolve_width(width: int | None, fallback: int = 80) -> int:
    """Explicit width when positive, otherwise the terminal's."""
    if width is not None and width > 0:
        return width
    return terminal_width(fallback)
