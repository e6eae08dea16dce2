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

from pathlib import Path

from tabplot.core.config import RenderConfig
from tabplot.core.loader import load_config

CONFIG_CANDIDATES = ("tabplot.yaml", "tabplot.yml", "tabplot.json")


def ensure_file(path: str) -> str:
    p = Path(path).resolve()
    if not p.is_file():
        raise FileNotFoundError(f"File does not exist: {p}")
    return str(p)


def default_config_file(directory: str = ".") -> str | None:
    p = Path(directory)
    for name in CONFIG_CANDIDATES:
        candidate = p / name
        if candidate.exists():
            return str(candidate)
    return None


def resolve_config(path: str | None, directory: str = ".") -> RenderConfig:
    path = path or default_config_file(directory)
    return load_config(path) if path else RenderConfig()
