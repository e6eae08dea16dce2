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

import json
from dataclasses import fields
from pathlib import Path
from typing import Any

from tabplot.core.config import RenderConfig
from tabplot.errors import ConfigError
from tabplot.text.ansi import Color

_INT_FIELDS = ("tick_width", "value_gutter", "fallback_width", "label_precision")


def load_config(path: str | Path) -> RenderConfig:
    """
    Load a RenderConfig from tabplot.yaml / tabplot.yml / tabplot.json.

    Keys not present in the file keep their defaults.
    """
    if not isinstance(path, Path):
        path = Path(path)

    if not path.exists():
        raise ConfigError(code="config_not_found", message=f"Config file does not exist: {path}")

    data = _read_config_file(path)
    if data is None:
        return RenderConfig()
    if not isinstance(data, dict):
        raise ConfigError(code="invalid_config", message="Config root must be a mapping/object.")

    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(
            code="unknown_keys",
            message=f"Unknown config keys: {', '.join(unknown)}",
            details={"supported": sorted(known)},
        )

    kwargs: dict[str, Any] = {}
    for key in _INT_FIELDS:
        if key in data:
            value = data[key]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ConfigError(code="invalid_value", message=f"'{key}' must be a non-negative integer.")
            kwargs[key] = value

    if "height_ratio" in data:
        ratio = data["height_ratio"]
        if not isinstance(ratio, (int, float)) or isinstance(ratio, bool) or ratio <= 0:
            raise ConfigError(code="invalid_value", message="'height_ratio' must be a positive number.")
        kwargs["height_ratio"] = float(ratio)

    if "bar_glyph" in data:
        glyph = data["bar_glyph"]
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ConfigError(code="invalid_value", message="'bar_glyph' must be a single character.")
        kwargs["bar_glyph"] = glyph

    if "colors" in data:
        kwargs["colors"] = _parse_colors(data["colors"])

    if "date_formats" in data:
        formats = data["date_formats"]
        if not isinstance(formats, list) or not all(isinstance(f, str) for f in formats):
            raise ConfigError(code="invalid_value", message="'date_formats' must be a list of strings.")
        kwargs["date_formats"] = tuple(formats)

    return RenderConfig(**kwargs)


def _read_config_file(path: Path) -> Any:
    suffix = path.suffix.lower()
    raw = path.read_text(encoding="utf-8")

    if suffix == ".json":
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(code="parse_error", message=f"Cannot parse config file {path}: {e}") from e

    if suffix in (".yaml", ".yml"):
        try:
            import yaml
        except Exception as e:
            raise ConfigError(
                code="yaml_dependency_missing",
                message="YAML config requires PyYAML.",
                details={"hint": "pip install pyyaml", "path": str(path)},
            ) from e
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(code="parse_error", message=f"Cannot parse config file {path}: {e}") from e

    raise ConfigError(
        code="unsupported_extension",
        message=f"Unsupported config file extension: {path.suffix!s}",
        details={"supported": [".yaml", ".yml", ".json"]},
    )


def _parse_colors(raw: Any) -> tuple[Color, ...]:
    if not isinstance(raw, list) or not raw:
        raise ConfigError(code="invalid_value", message="'colors' must be a non-empty list of color names.")
    out: list[Color] = []
    for name in raw:
        if not isinstance(name, str):
            raise ConfigError(code="invalid_value", message="'colors' entries must be strings.")
        try:
            out.append(Color.from_name(name))
        except ValueError as e:
            raise ConfigError(
                code="unknown_color",
                message=str(e),
                details={"supported": [c.name.lower() for c in Color]},
            ) from e
    return tuple(out)
