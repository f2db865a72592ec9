# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Trendline Contributors
#
# This file is part of Trendline.
#
# Trendline is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Trendline is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json
from collections.abc import Mapping
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import yaml

from trendline.chart import ChartOptions
from trendline.errors import TrendlineError


class ConfigLoadError(TrendlineError):
    """Raised when a chart config file is missing or malformed."""

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


# Expected value kinds per option. "number?" allows null.
_OPTION_KINDS: dict[str, str] = {
    "width": "number?",
    "height": "number?",
    "padding": "number",
    "smooth": "bool",
    "radius": "number",
    "stroke": "str",
    "stroke_width": "number",
    "gradient": "str_list",
    "range_highlight": "int_list",
    "range_highlight_color": "str",
    "auto_draw": "bool",
    "auto_draw_duration": "int",
    "auto_draw_easing": "str",
    "hover_text_color": "str",
    "hover_text_size": "int",
    "hover_text_weight": "str",
    "hover_line_color": "str",
    "hover_line_width": "number",
}


class ChartConfigLoader:
    """
    Loads ChartOptions from trendline.yaml / trendline.yml / trendline.json

    Keys may be written snake_case, kebab-case or camelCase
    (``range_highlight``, ``range-highlight``, ``rangeHighlight``).
    An optional top-level ``chart:`` section is unwrapped.
    """

    def load(self, path: Path) -> ChartOptions:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

        data = self._read_config_file(path)

        if data is None:
            return ChartOptions()

        if not isinstance(data, dict):
            raise ConfigLoadError(code="invalid_config", message="Config root must be a mapping/object.")

        if isinstance(data.get("chart"), dict):
            data = data["chart"]

        return options_from_mapping(data)

    def _read_config_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        raw = path.read_text(encoding="utf-8")

        try:
            if suffix == ".json":
                return json.loads(raw)
            # YAML is a superset of JSON, so unknown extensions go through it too
            return yaml.safe_load(raw)
        except ValueError as e:
            raise ConfigLoadError(
                code="invalid_json",
                message=f"Cannot parse {path}: {e}",
                details={"path": str(path)},
            ) from e
        except yaml.YAMLError as e:
            raise ConfigLoadError(
                code="invalid_yaml",
                message=f"Cannot parse {path}: {e}",
                details={"path": str(path)},
            ) from e


def options_from_mapping(data: Mapping[str, Any]) -> ChartOptions:
    values: dict[str, Any] = {}
    for raw_key, raw_value in data.items():
        key = _canonical_key(str(raw_key))
        kind = _OPTION_KINDS.get(key)
        if kind is None:
            raise ConfigLoadError(
                code="unknown_option",
                message=f"Unknown chart option '{raw_key}'.",
                details={"supported": sorted(_OPTION_KINDS)},
            )
        values[key] = _check(key, kind, raw_value)
    return ChartOptions(**values)


def merge_options(base: ChartOptions, **overrides: Any) -> ChartOptions:
    """Return ``base`` with every override that is not None applied."""
    known = {f.name for f in fields(ChartOptions)}
    changes = {k: v for k, v in overrides.items() if v is not None and k in known}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigLoadError(code="unknown_option", message=f"Unknown chart option(s): {', '.join(sorted(unknown))}.")
    return replace(base, **changes)


def _canonical_key(key: str) -> str:
    out = []
    for ch in key.replace("-", "_"):
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out).lstrip("_")


def _check(key: str, kind: str, value: Any) -> Any:
    def fail(expected: str) -> ConfigLoadError:
        return ConfigLoadError(
            code="invalid_option",
            message=f"'{key}' must be {expected}, got {value!r}.",
            details={"option": key},
        )

    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)

    if kind == "number?":
        if value is None:
            return None
        if not is_number:
            raise fail("a number or null")
        return value
    if kind == "number":
        if not is_number:
            raise fail("a number")
        return value
    if kind == "int":
        if not isinstance(value, int) or isinstance(value, bool):
            raise fail("an integer")
        return value
    if kind == "bool":
        if not isinstance(value, bool):
            raise fail("true or false")
        return value
    if kind == "str":
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise fail("a string")
        return str(value)
    if kind == "str_list":
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise fail("a list of colors")
        return tuple(value)
    if kind == "int_list":
        if (
            not isinstance(value, list)
            or len(value) not in (0, 2)
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)
        ):
            raise fail("a pair of indexes")
        return tuple(value)
    raise ConfigLoadError(code="invalid_option", message=f"'{key}' has no known value kind ({kind}).")
