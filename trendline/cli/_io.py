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
import sys
from pathlib import Path
from typing import Any

import yaml

from trendline.errors import DatasetError


def read_dataset(path: str) -> list[Any]:
    """
    Read chart data from a JSON/YAML file, or stdin when ``path`` is "-".

    The document is either a list (``[1, 2, 3]`` or ``[{value: 1}, ...]``)
    or a mapping holding that list under ``data`` or ``values``.
    """
    if path == "-":
        raw = sys.stdin.read()
        suffix = ""
    else:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Path does not exist: {p}")
        raw = p.read_text(encoding="utf-8")
        suffix = p.suffix.lower()

    try:
        doc = json.loads(raw) if suffix == ".json" else yaml.safe_load(raw)
    except (ValueError, yaml.YAMLError) as e:
        raise DatasetError(f"Cannot parse data from {path}: {e}", code="invalid_data_file") from e

    if isinstance(doc, dict):
        for key in ("data", "values"):
            if isinstance(doc.get(key), list):
                return doc[key]
        raise DatasetError("Data mapping needs a 'data' or 'values' list.", code="invalid_data_file")

    if not isinstance(doc, list):
        raise DatasetError("Data must be a list of numbers or {value: ...} records.", code="invalid_data_file")

    return doc


def dataset_labels(data: list[Any]) -> list[str]:
    """Labels from records that carry one (``{value: 3, label: "Jan 02"}``); empty otherwise."""
    labels = [item.get("label") for item in data if isinstance(item, dict)]
    if len(labels) != len(data) or not all(isinstance(x, str) for x in labels):
        return []
    return labels


def write_output(text: str, output: str | None) -> None:
    if output is None or output == "-":
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    Path(output).write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
