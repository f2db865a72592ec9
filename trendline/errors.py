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

from collections.abc import Mapping
from typing import Any


class TrendlineError(Exception):
    """
    Base class for all trendline errors.

    Raised only for inputs that cannot produce a defined chart; degenerate
    but valid inputs (equal values, zero-width ranges) never raise.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "trendline_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class DatasetError(TrendlineError):
    """Raised when input data cannot be coerced into numeric values."""

    pass


class InvalidRadiusError(TrendlineError):
    """Raised when a corner radius is negative or not a number."""

    pass


class ChartError(TrendlineError):
    """Raised when chart options do not fit the dataset (e.g. highlight indexes)."""

    pass


class PathSyntaxError(TrendlineError):
    """Raised when path data text cannot be parsed."""

    line: int | None = None

    def __init__(
        self,
        message: str,
        code: str = "path_syntax",
        line: int | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.line = line

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message
