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

from trendline.path.compiler import (
    DEFAULT_RADIUS,
    build_linear_path,
    build_path,
    build_smooth_path,
    plan_corner,
    validate_radius,
)
from trendline.path.serialize import parse_path_data, path_length, path_points, to_path_data
from trendline.path.types import Corner, CornerKind, Instruction, LineTo, MoveTo, PathCommand, SmoothTo

__all__ = [
    "DEFAULT_RADIUS",
    "Corner",
    "CornerKind",
    "Instruction",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "SmoothTo",
    "build_linear_path",
    "build_path",
    "build_smooth_path",
    "parse_path_data",
    "path_length",
    "path_points",
    "plan_corner",
    "to_path_data",
    "validate_radius",
]
