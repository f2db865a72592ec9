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

from trendline._version import __version__
from trendline.chart import Chart, ChartOptions, build_chart
from trendline.errors import ChartError, DatasetError, InvalidRadiusError, PathSyntaxError, TrendlineError
from trendline.geometry import Domain, Point, normalize, normalize_dataset
from trendline.path import build_linear_path, build_path, build_smooth_path, parse_path_data, to_path_data

__all__ = [
    "Chart",
    "ChartError",
    "ChartOptions",
    "DatasetError",
    "Domain",
    "InvalidRadiusError",
    "PathSyntaxError",
    "Point",
    "TrendlineError",
    "__version__",
    "build_chart",
    "build_linear_path",
    "build_path",
    "build_smooth_path",
    "normalize",
    "normalize_dataset",
    "parse_path_data",
    "to_path_data",
]
