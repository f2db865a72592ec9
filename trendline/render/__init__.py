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

from trendline.render.animation import StyleSheet, default_stylesheet, generate_auto_draw_css, reset_default_stylesheet
from trendline.render.hover import HoverOverlay, HoverState
from trendline.render.svg import SvgRenderer

__all__ = [
    "HoverOverlay",
    "HoverState",
    "StyleSheet",
    "SvgRenderer",
    "default_stylesheet",
    "generate_auto_draw_css",
    "reset_default_stylesheet",
]
