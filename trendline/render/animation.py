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

from __future__ import annotations

from trendline.chart import validate_chart_id

ELEMENT_PREFIX = "trendline"


def path_element_id(chart_id: str) -> str:
    return f"{ELEMENT_PREFIX}-{chart_id}"


def generate_auto_draw_css(chart_id: str, line_length: float, duration: int, easing: str) -> str:
    """
    CSS that "draws" the path on load.

    Uses the dash-array/dash-offset trick: the stroke is one dash as long as
    the whole line, offset by its own length (invisible), and the offset is
    animated down to 0.
    """
    validate_chart_id(chart_id)
    length = f"{line_length:.3f}".rstrip("0").rstrip(".")
    animation = f"{ELEMENT_PREFIX}-autodraw-{chart_id}"

    keyframes = (
        f"@keyframes {animation} {{\n"
        f"  0% {{\n"
        f"    stroke-dasharray: {length};\n"
        f"    stroke-dashoffset: {length};\n"
        f"  }}\n"
        f"  100% {{\n"
        f"    stroke-dasharray: {length};\n"
        f"    stroke-dashoffset: 0;\n"
        f"  }}\n"
        f"}}"
    )
    rule = f"#{path_element_id(chart_id)} {{\n  animation: {animation} {duration}ms {easing};\n}}"

    return f"{keyframes}\n\n{rule}\n"


class StyleSheet:
    """
    A single <style> block shared by every chart in one document.

    Nothing is allocated until the first ``inject``; ``clear`` drops the
    collected rules so the sheet can be reused for a new document.
    """

    ATTRIBUTE = f"data-{ELEMENT_PREFIX}"

    def __init__(self) -> None:
        self._chunks: list[str] | None = None

    @property
    def is_empty(self) -> bool:
        return not self._chunks

    def inject(self, css: str) -> None:
        if self._chunks is None:
            self._chunks = []
        self._chunks.append(css)

    def css(self) -> str:
        return "\n".join(self._chunks or ())

    def render(self) -> str:
        """The <style> element, or an empty string if nothing was injected."""
        if self.is_empty:
            return ""
        return f'<style type="text/css" {self.ATTRIBUTE}="">\n{self.css()}</style>'

    def clear(self) -> None:
        self._chunks = None


_default_stylesheet: StyleSheet | None = None


def default_stylesheet() -> StyleSheet:
    """Process-wide stylesheet, created on first use."""
    global _default_stylesheet
    if _default_stylesheet is None:
        _default_stylesheet = StyleSheet()
    return _default_stylesheet


def reset_default_stylesheet() -> None:
    global _default_stylesheet
    _default_stylesheet = None
