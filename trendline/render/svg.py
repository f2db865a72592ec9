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

from html import escape

from trendline.chart import Chart, ChartOptions, generate_id, gradient_stops, validate_chart_id
from trendline.path.serialize import to_path_data
from trendline.render.animation import StyleSheet, generate_auto_draw_css, path_element_id

SVG_NS = "http://www.w3.org/2000/svg"


class SvgRenderer:
    """
    Standalone SVG document for a Chart.

    Pure rendering: the chart is not modified. When ``auto_draw`` is on and
    a shared ``stylesheet`` is passed, the animation CSS goes there instead
    of into the document, so a page with many charts gets one <style>.
    """

    def __init__(self, options: ChartOptions | None = None, *, precision: int | None = 3):
        self.options = options or ChartOptions()
        self.precision = precision

    def render(self, chart: Chart, *, chart_id: str | None = None, stylesheet: StyleSheet | None = None) -> str:
        o = self.options
        chart_id = validate_chart_id(chart_id) if chart_id is not None else generate_id()
        gradient_id = f"trendline-vertical-gradient-{chart_id}"

        parts: list[str] = []
        _, _, vw, vh = chart.view_box
        parts.append(
            f'<svg xmlns="{SVG_NS}" width="{_attr(o.svg_width)}" height="{_attr(o.svg_height)}" '
            f'viewBox="0 0 {_n(vw)} {_n(vh)}">'
        )

        if o.auto_draw:
            css = generate_auto_draw_css(chart_id, chart.length, o.auto_draw_duration, o.auto_draw_easing)
            if stylesheet is not None:
                stylesheet.inject(css)
            else:
                local = StyleSheet()
                local.inject(css)
                parts.append(local.render())

        if o.gradient:
            parts.append(self._render_gradient(gradient_id))

        if chart.highlight is not None:
            band = chart.highlight
            parts.append(
                f'<rect x="{_n(band.start)}" y="0" width="{_n(band.width)}" height="{_n(vh)}" '
                f'stroke="transparent" stroke-width="0" fill="{_attr(o.range_highlight_color)}"/>'
            )

        stroke = f"url(#{gradient_id})" if o.gradient else o.stroke
        d = to_path_data(chart.instructions, precision=self.precision)
        parts.append(
            f'<path id="{path_element_id(chart_id)}" d="{d}" fill="none" '
            f'stroke="{_attr(stroke)}" stroke-width="{_n(o.stroke_width)}"/>'
        )

        # Hover placeholders, filled in by an interactive host.
        parts.append(
            f'<text fill="{_attr(o.hover_text_color)}" font-size="{o.hover_text_size}" '
            f'font-weight="{_attr(str(o.hover_text_weight))}" stroke="none" alignment-baseline="hanging"/>'
        )
        parts.append(
            f'<line opacity="0" x1="0" y1="0" x2="0" y2="100%" '
            f'stroke="{_attr(o.hover_line_color)}" stroke-width="{_n(o.hover_line_width)}"/>'
        )

        parts.append("</svg>")
        return "\n".join(parts) + "\n"

    def _render_gradient(self, gradient_id: str) -> str:
        stops = "\n".join(
            f'<stop offset="{_n(s.offset)}" stop-color="{_attr(s.color)}"/>'
            for s in gradient_stops(self.options.gradient)
        )
        return (
            f'<defs>\n<linearGradient id="{gradient_id}" x1="0%" y1="0%" x2="0%" y2="100%">\n'
            f"{stops}\n</linearGradient>\n</defs>"
        )


def _n(value: float) -> str:
    value = round(float(value), 3)
    return str(int(value)) if value.is_integer() else repr(value)


def _attr(value: str) -> str:
    return escape(str(value), quote=True)
