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

from trendline.geometry.normalize import normalize_dataset
from trendline.geometry.types import Domain


def render_ascii_chart(
    values: list[float],
    labels: list[str] | None = None,
    *,
    width: int = 60,
    height: int = 10,
    title: str | None = None,
) -> str:
    """
    Render a terminal preview of a trend line.

    Args:
        values: Y-axis values (one per data point)
        labels: Optional X-axis labels; only the first and last are shown
        width: Chart width in characters
        height: Chart height in lines
        title: Optional chart title

    Returns:
        The chart as a multi-line string
    """
    if not values:
        return "No data to display."

    lines: list[str] = []

    if title:
        lines.append(title)
        lines.append("=" * len(title))
        lines.append("")

    min_val = min(values)
    max_val = max(values)

    y_label_width = max(len(f"{max_val:.0f}"), len(f"{min_val:.0f}")) + 1

    chart_width = min(width - y_label_width - 3, len(values) * 3)
    chart_width = max(chart_width, len(values))  # at least 1 char per point

    # Row 0 is the bottom line. Flat data sits on the middle row and a
    # single point in the middle column.
    if min_val == max_val:
        low_row = high_row = height // 2
    else:
        low_row, high_row = 0, height - 1
    if len(values) == 1:
        left = right = chart_width // 2
    else:
        left, right = 0, chart_width - 1

    points = normalize_dataset(values, Domain(min_x=left, max_x=right, min_y=low_row, max_y=high_row))
    cells = [(int(round(p.x)), int(round(p.y))) for p in points]

    grid: list[list[str]] = [[" " for _ in range(chart_width)] for _ in range(height)]

    for col, row in cells:
        if 0 <= row < height and 0 <= col < chart_width:
            grid[row][col] = "●"

    # Horizontal runs between neighbours on the same row
    for (col1, row1), (col2, row2) in zip(cells, cells[1:]):
        if row1 == row2 and col2 - col1 > 1:
            for c in range(col1 + 1, col2):
                if grid[row1][c] == " ":
                    grid[row1][c] = "-"

    for row_idx in range(height - 1, -1, -1):
        if row_idx == height - 1:
            label = f"{max_val:>{y_label_width}.0f}"
        elif row_idx == 0:
            label = f"{min_val:>{y_label_width}.0f}"
        elif row_idx == height // 2:
            mid_val = (max_val + min_val) / 2
            label = f"{mid_val:>{y_label_width}.0f}"
        else:
            label = " " * y_label_width

        axis_char = "└" if row_idx == 0 else "│"
        lines.append(f"{label} {axis_char}{''.join(grid[row_idx])}")

    lines.append(" " * (y_label_width + 1) + "└" + "─" * chart_width)

    if labels:
        label_line = " " * (y_label_width + 2)
        if len(labels) == 1:
            label_line += labels[0].center(chart_width)
        else:
            first_label = labels[0][:10]
            last_label = labels[-1][:10]
            spacing = chart_width - len(first_label) - len(last_label)
            if spacing > 0:
                label_line += first_label + " " * spacing + last_label
            else:
                label_line += first_label
        lines.append(label_line)

    return "\n".join(lines)


def render_summary(values: list[float]) -> str:
    """
    One-paragraph summary of a series: direction, endpoints and range.

    Returns:
        Summary text
    """
    if not values:
        return "No data available."

    first_val = values[0]
    last_val = values[-1]
    diff = last_val - first_val

    if diff < 0:
        trend = "↓ Decreasing"
    elif diff > 0:
        trend = "↑ Increasing"
    else:
        trend = "→ Stable"

    avg_val = float(sum(values) / len(values))

    return "\n".join(
        [
            f"Trend: {trend} ({_fmt(diff, signed=True)} over {len(values)} points)",
            f"First: {_fmt(first_val)}  Last: {_fmt(last_val)}",
            f"Average: {_fmt(avg_val)}  Min: {_fmt(min(values))}  Max: {_fmt(max(values))}",
        ]
    )


def _fmt(value: float, *, signed: bool = False) -> str:
    sign = "+" if signed else ""
    if float(value).is_integer():
        return f"{value:{sign}.0f}"
    return f"{value:{sign}.2f}"
