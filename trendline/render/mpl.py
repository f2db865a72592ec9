"""
Matplotlib rendering of compiled trend paths for image export.

This module requires matplotlib (install with `pip install trendline[viz]`).
"""

from __future__ import annotations

from pathlib import Path

from trendline.chart import Chart, ChartOptions
from trendline.errors import PathSyntaxError
from trendline.geometry.types import Point
from trendline.path.types import Instruction, LineTo, MoveTo


def path_vertices(instructions: list[Instruction] | tuple[Instruction, ...]) -> tuple[list[tuple[float, float]], list[str]]:
    """
    Flatten instructions into (vertices, kinds) for matplotlib.

    kinds are "move", "line" or "curve4"; each smooth segment contributes
    three "curve4" vertices (two controls and the end point).
    """
    vertices: list[tuple[float, float]] = []
    kinds: list[str] = []
    if not instructions:
        return vertices, kinds

    if not isinstance(instructions[0], MoveTo):
        raise PathSyntaxError("Path must start with M.", code="missing_move")

    current = instructions[0].point
    last_control: Point | None = None

    for ins in instructions:
        if isinstance(ins, MoveTo):
            vertices.append(ins.point.to_tuple())
            kinds.append("move")
            last_control = None
        elif isinstance(ins, LineTo):
            vertices.append(ins.point.to_tuple())
            kinds.append("line")
            last_control = None
        else:
            if last_control is None:
                first = current
            else:
                first = Point(2 * current.x - last_control.x, 2 * current.y - last_control.y)
            vertices.extend([first.to_tuple(), ins.control.to_tuple(), ins.point.to_tuple()])
            kinds.extend(["curve4"] * 3)
            last_control = ins.control
        current = ins.end

    return vertices, kinds


def render_image(
    chart: Chart,
    output_path: str,
    *,
    options: ChartOptions | None = None,
    dpi: int = 150,
) -> None:
    """
    Draw the chart's path to an image file (PNG, SVG, PDF supported).

    Raises:
        ImportError: If matplotlib is not installed
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import PathPatch
        from matplotlib.path import Path as MplPath
    except ImportError as e:
        raise ImportError("matplotlib is required for image export. Install it with: pip install trendline[viz]") from e

    options = options or ChartOptions()
    _, _, view_width, view_height = chart.view_box

    codes_by_kind = {"move": MplPath.MOVETO, "line": MplPath.LINETO, "curve4": MplPath.CURVE4}
    vertices, kinds = path_vertices(chart.instructions)
    mpl_path = MplPath(vertices, [codes_by_kind[k] for k in kinds])

    # The gradient's top color stands in for the stroke.
    color = options.gradient[-1] if options.gradient else options.stroke

    fig, ax = plt.subplots(figsize=(view_width / 50, view_height / 50))
    if chart.highlight is not None and options.range_highlight_color != "transparent":
        ax.axvspan(chart.highlight.start, chart.highlight.end, color=options.range_highlight_color, linewidth=0)
    ax.add_patch(PathPatch(mpl_path, fill=False, edgecolor=color, linewidth=options.stroke_width))

    # viewBox coordinates grow downward
    ax.set_xlim(0, view_width)
    ax.set_ylim(view_height, 0)
    ax.set_axis_off()

    fig.savefig(Path(output_path), dpi=dpi, bbox_inches="tight", transparent=True)
    plt.close(fig)
