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

import argparse
import logging
import sys

from trendline._version import __version__
from trendline.cli import render
from trendline.cli.exitcodes import EXIT_ERROR
from trendline.utils.log import setup_logging


def _add_chart_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("data", help="Data file (JSON/YAML list of numbers or {value: n} records), or - for stdin.")
    p.add_argument("--config", default=None, help="Chart config file (trendline.yaml / .json).")
    p.add_argument("--smooth", action="store_true", default=None, help="Round the corners of the line.")
    p.add_argument("--radius", type=float, default=None, help="Corner radius for --smooth (default: 10).")
    p.add_argument("--width", type=float, default=None, help="viewBox width (default: 300, scalable SVG).")
    p.add_argument("--height", type=float, default=None, help="viewBox height (default: 75, scalable SVG).")
    p.add_argument("--padding", type=float, default=None, help="Inset from the viewBox edges (default: 8).")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="trendline", description="Trendline: scalable SVG trend lines")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(dest="cmd", required=True)

    # render
    render_p = sub.add_parser("render", help="Render data as a chart.")
    _add_chart_args(render_p)
    render_p.add_argument(
        "--format", choices=["svg", "path", "json", "ascii", "png"], default="svg", help="Output format."
    )
    render_p.add_argument("--output", "-o", default=None, help="Output file (default: stdout).")
    render_p.add_argument("--stroke", default=None, help="Stroke color.")
    render_p.add_argument("--stroke-width", dest="stroke_width", type=float, default=None, help="Stroke width.")
    render_p.add_argument("--gradient", nargs="+", default=None, help="Gradient colors, bottom to top.")
    render_p.add_argument(
        "--highlight", nargs=2, type=int, default=None, metavar=("FIRST", "LAST"), help="Highlight points FIRST..LAST."
    )
    render_p.add_argument("--highlight-color", dest="highlight_color", default=None, help="Highlight fill color.")
    render_p.add_argument("--auto-draw", dest="auto_draw", action="store_true", default=None, help="Animate the line.")
    render_p.add_argument("--id", dest="chart_id", default=None, help="Element id suffix (default: random).")

    # path
    path_p = sub.add_parser("path", help="Print path data only.")
    _add_chart_args(path_p)
    path_p.add_argument("--precision", type=int, default=None, help="Round coordinates to N decimals.")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        setup_logging(logging.DEBUG)

    try:
        if args.cmd == "render":
            options = render.load_options(
                args.config,
                smooth=args.smooth,
                radius=args.radius,
                width=args.width,
                height=args.height,
                padding=args.padding,
                stroke=args.stroke,
                stroke_width=args.stroke_width,
                gradient=tuple(args.gradient) if args.gradient else None,
                range_highlight=tuple(args.highlight) if args.highlight else None,
                range_highlight_color=args.highlight_color,
                auto_draw=args.auto_draw,
            )
            return render.run(
                data=args.data,
                fmt=args.format,
                output=args.output,
                options=options,
                chart_id=args.chart_id,
            )

        if args.cmd == "path":
            options = render.load_options(
                args.config,
                smooth=args.smooth,
                radius=args.radius,
                width=args.width,
                height=args.height,
                padding=args.padding,
            )
            return render.path(data=args.data, options=options, precision=args.precision)

        print("Unknown command.", file=sys.stderr)
        return EXIT_ERROR

    except Exception as e:
        print(f"trendline: error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
