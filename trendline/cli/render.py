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
import logging
import sys
from pathlib import Path
from typing import Any

from trendline.chart import ChartOptions, build_chart
from trendline.cli._io import dataset_labels, read_dataset, write_output
from trendline.cli.exitcodes import EXIT_ERROR, EXIT_NOTHING_TO_DRAW, EXIT_OK
from trendline.config import ChartConfigLoader, merge_options
from trendline.path.serialize import to_path_data
from trendline.render.ascii import render_ascii_chart, render_summary
from trendline.render.svg import SvgRenderer

logger = logging.getLogger(__name__)


def load_options(config: str | None, **overrides: Any) -> ChartOptions:
    base = ChartConfigLoader().load(Path(config)) if config else ChartOptions()
    return merge_options(base, **overrides)


def run(
    *,
    data: str,
    fmt: str = "svg",
    output: str | None = None,
    options: ChartOptions | None = None,
    chart_id: str | None = None,
) -> int:
    """
    Render DATA as a trend chart.

    Args:
        data: Data file path, or "-" for stdin
        fmt: svg, path, json, ascii or png
        output: Output file (default: stdout; required for png)
        options: Chart options (file config merged with CLI flags)
        chart_id: Fixed element id suffix instead of a random one
    """
    options = options or ChartOptions()
    raw = read_dataset(data)
    chart = build_chart(raw, options)

    if chart is None:
        print("Nothing to draw: at least 2 values are needed.", file=sys.stderr)
        return EXIT_NOTHING_TO_DRAW

    logger.info("rendering %d points as %s", len(chart.points), fmt)

    if fmt == "svg":
        write_output(SvgRenderer(options).render(chart, chart_id=chart_id), output)
    elif fmt == "path":
        write_output(chart.path_data, output)
    elif fmt == "json":
        write_output(json.dumps(chart.to_dict(), indent=2), output)
    elif fmt == "ascii":
        labels = dataset_labels(raw)
        text = render_ascii_chart(list(chart.values), labels) + "\n\n" + render_summary(list(chart.values))
        write_output(text, output)
    elif fmt == "png":
        if not output:
            print("trendline: error: --output is required for png", file=sys.stderr)
            return EXIT_ERROR
        from trendline.render.mpl import render_image

        render_image(chart, output, options=options)
    else:
        print(f"trendline: error: unknown format {fmt!r}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


def path(*, data: str, options: ChartOptions | None = None, precision: int | None = None) -> int:
    """Print only the path data for DATA."""
    chart = build_chart(read_dataset(data), options or ChartOptions())
    if chart is None:
        print("Nothing to draw: at least 2 values are needed.", file=sys.stderr)
        return EXIT_NOTHING_TO_DRAW
    write_output(to_path_data(chart.instructions, precision=precision), None)
    return EXIT_OK
