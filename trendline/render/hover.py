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

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

DEFAULT_FADE_AFTER = 1.0  # seconds


@dataclass(frozen=True, slots=True)
class HoverState:
    visible: bool
    value: float | None = None
    line_x_percent: float | None = None  # hover line position, % of svg width

    @property
    def text(self) -> str:
        if not self.visible or self.value is None:
            return ""
        value = float(self.value)
        return str(int(value)) if value.is_integer() else repr(value)


HIDDEN = HoverState(visible=False)


class HoverOverlay:
    """
    Hover readout for one rendered chart.

    Keeps the mutable session state (last readout, when it was shown) that
    the pure geometry code does not have. ``clock`` is injectable so the
    fade-out can be driven deterministically.
    """

    def __init__(
        self,
        values: Sequence[float],
        *,
        fade_after: float = DEFAULT_FADE_AFTER,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.values = tuple(values)
        self.fade_after = fade_after
        self._clock = clock
        self._state = HIDDEN
        self._shown_at: float | None = None

    def move(self, x: float, *, svg_width: float, path_left: float, path_width: float) -> HoverState:
        """
        Update the readout for a pointer at ``x`` (pixels from the svg's left edge).

        ``path_left``/``path_width`` are the drawn path's box relative to the
        svg. Outside that box the readout hides immediately.
        """
        if not self.values or path_width <= 0 or not path_left <= x <= path_left + path_width:
            return self.reset()

        computed_x = x - path_left
        # half-up rounding, so a pointer exactly between two points picks the later one
        index = int(computed_x / path_width * (len(self.values) - 1) + 0.5)
        self._state = HoverState(
            visible=True,
            value=self.values[index],
            line_x_percent=x / svg_width * 100 if svg_width else 0.0,
        )
        self._shown_at = self._clock()
        return self._state

    def state(self) -> HoverState:
        """Current readout; hides once ``fade_after`` seconds passed since the last move."""
        if self._shown_at is not None and self._clock() - self._shown_at >= self.fade_after:
            self.reset()
        return self._state

    def reset(self) -> HoverState:
        self._state = HIDDEN
        self._shown_at = None
        return self._state
