"""A buffer of plot points whose x axis wraps around every ``span`` units."""

from __future__ import annotations

import math


class RollingBuffer:
    """Collects (x, y) points with x taken modulo ``span``; restarts on wrap."""

    def __init__(self, span: float = 10.0) -> None:
        self.span = span
        self.data: list[tuple[float, float]] = []

    def add_point(self, x: float, y: float) -> None:
        """Append a point, clearing the buffer first when x wraps around."""
        xmod = math.fmod(x, self.span)
        if self.data and xmod < self.data[-1][0]:
            self.data.clear()
        self.data.append((xmod, y))