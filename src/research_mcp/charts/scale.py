"""Linear scale and axis calculations shared by every chart."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

DEFAULT_TICK_COUNT = 4
MIN_SPAN = 1.0


class EmptySeriesError(ValueError):
    """Scale requested for an empty series. Callers must render "no data" instead."""

    pass


@dataclass(frozen=True)
class PlotArea:
    """Chart frame in viewBox units."""

    width: float
    height: float
    padding: float = 0.0

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def usable_height(self) -> float:
        return self.height - 2 * self.padding

    @property
    def baseline(self) -> float:
        """y of the x-axis (bottom of the plotting rectangle)."""
        return self.height - self.padding


@dataclass(frozen=True)
class AxisScale:
    """
    Linear mapping from (sample index, value) to chart coordinates.

    Larger values plot higher (smaller y). ``span`` is floored at 1 so
    constant and single-point series never divide by zero.
    """

    area: PlotArea
    count: int
    min: float
    max: float
    span: float
    step: float
    ticks: tuple[float, ...]

    def x(self, index: int) -> float:
        if self.count == 1:
            return self.area.padding + self.area.usable_width / 2
        return self.area.padding + index * self.step

    def y(self, value: float) -> float:
        ratio = (value - self.min) / self.span
        return self.area.baseline - ratio * self.area.usable_height

    def point(self, index: int, value: float) -> tuple[float, float]:
        return self.x(index), self.y(value)


def build_scale(
    values: Sequence[float],
    count: int,
    area: PlotArea,
    tick_count: int = DEFAULT_TICK_COUNT,
) -> AxisScale:
    """
    Derive the scale for a chart.

    Args:
        values: y-domain values; for multi-series charts the union of all series
        count: Number of x sample positions
        area: Plotting frame
        tick_count: Number of y tick values (evenly spaced, min and max included)

    Returns:
        AxisScale for mapping samples to coordinates

    Raises:
        EmptySeriesError: If there are no values or no sample positions
    """
    if len(values) == 0 or count < 1:
        raise EmptySeriesError("cannot scale an empty series")

    arr = np.asarray(values, dtype=float)
    lo = float(arr.min())
    hi = float(arr.max())
    span = max(MIN_SPAN, hi - lo)
    step = area.usable_width / (count - 1) if count > 1 else area.usable_width
    ticks = tuple(float(t) for t in np.linspace(lo, hi, tick_count))

    return AxisScale(
        area=area,
        count=count,
        min=lo,
        max=hi,
        span=span,
        step=step,
        ticks=ticks,
    )
