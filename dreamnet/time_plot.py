"""Running mean and spread of a scalar over a number of steps."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PlotPoint:
    """A plotted point: mean with a one-standard-deviation range."""

    index: float
    mean: float
    low: float
    high: float


@dataclass
class TimePlot:
    """Collects scalar values and emits one point every ``step`` values."""

    step: int = 1
    points: list[PlotPoint] = field(default_factory=list)
    _next_index: int = field(default=0, repr=False)
    _count: int = field(default=0, repr=False)
    _index_sum: float = field(default=0.0, repr=False)
    _value_sum: float = field(default=0.0, repr=False)
    _sq_sum: float = field(default=0.0, repr=False)

    def __init__(self, step=1):
        if step < 1:
            raise ValueError("step must be at least 1")
        self.step = step
        self.points = []
        self._next_index = 0
        self._reset()

    def _reset(self) -> None:
        self._count = 0
        self._index_sum = 0.0
        self._value_sum = 0.0
        self._sq_sum = 0.0

    def add(self, value, index=None) -> PlotPoint | None:
        """Add a value; return the new point once ``step`` values are in.

        Without ``index`` the values are numbered 0, 1, 2, ...
        """
        auto_index = self._next_index
        self._next_index += 1
        position = auto_index if index is None else index
        value = float(value)
        self._count += 1
        self._value_sum += value
        self._sq_sum += value * value
        self._index_sum += position
        if self._count < self.step:
            return None
        mean = self._value_sum / self._count
        variance = self._sq_sum / self._count - mean * mean
        stdev = math.sqrt(max(variance, 0.0))
        point = PlotPoint(
            index=self._index_sum / self._count,
            mean=mean,
            low=mean - stdev,
            high=mean + stdev,
        )
        self._reset()
        self.points.append(point)
        return point