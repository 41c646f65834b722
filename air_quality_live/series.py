"""
Fixed-capacity sliding window of AQI samples for the live chart.

The first ``capacity`` pushes fill x = 0 .. capacity-1 under the initial
bounds. Every later push evicts the oldest point, shifts both bounds by one
and places the new sample at the new upper bound.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Iterator, List, Tuple

import pandas as pd


DEFAULT_CAPACITY = 21

# Fixed y-axis domain matching the AQI scale.
Y_DOMAIN: Tuple[float, float] = (0.0, 500.0)


class SeriesInvariantViolation(RuntimeError):
    """The buffer/bounds coupling was found broken. Programming error."""


@dataclass(frozen=True)
class SeriesPoint:
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))


@dataclass(frozen=True)
class WindowBounds:
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def shifted(self, step: float = 1.0) -> "WindowBounds":
        return WindowBounds(self.lower + step, self.upper + step)

    def as_list(self) -> List[float]:
        return [self.lower, self.upper]


class WindowedSeries:
    """
    Owns the point buffer and the visible x-axis bounds together.

    ``push`` is the only mutator. Not safe for concurrent producers: a
    multi-producer caller must hold one lock around each ``push``.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        capacity = int(capacity)
        if capacity < 2:
            raise ValueError(f"capacity must be at least 2, got {capacity}")
        self._capacity = capacity
        self._points: Deque[SeriesPoint] = deque()
        self._bounds = WindowBounds(0.0, float(capacity - 1))

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def fill_threshold(self) -> int:
        return self._capacity - 1

    @property
    def bounds(self) -> WindowBounds:
        return self._bounds

    @property
    def points(self) -> Tuple[SeriesPoint, ...]:
        return tuple(self._points)

    @property
    def y_domain(self) -> Tuple[float, float]:
        return Y_DOMAIN

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[SeriesPoint]:
        return iter(tuple(self._points))

    def push(self, value: float) -> None:
        y = float(value)
        if len(self._points) <= self.fill_threshold:
            self._points.append(SeriesPoint(float(len(self._points)), y))
        else:
            self._points.popleft()
            self._bounds = self._bounds.shifted()
            self._points.append(SeriesPoint(self._bounds.upper, y))
        self.check_invariants()

    def push_many(self, values: Iterable[float]) -> None:
        for value in values:
            self.push(value)

    def check_invariants(self) -> None:
        if len(self._points) > self._capacity:
            raise SeriesInvariantViolation(
                f"{len(self._points)} points stored, capacity is {self._capacity}"
            )
        if self._bounds.width != self.fill_threshold:
            raise SeriesInvariantViolation(
                f"window width {self._bounds.width} != {self.fill_threshold}"
            )
        if self._points and not (
            self._bounds.lower <= self._points[0].x
            and self._points[-1].x <= self._bounds.upper
        ):
            raise SeriesInvariantViolation(
                f"points [{self._points[0].x}, {self._points[-1].x}] "
                f"outside window {self._bounds.as_list()}"
            )

    def xs(self) -> List[float]:
        return [p.x for p in self._points]

    def ys(self) -> List[float]:
        return [p.y for p in self._points]

    def to_frame(self) -> pd.DataFrame:
        """Current window as a DataFrame with ``x`` and ``aqi`` columns."""
        return pd.DataFrame({"x": self.xs(), "aqi": self.ys()}, dtype=float)
