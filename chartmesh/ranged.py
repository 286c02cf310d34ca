from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, timedelta
import math
from typing import Generic, Sequence, TypeVar

import numpy as np

from chartmesh.scales import format_tick, limited_nice_ticks, tick_step


V = TypeVar("V")

DATE_STEPS_DAYS = (1, 2, 7, 14, 30, 61, 91, 182, 365)


class Ranged(ABC, Generic[V]):
    @abstractmethod
    def range(self) -> tuple[V, V]:
        raise NotImplementedError

    @abstractmethod
    def map(self, value: V, limit: tuple[int, int]) -> int:
        raise NotImplementedError

    @abstractmethod
    def key_points(self, max_points: int) -> list[V]:
        raise NotImplementedError

    def format(self, value: V) -> str:
        return str(value)


def _lerp_pixel(fraction: float, limit: tuple[int, int]) -> int:
    lo, hi = limit
    return int(round(lo + (hi - lo) * fraction))


class RangedFloat(Ranged[float]):
    def __init__(self, start: float, end: float) -> None:
        if not (math.isfinite(start) and math.isfinite(end)):
            raise ValueError("range bounds must be finite")
        self._start = float(start)
        self._end = float(end)
        # Step of the most recent key_points() call; labels use its decimals.
        self._step: float | None = None

    def range(self) -> tuple[float, float]:
        return (self._start, self._end)

    def map(self, value: float, limit: tuple[int, int]) -> int:
        span = self._end - self._start
        if span == 0:
            return _lerp_pixel(0.5, limit)
        return _lerp_pixel((float(value) - self._start) / span, limit)

    def key_points(self, max_points: int) -> list[float]:
        ticks = limited_nice_ticks(self._start, self._end, max_points)
        self._step = tick_step(ticks)
        return [float(v) for v in ticks.tolist()]

    def format(self, value: float) -> str:
        return format_tick(float(value), step=self._step)


class RangedInt(Ranged[int]):
    def __init__(self, start: int, end: int) -> None:
        self._start = int(start)
        self._end = int(end)

    def range(self) -> tuple[int, int]:
        return (self._start, self._end)

    def map(self, value: int, limit: tuple[int, int]) -> int:
        span = self._end - self._start
        if span == 0:
            return _lerp_pixel(0.5, limit)
        return _lerp_pixel((value - self._start) / span, limit)

    def key_points(self, max_points: int) -> list[int]:
        if max_points <= 0:
            return []
        lo, hi = min(self._start, self._end), max(self._start, self._end)
        ticks = limited_nice_ticks(float(lo), float(hi), max_points)
        # Integer ranges never subdivide below a step of one.
        if ticks.size > 1 and ticks[1] - ticks[0] < 1:
            return list(range(lo, hi + 1))[:max_points]
        return [int(v) for v in np.rint(ticks).tolist()]

    def format(self, value: int) -> str:
        return str(int(value))


class RangedCategory(Ranged[str]):
    """Discrete axis; each category owns one equal-width segment.

    Values map to the left edge of their segment, so histogram-style charts
    shift labels by half a segment with the mesh's ``x_label_offset``.
    """

    def __init__(self, categories: Sequence[str]) -> None:
        if not categories:
            raise ValueError("categories must be non-empty")
        self._categories = tuple(str(c) for c in categories)
        self._index = {c: i for i, c in enumerate(self._categories)}

    @property
    def categories(self) -> tuple[str, ...]:
        return self._categories

    def range(self) -> tuple[str, str]:
        return (self._categories[0], self._categories[-1])

    def map(self, value: str, limit: tuple[int, int]) -> int:
        idx = self._index.get(value)
        if idx is None:
            raise KeyError(f"unknown category: {value!r}")
        return _lerp_pixel(idx / len(self._categories), limit)

    def segment_width(self, limit: tuple[int, int]) -> int:
        return int(abs(limit[1] - limit[0]) / len(self._categories))

    def key_points(self, max_points: int) -> list[str]:
        if max_points <= 0:
            return []
        stride = max(1, math.ceil(len(self._categories) / max_points))
        return list(self._categories[::stride])[:max_points]


class RangedDate(Ranged[date]):
    def __init__(self, start: date, end: date) -> None:
        if end < start:
            start, end = end, start
        self._start = start
        self._end = end

    def range(self) -> tuple[date, date]:
        return (self._start, self._end)

    def map(self, value: date, limit: tuple[int, int]) -> int:
        span = (self._end - self._start).days
        if span == 0:
            return _lerp_pixel(0.5, limit)
        return _lerp_pixel((value - self._start).days / span, limit)

    def key_points(self, max_points: int) -> list[date]:
        if max_points <= 0:
            return []
        days = (self._end - self._start).days
        for step in DATE_STEPS_DAYS:
            if days // step + 1 <= max_points:
                break
        else:
            step = max(DATE_STEPS_DAYS[-1], math.ceil(days / max_points))
        points = [self._start + timedelta(days=offset) for offset in range(0, days + 1, step)]
        return points[:max_points]

    def format(self, value: date) -> str:
        return value.isoformat()
