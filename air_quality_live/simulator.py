"""
Particulate-matter sensors.

The real serial driver lives outside this package. What ships here:
- SensorSimulator: plausible indoor PM2.5/PM10 with slow drift, noise and
  occasional decaying spikes (cooking, dust)
- ReplaySensor: plays back a fixed list of PM2.5 readings
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import random
from typing import Iterable, Iterator, Optional, Protocol


class SensorError(RuntimeError):
    """A sensor could not produce a measurement."""


@dataclass(frozen=True)
class Measurement:
    ts_utc: datetime
    pm2_5: float
    pm10: float


class Sensor(Protocol):
    def get_measurement(self) -> Measurement:
        ...


class SensorSimulator:
    """
    Stateful simulator that produces plausible particulate readings.
    """

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        base_pm25: float = 8.0,
        base_pm10: float = 14.0,
    ) -> None:
        self._rng = random.Random(seed)
        self._base_pm25 = base_pm25
        self._base_pm10 = base_pm10

        self._pm25 = base_pm25
        self._pm10 = base_pm10
        self._spike = 0.0

    def _clamp(self, x: float, lo: float, hi: float) -> float:
        return max(lo, min(hi, x))

    def get_measurement(self, now_utc: Optional[datetime] = None) -> Measurement:
        """
        Produce the next reading. Intended to be called once per tick.
        """
        if now_utc is None:
            now_utc = datetime.now(timezone.utc)

        # Baseline random walk with mean reversion
        self._pm25 += self._rng.gauss(0.0, 0.15)
        self._pm25 += 0.01 * (self._base_pm25 - self._pm25)

        # Occasionally: sharp spike that decays exponentially
        if self._rng.random() < 0.008:
            self._spike += self._rng.uniform(8.0, 60.0)
        self._spike *= 0.88

        pm25 = self._clamp(self._pm25 + self._spike, 0.0, 500.0)

        # Coarse fraction tracks fine particles loosely
        self._pm10 += self._rng.gauss(0.0, 0.25) + 0.02 * (self._base_pm10 - self._pm10)
        pm10 = self._clamp(self._pm10 + 1.6 * self._spike, pm25, 600.0)

        return Measurement(
            ts_utc=now_utc,
            pm2_5=round(pm25, 1),
            pm10=round(pm10, 1),
        )


class ReplaySensor:
    """
    Yields the given PM2.5 values in order, then raises SensorError.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values: Iterator[float] = iter(list(values))

    def get_measurement(self) -> Measurement:
        try:
            pm25 = float(next(self._values))
        except StopIteration:
            raise SensorError("replay exhausted") from None
        return Measurement(ts_utc=datetime.now(timezone.utc), pm2_5=pm25, pm10=pm25)
