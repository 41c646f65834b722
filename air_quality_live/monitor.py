"""
The per-tick loop: read the sensor, convert PM2.5 to AQI, slide the window.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from air_quality_live.aqi import NoMatchingBreakpoint, calculate_aqi
from air_quality_live.events import Event, Input, Tick
from air_quality_live.series import WindowedSeries
from air_quality_live.simulator import Measurement, Sensor


logger = logging.getLogger(__name__)


class AirQualityMonitor:
    def __init__(self, sensor: Sensor, series: Optional[WindowedSeries] = None) -> None:
        self.sensor = sensor
        self.series = series if series is not None else WindowedSeries()
        self.ticks = 0
        self.last_measurement: Optional[Measurement] = None
        self.dropped = 0

    def update(self) -> Optional[float]:
        """
        Run one tick. Returns the pushed AQI, or None if the sample was dropped.

        Sensor errors propagate; unclassifiable readings are logged and skipped.
        """
        measurement = self.sensor.get_measurement()
        self.ticks += 1
        self.last_measurement = measurement
        try:
            aqi, category = calculate_aqi(measurement.pm2_5)
        except NoMatchingBreakpoint as e:
            self.dropped += 1
            logger.warning("Dropping sample: %s", e)
            return None

        self.series.push(aqi)
        bounds = self.series.bounds
        logger.info(
            "PM2.5=%.1f ug/m3 | AQI=%.1f (%s) | window=[%g, %g]",
            measurement.pm2_5,
            aqi,
            category,
            bounds.lower,
            bounds.upper,
        )
        return aqi

    def handle(self, event: Event, quit_key: str = "q") -> bool:
        """Dispatch one event. Returns False when the loop should stop."""
        if isinstance(event, Tick):
            self.update()
        elif isinstance(event, Input) and event.key == quit_key:
            return False
        return True

    def run(
        self,
        events: Iterable[Event],
        render: Optional[Callable[[WindowedSeries], None]] = None,
        quit_key: str = "q",
    ) -> int:
        """
        Draw, then wait for the next event, until the quit key arrives.
        Returns the number of ticks handled.
        """
        start = self.ticks
        if render is not None:
            render(self.series)
        for event in events:
            if not self.handle(event, quit_key=quit_key):
                break
            if render is not None:
                render(self.series)
        return self.ticks - start
