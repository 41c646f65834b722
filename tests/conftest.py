"""Shared fixtures."""

from datetime import datetime, timezone

import pytest

from air_quality_live.simulator import Measurement, SensorError


class ListSensor:
    """Fake sensor returning the given PM2.5 values, then failing."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def get_measurement(self):
        if self.calls >= len(self.values):
            raise SensorError("no more values")
        value = self.values[self.calls]
        self.calls += 1
        return Measurement(ts_utc=datetime.now(timezone.utc), pm2_5=value, pm10=value)


@pytest.fixture
def list_sensor():
    return ListSensor
