import logging

import pytest

from air_quality_live.events import Input, Tick
from air_quality_live.monitor import AirQualityMonitor
from air_quality_live.series import WindowBounds, WindowedSeries
from air_quality_live.simulator import SensorError


def test_end_to_end_pipeline(list_sensor):
    monitor = AirQualityMonitor(list_sensor([0.0, 12.0, 35.5, 55.5]))
    for _ in range(4):
        monitor.update()
    series = monitor.series
    assert series.xs() == [0.0, 1.0, 2.0, 3.0]
    assert series.ys() == [0.0, 50.0, 101.0, 151.0]
    assert series.bounds == WindowBounds(0.0, 20.0)


def test_gap_sample_is_dropped_and_logged(list_sensor, caplog):
    monitor = AirQualityMonitor(list_sensor([0.0, 12.05, 12.0]))
    with caplog.at_level(logging.WARNING, logger="air_quality_live.monitor"):
        results = [monitor.update() for _ in range(3)]
    assert results == [0.0, None, 50.0]
    assert monitor.dropped == 1
    assert monitor.ticks == 3
    assert monitor.series.xs() == [0.0, 1.0]
    assert "Dropping sample" in caplog.text


def test_sensor_error_propagates(list_sensor):
    monitor = AirQualityMonitor(list_sensor([]))
    with pytest.raises(SensorError):
        monitor.update()


def test_handle_dispatch(list_sensor):
    monitor = AirQualityMonitor(list_sensor([5.0]))
    assert monitor.handle(Input("x")) is True
    assert len(monitor.series) == 0
    assert monitor.handle(Tick()) is True
    assert len(monitor.series) == 1
    assert monitor.handle(Input("q")) is False
    assert monitor.handle(Input("z"), quit_key="z") is False


def test_run_draws_then_stops_on_quit(list_sensor):
    monitor = AirQualityMonitor(list_sensor([1.0, 2.0, 3.0, 4.0]), WindowedSeries(capacity=5))
    frames = []
    events = [Tick(), Tick(), Input("x"), Tick(), Input("q"), Tick()]
    ticks = monitor.run(events, render=lambda s: frames.append(len(s)))
    assert ticks == 3
    assert len(monitor.series) == 3
    # initial frame plus one after each event before the quit key
    assert frames == [0, 1, 2, 2, 3]


def test_run_slides_window(list_sensor):
    values = [float(v) for v in range(30)]
    monitor = AirQualityMonitor(list_sensor(values))
    monitor.run([Tick()] * 30)
    assert len(monitor.series) == 21
    assert monitor.series.bounds == WindowBounds(9.0, 29.0)


def test_failed_sensor_read_is_not_a_tick(list_sensor):
    monitor = AirQualityMonitor(list_sensor([20.0]))
    monitor.update()
    with pytest.raises(SensorError):
        monitor.update()
    assert monitor.ticks == 1
    assert monitor.last_measurement.pm2_5 == 20.0


def test_last_measurement_kept_for_dropped_sample(list_sensor):
    monitor = AirQualityMonitor(list_sensor([12.05]))
    assert monitor.last_measurement is None
    assert monitor.update() is None
    assert monitor.last_measurement.pm2_5 == 12.05
