import io
import queue

import pytest

from air_quality_live.events import Events, Input, Tick


def test_ticks_arrive():
    with Events(tick_rate=0.01) as events:
        assert events.next(timeout=2.0) == Tick()
        assert events.next(timeout=2.0) == Tick()


def test_input_keys_in_order():
    with Events(tick_rate=60.0, input_stream=io.StringIO("x\nq")) as events:
        assert events.next(timeout=2.0) == Input("x")
        assert events.next(timeout=2.0) == Input("q")
        with pytest.raises(queue.Empty):
            events.next(timeout=0.05)


def test_close_stops_ticks():
    events = Events(tick_rate=0.01)
    events.close()
    events._tick_thread.join(timeout=2.0)
    assert not events._tick_thread.is_alive()


def test_invalid_tick_rate():
    with pytest.raises(ValueError):
        Events(tick_rate=0)
