"""
Terminal live view.

Reads PM2.5 once per tick, converts it to AQI and slides the chart window.
Press q to quit. A terminal stdin is switched to single-key (cbreak) mode
while the loop runs and restored on exit.
"""

from __future__ import annotations

import argparse
from contextlib import contextmanager
import logging
import sys
from typing import Iterator, List, Optional, TextIO

from air_quality_live.events import Events
from air_quality_live.monitor import AirQualityMonitor
from air_quality_live.render import format_frame
from air_quality_live.series import DEFAULT_CAPACITY, WindowedSeries
from air_quality_live.simulator import ReplaySensor, SensorError, SensorSimulator


def _parse_replay(text: str) -> List[float]:
    try:
        return [float(v) for v in text.split(",") if v.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid replay values: {e}") from e


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Live PM2.5 Air Quality Index chart")
    p.add_argument("--interval", type=float, default=1.0, help="Tick interval (seconds)")
    p.add_argument("--seed", type=int, default=42, help="Random seed for simulator")
    p.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="Points kept in the window")
    p.add_argument("--quit-key", default="q", help="Key that stops the loop")
    p.add_argument("--replay", type=_parse_replay, default=None, help="Comma-separated PM2.5 values to play back")
    p.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return p.parse_args(argv)


@contextmanager
def single_key_mode(stream: TextIO) -> Iterator[None]:
    """Deliver key presses without Enter or echo while active (terminals only)."""
    if not stream.isatty():
        yield
        return

    import termios
    import tty

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    sensor = ReplaySensor(args.replay) if args.replay is not None else SensorSimulator(seed=args.seed)
    monitor = AirQualityMonitor(sensor, WindowedSeries(capacity=args.capacity))

    def render(series: WindowedSeries) -> None:
        print(format_frame(series), flush=True)

    logging.info("Ticking every %.1fs, press %r to quit", args.interval, args.quit_key)
    with single_key_mode(sys.stdin):
        events = Events(tick_rate=args.interval, input_stream=sys.stdin)
        try:
            ticks = monitor.run(events, render=render, quit_key=args.quit_key)
        except SensorError as e:
            logging.error("Sensor failed: %s", e)
            return 1
        except KeyboardInterrupt:
            logging.info("Stopped.")
            return 0
        finally:
            events.close()

    logging.info("Stopped after %d ticks (%d dropped).", ticks, monitor.dropped)
    return 0


if __name__ == "__main__":
    sys.exit(main())
