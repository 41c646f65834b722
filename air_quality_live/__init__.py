"""Live PM2.5 Air Quality Index chart."""

from air_quality_live.aqi import (
    PM25_BREAKPOINTS,
    BreakpointRow,
    NoMatchingBreakpoint,
    calculate_aqi,
    compute,
    pm25_to_aqi,
)
from air_quality_live.series import (
    SeriesInvariantViolation,
    SeriesPoint,
    WindowBounds,
    WindowedSeries,
)

__version__ = "0.1.0"
