"""
AQI (Air Quality Index) calculation utilities.

PM2.5 -> AQI using the US EPA breakpoint table and piecewise linear
interpolation. No rounding happens here; callers round for display.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence, Tuple


@dataclass(frozen=True)
class BreakpointRow:
    concentration_low: float
    concentration_high: float
    index_low: int
    index_high: int
    category_label: str


# US EPA PM2.5 AQI breakpoints (ug/m3).
# Adjacent rows leave a 0.1 gap (12.0 -> 12.1); values inside a gap have no row.
PM25_BREAKPOINTS: Tuple[BreakpointRow, ...] = (
    BreakpointRow(0.0, 12.0, 0, 50, "good"),
    BreakpointRow(12.1, 35.4, 51, 100, "moderate"),
    BreakpointRow(35.5, 55.4, 101, 150, "unhealthy for sensitive groups"),
    BreakpointRow(55.5, 150.4, 151, 200, "unhealthy"),
    BreakpointRow(150.5, 250.4, 201, 300, "very unhealthy"),
    BreakpointRow(250.5, 350.4, 301, 400, "hazardous"),
    BreakpointRow(350.5, 500.4, 401, 500, "hazardous"),
)

PM25_MAX_CONCENTRATION = PM25_BREAKPOINTS[-1].concentration_high


class NoMatchingBreakpoint(ValueError):
    """Raised when a concentration is not covered by any breakpoint row."""

    def __init__(self, concentration: float) -> None:
        super().__init__(f"No breakpoint row covers concentration {concentration!r}")
        self.concentration = concentration


def find_breakpoint(
    concentration: float,
    table: Sequence[BreakpointRow] = PM25_BREAKPOINTS,
) -> BreakpointRow:
    """
    Select the row whose concentration range contains ``concentration``.

    Anything above the table maximum selects the last row. Negative,
    non-finite, and in-gap values raise NoMatchingBreakpoint.
    """
    c = float(concentration)
    if not math.isfinite(c):
        raise NoMatchingBreakpoint(c)
    if c > table[-1].concentration_high:
        return table[-1]
    for row in table:
        if row.concentration_low <= c <= row.concentration_high:
            return row
    raise NoMatchingBreakpoint(c)


def interpolate(row: BreakpointRow, concentration: float) -> float:
    """
    EPA linear interpolation:
    (i_hi - i_lo) / (c_hi - c_lo) * (c - c_lo) + i_lo
    """
    c_lo, c_hi = row.concentration_low, row.concentration_high
    i_lo, i_hi = row.index_low, row.index_high
    return (i_hi - i_lo) / (c_hi - c_lo) * (float(concentration) - c_lo) + i_lo


def compute(concentration: float) -> float:
    """
    Convert a PM2.5 concentration to AQI.

    Inputs above 500.4 ug/m3 keep the last row's slope, so the result can
    exceed 500.
    """
    return interpolate(find_breakpoint(concentration), concentration)


pm25_to_aqi = compute


def aqi_category(concentration: float) -> str:
    return find_breakpoint(concentration).category_label


def calculate_aqi(concentration: float) -> Tuple[float, str]:
    row = find_breakpoint(concentration)
    return interpolate(row, concentration), row.category_label
