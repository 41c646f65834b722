"""
Streamlit dashboard:
- Live rolling AQI chart (last 21 ticks)
- Latest PM2.5 / AQI / category
- Dropped-sample counter

Every auto-refresh rerun is one tick.

Run:
  streamlit run air_quality_live/dashboard.py
"""

from __future__ import annotations

import logging

import streamlit as st
from streamlit_autorefresh import st_autorefresh

from air_quality_live.monitor import AirQualityMonitor
from air_quality_live.render import build_figure, category_for_aqi
from air_quality_live.series import WindowedSeries
from air_quality_live.simulator import SensorSimulator


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

st.set_page_config(page_title="Live Air Quality Index", layout="wide")


def _get_monitor(seed: int) -> AirQualityMonitor:
    state = st.session_state
    if state.get("seed") != seed or "monitor" not in state:
        state["seed"] = seed
        state["monitor"] = AirQualityMonitor(SensorSimulator(seed=seed), WindowedSeries())
        state["last_tick"] = -1
    return state["monitor"]


st.title("Air Quality Index (PM 2.5), Live")

with st.sidebar:
    st.header("Settings")
    seed = st.number_input("Simulator seed", min_value=0, value=42, step=1)
    refresh_secs = st.slider("Tick seconds", min_value=1, max_value=30, value=1, step=1)
    stopped = st.toggle("Stop", value=False)

monitor = _get_monitor(int(seed))

if not stopped:
    # st_autorefresh returns the rerun count; tick once per new count only
    count = st_autorefresh(interval=refresh_secs * 1000, key="tick")
    if count != st.session_state["last_tick"]:
        st.session_state["last_tick"] = count
        monitor.update()

series = monitor.series

col1, col2, col3, col4 = st.columns(4)
if len(series):
    latest = series.points[-1].y
    col1.metric("AQI", f"{latest:.0f}")
    col2.metric("Category", category_for_aqi(latest))
else:
    col1.metric("AQI", "N/A")
    col2.metric("Category", "N/A")
measurement = monitor.last_measurement
col3.metric("PM2.5 (ug/m3)", f"{measurement.pm2_5:.1f}" if measurement is not None else "N/A")
col4.metric("Dropped samples", monitor.dropped)

st.plotly_chart(build_figure(series), use_container_width=True)
st.caption(f"Window: [{series.bounds.lower:g}, {series.bounds.upper:g}] | ticks: {monitor.ticks}")

with st.expander("Window data"):
    st.dataframe(series.to_frame(), use_container_width=True, hide_index=True)
