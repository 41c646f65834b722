from air_quality_live.render import build_figure, category_for_aqi, format_frame, x_labels
from air_quality_live.series import WindowBounds, WindowedSeries


def test_x_labels():
    assert x_labels(WindowBounds(0.0, 20.0)) == ["0", "10", "20"]
    assert x_labels(WindowBounds(1.0, 21.0)) == ["1", "11", "21"]


def test_category_for_aqi():
    assert category_for_aqi(0.0) == "good"
    assert category_for_aqi(50.0) == "good"
    assert category_for_aqi(151.0) == "unhealthy"
    assert category_for_aqi(650.0) == "hazardous"


def test_build_figure_axes_follow_window():
    series = WindowedSeries()
    series.push_many([float(v) for v in range(25)])
    fig = build_figure(series)
    assert list(fig.layout.xaxis.range) == [4.0, 24.0]
    assert list(fig.layout.yaxis.range) == [0.0, 500.0]
    trace = fig.data[0]
    assert list(trace.x) == [float(x) for x in range(4, 25)]
    assert list(trace.y) == [float(y) for y in range(4, 25)]
    assert fig.layout.title.text == "Air Quality Index (PM 2.5)"


def test_format_frame():
    series = WindowedSeries()
    assert "no samples yet" in format_frame(series)
    series.push(101.0)
    frame = format_frame(series)
    assert "window=[0 .. 10 .. 20]" in frame
    assert "points=1/21" in frame
    assert "AQI=101 (unhealthy for sensitive groups)" in frame
