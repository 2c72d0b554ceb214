import os
from unittest.mock import MagicMock

import pytest
from PyQt6.QtWidgets import QApplication

from model.harmonics import compute_levels
from ui.harmonic_chart import HarmonicChartWidget, HarmonicChartWindow

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def chart(app):
    c = HarmonicChartWidget()
    c.resize(640, 127)
    return c


def test_chart_initially_silent(chart):
    assert chart.levels == (0,) * 64


def test_set_levels_emits_signal(chart):
    handler = MagicMock()
    chart.levels_changed.connect(handler)
    chart.set_levels(compute_levels("saw"))
    assert handler.called
    assert chart.levels == compute_levels("saw")


def test_set_levels_rejects_wrong_length(chart):
    with pytest.raises(ValueError):
        chart.set_levels([1, 2, 3])


def test_bar_heights_follow_levels(chart):
    chart.set_levels(compute_levels("sine"))
    rects = chart._bar_rects()
    assert len(rects) == 64
    x, y, w, h = rects[0]
    assert h == pytest.approx(chart.height())
    assert y == pytest.approx(0)
    assert all(r[3] == 0 for r in rects[1:])


def test_bars_left_to_right(chart):
    chart.set_levels(compute_levels("saw"))
    xs = [r[0] for r in chart._bar_rects()]
    assert xs == sorted(xs)


def test_chart_paints(chart):
    chart.set_levels(compute_levels("triangle"))
    pixmap = chart.grab()
    assert not pixmap.isNull()


def test_window_wraps_chart(app):
    levels = compute_levels("square")
    window = HarmonicChartWindow(levels, title="square")
    assert window.chart.levels == levels
    assert window.title_label.text() == "square"
    assert window.windowTitle() == "square"
