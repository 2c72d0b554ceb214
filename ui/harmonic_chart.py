from __future__ import annotations
from typing import Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QPalette
from PyQt6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from model.harmonics import HARMONIC_COUNT, MAX_LEVEL


class HarmonicChartWidget(QWidget):
    """Custom-painted bar chart of a 64-harmonic level table."""

    levels_changed = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._levels: tuple[int, ...] = (0,) * HARMONIC_COUNT
        self.setMinimumSize(HARMONIC_COUNT * 4, 120)

    @property
    def levels(self) -> tuple[int, ...]:
        return self._levels

    def set_levels(self, levels: Sequence[int]) -> None:
        if len(levels) != HARMONIC_COUNT:
            raise ValueError(
                f"Level table must have {HARMONIC_COUNT} entries, got {len(levels)}"
            )
        self._levels = tuple(levels)
        self.levels_changed.emit()
        self.update()

    # -- Geometry helpers --

    def _bar_rects(self) -> list[tuple[float, float, float, float]]:
        """Return (x, y, w, h) for each harmonic bar, harmonic 1 leftmost."""
        w = self.width()
        h = self.height()
        slot = w / HARMONIC_COUNT
        bar_w = max(1.0, slot * 0.8)
        rects = []
        for i, level in enumerate(self._levels):
            bar_h = h * max(0, min(MAX_LEVEL, level)) / MAX_LEVEL
            rects.append((i * slot, h - bar_h, bar_w, bar_h))
        return rects

    # -- Painting --

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        pal = self.palette()
        background = QColor(pal.color(QPalette.ColorRole.Base))
        accent = QColor(pal.color(QPalette.ColorRole.Highlight))
        border = QColor(pal.color(QPalette.ColorRole.Mid))

        painter.fillRect(self.rect(), background)
        painter.setBrush(accent)
        painter.setPen(border)
        for x, y, w, h in self._bar_rects():
            if h > 0:
                painter.drawRect(int(x), int(y), int(w), int(h))
        painter.end()


class HarmonicChartWindow(QWidget):
    def __init__(self, levels: Sequence[int], title: str = "",
                 parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title or "Harmonic Levels")
        layout = QVBoxLayout(self)
        self.title_label = QLabel(title)
        layout.addWidget(self.title_label)
        self.chart = HarmonicChartWidget()
        self.chart.set_levels(levels)
        layout.addWidget(self.chart)
        self.resize(640, 320)


def show_levels(levels: Sequence[int], title: str = "") -> int:
    """Open the chart window and block until it is closed."""
    app = QApplication.instance() or QApplication([])
    window = HarmonicChartWindow(levels, title)
    window.show()
    return app.exec()
