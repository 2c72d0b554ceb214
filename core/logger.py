from __future__ import annotations
import sys
from PyQt6.QtCore import QObject, pyqtSignal


class AppLogger(QObject):
    message_logged = pyqtSignal(str, str)  # category, message

    def __init__(self, echo: bool = True, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._echo = echo

    def log(self, category: str, message: str) -> None:
        # stdout carries the chart and sendmidi lines
        if self._echo:
            print(f"[{category}] {message}", file=sys.stderr, flush=True)
        self.message_logged.emit(category, message)

    def levels(self, message: str) -> None:
        self.log("LEVELS", message)

    def sysex(self, message: str) -> None:
        self.log("SYSEX", message)

    def general(self, message: str) -> None:
        self.log("GENERAL", message)
