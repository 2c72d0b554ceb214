from __future__ import annotations
import json
from pathlib import Path

_DEFAULTS = {
    "midi_device": "MIDI Out",
    "channel": 1,
    "group": 0,
    "source": 0,
    "chart_format": "graph",
}


class AppConfig:
    """CLI defaults, read from a JSON file when one exists."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "k5000harmonics" / "config.json"
        self.midi_device: str = _DEFAULTS["midi_device"]
        self.channel: int = _DEFAULTS["channel"]
        self.group: int = _DEFAULTS["group"]
        self.source: int = _DEFAULTS["source"]
        self.chart_format: str = _DEFAULTS["chart_format"]
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text())
            if not isinstance(data, dict):
                return
            for key, default in _DEFAULTS.items():
                value = data.get(key)
                # Wrong-typed values (null, 2.5, true) keep the default
                if isinstance(value, type(default)) and not isinstance(value, bool):
                    setattr(self, key, value)
        except (json.JSONDecodeError, OSError):
            pass

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {key: getattr(self, key) for key in _DEFAULTS}
        self._path.write_text(json.dumps(data, indent=2))
