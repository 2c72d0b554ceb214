from __future__ import annotations
from typing import Sequence

CHART_STYLES = ("graph", "list")


def render_level_list(levels: Sequence[int]) -> str:
    return ", ".join(str(level) for level in levels)


def render_vertical_chart(levels: Sequence[int]) -> str:
    """One line per harmonic with a bar of asterisks.

    Levels 0-127 are bucketed by ten and each bucket is six characters wide,
    so a full-scale bar is 72 characters.
    """
    lines = []
    for n, level in enumerate(levels, start=1):
        lines.append(f"{n:2}: " + "*" * ((level // 10) * 6))
    return "\n".join(lines) + "\n"


def render_chart(levels: Sequence[int], style: str = "graph") -> str:
    if style == "graph":
        return render_vertical_chart(levels)
    if style == "list":
        return render_level_list(levels)
    raise ValueError(f"Unknown chart style '{style}' (expected one of: {', '.join(CHART_STYLES)})")
