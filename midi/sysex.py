from __future__ import annotations
from typing import Sequence

import mido

KAWAI_ID = 0x40
FUNC_PARAM_SEND = 0x10   # one-parameter send
SYNTH_GROUP = 0x00
MACHINE_K5000 = 0x0A
ADD_WAVE_PARAM = 0x02    # "Single Tone ADD Wave Parameter"
SOURCE_GROUP_BASE = 0x40

SYSEX_START = 0xF0
SYSEX_END = 0xF7

HARMONICS_PER_TABLE = 64
NUM_SOURCES = 6  # sources 0-5


def build_harmonic_payload(harmonic: int, channel: int, level: int,
                           group: int = 0, source: int = 0) -> list[int]:
    """Unframed K5000 harmonic-level message (manufacturer ID + 11 bytes).

    ``harmonic`` and ``channel`` are 0-based.  Out-of-range values are
    narrowed to the field width instead of rejected.
    """
    return [
        KAWAI_ID,
        channel & 0x0F,               # MIDI channel 0-15
        FUNC_PARAM_SEND,
        SYNTH_GROUP,
        MACHINE_K5000,
        ADD_WAVE_PARAM,
        (SOURCE_GROUP_BASE + group) & 0x7F,
        source & 0x7F,                # 00h-05h
        harmonic & 0x7F,              # harmonic 0-63
        0x00,
        0x00,
        level & 0x7F,
    ]


encode_harmonic_message = build_harmonic_payload


def build_harmonic_sysex(harmonic: int, channel: int, level: int,
                         group: int = 0, source: int = 0) -> mido.Message:
    """Complete SysEx message; ``.bytes()`` is F0 <payload> F7."""
    data = build_harmonic_payload(harmonic, channel, level, group, source)
    return mido.Message("sysex", data=data)


def strip_framing(message: Sequence[int]) -> list[int]:
    if len(message) < 2 or message[0] != SYSEX_START or message[-1] != SYSEX_END:
        raise ValueError("Not a framed SysEx message (expected F0 ... F7)")
    return list(message[1:-1])


def build_table_payloads(levels: Sequence[int], channel: int,
                         group: int = 0, source: int = 0) -> list[list[int]]:
    """One payload per harmonic, harmonic 1 first."""
    if len(levels) != HARMONICS_PER_TABLE:
        raise ValueError(
            f"Level table must have {HARMONICS_PER_TABLE} entries, got {len(levels)}"
        )
    return [
        build_harmonic_payload(i, channel, level, group, source)
        for i, level in enumerate(levels)
    ]


def to_hex(payload: Sequence[int]) -> str:
    return " ".join(f"{b:02x}" for b in payload)


def format_sendmidi_command(device: str, payload: Sequence[int]) -> str:
    """Command line for the external ``sendmidi`` utility (not executed here)."""
    return f'sendmidi dev "{device}" hex syx {to_hex(payload)}'
