"""Generate Kawai K5000 harmonic levels for a waveform and print sendmidi commands.

Usage:
    python main.py -w saw
    python main.py -w custom 1,1,0,0.5,0,0,0 -c 2
    python main.py --preset pulse20 --format list
"""
from __future__ import annotations
import argparse
import sys

import numpy as np

from core.config import AppConfig
from core.logger import AppLogger
from midi.sysex import NUM_SOURCES, build_table_payloads, format_sendmidi_command
from model.custom_wave import PRESETS, CustomParams, custom_log2_magnitude
from model.harmonics import (
    HARMONIC_COUNT, WAVEFORMS, compute_levels, saw_amplitudes, triangle_amplitudes,
)
from ui.text_chart import CHART_STYLES, render_chart


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute K5000 ADD harmonic levels and print SysEx send commands",
    )
    shape = parser.add_mutually_exclusive_group(required=True)
    shape.add_argument("-w", "--waveform",
                       help=f"Waveform model: {', '.join(WAVEFORMS)}")
    shape.add_argument("--preset", choices=sorted(PRESETS),
                       help="Use a named custom-waveform parameter set")
    parser.add_argument("params", nargs="?", default=None,
                        help="Custom waveform parameters a,b,c,xp,d,e,yp")
    parser.add_argument("-d", "--device", default=config.midi_device,
                        help=f"sendmidi device name (default: {config.midi_device})")
    parser.add_argument("-c", "--channel", type=int, default=config.channel,
                        help=f"MIDI channel 1-16 (default: {config.channel})")
    parser.add_argument("-g", "--group", type=int, default=config.group,
                        help=f"Tone group (default: {config.group})")
    parser.add_argument("-s", "--source", type=int, default=config.source,
                        help=f"Tone source 0-{NUM_SOURCES - 1} (default: {config.source})")
    parser.add_argument("-f", "--format", choices=CHART_STYLES, default=config.chart_format,
                        help=f"Level table rendering (default: {config.chart_format})")
    parser.add_argument("--gui", action="store_true",
                        help="Also show the level table in a chart window")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log amplitude and level for every harmonic")
    return parser


def _amplitude_details(waveform: str, params: CustomParams | None) -> list[str] | None:
    if waveform == "saw":
        return [f"a = {a}" for a in saw_amplitudes()]
    if waveform == "triangle":
        return [f"a = {a}" for a in triangle_amplitudes()]
    if waveform == "custom" and params is not None:
        magnitudes = custom_log2_magnitude(np.arange(1, HARMONIC_COUNT + 1), params)
        return [f"log2|a| = {v:.3f}" for v in magnitudes]
    return None


def run(args: argparse.Namespace, logger: AppLogger) -> None:
    waveform = args.waveform
    params: CustomParams | None = None
    if args.preset:
        waveform = "custom"
        params = PRESETS[args.preset]
    elif waveform == "custom" and args.params is not None:
        params = CustomParams.parse(args.params)

    levels = compute_levels(waveform, params)
    logger.general(f"waveform={waveform} channel={args.channel} "
                   f"group={args.group} source={args.source}")
    if args.verbose:
        details = _amplitude_details(waveform, params)
        for n, level in enumerate(levels, start=1):
            if details is not None:
                logger.levels(f"{n}: {details[n - 1]}, level = {level}")
            else:
                logger.levels(f"{n}: level = {level}")

    # Channel is 1-based on the command line, 0-based on the wire
    payloads = build_table_payloads(levels, args.channel - 1, args.group, args.source)
    logger.sysex(f"{len(payloads)} messages for device '{args.device}'")

    print(render_chart(levels, args.format))
    for payload in payloads:
        print(format_sendmidi_command(args.device, payload))

    if args.gui:
        from ui.harmonic_chart import show_levels
        show_levels(levels, title=f"{waveform} (channel {args.channel})")


def main(argv: list[str] | None = None) -> None:
    config = AppConfig()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    if not (1 <= args.channel <= 16):
        parser.error(f"MIDI channel must be 1-16, got {args.channel}")
    if not (0 <= args.source < NUM_SOURCES):
        parser.error(f"Source must be 0-{NUM_SOURCES - 1}, got {args.source}")

    logger = AppLogger(echo=args.verbose)
    try:
        run(args, logger)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
