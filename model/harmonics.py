from __future__ import annotations
import math

import numpy as np

from model.custom_wave import (
    CustomParams,
    DomainError,
    ParameterParseError,
    custom_log2_magnitude,
)

HARMONIC_COUNT = 64
MAX_LEVEL = 127
LEVEL_STEPS_PER_OCTAVE = 8  # K5000 level code drops by 8 for each halving of amplitude

WAVEFORMS = ("sine", "saw", "square", "triangle", "custom", "random")


class UnsupportedWaveformError(ValueError):
    pass


def harmonic_numbers() -> range:
    return range(1, HARMONIC_COUNT + 1)


# -- Quantization --

def level_of(amplitude: float) -> int:
    """Raw K5000 level for an amplitude: floor(log2|a| * 8 + 127).

    Not clamped; very small or very large amplitudes fall outside 0-127.
    """
    if amplitude == 0 or not math.isfinite(amplitude):
        raise DomainError(f"Cannot quantize amplitude {amplitude!r}")
    return math.floor(math.log2(abs(amplitude)) * LEVEL_STEPS_PER_OCTAVE + MAX_LEVEL)


def clamp_level(value: int) -> int:
    return max(0, min(MAX_LEVEL, value))


def quantize(amplitude: float) -> int:
    """Clamped level for an amplitude.  A silent (zero) harmonic is level 0."""
    if amplitude == 0:
        return 0
    return clamp_level(level_of(amplitude))


def level_from_log2(magnitude: float) -> int:
    """Clamped level from log2|amplitude|; -inf is a silent harmonic."""
    if math.isnan(magnitude):
        raise DomainError("Cannot quantize an undefined amplitude")
    if math.isinf(magnitude):
        return MAX_LEVEL if magnitude > 0 else 0
    return clamp_level(math.floor(magnitude * LEVEL_STEPS_PER_OCTAVE + MAX_LEVEL))


# -- Waveform models --

def sine_levels() -> tuple[int, ...]:
    return (MAX_LEVEL,) + (0,) * (HARMONIC_COUNT - 1)


def saw_amplitudes() -> tuple[float, ...]:
    return tuple(1.0 / n for n in harmonic_numbers())


def saw_levels() -> tuple[int, ...]:
    return tuple(quantize(a) for a in saw_amplitudes())


def square_levels() -> tuple[int, ...]:
    # Sawtooth with the even harmonics taken out
    saw = saw_levels()
    return tuple(
        level if n % 2 != 0 else 0
        for n, level in zip(harmonic_numbers(), saw)
    )


def triangle_amplitudes() -> tuple[float, ...]:
    """Signed amplitudes: +-1/n^2 on odd harmonics, alternating sign, 0 on even."""
    amplitudes: list[float] = []
    sign = 1.0
    for n in harmonic_numbers():
        if n % 2 != 0:
            amplitudes.append(sign / (n * n))
            sign = -sign
        else:
            amplitudes.append(0.0)
    return tuple(amplitudes)


def triangle_levels() -> tuple[int, ...]:
    return tuple(
        quantize(a) if n % 2 != 0 else 0
        for n, a in zip(harmonic_numbers(), triangle_amplitudes())
    )


def custom_levels(params: CustomParams) -> tuple[int, ...]:
    magnitudes = custom_log2_magnitude(np.arange(1, HARMONIC_COUNT + 1), params)
    return tuple(level_from_log2(float(v)) for v in magnitudes)


def random_levels(rng: np.random.Generator | None = None) -> tuple[int, ...]:
    """Independent uniform levels in 0-127.

    Pass a seeded generator for reproducible tables; otherwise a fresh one is
    created for every call.
    """
    if rng is None:
        rng = np.random.default_rng()
    values = rng.integers(0, MAX_LEVEL + 1, size=HARMONIC_COUNT)
    return tuple(int(v) for v in values)


_FIXED_MODELS = {
    "sine": sine_levels,
    "saw": saw_levels,
    "square": square_levels,
    "triangle": triangle_levels,
}


def compute_levels(
    model: str,
    params: CustomParams | str | None = None,
    rng: np.random.Generator | None = None,
) -> tuple[int, ...]:
    """Return the 64-entry level table for a waveform selector.

    ``params`` is required for ``custom`` and may be given either parsed or as
    the raw ``"a,b,c,xp,d,e,yp"`` string.  ``rng`` is only used by ``random``.
    """
    if model == "custom":
        if params is None:
            raise ParameterParseError(
                "The custom waveform requires seven parameters: a,b,c,xp,d,e,yp"
            )
        if isinstance(params, str):
            params = CustomParams.parse(params)
        return custom_levels(params)
    if model == "random":
        return random_levels(rng)
    builder = _FIXED_MODELS.get(model)
    if builder is None:
        raise UnsupportedWaveformError(
            f"Unsupported waveform '{model}' (expected one of: {', '.join(WAVEFORMS)})"
        )
    return builder()
