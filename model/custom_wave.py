from __future__ import annotations
import math
from dataclasses import astuple, dataclass

import numpy as np

PARAM_NAMES = ("a", "b", "c", "xp", "d", "e", "yp")


class ParameterParseError(ValueError):
    """Custom waveform parameter text could not be parsed."""


class DomainError(ValueError):
    """An amplitude could not be evaluated to a finite, quantizable number."""


@dataclass(frozen=True)
class CustomParams:
    a: float
    b: float
    c: float
    xp: float
    d: float
    e: float
    yp: float

    @classmethod
    def parse(cls, text: str) -> CustomParams:
        """Parse ``"a,b,c,xp,d,e,yp"``; all seven values are mandatory."""
        tokens = [t.strip() for t in text.split(",")]
        if len(tokens) != len(PARAM_NAMES):
            raise ParameterParseError(
                f"Expected {len(PARAM_NAMES)} comma-separated values "
                f"({','.join(PARAM_NAMES)}), got {len(tokens)}"
            )
        values: list[float] = []
        for index, (name, token) in enumerate(zip(PARAM_NAMES, tokens), start=1):
            try:
                value = float(token)
            except ValueError:
                raise ParameterParseError(
                    f"Parameter {index} ({name}) is not a number: {token!r}"
                ) from None
            if not math.isfinite(value):
                raise ParameterParseError(
                    f"Parameter {index} ({name}) must be finite, got {token!r}"
                )
            values.append(value)
        return cls(*values)

    def as_tuple(self) -> tuple[float, ...]:
        return astuple(self)


# Shapes the custom formula was originally tuned against
PRESETS: dict[str, CustomParams] = {
    "saw": CustomParams(1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    "square": CustomParams(1.0, 1.0, 0.0, 0.5, 0.0, 0.0, 0.0),
    "triangle": CustomParams(2.0, 1.0, 0.0, 0.5, 0.0, 0.0, 0.0),
    "pulse20": CustomParams(1.0, 1.0, 0.0, 0.2, 0.0, 0.0, 0.0),
}


def custom_amplitude(n, params: CustomParams):
    """Amplitude of harmonic ``n`` (1-based) under the custom formula.

        (1 / a^n) * sin(n*pi*xp)^b * cos(n*pi*xp)^c * sin(n*pi*yp)^d * cos(n*pi*yp)^e

    ``n`` may be an int or a numpy array of harmonic numbers; the result is a
    float or an array of the same shape.  Raises DomainError instead of
    returning NaN or infinity, e.g. for a negative base raised to a
    non-integer exponent.
    """
    if params.a == 0:
        raise DomainError("Custom parameter 'a' must be nonzero (1/a^n is undefined)")

    harmonics = np.asarray(n, dtype=np.float64)
    x = harmonics * np.pi * params.xp
    y = harmonics * np.pi * params.yp

    with np.errstate(all="ignore"):
        module1 = 1.0 / np.power(params.a, harmonics)
        module2 = np.power(np.sin(x), params.b) * np.power(np.cos(x), params.c)
        module3 = np.power(np.sin(y), params.d) * np.power(np.cos(y), params.e)
        amplitude = module1 * module2 * module3

    finite = np.isfinite(amplitude)
    if not np.all(finite):
        bad = np.atleast_1d(harmonics)[~np.atleast_1d(finite)]
        listed = ", ".join(str(int(h)) for h in bad)
        raise DomainError(
            f"Custom formula is undefined for harmonic(s) {listed} "
            f"with parameters {params.as_tuple()}"
        )

    if amplitude.ndim == 0:
        return float(amplitude)
    return amplitude


def _log2_power(base, exponent: float):
    """log2|base^exponent| and a mask of entries where the power is undefined."""
    if exponent == 0:
        return np.zeros_like(base), np.zeros(base.shape, dtype=bool)
    undefined = (base == 0) & (exponent < 0)
    if not float(exponent).is_integer():
        undefined |= base < 0
    with np.errstate(divide="ignore", invalid="ignore"):
        return exponent * np.log2(np.abs(base)), undefined


def custom_log2_magnitude(n, params: CustomParams):
    """log2 of |custom_amplitude(n, params)|, summed term by term.

    Never forms 1/a^n or the trig powers directly, so extreme parameters
    cannot overflow.  A zero factor gives -inf.  Raises DomainError where the
    formula itself is undefined.
    """
    if params.a == 0:
        raise DomainError("Custom parameter 'a' must be nonzero (1/a^n is undefined)")

    harmonics = np.atleast_1d(np.asarray(n, dtype=np.float64))
    x = harmonics * np.pi * params.xp
    y = harmonics * np.pi * params.yp

    total = -harmonics * np.log2(abs(params.a))
    undefined = np.zeros(harmonics.shape, dtype=bool)
    for base, exponent in ((np.sin(x), params.b), (np.cos(x), params.c),
                           (np.sin(y), params.d), (np.cos(y), params.e)):
        term, bad = _log2_power(base, exponent)
        total = total + term
        undefined |= bad

    if np.any(undefined):
        listed = ", ".join(str(int(h)) for h in harmonics[undefined])
        raise DomainError(
            f"Custom formula is undefined for harmonic(s) {listed} "
            f"with parameters {params.as_tuple()}"
        )

    if np.ndim(n) == 0:
        return float(total[0])
    return total
