"""Hyperbolic trigonometric primitives on plain floats.

Hand-written cosh/sinh/tanh and their inverses, together with a log1p
correction, in the spirit of P.J. Plauger, "The Standard C Library".

All functions are total: domain errors come back as nan or ±inf instead of
raising. The thresholds 2^28 and 2^-28 are tuned for IEEE754 double
precision; above 2^28 the ``1/x`` terms vanish and below 2^-28 the
functions equal their argument to working precision.
"""

from __future__ import annotations

import math
import sys

LN2 = math.log(2.0)

_LARGE = 2.0 ** 28
_SMALL = 2.0 ** -28

# exp(x) overflows above this
_MAX_EXP_ARG = math.log(sys.float_info.max)

# sinh/tanh use the rational approximation below these crossovers
SINH_CROSSOVER = 1.0
TANH_CROSSOVER = 0.54930614433405


def _exp(x: float) -> float:
    """exp(x), returning inf instead of raising OverflowError."""
    if x > _MAX_EXP_ARG:
        return math.inf
    return math.exp(x)


def _log(x: float) -> float:
    """Natural log with IEEE results at and below zero."""
    if x > 0.0 or x != x:
        return math.log(x)
    if x == 0.0:
        return -math.inf
    return math.nan


def _is_inf_or_nan(x: float) -> bool:
    return math.isinf(x) or math.isnan(x)


def cosh(x: float) -> float:
    """Hyperbolic cosine. ``cosh(0) == 1.0`` exactly."""
    if x == 0.0:
        return 1.0
    if x < 0.0:
        x = -x
    e = _exp(x)
    return e / 2.0 + 0.5 / e


def sinh(x: float) -> float:
    """Hyperbolic sine.

    For ``|x| < 1`` a minimax rational polynomial avoids the cancellation in
    ``(e^x - e^-x)/2``.
    """
    if x == 0.0:
        return 0.0
    neg = x < 0.0
    if neg:
        x = -x
    if x < SINH_CROSSOVER:
        y = x * x
        x = x + x * y * (
            ((-0.78966127417357099479e0 * y
              - 0.16375798202630751372e3) * y
             - 0.11563521196851768270e5) * y
            - 0.35181283430177117881e6
        ) / (
            ((0.10000000000000000000e1 * y
              - 0.27773523119650701667e3) * y
             + 0.36162723109421836460e5) * y
            - 0.21108770058106271242e7
        )
    else:
        e = _exp(x)
        x = e / 2.0 - 0.5 / e
    return -x if neg else x


def tanh(x: float) -> float:
    """Hyperbolic tangent, rational approximation below ~0.549."""
    if x == 0.0:
        return 0.0
    neg = x < 0.0
    if neg:
        x = -x
    if x < TANH_CROSSOVER:
        y = x * x
        x = x + x * y * (
            (-0.96437492777225469787e0 * y
             - 0.99225929672236083313e2) * y
            - 0.16134119023996228053e4
        ) / (
            ((0.10000000000000000000e1 * y
              + 0.11274474380534949335e3) * y
             + 0.22337720718962312926e4) * y
            + 0.48402357071988688686e4
        )
    else:
        e = _exp(x)
        x = 1.0 - 2.0 / (e * e + 1.0)
    return -x if neg else x


def log1p(x: float) -> float:
    """ln(1 + x), accurate near zero.

    The rounding error of ``1 + x`` is compensated by the factor
    ``x / ((1 + x) - 1)``.
    """
    u = 1.0 + x
    if u == 1.0:
        return x
    if math.isinf(u):
        return u
    if u <= 0.0:
        return _log(u)
    return math.log(u) * x / (u - 1.0)


def acosh(x: float) -> float:
    """Inverse hyperbolic cosine on ``x >= 1``; nan below 1."""
    if x < 1.0:
        return math.nan
    if x > _LARGE:
        if _is_inf_or_nan(x):
            return x + x
        return LN2 + math.log(x)
    if x == 1.0:
        return 0.0
    if x > 2.0:
        return math.log(2.0 * x - 1.0 / (x + math.sqrt(x * x - 1.0)))
    # 1 < x <= 2
    t = x - 1.0
    return log1p(t + math.sqrt(2.0 * t + t * t))


def asinh(x: float) -> float:
    """Inverse hyperbolic sine (odd)."""
    y = abs(x)
    if y < _SMALL:
        return x
    if y > _LARGE:
        if _is_inf_or_nan(x):
            return x + x
        a = LN2 + math.log(y)
    elif y > 2.0:
        a = math.log(2.0 * y + 1.0 / (y + math.sqrt(1.0 + y * y)))
    else:
        y2 = y * y
        a = log1p(y + y2 / (1.0 + math.sqrt(1.0 + y2)))
    return -a if x < 0.0 else a


def atanh(x: float) -> float:
    """Inverse hyperbolic tangent on (-1, 1); ±inf at ±1, nan beyond."""
    if x != x:
        return x
    y = abs(x)
    if y < 0.5:
        if y < _SMALL:
            return x
        a = 2.0 * y
        a = 0.5 * log1p(a + a * y / (1.0 - y))
    elif y < 1.0:
        a = 0.5 * log1p(2.0 * y / (1.0 - y))
    elif y > 1.0:
        return math.nan
    else:
        return math.copysign(math.inf, x)
    return -a if x < 0.0 else a


__all__ = [
    "LN2",
    "SINH_CROSSOVER",
    "TANH_CROSSOVER",
    "cosh",
    "sinh",
    "tanh",
    "log1p",
    "acosh",
    "asinh",
    "atanh",
]
