"""TF-IDF Math Utilities - IEEE-754 Arithmetic Helpers.

Python's ``math.log`` and ``/`` raise on zero and negative inputs. The
weighting formulas instead surface those cases as non-finite floats, so
every formula routes through these helpers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import math

INF = float("inf")
NAN = float("nan")


def ln(x: float) -> float:
    """Natural logarithm with IEEE-754 semantics.

    ln(0) = -inf, ln(+inf) = +inf, ln(x < 0) = nan, ln(nan) = nan.
    """
    if x > 0:
        return math.log(x)
    if x == 0:
        return -INF
    return NAN


def divide(numerator: float, denominator: float) -> float:
    """Floating point division with IEEE-754 semantics for a zero divisor.

    x / 0 is +inf or -inf by the sign of x, and 0 / 0 is nan.
    """
    numerator = float(numerator)
    denominator = float(denominator)
    if denominator != 0:
        return numerator / denominator
    if math.isnan(numerator) or numerator == 0:
        return NAN
    return math.copysign(INF, numerator) * math.copysign(1.0, denominator)


__all__ = ["INF", "NAN", "ln", "divide"]
