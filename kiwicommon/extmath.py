"""Numeric helpers."""

from __future__ import annotations

import math


def round_to(value: float, places: int) -> float:
    """Round to `places` decimal places, halves away from zero."""
    power = math.pow(10, places)
    digit = power * value
    fraction, _ = math.modf(digit)
    signed_fraction = math.copysign(fraction, value)
    round_on = math.copysign(0.5, value)
    if signed_fraction >= round_on:
        rounded = float(math.ceil(digit))
    else:
        rounded = float(math.floor(digit))
    return rounded / power