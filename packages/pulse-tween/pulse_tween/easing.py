"""Easing functions for timeline interpolation.

Back and elastic curves overshoot [0, 1] on purpose; callers must not clamp.
Constants follow the CreateJS Ease defaults.
"""
from __future__ import annotations

import math
from typing import Callable, Union

Easing = Callable[[float], float]

_TAU = math.pi * 2


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def make_back_in(amount: float) -> Easing:
    def back_in(t: float) -> float:
        return t * t * ((amount + 1) * t - amount)

    return back_in


def make_back_out(amount: float) -> Easing:
    def back_out(t: float) -> float:
        t -= 1
        return t * t * ((amount + 1) * t + amount) + 1

    return back_out


def make_back_in_out(amount: float) -> Easing:
    amount *= 1.525

    def back_in_out(t: float) -> float:
        t *= 2
        if t < 1:
            return 0.5 * (t * t * ((amount + 1) * t - amount))
        t -= 2
        return 0.5 * (t * t * ((amount + 1) * t + amount) + 2)

    return back_in_out


def make_elastic_in(amplitude: float, period: float) -> Easing:
    s = period / _TAU * math.asin(1 / amplitude)

    def elastic_in(t: float) -> float:
        if t == 0 or t == 1:
            return t
        t -= 1
        return -(amplitude * 2 ** (10 * t) * math.sin((t - s) * _TAU / period))

    return elastic_in


def make_elastic_out(amplitude: float, period: float) -> Easing:
    s = period / _TAU * math.asin(1 / amplitude)

    def elastic_out(t: float) -> float:
        if t == 0 or t == 1:
            return t
        return amplitude * 2 ** (-10 * t) * math.sin((t - s) * _TAU / period) + 1

    return elastic_out


def make_elastic_in_out(amplitude: float, period: float) -> Easing:
    s = period / _TAU * math.asin(1 / amplitude)

    def elastic_in_out(t: float) -> float:
        t *= 2
        if t < 1:
            t -= 1
            return -0.5 * (amplitude * 2 ** (10 * t) * math.sin((t - s) * _TAU / period))
        t -= 1
        return amplitude * 2 ** (-10 * t) * math.sin((t - s) * _TAU / period) * 0.5 + 1

    return elastic_in_out


back_in = make_back_in(1.7)
back_out = make_back_out(1.7)
back_in_out = make_back_in_out(1.7)
elastic_in = make_elastic_in(1, 0.3)
elastic_out = make_elastic_out(1, 0.3)
elastic_in_out = make_elastic_in_out(1, 0.3 * 1.5)


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "back_in": back_in,
    "back_out": back_out,
    "back_in_out": back_in_out,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_in_out": elastic_in_out,
}


def resolve_easing(easing: Union[str, Easing]) -> Easing:
    """Look up an easing by name, or pass a callable straight through."""
    if isinstance(easing, str):
        try:
            return EASINGS[easing]
        except KeyError:
            raise KeyError(f"Unknown easing {easing!r}") from None
    if not callable(easing):
        raise TypeError(f"easing must be a name or callable, got {type(easing).__name__}")
    return easing
