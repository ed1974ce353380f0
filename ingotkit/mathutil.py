"""Numeric helpers: approximate comparison, number properties, interpolation and mapping."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable, Iterable, Sequence

__all__ = [
    "approx_eq",
    "is_odd",
    "is_even",
    "is_prime",
    "lerp",
    "lerp_vec",
    "min_pos",
    "max_pos",
    "min_neg",
    "max_neg",
    "normalize",
    "unnormalize",
    "linear_map",
    "linear_map_vec",
]


def _require_number(name: str, value: float) -> None:
    if math.isnan(value):
        raise ValueError(f"{name} must be a number!")


def _zip_same_length(name: str, *vectors: Sequence[float]) -> Iterable[tuple[float, ...]]:
    if len({len(vector) for vector in vectors}) > 1:
        raise ValueError(f"{name} needs vectors of the same length!")
    return zip(*vectors)


def approx_eq(a, b, epsilon: float = sys.float_info.epsilon) -> bool:
    """Check whether ``b`` lies within ``[(1 - epsilon) * a, (1 + epsilon) * a]``.

    Sequences are compared component by component.
    """
    if isinstance(a, Sequence) and isinstance(b, Sequence):
        return len(a) == len(b) and all(approx_eq(x, y, epsilon) for x, y in zip(a, b))
    return (1.0 - epsilon) * a <= b <= (1.0 + epsilon) * a


def is_odd(n: int) -> bool:
    """Check whether ``n`` is an odd number."""
    return n & 1 == 1


def is_even(n: int) -> bool:
    """Check whether ``n`` is an even number."""
    return n & 1 == 0


def is_prime(n: int) -> bool:
    """Check whether ``n`` is a prime number."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if is_even(n):
        return False
    if n < 9:
        return True
    root = math.isqrt(n)
    if root * root == n:
        return False
    if n < 15:
        return True
    return all(n % divisor for divisor in range(3, root + 1, 2))


def lerp(t: float, a: float, b: float) -> float:
    """Linearly interpolate: ``a`` at ``t`` = 0 and ``b`` at ``t`` = 1."""
    _require_number("t", t)
    _require_number("a", a)
    _require_number("b", b)
    return (b - a) * t + a


def lerp_vec(t: float, a: Sequence[float], b: Sequence[float]) -> tuple[float, ...]:
    """Linearly interpolate two vectors component by component."""
    _require_number("t", t)
    return tuple(lerp(t, x, y) for x, y in _zip_same_length("lerp_vec", a, b))


def _checked_values(values: Iterable[float]) -> list[float]:
    numbers = list(values)
    if any(math.isnan(value) for value in numbers):
        raise ValueError("values must contain numbers only!")
    return numbers


def _scan(
    values: Iterable[float],
    eligible: Callable[[float], bool],
    beats: Callable[[float, float], bool],
    start: float,
) -> tuple[int, float] | None:
    best_index: int | None = None
    best = start
    for index, value in enumerate(_checked_values(values)):
        if eligible(value) and beats(value, best):
            best_index, best = index, value
    return None if best_index is None else (best_index, best)


def min_pos(values: Iterable[float]) -> tuple[int, float] | None:
    """Find the smallest non-negative value and its index, or ``None``."""
    return _scan(values, lambda v: v >= 0.0, operator.lt, math.inf)


def max_pos(values: Iterable[float]) -> tuple[int, float] | None:
    """Find the largest non-negative value and its index, or ``None``."""
    return _scan(values, lambda v: v >= 0.0, operator.gt, -math.inf)


def min_neg(values: Iterable[float]) -> tuple[int, float] | None:
    """Find the smallest negative value and its index, or ``None``."""
    return _scan(values, lambda v: v < 0.0, operator.lt, math.inf)


def max_neg(values: Iterable[float]) -> tuple[int, float] | None:
    """Find the largest negative value and its index, or ``None``."""
    return _scan(values, lambda v: v < 0.0, operator.gt, -math.inf)


def normalize(value: float, start: float, end: float) -> float:
    """Map ``value`` from the range ``start``..``end`` onto 0..1."""
    return (value - start) / (end - start)


def unnormalize(t: float, start: float, end: float) -> float:
    """Map ``t`` from 0..1 onto the range ``start``..``end``."""
    return start + t * (end - start)


def linear_map(
    value: float, from_range: tuple[float, float], to_range: tuple[float, float]
) -> float:
    """Linearly map ``value`` from one ``(start, end)`` range to another."""
    _require_number("value", value)
    return unnormalize(normalize(value, *from_range), *to_range)


def linear_map_vec(
    value: Sequence[float],
    from_position: Sequence[float],
    from_size: Sequence[float],
    to_position: Sequence[float],
    to_size: Sequence[float],
) -> tuple[float, ...]:
    """Linearly map a point from one region, given by position and size, to another."""
    return tuple(
        linear_map(v, (fp, fp + fs), (tp, tp + ts))
        for v, fp, fs, tp, ts in _zip_same_length(
            "linear_map_vec", value, from_position, from_size, to_position, to_size
        )
    )