"""
Numeric helpers: rounding policies, sums and min/max reducers.

Rounding uses Python's floored modulo for the fractional part, so
``value % 1`` is always in ``[0, 1)``, negative values included. For
``-20.5`` the fraction is ``0.5`` and the lower neighbour is ``-21``.
Infinities and NaN have no integer neighbours and are returned unchanged.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Optional, TypeVar, Union

from helpkit.core.exceptions import RoundingModeError
from helpkit.core.logging import numeric_logger
from helpkit.core.models import RoundingMode

T = TypeVar("T")
Number = Union[int, float]


def _round_nearest(value: float) -> int:
    # Ties go towards +infinity
    return math.floor(value + 0.5)


def round_half_even(value: float) -> Number:
    """
    Round to the nearest integer, sending exact halves to the even neighbour.

    Also known as bankers' rounding.

    Examples:
        >>> round_half_even(20.5)
        20
        >>> round_half_even(21.5)
        22
    """
    if not math.isfinite(value):
        return value
    fraction = value % 1
    if fraction > 0.5:
        return _round_nearest(value)
    if fraction < 0.5:
        return math.floor(value)
    return _round_nearest(value / 2) * 2


def round_half_up(value: float) -> Number:
    """
    Round to the nearest integer, sending exact halves up.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(2.4)
        2
    """
    if not math.isfinite(value):
        return value
    fraction = value % 1
    if fraction >= 0.5:
        return _round_nearest(value)
    return math.floor(value)


def round_half_down(value: float) -> Number:
    """
    Round to the nearest integer, sending exact halves down.

    Examples:
        >>> round_half_down(2.5)
        2
        >>> round_half_down(2.6)
        3
    """
    if not math.isfinite(value):
        return value
    fraction = value % 1
    if fraction > 0.5:
        return _round_nearest(value)
    return math.floor(value)


_ROUNDERS = {
    RoundingMode.HALF_EVEN: round_half_even,
    RoundingMode.HALF_UP: round_half_up,
    RoundingMode.HALF_DOWN: round_half_down,
}


def round_value(value: float, mode: Union[RoundingMode, str] = RoundingMode.HALF_EVEN) -> Number:
    """
    Round ``value`` using the named rounding mode.

    Raises:
        RoundingModeError: If ``mode`` is not a known rounding mode
    """
    try:
        rounding_mode = RoundingMode(mode)
    except ValueError:
        raise RoundingModeError(
            mode, details={"allowed": [m.value for m in RoundingMode]}
        ) from None

    result = _ROUNDERS[rounding_mode](value)
    numeric_logger.debug("Rounded value", value=value, mode=rounding_mode.value, result=result)
    return result


def sum_by(items: Iterable[T], get_value: Callable[[T], Number]) -> Number:
    """
    Sum the values computed by ``get_value``; 0 for no items.

    Example:
        >>> sum_by([{"price": 1}, {"price": 2}], lambda x: x["price"])
        3
    """
    return sum((get_value(item) for item in items), 0)


def by_min(get_value: Callable[[T], Optional[Number]]) -> Callable[[T, T], T]:
    """
    Reducer that keeps the item with the smallest value.

    Items without a value lose to any item with one; ties keep the left item.

    Example:
        >>> from functools import reduce
        >>> reduce(by_min(lambda x: x["price"]), [{"price": 1}, {"price": 2}])
        {'price': 1}
    """

    def reducer(a: T, b: T) -> T:
        value_a = get_value(a)
        value_b = get_value(b)
        value_a = math.inf if value_a is None else value_a
        value_b = math.inf if value_b is None else value_b
        return b if value_b < value_a else a

    return reducer


def by_max(get_value: Callable[[T], Optional[Number]]) -> Callable[[T, T], T]:
    """Reducer that keeps the item with the largest value; see ``by_min``."""

    def reducer(a: T, b: T) -> T:
        value_a = get_value(a)
        value_b = get_value(b)
        value_a = -math.inf if value_a is None else value_a
        value_b = -math.inf if value_b is None else value_b
        return b if value_b > value_a else a

    return reducer


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    """Bound ``value`` to ``[minimum, maximum]``."""
    return min(max(value, minimum), maximum)
