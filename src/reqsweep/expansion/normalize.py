"""Axis normalization: raw descriptors to explicit string axes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from reqsweep.constants import DEFAULT_MAX_AXIS_VALUES
from reqsweep.exceptions import InvalidRangeError, InvalidValueError
from reqsweep.expansion.axes import ExplicitList, NumericRange, coerce_raw_axis


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def range_length(start: int, step: int, stop: int) -> int:
    """Number of values in the inclusive range (0 when start > stop)."""
    if start > stop:
        return 0
    return (stop - start) // step + 1


def _expand_range(axis: NumericRange, axis_index: int, max_axis_values: int) -> list[str]:
    start, step, stop = axis.start, axis.step, axis.stop
    if not all(_is_int(bound) for bound in (start, step, stop)):
        raise InvalidRangeError(
            axis_index, "bounds must be integers", start=start, step=step, stop=stop
        )
    if step <= 0:
        raise InvalidRangeError(
            axis_index, "step must be positive", start=start, step=step, stop=stop
        )

    length = range_length(start, step, stop)
    if length > max_axis_values:
        raise InvalidRangeError(
            axis_index,
            f"expands to {length} values, cap is {max_axis_values}",
            start=start,
            step=step,
            stop=stop,
        )
    return [str(n) for n in range(start, stop + 1, step)]


def _check_explicit(axis: ExplicitList, axis_index: int) -> list[str]:
    for value_index, value in enumerate(axis.values):
        if not isinstance(value, str):
            raise InvalidValueError(axis_index, value_index, value)
    return list(axis.values)


def normalize(
    raw_axes: Sequence[Any],
    *,
    max_axis_values: int = DEFAULT_MAX_AXIS_VALUES,
) -> list[list[str]]:
    """Convert raw axis descriptors into explicit, ordered string axes.

    Numeric ranges expand inclusively (``(2, 2, 8)`` -> ``["2", "4", "6", "8"]``)
    using canonical base-10 formatting. Explicit lists must already hold
    strings. Empty axes are passed through; ``generate`` rejects them.

    Args:
        raw_axes: Axis descriptors in axis order. Each is an ``ExplicitList``,
            a ``NumericRange``, or a plain value accepted by ``coerce_raw_axis``.
        max_axis_values: Largest number of values a single range may expand to.

    Returns:
        One list of strings per input axis, in the same order.

    Raises:
        InvalidValueError: An explicit list holds a non-string value.
        InvalidRangeError: A range has non-integer bounds, a non-positive step,
            or would exceed ``max_axis_values``.
    """
    axes: list[list[str]] = []
    for axis_index, raw in enumerate(raw_axes):
        axis = coerce_raw_axis(raw, axis_index)
        if isinstance(axis, NumericRange):
            axes.append(_expand_range(axis, axis_index, max_axis_values))
        else:
            axes.append(_check_explicit(axis, axis_index))
    return axes
