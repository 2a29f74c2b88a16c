"""Cartesian tuple generation over normalized axes.

Tuples are enumerated in mixed-radix (odometer) order: axis 0 is the most
significant digit and changes slowest, the last axis changes fastest. This is
the same order as ``itertools.product(*axes)``, and template numbering
downstream depends on it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from reqsweep.exceptions import EmptyAxisError

#: Returned by ``generate`` when no axes were given: use the template verbatim.
NO_EXPANSION = None

Tuple = tuple[str, ...]


def _check_axes(axes: Sequence[Sequence[str]]) -> list[int]:
    lengths = [len(axis) for axis in axes]
    for axis_index, length in enumerate(lengths):
        if length == 0:
            raise EmptyAxisError(axis_index)
    return lengths


def count_tuples(axes: Sequence[Sequence[str]]) -> int:
    """Number of tuples ``generate`` would produce (0 for an empty axis set)."""
    if not axes:
        return 0
    return math.prod(len(axis) for axis in axes)


def generate(axes: Sequence[Sequence[str]]) -> list[Tuple] | None:
    """Materialize the full Cartesian product of ``axes``.

    Each position is filled by stride arithmetic rather than recursion. For
    axis ``i``, ``stride`` consecutive tuples share a value, the run of all
    values spans ``block`` tuples, and that block repeats ``repeat`` times.

    Returns:
        ``NO_EXPANSION`` (None) if ``axes`` is empty, otherwise the list of all
        tuples in odometer order.

    Raises:
        EmptyAxisError: An axis has no values.
    """
    if not axes:
        return NO_EXPANSION

    lengths = _check_axes(axes)
    n = len(lengths)
    total = math.prod(lengths)
    rows: list[list[str | None]] = [[None] * n for _ in range(total)]

    for i, axis in enumerate(axes):
        stride = math.prod(lengths[i + 1 :])
        repeat = math.prod(lengths[:i])
        block = lengths[i] * stride
        for x, value in enumerate(axis):
            for z in range(repeat):
                base = z * block + x * stride
                for y in range(stride):
                    rows[base + y][i] = value

    return [tuple(row) for row in rows]  # type: ignore[misc]


def tuple_at(axes: Sequence[Sequence[str]], index: int) -> Tuple:
    """Return the tuple ``generate(axes)`` places at flat ``index``.

    Decodes ``index`` as a mixed-radix number whose digit ``i`` has radix
    ``len(axes[i])``, least significant digit last.

    Raises:
        EmptyAxisError: An axis has no values.
        IndexError: ``index`` is outside ``0 .. count_tuples(axes) - 1``. An
            empty axis set has no tuples (``generate`` returns ``NO_EXPANSION``).
    """
    if not axes:
        raise IndexError(f"tuple index {index} out of range: empty axis set has no tuples")
    lengths = _check_axes(axes)
    total = math.prod(lengths)
    if not 0 <= index < total:
        raise IndexError(f"tuple index {index} out of range for {total} tuples")

    digits: list[str] = []
    remainder = index
    for axis, length in zip(reversed(axes), reversed(lengths), strict=True):
        remainder, digit = divmod(remainder, length)
        digits.append(axis[digit])
    return tuple(reversed(digits))
