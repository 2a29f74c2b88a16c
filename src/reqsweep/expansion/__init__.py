"""Axis normalization and Cartesian tuple generation.

Both stages are pure: no I/O, no logging, no shared state.
"""

from reqsweep.expansion.axes import ExplicitList, NumericRange, RawAxis, coerce_raw_axis
from reqsweep.expansion.normalize import normalize, range_length
from reqsweep.expansion.product import NO_EXPANSION, count_tuples, generate, tuple_at

__all__ = [
    "NO_EXPANSION",
    "ExplicitList",
    "NumericRange",
    "RawAxis",
    "coerce_raw_axis",
    "count_tuples",
    "generate",
    "normalize",
    "range_length",
    "tuple_at",
]
