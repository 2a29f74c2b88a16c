"""Raw axis descriptors accepted by the normalizer.

An axis arrives either as an explicit list of values or as an inclusive
numeric range. The variant is decided once, when the descriptor is built,
rather than inferred per element during expansion.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from reqsweep.exceptions import InvalidRangeError

_RANGE_KEYS = ("start", "step", "stop")


class ExplicitList(BaseModel):
    """Axis given as an ordered list of values.

    Values are stored as given; the normalizer rejects anything that is not
    a string.
    """

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["list"] = "list"
    values: list[Any] = Field(default_factory=list, description="Axis values, in order")


class NumericRange(BaseModel):
    """Axis given as an inclusive integer range ``start, start+step, ... <= stop``.

    Bounds are not checked here. ``normalize`` rejects non-integer bounds and
    non-positive steps with an error that carries the axis index.
    """

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["range"] = "range"
    start: Any = Field(..., description="First value")
    step: Any = Field(..., description="Increment, must be > 0")
    stop: Any = Field(..., description="Inclusive upper bound")


RawAxis = Annotated[ExplicitList | NumericRange, Field(discriminator="kind")]


def coerce_raw_axis(raw: Any, axis_index: int) -> ExplicitList | NumericRange:
    """Turn a plain Python descriptor into a RawAxis variant.

    - ``ExplicitList`` / ``NumericRange`` pass through.
    - ``list`` is an explicit list.
    - 3-element ``tuple`` is ``(start, step, stop)``.
    - mapping with ``start``/``step``/``stop`` keys is a numeric range.

    Raises:
        InvalidRangeError: If the descriptor is none of the above.
    """
    if isinstance(raw, (ExplicitList, NumericRange)):
        return raw
    if isinstance(raw, list):
        return ExplicitList(values=raw)
    if isinstance(raw, tuple):
        if len(raw) != 3:
            raise InvalidRangeError(
                axis_index, f"range descriptor needs 3 elements, got {len(raw)}"
            )
        start, step, stop = raw
        return NumericRange(start=start, step=step, stop=stop)
    if isinstance(raw, Mapping):
        missing = [key for key in _RANGE_KEYS if key not in raw]
        extra = sorted(set(raw) - set(_RANGE_KEYS))
        if missing or extra:
            raise InvalidRangeError(
                axis_index,
                f"range mapping needs exactly start/step/stop (missing={missing}, extra={extra})",
                start=raw.get("start"),
                step=raw.get("step"),
                stop=raw.get("stop"),
            )
        return NumericRange(start=raw["start"], step=raw["step"], stop=raw["stop"])
    raise InvalidRangeError(
        axis_index, f"unsupported axis descriptor of type {type(raw).__name__}"
    )
