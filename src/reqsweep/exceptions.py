"""Exception hierarchy for reqsweep."""

from __future__ import annotations

from typing import Any


class ReqSweepError(Exception):
    """Base exception for reqsweep."""


class ConfigError(ReqSweepError):
    """Invalid or missing suite configuration."""


class RenderError(ReqSweepError):
    """Request template could not be filled with an expanded tuple."""


class ExpansionError(ReqSweepError):
    """Axis normalization or product generation failed."""

    def __init__(self, message: str, axis_index: int | None = None):
        super().__init__(message)
        self.axis_index = axis_index


class InvalidValueError(ExpansionError):
    """Explicit axis contains a value that is not a string."""

    def __init__(self, axis_index: int, value_index: int, value: Any):
        super().__init__(
            f"Axis {axis_index}: value {value_index} is {type(value).__name__} "
            f"({value!r}), expected str",
            axis_index=axis_index,
        )
        self.value_index = value_index
        self.value = value


class InvalidRangeError(ExpansionError):
    """Numeric range descriptor cannot be expanded."""

    def __init__(
        self,
        axis_index: int,
        reason: str,
        start: Any = None,
        step: Any = None,
        stop: Any = None,
    ):
        super().__init__(
            f"Axis {axis_index}: invalid range (start={start!r}, step={step!r}, "
            f"stop={stop!r}): {reason}",
            axis_index=axis_index,
        )
        self.reason = reason
        self.start = start
        self.step = step
        self.stop = stop


class EmptyAxisError(ExpansionError):
    """Axis has no values, so the product is empty."""

    def __init__(self, axis_index: int):
        super().__init__(f"Axis {axis_index} has no values", axis_index=axis_index)
