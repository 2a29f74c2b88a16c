"""Configuration models for request sweep suites.

A suite file carries a ``login`` block and a ``test`` list. Each test case
holds a request template split into head/body/tail and a ``replace`` list of
substitution axes for the body. Field names are snake_case; the CamelCase keys
of existing suite files (``XMLRequestBody``, ``Replace``, ...) are accepted as
aliases.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator

from reqsweep.constants import DEFAULT_MAX_AXIS_VALUES
from reqsweep.expansion.axes import ExplicitList, NumericRange, RawAxis

_RANGE_KEYS = {"start", "step", "stop"}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_raw_axis(entry: Any) -> Any:
    """Decide the RawAxis variant of one ``replace`` entry from a suite file.

    - A list whose first element is an integer is ``[start, step, stop]``.
      Bounds are checked later by ``normalize``; only the arity is checked here.
    - Any other list is an explicit list of values.
    - A mapping with ``start``/``step``/``stop`` is a numeric range.
    - A mapping with ``kind`` is left for the discriminated union.

    Raises:
        ValueError: The entry matches none of the forms above.
    """
    if isinstance(entry, (ExplicitList, NumericRange)):
        return entry
    if isinstance(entry, Mapping):
        if "kind" in entry:
            return entry
        if set(entry) == _RANGE_KEYS:
            return NumericRange(start=entry["start"], step=entry["step"], stop=entry["stop"])
        raise ValueError(
            f"replace mapping must have exactly start/step/stop keys, got {sorted(entry)}"
        )
    if isinstance(entry, (list, tuple)):
        if entry and _is_int(entry[0]):
            if len(entry) != 3:
                raise ValueError(
                    f"numeric replace entry must be [start, step, stop], got {list(entry)!r}"
                )
            start, step, stop = entry
            return NumericRange(start=start, step=step, stop=stop)
        return ExplicitList(values=list(entry))
    raise ValueError(f"replace entry must be a list or mapping, got {type(entry).__name__}")


# =============================================================================
# Expansion settings
# =============================================================================


class ExpansionSettings(BaseModel):
    """Limits applied while expanding replace axes."""

    model_config = {"extra": "forbid"}

    max_axis_values: int = Field(
        default=DEFAULT_MAX_AXIS_VALUES,
        ge=1,
        description="Largest number of values a single numeric range may expand to",
    )


# =============================================================================
# Suite file models
# =============================================================================


class LoginConfig(BaseModel):
    """Target of the suite. Only ``enabled`` affects planning."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    address: str = Field(default="", alias="Address", description="host:port of the target")
    username: str = Field(default="", alias="Username")
    password: SecretStr | None = Field(default=None, alias="Password", repr=False)
    enabled: bool = Field(
        default=True, alias="Enabled", description="Disabled suites are skipped entirely"
    )


class TestCaseConfig(BaseModel):
    """One test case: a request template plus its substitution axes."""

    __test__ = False  # not a pytest test class

    model_config = {"extra": "forbid", "populate_by_name": True}

    message: str = Field(default="", alias="Message", description="Printed before the case runs")
    xml_request_head: str = Field(default="", alias="XMLRequestHead")
    xml_request_body: str = Field(
        default="",
        alias="XMLRequestBody",
        description="Body template, one %s placeholder per replace axis",
    )
    xml_request_tail: str = Field(default="", alias="XMLRequestTail")
    xml_response: str = Field(default="", alias="XMLResponse", description="Expected reply")
    replace: list[RawAxis] = Field(
        default_factory=list,
        alias="Replace",
        description="Substitution axes for the body, in placeholder order",
    )
    setup: list[TestCaseConfig] = Field(default_factory=list, alias="Setup")
    teardown: list[TestCaseConfig] = Field(default_factory=list, alias="Teardown")
    graph: bool = Field(default=False, alias="Graph")

    @field_validator("replace", mode="before")
    @classmethod
    def decide_axis_variants(cls, value: Any) -> Any:
        """Map file-level replace entries onto ExplicitList / NumericRange."""
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(f"replace must be a list of axes, got {type(value).__name__}")
        return [parse_raw_axis(entry) for entry in value]


class SuiteConfig(BaseModel):
    """A whole suite file."""

    model_config = {"extra": "forbid", "populate_by_name": True}

    login: LoginConfig = Field(default_factory=LoginConfig, alias="Login")
    test: list[TestCaseConfig] = Field(default_factory=list, alias="Test")
    source: str | None = Field(
        default=None, description="Path the suite was loaded from (set by the loader)"
    )

    @property
    def enabled(self) -> bool:
        return self.login.enabled
