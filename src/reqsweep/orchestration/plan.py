"""Suite planning: render every test case of a suite, skipping the broken ones.

A case whose axes cannot be expanded or whose template does not fit is
recorded as skipped, and the rest of the suite still plans. A case with an
empty axis is not an error here: it plans to zero requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field

from reqsweep.config.models import ExpansionSettings, SuiteConfig
from reqsweep.exceptions import EmptyAxisError, ExpansionError, RenderError
from reqsweep.rendering import RenderedCase, render_case


@dataclass
class SkippedCase:
    """A test case that could not be rendered."""

    index: int
    message: str
    reason: str

    @property
    def short_label(self) -> str:
        """Short label for display: '#3 Call ListUnits'."""
        return f"#{self.index + 1} {self.message}".strip()

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "message": self.message,
            "reason": self.reason,
            "short_label": self.short_label,
        }


class PlannedCase(BaseModel):
    """A rendered test case with its position in the suite."""

    index: int
    case: RenderedCase


class SuitePlan(BaseModel):
    """Result of planning one suite."""

    source: str | None = None
    enabled: bool = True
    cases: list[PlannedCase] = Field(default_factory=list)
    skipped: list[SkippedCase] = Field(default_factory=list)

    @property
    def total_requests(self) -> int:
        return sum(planned.case.request_count for planned in self.cases)

    @property
    def total_list_entries(self) -> int:
        return sum(planned.case.list_entries for planned in self.cases)

    @property
    def summary(self) -> str:
        """Human-readable summary of the plan."""
        name = self.source or "<suite>"
        if not self.enabled:
            return f"{name}: disabled"
        parts = [
            f"{name}: {len(self.cases)} cases",
            f"{self.total_requests} requests",
            f"{self.total_list_entries} list entries",
        ]
        if self.skipped:
            parts.append(f"{len(self.skipped)} skipped")
        return " | ".join(parts)


def build_plan(suite: SuiteConfig, settings: ExpansionSettings | None = None) -> SuitePlan:
    """Render every test case of ``suite`` in order.

    Args:
        suite: Loaded suite configuration.
        settings: Expansion limits. Defaults to ``ExpansionSettings()``.

    Returns:
        SuitePlan with rendered cases and skipped-case records.
    """
    settings = settings or ExpansionSettings()

    if not suite.enabled:
        logger.info("Suite {} is disabled", suite.source or "<suite>")
        return SuitePlan(source=suite.source, enabled=False)

    cases: list[PlannedCase] = []
    skipped: list[SkippedCase] = []

    for index, case in enumerate(suite.test):
        try:
            rendered = render_case(case, max_axis_values=settings.max_axis_values)
        except EmptyAxisError as e:
            logger.warning("Case #{} ({}) produces no requests: {}", index + 1, case.message, e)
            rendered = RenderedCase(message=case.message, expected_response=case.xml_response)
        except (ExpansionError, RenderError) as e:
            skipped.append(SkippedCase(index=index, message=case.message, reason=str(e)))
            logger.warning("Skipped case #{} ({}): {}", index + 1, case.message, e)
            continue

        logger.debug(
            "Case #{}: {} requests, {} list entries",
            index + 1,
            rendered.request_count,
            rendered.list_entries,
        )
        cases.append(PlannedCase(index=index, case=rendered))

    plan = SuitePlan(source=suite.source, cases=cases, skipped=skipped)
    logger.info(plan.summary)
    return plan


__all__ = ["PlannedCase", "SkippedCase", "SuitePlan", "build_plan"]
