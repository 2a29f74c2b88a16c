"""Suite planning."""

from reqsweep.orchestration.plan import PlannedCase, SkippedCase, SuitePlan, build_plan

__all__ = ["PlannedCase", "SkippedCase", "SuitePlan", "build_plan"]
