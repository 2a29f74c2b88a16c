"""reqsweep -- combinatorial expansion of request templates.

Public API:
    normalize, generate, tuple_at, count_tuples, NO_EXPANSION,
    ExplicitList, NumericRange, load_suite, load_suites, render_case,
    build_plan, __version__
"""

from reqsweep.config.loader import load_suite, load_suites
from reqsweep.constants import SCHEMA_VERSION
from reqsweep.expansion import (
    NO_EXPANSION,
    ExplicitList,
    NumericRange,
    count_tuples,
    generate,
    normalize,
    tuple_at,
)
from reqsweep.orchestration.plan import build_plan
from reqsweep.rendering import render_case

__version__: str = SCHEMA_VERSION

__all__ = [
    "NO_EXPANSION",
    "ExplicitList",
    "NumericRange",
    "__version__",
    "build_plan",
    "count_tuples",
    "generate",
    "load_suite",
    "load_suites",
    "normalize",
    "render_case",
    "tuple_at",
]
