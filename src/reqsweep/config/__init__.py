"""Suite configuration models and loading."""

from reqsweep.config.loader import load_suite, load_suite_dict, load_suites
from reqsweep.config.models import (
    ExpansionSettings,
    LoginConfig,
    SuiteConfig,
    TestCaseConfig,
    parse_raw_axis,
)

__all__ = [
    "ExpansionSettings",
    "LoginConfig",
    "SuiteConfig",
    "TestCaseConfig",
    "load_suite",
    "load_suite_dict",
    "load_suites",
    "parse_raw_axis",
]
