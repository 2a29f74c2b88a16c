"""YAML/JSON/TOML loader for request sweep suites.

Implements the loading contract:
- ConfigError with file path for missing files, parse errors and bad structure
- Did-you-mean suggestions for unknown top-level keys
- Directory loading in sorted file-name order
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from reqsweep.config.models import SuiteConfig
from reqsweep.constants import SUPPORTED_SUITE_SUFFIXES
from reqsweep.exceptions import ConfigError

__all__ = ["load_suite", "load_suite_dict", "load_suites"]


# =============================================================================
# Public API
# =============================================================================


def load_suite(path: Path | str) -> SuiteConfig:
    """Load and validate one suite file.

    Args:
        path: Path to a .yaml, .yml, .json or .toml suite file.

    Returns:
        Validated SuiteConfig with ``source`` set to the file path.

    Raises:
        ConfigError: File not found, unsupported format, parse error, unknown
            top-level keys, or a model validation failure.
    """
    path = Path(path)
    raw = _load_file(path)
    suite = load_suite_dict(raw, source=path)
    logger.debug("Loaded suite {} ({} test cases)", path, len(suite.test))
    return suite


def load_suite_dict(raw: dict[str, Any], source: Path | str | None = None) -> SuiteConfig:
    """Validate an already-parsed suite mapping.

    Raises:
        ConfigError: Unknown top-level keys or a model validation failure.
    """
    context = f" (in {source})" if source else ""

    known = _known_top_level_keys()
    unknown = set(raw) - known
    if unknown:
        errors = []
        for key in sorted(unknown):
            msg = f"Unknown field '{key}'"
            suggestion = _did_you_mean(key, known)
            if suggestion:
                msg += f", did you mean '{suggestion}'?"
            errors.append(msg + context)
        raise ConfigError("\n".join(errors))

    try:
        suite = SuiteConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid suite{context}:\n{_format_validation_error(e)}") from e

    if source is not None:
        suite = suite.model_copy(update={"source": str(source)})
    return suite


def load_suites(path: Path | str) -> list[SuiteConfig]:
    """Load one suite file, or every supported suite file in a directory.

    Directory entries are loaded in sorted file-name order; files with other
    suffixes are ignored.

    Raises:
        ConfigError: Path missing, directory holds no suite files, or any
            file fails to load.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Suite path not found: {path}")
    if path.is_file():
        return [load_suite(path)]

    files = sorted(
        p for p in path.iterdir() if p.is_file() and p.suffix in SUPPORTED_SUITE_SUFFIXES
    )
    if not files:
        raise ConfigError(
            f"No suite files in {path} (expected {', '.join(SUPPORTED_SUITE_SUFFIXES)})"
        )
    logger.debug("Found {} suite files in {}", len(files), path)
    return [load_suite(p) for p in files]


# =============================================================================
# Private helpers
# =============================================================================


def _load_file(path: Path) -> dict[str, Any]:
    """Parse a suite file into a dict.

    Raises:
        ConfigError: If file not found, unsupported format, parse error, or not a mapping.
    """
    if not path.exists():
        raise ConfigError(f"Suite file not found: {path}")
    try:
        content = path.read_text(encoding="utf-8")
        if path.suffix in (".yaml", ".yml"):
            result = yaml.safe_load(content)
        elif path.suffix == ".json":
            result = json.loads(content)
        elif path.suffix == ".toml":
            result = tomllib.loads(content)
        else:
            raise ConfigError(
                f"Unsupported suite format '{path.suffix}': use .yaml, .json or .toml"
            )
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Parse error in {path}: {e}") from e

    if result is None:
        return {}
    if not isinstance(result, dict):
        raise ConfigError(f"Suite must be a mapping (got {type(result).__name__}): {path}")
    return result


def _known_top_level_keys() -> set[str]:
    keys: set[str] = set()
    for name, field in SuiteConfig.model_fields.items():
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
    return keys


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        lines.append(f"  {location}: {item['msg']}")
    return "\n".join(lines)


def _did_you_mean(key: str, candidates: set[str], max_distance: int = 3) -> str | None:
    """Return the closest candidate if within max_distance edits, else None."""
    best: str | None = None
    best_dist = max_distance + 1
    for candidate in sorted(candidates):
        dist = _levenshtein(key, candidate)
        if dist < best_dist:
            best_dist = dist
            best = candidate
    return best if best_dist <= max_distance else None


def _levenshtein(a: str, b: str) -> int:
    """Compute Levenshtein edit distance between two strings."""
    if len(a) < len(b):
        return _levenshtein(b, a)
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        curr = [i + 1]
        for j, cb in enumerate(b):
            curr.append(min(prev[j + 1] + 1, curr[j] + 1, prev[j] + (ca != cb)))
        prev = curr
    return prev[-1]
