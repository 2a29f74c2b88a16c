"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
import yaml
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru() -> Generator[None, None, None]:
    """Drop handlers added by setup_logging so tests don't share sinks."""
    yield
    logger.remove()


@pytest.fixture
def write_suite(tmp_path: Path):
    """Write a suite mapping to a YAML file and return its path."""

    def _write(payload: dict, name: str = "suite.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sdbus_suite() -> dict:
    """Suite with one expanded case, one verbatim case and one broken case."""
    return {
        "login": {"address": "127.0.0.1:830", "username": "netconf", "enabled": True},
        "test": [
            {
                "message": "Call ListUnits per unit",
                "xml_request_body": "<unit>%s</unit><idx>%s</idx>",
                "replace": [["a.service", "b.service"], [0, 1, 2]],
            },
            {
                "message": "Get state",
                "xml_request_head": "<rpc>",
                "xml_request_body": "<get/>",
                "xml_request_tail": "</rpc>",
            },
            {
                "message": "Broken range",
                "xml_request_body": "<n>%s</n>",
                "replace": [[5, 0, 10]],
            },
        ],
    }
