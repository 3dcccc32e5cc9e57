"""Shared fixtures for the cisakev test suite."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def json_file() -> Path:
    return FIXTURES_DIR / "known_exploited_vulnerabilities.json"


@pytest.fixture
def raw_json(json_file: Path) -> str:
    return json_file.read_text(encoding="utf-8")


@pytest.fixture
def feed(raw_json: str) -> dict[str, Any]:
    return json.loads(raw_json)


@pytest.fixture
def sample_entry(feed: dict[str, Any]) -> dict[str, Any]:
    """First vulnerability object of the fixture feed (a ransomware one)."""
    return copy.deepcopy(feed["vulnerabilities"][0])
