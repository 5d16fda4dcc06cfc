"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honoured.
"""
from __future__ import annotations

import copy
import os
import sys
from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Fixtures are addressed to a test skill id; keep verification off by default.
os.environ["ALEXA_SKILL_ID"] = ""
os.environ.setdefault("HEALTHCHECK_API_TOKEN", "health-token")

from skill_fixtures import TOM_HANKS_PAYLOAD, FakeEntityLookup  # noqa: E402


@pytest.fixture
def tom_hanks_payload() -> dict[str, Any]:
    return copy.deepcopy(TOM_HANKS_PAYLOAD)


@pytest.fixture
def tom_hanks_lookup() -> FakeEntityLookup:
    return FakeEntityLookup(payload=TOM_HANKS_PAYLOAD)
