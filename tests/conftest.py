from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from stubs import PLAN_PAYLOAD  # noqa: E402


@pytest.fixture
def plan_payload() -> dict:
    return copy.deepcopy(PLAN_PAYLOAD)


@pytest.fixture(autouse=True)
def _clean_openai_env(monkeypatch):
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "OPENAI_BASE_URL",
        "OPENAI_TEMPERATURE",
        "OPENAI_REQUEST_TIMEOUT",
        "OPENAI_API_KEY_PARAMETER",
    ):
        monkeypatch.delenv(name, raising=False)
