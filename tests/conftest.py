from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _clean_bfvm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("BFVM_LOG_LEVEL", "BFVM_STRICT", "BFVM_EOF_ERROR"):
        monkeypatch.delenv(key, raising=False)
