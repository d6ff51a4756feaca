# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def tmp_logs_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Point the per-run log directory at a temporary ``logs/`` folder."""
    logs_dir = tmp_path / "logs"
    with patch.object(Settings, "LOGS_DIR", logs_dir):
        yield logs_dir
