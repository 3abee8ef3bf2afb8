from __future__ import annotations

from pathlib import Path

import pytest
from gomemo.config import Settings
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger.remove()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(xdg_config_home=str(tmp_path / "xdg"), home=str(tmp_path / "home"))
