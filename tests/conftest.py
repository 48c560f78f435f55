"""Pytest configuration for the loggate test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_loguru() -> Iterator[None]:
    """Drop handlers installed by a test so records never leak into later buffers."""

    yield
    logger.remove()
