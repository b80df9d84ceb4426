"""Shared pytest fixtures and configuration for the fic test suite.

Guidelines
----------
* Engines are mocked at the dispatcher boundary unless a test exercises
  the Pillow engine itself.
* Files are created under ``tmp_path`` only.
* Each test gets its own logger so handler and level changes do not leak.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """An existing, readable, regular file."""
    path = tmp_path / "lena.png"
    path.write_bytes(b"not really an image")
    return path


@pytest.fixture
def logger(request: pytest.FixtureRequest) -> Iterator[logging.Logger]:
    """Isolated logger that is stripped of its handlers afterwards."""
    test_logger = logging.getLogger(f"fic.tests.{request.node.name}")
    test_logger.setLevel(logging.NOTSET)
    yield test_logger
    for handler in list(test_logger.handlers):
        test_logger.removeHandler(handler)
        handler.close()
