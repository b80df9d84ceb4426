"""Tests for the command dispatcher (core/dispatcher.py).

The :class:`Engine` dependency is **mocked** — no image codec runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from fic.core.catalog import Command, Metric
from fic.core.dispatcher import CommandDispatcher
from fic.core.models import Settings
from fic.exceptions import EngineError


def _settings(**overrides: Any) -> Settings:
    defaults: dict[str, Any] = {
        "command": Command.COMPRESS,
        "input_path": Path("in.png"),
        "output_path": "output.fic",
        "metric": Metric.AE,
        "fuzz": 5.0,
        "quality": 0.9,
        "debug": False,
        "verbose": False,
    }
    defaults.update(overrides)
    return Settings(**defaults)


def _factory(engine: MagicMock) -> MagicMock:
    return MagicMock(return_value=engine)


class TestDispatch:
    def test_compress_runs_compress_only(self, logger: logging.Logger) -> None:
        engine = MagicMock()
        factory = _factory(engine)
        settings = _settings()

        CommandDispatcher(factory, logger).dispatch(settings)

        factory.assert_called_once_with(settings)
        engine.compress.assert_called_once_with()
        engine.decompress.assert_not_called()

    def test_decompress_runs_decompress_only(self, logger: logging.Logger) -> None:
        engine = MagicMock()
        CommandDispatcher(_factory(engine), logger).dispatch(
            _settings(command=Command.DECOMPRESS),
        )

        engine.decompress.assert_called_once_with()
        engine.compress.assert_not_called()

    def test_engine_errors_propagate_unchanged(self, logger: logging.Logger) -> None:
        engine = MagicMock()
        original = EngineError("disk full")
        engine.compress.side_effect = original

        with pytest.raises(EngineError) as exc_info:
            CommandDispatcher(_factory(engine), logger).dispatch(_settings())
        assert exc_info.value is original

    def test_foreign_errors_are_not_wrapped(self, logger: logging.Logger) -> None:
        engine = MagicMock()
        engine.decompress.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            CommandDispatcher(_factory(engine), logger).dispatch(
                _settings(command=Command.DECOMPRESS),
            )
        assert engine.decompress.call_count == 1

    def test_logs_when_verbose(
        self, logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger=logger.name):
            CommandDispatcher(_factory(MagicMock()), logger).dispatch(_settings())
        assert ":: Initializing compress process.." in caplog.messages
