"""Tests for operation result values and logging setup."""

import logging

from dockside.models.results import CargoError, OperationResult
from dockside.utils.logger import get_logger, set_level


class TestOperationResult:
    def test_success_is_truthy(self):
        result = OperationResult.success("done")
        assert result
        assert result.error is None

    def test_failure_is_falsy(self):
        result = OperationResult.failure(CargoError.VESSEL_FULL, "ship at full capacity.")
        assert not result
        assert result.error == CargoError.VESSEL_FULL
        assert result.message == "ship at full capacity."


class TestLogger:
    def test_loggers_live_under_package(self):
        assert get_logger("dockside.models.vessel").name == "dockside.models.vessel"
        assert get_logger("console").name == "dockside.console"

    def test_single_handler(self):
        get_logger("a")
        get_logger("b")
        assert len(logging.getLogger("dockside").handlers) == 1

    def test_set_level(self):
        root = logging.getLogger("dockside")
        previous = root.level
        try:
            set_level("debug")
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)
