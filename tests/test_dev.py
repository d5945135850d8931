"""Tests for waypoint.server.dev — logging setup and the uvicorn launcher."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from waypoint.app import App
from waypoint.config import AppConfig
from waypoint.server.dev import configure_logging, run_dev_server


@pytest.fixture
def _clean_logger():
    logger = logging.getLogger("waypoint")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


@pytest.mark.usefixtures("_clean_logger")
class TestConfigureLogging:
    def test_sets_level(self) -> None:
        configure_logging("debug")
        assert logging.getLogger("waypoint").level == logging.DEBUG

    def test_handler_added_once(self) -> None:
        logger = logging.getLogger("waypoint")
        before = len(logger.handlers)
        configure_logging()
        configure_logging()
        assert len(logger.handlers) == before + 1


@pytest.mark.usefixtures("_clean_logger")
class TestRunDevServer:
    @patch("uvicorn.run")
    def test_passes_app_through(self, mock_run: MagicMock) -> None:
        app = App()
        run_dev_server(app, "0.0.0.0", 9000, log_level="warning")

        mock_run.assert_called_once_with(
            app, host="0.0.0.0", port=9000, log_level="warning", lifespan="on"
        )

    @patch("uvicorn.run")
    def test_app_run_uses_config(self, mock_run: MagicMock) -> None:
        app = App(AppConfig(host="0.0.0.0", port=9100, debug=True))
        app.run()

        kwargs = mock_run.call_args[1]
        assert (kwargs["host"], kwargs["port"], kwargs["log_level"]) == ("0.0.0.0", 9100, "debug")
        assert app.router.compiled is True
