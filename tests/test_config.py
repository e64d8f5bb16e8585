"""
Tests for chaosgame.config and chaosgame.logging_config
"""
import io
import logging
import os

from chaosgame import config
from chaosgame.logging_config import setup_logging


class TestConfig:
    def test_iteration_limits(self):
        assert 1 <= config.DEFAULT_ITERATIONS <= config.MAX_ITERATIONS == 50_000

    def test_pixel_marker_is_smallest(self):
        assert config.PIXEL_RADIUS < config.POINT_RADIUS < config.ACTIVE_TARGET_RADIUS

    def test_icon_exists(self):
        assert os.path.exists(config.APP_ICON_PATH)


class TestSetupLogging:
    def test_package_logger(self):
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "chaosgame"
        assert logger.level == logging.DEBUG

    def test_handlers_not_duplicated(self):
        setup_logging(logging.DEBUG)
        logger = setup_logging(logging.DEBUG)
        assert len(logger.handlers) == 1

    def test_stream_and_format(self):
        stream = io.StringIO()
        setup_logging(logging.INFO, stream=stream)
        logging.getLogger("chaosgame.model.engine").info("hello")
        logging.getLogger("chaosgame.model.engine").debug("hidden")
        output = stream.getvalue()
        assert "INFO" in output
        assert "[chaosgame.model.engine] hello" in output
        assert "hidden" not in output
        setup_logging(logging.INFO)

    def test_log_file_closed_on_reconfigure(self, tmp_path):
        path = tmp_path / "chaos.log"
        logger = setup_logging(logging.INFO, log_file=str(path), stream=io.StringIO())
        file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))
        logging.getLogger("chaosgame.test").info("hello")
        setup_logging(logging.INFO)
        assert file_handler.stream is None
        assert "hello" in path.read_text(encoding="utf-8")
