import logging
import sys

import pytest

from perspective3d import config
from perspective3d.logging_config import setup_logging
from perspective3d.main import build_demo_window, parse_args
## unit tests for the command line entry point and logging setup


class TestMain:
    """argument parsing and demo window construction"""

    def test_defaults(self):
        args = parse_args([])
        assert args.width == config.DEFAULT_VIEWPORT_WIDTH
        assert args.height == config.DEFAULT_VIEWPORT_HEIGHT
        assert args.focal_length == config.DEFAULT_FOCAL_LENGTH
        assert args.log_level == "INFO"

    def test_overrides(self):
        args = parse_args(["--width", "640", "--height", "480", "--focal-length", "350"])
        assert (args.width, args.height, args.focal_length) == (640, 480, 350.0)

    def test_rejects_non_positive_size(self):
        with pytest.raises(SystemExit):
            parse_args(["--width", "0"])

    def test_demo_window(self, qapp):
        window = build_demo_window(parse_args(["--width", "320", "--height", "240"]))
        widget = window.centralWidget()
        assert widget.view().width == 320
        assert len(widget.projection()) == 11


class TestLogging:
    """package logger configuration"""

    def _reset(self, logger):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_setup_logging(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging("debug", str(log_file))
        try:
            assert logger is logging.getLogger("perspective3d")
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 2
            logging.getLogger("perspective3d.models.view").debug("zoom test")
            setup_logging(logging.WARNING)
            assert logger.level == logging.WARNING
            assert len(logger.handlers) == 1
            assert logger.handlers[0].stream is sys.stderr
        finally:
            self._reset(logger)
        content = log_file.read_text(encoding="utf-8")
        assert "zoom test" in content
        assert "DEBUG" in content

    def test_no_file_handler_logs_nothing_on_setup(self, capsys):
        logger = setup_logging(logging.INFO)
        try:
            assert len(logger.handlers) == 1
        finally:
            self._reset(logger)
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
