"""Unit tests for CLI logging setup."""

import io
import json
import logging

from py2sass.utils.logging import LogMode, configure_from_cli, get_logger, setup_logging


class TestSetupLogging:
    """Tests for handler and formatter selection."""

    def test_human_mode(self) -> None:
        stream = io.StringIO()
        setup_logging(LogMode.HUMAN, stream=stream)

        get_logger("py2sass.test").info("hello")

        assert stream.getvalue() == "[INFO] hello\n"

    def test_verbose_mode_has_timestamp(self) -> None:
        stream = io.StringIO()
        setup_logging(LogMode.VERBOSE, level=logging.DEBUG, stream=stream)

        get_logger("py2sass.test").debug("details")

        line = stream.getvalue()
        assert line.startswith("[DEBUG][")
        assert line.endswith("] details\n")

    def test_json_mode_structured_fields(self) -> None:
        stream = io.StringIO()
        setup_logging(LogMode.JSON, stream=stream)

        get_logger().structured(logging.INFO, "compiled", characters=42)

        entry = json.loads(stream.getvalue())
        assert entry["level"] == "INFO"
        assert entry["msg"] == "compiled"
        assert entry["characters"] == 42

    def test_quiet_sets_warning_level(self) -> None:
        configure_from_cli(quiet=True)

        assert logging.getLogger("py2sass").level == logging.WARNING

    def test_setup_replaces_handlers(self) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("py2sass").handlers) == 1
