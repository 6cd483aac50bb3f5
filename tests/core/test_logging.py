"""Tests for structlog configuration."""

import logging

import structlog

from claudenv.core.logging import configure_structlog


class TestConfigureStructlog:
    def test_debug_level(self):
        configure_structlog(debug=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_is_warning(self):
        configure_structlog()
        assert logging.getLogger().level == logging.WARNING

    def test_stdlib_records_go_to_stderr(self, capsys):
        configure_structlog(json_output=True)
        logging.getLogger("claudenv.test").warning("scan skipped")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "scan skipped"' in captured.err

    def test_json_renderer(self):
        configure_structlog(json_output=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
