"""Unit tests for CLI utilities."""

import logging

from lsp_wire.cli.utils import configure_logging, echo_error, echo_info


class TestUtils:
    def test_echo_error_goes_to_stderr(self, capsys):
        echo_error("bad uri")
        captured = capsys.readouterr()
        assert "bad uri" in captured.err
        assert captured.out == ""

    def test_echo_info_goes_to_stdout(self, capsys):
        echo_info("detail")
        captured = capsys.readouterr()
        assert "detail" in captured.out
        assert captured.err == ""

    def test_configure_logging_verbose(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(True)
        configure_logging(False)

        assert calls[0]["level"] == logging.DEBUG
        assert calls[1]["level"] == logging.WARNING
