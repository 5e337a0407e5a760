"""
Unit tests for the 'uri' command group.
"""

from click.testing import CliRunner

from lsp_wire.cli.commands.uri import uri


class TestUriToPath:

    def test_converts_each_uri(self):
        runner = CliRunner()
        result = runner.invoke(uri, [
            "to-path",
            "file:///c%3A/Users/test/Sketch.ino",
            "file:///Users/test/Sketch%23suffix.ino",
        ])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "c:/Users/test/Sketch.ino",
            "/Users/test/Sketch#suffix.ino",
        ]

    def test_reports_invalid_uri_and_keeps_going(self):
        runner = CliRunner()
        result = runner.invoke(uri, ["to-path", "http://example.com/a", "file:///ok"])

        assert result.exit_code == 1
        assert "/ok" in result.output
        assert "Invalid URI scheme" in result.output

    def test_requires_an_argument(self):
        result = CliRunner().invoke(uri, ["to-path"])
        assert result.exit_code != 0


class TestUriFromPath:

    def test_windows_style(self):
        runner = CliRunner()
        result = runner.invoke(uri, ["from-path", "--style", "windows", "C:\\Users\\test\\Sketch.ino"])

        assert result.exit_code == 0
        assert result.output.strip() == "file:///c%3A/Users/test/Sketch.ino"

    def test_posix_style(self):
        runner = CliRunner()
        result = runner.invoke(uri, ["from-path", "--style", "posix", "/User nàmé/test/Sketch.ino"])

        assert result.exit_code == 0
        assert result.output.strip() == "file:///User%20n%C3%A0m%C3%A9/test/Sketch.ino"

    def test_empty_path_fails(self):
        result = CliRunner().invoke(uri, ["from-path", "--style", "posix", ""])
        assert result.exit_code == 1

    def test_unknown_style_rejected(self):
        result = CliRunner().invoke(uri, ["from-path", "--style", "vms", "/a"])
        assert result.exit_code == 2
