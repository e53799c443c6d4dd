"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from tailwind_ast.cli.commands import main


class TestParseCommand:
    """``tailwind-ast parse``."""

    def setup_method(self):
        self.runner = CliRunner()

    def _json_lines(self, output):
        return [json.loads(line) for line in output.splitlines() if line.startswith("{")]

    def test_json_output(self):
        result = self.runner.invoke(main, ["parse", "--format", "json", "md:hover:mt-4"])
        assert result.exit_code == 0
        [line] = self._json_lines(result.output)
        assert line["input"] == "md:hover:mt-4"
        assert line["kind"] == "functional"
        assert line["property"] == "marginTop"
        assert line["value"] == "1rem"
        assert line["value_def"]["class"] == ["margin-top"]
        assert [variant["name"] for variant in line["variants"]] == ["hover", "md"]

    def test_error_sets_exit_code(self):
        result = self.runner.invoke(main, ["parse", "--format", "json", "mt-4", "nope"])
        assert result.exit_code == 1
        lines = self._json_lines(result.output)
        assert [line["kind"] for line in lines] == ["functional", "error"]
        assert lines[1]["message"] == "Tailwindcss core plugin not found"

    def test_table_output(self):
        result = self.runner.invoke(main, ["parse", "bg-red-500/50"])
        assert result.exit_code == 0
        assert "backgroundColor" in result.output
        assert "#ef4444" in result.output

    def test_reads_stdin(self):
        result = self.runner.invoke(main, ["parse", "--format", "json", "-"], input="mt-4 p-2\n")
        assert result.exit_code == 0
        assert [line["input"] for line in self._json_lines(result.output)] == ["mt-4", "p-2"]

    def test_config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "output_format: json\n"
            "theme:\n"
            "  extend:\n"
            "    colors:\n"
            "      brand: '#123456'\n"
        )
        result = self.runner.invoke(main, ["--config", str(path), "parse", "bg-brand"])
        assert result.exit_code == 0
        [line] = self._json_lines(result.output)
        assert line["value"] == "#123456"

    def test_invalid_config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output_format: xml\n")
        result = self.runner.invoke(main, ["--config", str(path), "parse", "mt-4"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestThemeCommand:
    """``tailwind-ast theme``."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_prints_scale(self):
        result = self.runner.invoke(main, ["theme", "screens"])
        assert result.exit_code == 0
        assert json.loads(result.output)["md"] == "768px"

    def test_unknown_scale(self):
        result = self.runner.invoke(main, ["theme", "nope"])
        assert result.exit_code == 1
        assert "Unknown scale 'nope'" in result.output
