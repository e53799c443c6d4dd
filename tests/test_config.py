"""Tests for configuration loading."""

import json

import pytest

from tailwind_ast.config import ConfigError, ConfigModel, load_config, save_config


class TestConfigModel:
    """Validation and serialization."""

    def test_defaults(self):
        config = ConfigModel()
        assert config.theme == {}
        assert config.log_level == "WARNING"
        assert config.output_format == "table"
        assert config.tailwind_config() == {}

    def test_log_level_normalized(self):
        assert ConfigModel(log_level="debug").log_level == "DEBUG"

    def test_invalid_output_format(self):
        with pytest.raises(ConfigError):
            ConfigModel(output_format="xml")

    def test_invalid_theme(self):
        with pytest.raises(ConfigError):
            ConfigModel(theme=["colors"])

    def test_tailwind_config(self):
        config = ConfigModel(theme={"extend": {"colors": {"brand": "#123456"}}})
        assert config.tailwind_config() == {"theme": {"extend": {"colors": {"brand": "#123456"}}}}

    def test_from_dict_ignores_unknown_keys(self):
        config = ConfigModel.from_dict({"output_format": "json", "colour": "red"})
        assert config.output_format == "json"

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(ConfigError):
            ConfigModel.from_dict(["theme"])

    def test_yaml_round_trip(self):
        config = ConfigModel(theme={"colors": {"brand": "#123456"}}, output_format="json")
        assert ConfigModel.from_yaml(config.to_yaml()) == config

    def test_invalid_yaml(self):
        with pytest.raises(ConfigError):
            ConfigModel.from_yaml("theme: [unclosed")


class TestLoadConfig:
    """Loading from files."""

    def test_none_gives_defaults(self):
        assert load_config(None) == ConfigModel()

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == ConfigModel()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "tailwind.yaml"
        path.write_text(
            "log_level: info\n"
            "theme:\n"
            "  extend:\n"
            "    colors:\n"
            "      brand: '#123456'\n"
        )
        config = load_config(path)
        assert config.log_level == "INFO"
        assert config.theme["extend"]["colors"]["brand"] == "#123456"

    def test_json_file(self, tmp_path):
        path = tmp_path / "tailwind.json"
        path.write_text(json.dumps({"output_format": "json", "theme": {"spacing": {"4": "1rem"}}}))
        config = load_config(path)
        assert config.output_format == "json"
        assert config.theme == {"spacing": {"4": "1rem"}}

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "tailwind.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ConfigModel()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        save_config(ConfigModel(log_level="DEBUG"), path)
        assert load_config(path).log_level == "DEBUG"
