"""Tests for config loading, validation, and merging."""

import pytest
import yaml

import config as config_module
from config import (
    Config,
    load_config,
)


class TestLoadConfig:
    """Tests for load_config() behavior."""

    def test_load_default_config(self) -> None:
        """Load config.default.yml; verify all sections present."""
        config = load_config()
        assert config.optimizer.steps == 2000
        assert config.display.show_inputs is True
        assert config.display.cost_precision >= 0

    def test_load_missing_default_returns_defaults(self, tmp_path, monkeypatch) -> None:
        """When config.default.yml is absent, returns Config() defaults."""
        missing = tmp_path / "nonexistent" / "config.yml"
        monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", missing)
        assert load_config() == Config()

    def test_load_explicit_missing_raises(self, tmp_path) -> None:
        """load_config('nonexistent.yml') raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.yml")

    def test_zero_steps_raise_value_error(self, tmp_path) -> None:
        config_file = tmp_path / "bad.yml"
        config_file.write_text(yaml.dump({"optimizer": {"steps": 0}}))
        with pytest.raises(ValueError, match="optimizer.steps"):
            load_config(config_file)

    def test_non_integer_steps_raise_value_error(self, tmp_path) -> None:
        config_file = tmp_path / "bad.yml"
        config_file.write_text(yaml.dump({"optimizer": {"steps": 12.5}}))
        with pytest.raises(ValueError, match="optimizer.steps"):
            load_config(config_file)

    def test_every_error_is_listed(self, tmp_path) -> None:
        config_file = tmp_path / "bad.yml"
        config_file.write_text(
            yaml.dump(
                {
                    "optimizer": {"steps": -1},
                    "display": {"show_inputs": "maybe", "cost_precision": -2},
                }
            )
        )
        with pytest.raises(ValueError) as excinfo:
            load_config(config_file)
        message = str(excinfo.value)
        assert "optimizer.steps" in message
        assert "display.show_inputs" in message
        assert "display.cost_precision" in message

    def test_partial_config_merges_with_defaults(self, tmp_path) -> None:
        """YAML with only optimizer section; rest uses defaults."""
        config_file = tmp_path / "partial.yml"
        config_file.write_text(yaml.dump({"optimizer": {"steps": 500}}))

        config = load_config(config_file)
        assert config.optimizer.steps == 500
        assert config.display == Config().display

    def test_unknown_keys_ignored(self, tmp_path) -> None:
        """Extra keys in YAML don't crash."""
        data = {
            "optimizer": {"steps": 300, "totally_fake_key": 999},
            "nonexistent_section": {"foo": "bar"},
        }
        config_file = tmp_path / "extra.yml"
        config_file.write_text(yaml.dump(data))

        config = load_config(config_file)
        assert config.optimizer.steps == 300
        assert not hasattr(config.optimizer, "totally_fake_key")

    def test_empty_yaml_returns_defaults(self, tmp_path) -> None:
        """Empty file loads default Config."""
        config_file = tmp_path / "empty.yml"
        config_file.write_text("")

        assert load_config(config_file) == Config()

    def test_non_mapping_yaml_raises(self, tmp_path) -> None:
        config_file = tmp_path / "list.yml"
        config_file.write_text("- steps\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(config_file)

    def test_directory_raises_os_error(self, tmp_path) -> None:
        """A directory passed as the config file is an OSError."""
        with pytest.raises(OSError):
            load_config(tmp_path)
