"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from conventor.config.defaults import (
    ExpansionParams,
    config_from_dict,
    get_default_config,
)
from conventor.config.loader import CONFIG_FILE_NAME, ConfigLoader
from conventor.config.validation import ConfigValidator


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.expansion.major_suits == ("H", "S")
        assert config.expansion.minor_suits == ("C", "D")
        assert config.expansion.any_suits == ("C", "D", "H", "S")
        assert config.prune.prune_illegal is True
        assert config.render.sequence_separator == "-"
        assert config.logging.level == "INFO"

    def test_config_from_dict_converts_lists(self) -> None:
        """YAML lists come back as tuples."""
        config = config_from_dict({"expansion": {"major_suits": ["S"]}})
        assert config.expansion.major_suits == ("S",)
        assert config.expansion.minor_suits == ExpansionParams().minor_suits

    def test_config_from_dict_ignores_unknown_keys(self) -> None:
        config = config_from_dict({"expansion": {"colour": "red"}, "unknown": {}})
        assert config.expansion == ExpansionParams()


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with no file present."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config()

        assert config["expansion"]["major_suits"] == ("H", "S")
        assert config["prune"]["prune_empty"] is True

    def test_file_overrides_defaults(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text(
            "render:\n  suit_symbols: true\n", encoding="utf-8"
        )
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["render"]["suit_symbols"] is True
        # Other defaults should remain
        assert config["render"]["sequence_separator"] == "-"

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text(
            "prune:\n  prune_empty: false\n", encoding="utf-8"
        )
        config = ConfigLoader.create(tmp_path).merge_config(
            {"prune": {"prune_empty": True, "prune_illegal": False}}
        )

        assert config["prune"]["prune_empty"] is True
        assert config["prune"]["prune_illegal"] is False

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILE_NAME).write_text("", encoding="utf-8")
        assert ConfigLoader.create(tmp_path).load_file_config() == {}


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_default_config_valid(self, tmp_path: Path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()
        assert ConfigValidator.validate_config(config) == []

    def test_shipped_config_valid(self) -> None:
        """The repository's config/conventor.yaml passes validation."""
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("params,field", [
        ({"major_suits": ["H", "C"]}, "major_suits"),
        ({"minor_suits": []}, "minor_suits"),
        ({"any_suits": ["C", "C"]}, "any_suits"),
        ({"major_suits": "HS"}, "major_suits"),
        ({"relay_alertable": "yes"}, "relay_alertable"),
    ])
    def test_invalid_expansion_params(self, params, field) -> None:
        errors = ConfigValidator.validate_expansion_params(params)
        assert len(errors) == 1
        assert errors[0].field == field

    def test_invalid_prune_params(self) -> None:
        errors = ConfigValidator.validate_prune_params({"prune_illegal": 1})
        assert [error.field for error in errors] == ["prune_illegal"]

    def test_invalid_render_params(self) -> None:
        errors = ConfigValidator.validate_render_params(
            {"suit_symbols": "no", "sequence_separator": ""}
        )
        assert [error.field for error in errors] == ["suit_symbols", "sequence_separator"]

    def test_invalid_logging_params(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD"})
        assert len(errors) == 1
        assert errors[0].value == "LOUD"

    def test_lowercase_level_accepted(self) -> None:
        assert ConfigValidator.validate_logging_params({"level": "debug"}) == []
