"""Tests for structure settings loading."""

import logging
from pathlib import Path

import pytest

from pdftool.config import STRUCTURE_DEFAULTS, load_structure_config
from pdftool.lib.errors import ConfigError
from pdftool.models.config import StructureConfig


class TestLoadStructureConfigDefaults:
    """Tests for loading without overrides."""

    def test_defaults_without_file_or_env(self) -> None:
        """Test built-in defaults are used when nothing overrides them."""
        config = load_structure_config(env={})
        assert config == StructureConfig()
        assert config.min_median_length == STRUCTURE_DEFAULTS["min_median_length"]

    def test_reads_process_environment(
        self, isolated_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test os.environ is consulted when no mapping is given."""
        monkeypatch.setenv("PDFTOOL_MIN_HEADING_LENGTH", "5")
        assert load_structure_config().min_heading_length == 5


class TestLoadStructureConfigFile:
    """Tests for YAML file overrides."""

    def test_nested_structure_section(self, temp_dir: Path) -> None:
        """Test values under a top-level structure key are applied."""
        path = temp_dir / "pdftool.yaml"
        path.write_text("structure:\n  min_median_length: 30\n  heading_marker: '='\n")

        config = load_structure_config(path, env={})

        assert config.min_median_length == 30
        assert config.heading_marker == "="
        assert config.min_heading_length == 3

    def test_bare_mapping(self, temp_dir: Path) -> None:
        """Test a file without a structure key is read as the section."""
        path = temp_dir / "pdftool.yaml"
        path.write_text("max_page_number_digits: 6\n")

        assert load_structure_config(str(path), env={}).max_page_number_digits == 6

    def test_empty_file(self, temp_dir: Path) -> None:
        """Test an empty file leaves the defaults in place."""
        path = temp_dir / "empty.yaml"
        path.write_text("")

        assert load_structure_config(path, env={}) == StructureConfig()

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            load_structure_config(temp_dir / "nope.yaml", env={})

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Test malformed YAML raises ConfigError."""
        path = temp_dir / "bad.yaml"
        path.write_text("structure: [unclosed\n")

        with pytest.raises(ConfigError, match="Failed to parse YAML"):
            load_structure_config(path, env={})

    def test_non_mapping_file(self, temp_dir: Path) -> None:
        """Test a YAML list is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_structure_config(path, env={})

    def test_unknown_field(self, temp_dir: Path) -> None:
        """Test unknown settings are reported."""
        path = temp_dir / "extra.yaml"
        path.write_text("structure:\n  reflow: true\n")

        with pytest.raises(ConfigError, match="reflow"):
            load_structure_config(path, env={})

    def test_invalid_value(self, temp_dir: Path) -> None:
        """Test out-of-range values are reported with the field name."""
        path = temp_dir / "invalid.yaml"
        path.write_text("structure:\n  min_heading_length: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_structure_config(path, env={})

        assert exc_info.value.field == "structure"
        assert "min_heading_length" in str(exc_info.value)


class TestLoadStructureConfigEnv:
    """Tests for environment variable overrides."""

    def test_env_overrides_file(self, temp_dir: Path) -> None:
        """Test environment variables win over file values."""
        path = temp_dir / "pdftool.yaml"
        path.write_text("structure:\n  min_median_length: 30\n")

        config = load_structure_config(
            path,
            env={
                "PDFTOOL_MIN_MEDIAN_LENGTH": "40",
                "PDFTOOL_HEADING_MARKER": "=",
            },
        )

        assert config.min_median_length == 40
        assert config.heading_marker == "="

    def test_unparseable_env_value_ignored(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a non-integer env value is skipped with a warning."""
        with caplog.at_level(logging.WARNING, logger="pdftool"):
            config = load_structure_config(
                env={"PDFTOOL_MAX_PAGE_NUMBER_DIGITS": "many"}
            )

        assert config.max_page_number_digits == 4
        assert "PDFTOOL_MAX_PAGE_NUMBER_DIGITS" in caplog.text

    def test_invalid_env_marker(self) -> None:
        """Test an invalid marker from the environment raises ConfigError."""
        with pytest.raises(ConfigError, match="heading_marker"):
            load_structure_config(env={"PDFTOOL_HEADING_MARKER": "##"})
