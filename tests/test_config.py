"""Tests for configuration defaults and YAML loading."""

import logging
from pathlib import Path

import pytest
import yaml

from qa_artifacts.config.loader import load_config, load_yaml_config
from qa_artifacts.config.schema import DEFAULT_CONFIG, TEXT_FIELDS, ArtifactConfig


def write_yaml(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


class TestArtifactConfig:
    """Tests for ArtifactConfig dataclass."""

    def test_default_config_values(self) -> None:
        """Test that DEFAULT_CONFIG has the documented defaults."""
        assert DEFAULT_CONFIG.project == "Project"
        assert DEFAULT_CONFIG.release == "Release"
        assert DEFAULT_CONFIG.feature == "Feature"
        assert DEFAULT_CONFIG.title == "Bug title"
        for name in ("owner", "approvers", "reported_by", "env"):
            assert getattr(DEFAULT_CONFIG, name) == ""
        assert DEFAULT_CONFIG.force is False
        assert DEFAULT_CONFIG.out is None

    def test_merge_prefers_other_values(self) -> None:
        """Test that merge applies values from the mapping."""
        merged = DEFAULT_CONFIG.merge({"project": "Acme", "out": "docs"})
        assert merged.project == "Acme"
        assert merged.out == Path("docs")

    def test_merge_skips_none_and_unknown(self) -> None:
        """Test that None values and unknown keys are ignored."""
        base = ArtifactConfig(owner="QA")
        merged = base.merge({"owner": None, "colour": "blue"})
        assert merged == base

    def test_merge_returns_new_instance(self) -> None:
        """Test that merge never mutates the original."""
        base = ArtifactConfig()
        merged = base.merge({"release": "v2"})
        assert merged is not base
        assert base.release == "Release"

    def test_merge_stringifies_yaml_scalars(self) -> None:
        """Test that numeric YAML values become strings."""
        merged = DEFAULT_CONFIG.merge({"release": 2.0})
        assert merged.release == "2.0"

    def test_replacements_include_date_and_text_fields(self) -> None:
        """Test the keys of the substitution map."""
        replacements = DEFAULT_CONFIG.replacements("2025-01-15")
        assert set(replacements) == {"date", *TEXT_FIELDS}
        assert "force" not in replacements
        assert "out" not in replacements


class TestLoadYamlConfig:
    """Tests for load_yaml_config."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file returns None."""
        assert load_yaml_config(tmp_path / "missing.yaml") is None

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file returns None."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_yaml_config(path) is None

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test that a YAML list returns None."""
        path = tmp_path / "config.yaml"
        write_yaml(path, ["a", "b"])
        assert load_yaml_config(path) is None

    def test_malformed_yaml_logged(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that malformed YAML is ignored with a warning."""
        path = tmp_path / "config.yaml"
        path.write_text("project: [unclosed\n")
        with caplog.at_level(logging.WARNING, logger="qa_artifacts.config.loader"):
            assert load_yaml_config(path) is None
        assert "Ignoring unreadable config file" in caplog.text

    def test_invalid_utf8_logged(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a file with invalid UTF-8 bytes is ignored with a warning."""
        path = tmp_path / "config.yaml"
        path.write_bytes(b"project: \xff\xfe\n")
        with caplog.at_level(logging.WARNING, logger="qa_artifacts.config.loader"):
            assert load_yaml_config(path) is None
        assert "Ignoring unreadable config file" in caplog.text

    def test_directory_path_logged(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a directory at the config path is ignored with a warning."""
        path = tmp_path / "config.yaml"
        path.mkdir()
        with caplog.at_level(logging.WARNING, logger="qa_artifacts.config.loader"):
            assert load_yaml_config(path) is None
        assert "Ignoring unreadable config file" in caplog.text


class TestLoadConfig:
    """Tests for layered configuration loading."""

    def test_defaults_without_files(self) -> None:
        """Test that no config files gives the built-in defaults."""
        assert load_config() == DEFAULT_CONFIG

    def test_local_overrides_home(self, isolated_config: Path) -> None:
        """Test precedence: defaults < home < local."""
        write_yaml(
            isolated_config / "home" / "config.yaml",
            {"project": "HomeProject", "owner": "Home Owner"},
        )
        write_yaml(isolated_config / "local" / "config.yaml", {"project": "Local"})

        config = load_config()

        assert config.project == "Local"
        assert config.owner == "Home Owner"
        assert config.release == "Release"

    def test_force_cannot_be_set_from_file(self, isolated_config: Path) -> None:
        """Test that force is a command-line only flag."""
        write_yaml(isolated_config / "local" / "config.yaml", {"force": True})
        assert load_config().force is False

    def test_out_cannot_be_set_from_file(
        self, isolated_config: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that out is a command-line only option."""
        write_yaml(
            isolated_config / "local" / "config.yaml",
            {"out": "elsewhere", "project": "Kept"},
        )
        with caplog.at_level(logging.WARNING, logger="qa_artifacts.config.loader"):
            config = load_config()

        assert config.out is None
        assert config.project == "Kept"
        assert "--out" in caplog.text

    def test_non_scalar_values_skipped(
        self, isolated_config: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that list and mapping values are skipped with a warning."""
        write_yaml(
            isolated_config / "local" / "config.yaml",
            {"release": ["a", "b"], "env": {"os": "linux"}, "owner": "QA"},
        )
        with caplog.at_level(logging.WARNING, logger="qa_artifacts.config.loader"):
            config = load_config()

        assert config.release == "Release"
        assert config.env == ""
        assert config.owner == "QA"
        assert "non-scalar value for 'release'" in caplog.text
        assert "non-scalar value for 'env'" in caplog.text

    def test_non_string_keys_skipped(
        self, isolated_config: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that non-string keys are skipped with a warning."""
        path = isolated_config / "local" / "config.yaml"
        path.parent.mkdir(parents=True)
        path.write_text("1: one\nproject: P\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="qa_artifacts.config.loader"):
            config = load_config()

        assert config.project == "P"
        assert "non-string key 1" in caplog.text
