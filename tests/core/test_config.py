"""Tests for settings loading."""

import pytest

from pipegen.core import ConfigError
from pipegen.core.config import PROJECT_CONFIG_FILE, Settings, get_settings, load_settings


def _config(tmp_path, content: str):
    (tmp_path / PROJECT_CONFIG_FILE).write_text(content, encoding="utf-8")
    return tmp_path


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.coverage_path == "coverage.txt"
        assert settings.image_base == "scratch"
        assert settings.codecov_enabled is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PIPEGEN_TOOLCHAIN_IMAGE", "golang:1.21")
        monkeypatch.setenv("PIPEGEN_CGO_ENABLED", "true")
        settings = get_settings()
        assert settings.toolchain_image == "golang:1.21"
        assert settings.cgo_enabled is True

    def test_absolute_coverage_path_rejected(self):
        with pytest.raises(ValueError):
            Settings(coverage_path="/tmp/coverage.txt")


class TestLoadSettings:
    def test_no_project_file_uses_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PIPEGEN_IMAGE_BASE", "alpine:3.20")
        assert load_settings(tmp_path).image_base == "alpine:3.20"

    def test_project_file_overrides_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PIPEGEN_IMAGE_BASE", "alpine:3.20")
        _config(tmp_path, "image_base: distroless\ncoverage_path: cover.out\n")

        settings = load_settings(tmp_path)

        assert settings.image_base == "distroless"
        assert settings.coverage_path == "cover.out"

    def test_empty_project_file(self, tmp_path):
        _config(tmp_path, "")
        assert load_settings(tmp_path) == Settings()

    def test_unknown_key(self, tmp_path):
        _config(tmp_path, "image_bsae: distroless\n")
        with pytest.raises(ConfigError, match="image_bsae"):
            load_settings(tmp_path)

    def test_non_string_key(self, tmp_path):
        _config(tmp_path, "1: x\n")
        with pytest.raises(ConfigError, match="keys must be strings"):
            load_settings(tmp_path)

    def test_mixed_string_and_non_string_keys(self, tmp_path):
        _config(tmp_path, "1: x\nfoo: y\n")
        with pytest.raises(ConfigError, match="keys must be strings"):
            load_settings(tmp_path)

    def test_not_a_mapping(self, tmp_path):
        _config(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        _config(tmp_path, "image_base: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to read"):
            load_settings(tmp_path)

    def test_invalid_value(self, tmp_path):
        _config(tmp_path, "coverage_path: /abs/coverage.txt\n")
        with pytest.raises(ConfigError, match="Invalid"):
            load_settings(tmp_path)
