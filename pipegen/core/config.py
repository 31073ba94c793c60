from pathlib import Path

import yaml
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pipegen.core.errors import ConfigError

# Per-project overrides, read from the project root when present.
PROJECT_CONFIG_FILE = ".pipegen.yaml"


class Settings(BaseSettings):
    """Project-wide configuration handed to every node factory.

    Values come from environment variables prefixed with ``PIPEGEN_``
    (or a local ``.env``), optionally overlaid with the project's
    ``.pipegen.yaml``. The YAML file wins over the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="PIPEGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Go toolchain
    toolchain_image: str = "golang:1.23-alpine"
    golangci_lint_version: str = "v1.61.0"
    gofumpt_version: str = "v0.7.0"
    go_ldflags: str = "-s -w"
    cgo_enabled: bool = False

    # Unit tests write their profile here; the coverage uploader reads it.
    coverage_path: str = "coverage.txt"
    codecov_enabled: bool = True

    # Container images
    image_base: str = "scratch"
    image_registry: str = "ghcr.io"

    @field_validator("coverage_path")
    @classmethod
    def coverage_path_is_relative(cls, v: str) -> str:
        if not v or Path(v).is_absolute():
            raise ValueError("coverage_path must be a non-empty relative path")
        return v


def get_settings() -> Settings:
    return Settings()


def load_settings(root: Path) -> Settings:
    """Return settings for the project at ``root``.

    Raises:
        ConfigError: If ``.pipegen.yaml`` is unreadable, is not a mapping,
            names an unknown setting, or holds an invalid value.
    """
    path = Path(root) / PROJECT_CONFIG_FILE
    if not path.is_file():
        return get_settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to read {PROJECT_CONFIG_FILE}: {exc}") from exc

    if data is None:
        return get_settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{PROJECT_CONFIG_FILE} must contain a mapping at the top level")

    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigError(
            f"{PROJECT_CONFIG_FILE} keys must be strings, got: {', '.join(map(repr, bad_keys))}"
        )

    unknown = sorted(set(data) - set(Settings.model_fields))
    if unknown:
        raise ConfigError(f"Unknown settings in {PROJECT_CONFIG_FILE}: {', '.join(unknown)}")

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid {PROJECT_CONFIG_FILE}: {exc}") from exc
