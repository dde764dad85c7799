"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from classpath_infer.core.config.loader import ConfigLoader

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"

S = TypeVar("S", bound=BaseSettings)


def _optional_path(v: str | Path | None) -> Path | None:
    if v is None or v == "":
        return None
    return Path(v).expanduser()


class InferenceSettings(BaseSettings):
    """Classpath inference settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSPATH_INFER_INFERENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    maven_home: Path | None = Field(
        default=None,
        description="Maven home containing repository/ (default: ~/.m2)",
    )
    gradle_home: Path | None = Field(
        default=None,
        description="Gradle user home containing caches/ (default: $GRADLE_USER_HOME or ~/.gradle)",
    )
    maven_executable: str | None = Field(
        default=None,
        description="Explicit Maven executable (default: mvn, or mvn.cmd/mvn.bat on Windows)",
    )
    dependency_list_timeout: int = Field(
        default=300,
        ge=1,
        le=3600,
        description="Timeout for the dependency listing command in seconds",
    )
    dependency_list_goal: str = Field(
        default="dependency:list",
        description="Maven goal that prints the resolved dependencies",
    )

    @field_validator("maven_home", "gradle_home", mode="before")
    @classmethod
    def validate_home(cls, v: str | Path | None) -> Path | None:
        """Validate and convert repository homes to Path."""
        return _optional_path(v)


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSPATH_INFER_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        return _optional_path(v)


def _under_env(settings_cls: type[S], section: dict[str, Any]) -> S:
    """Build a settings section where environment values win over file values."""
    from_env = settings_cls().model_fields_set
    return settings_cls(**{k: v for k, v in section.items() if k not in from_env})


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSPATH_INFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    inference: InferenceSettings = Field(default_factory=InferenceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Environment variables still take precedence over the file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            inference=_under_env(InferenceSettings, loader.get_section("inference")),
            logging=_under_env(LoggingSettings, loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Priority: Environment variables > .env > config/default.yaml > defaults

        Returns:
            Settings instance.
        """
        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml(DEFAULT_CONFIG_PATH)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
