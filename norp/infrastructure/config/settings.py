import tomllib
from pathlib import Path
from typing import Literal, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from norp.domain.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path("./data/norp.config.toml")


class Settings(BaseSettings):
    """
    Main application settings.
    Values come from the TOML config file; environment variables prefixed
    with NORP_ (or a .env file) fill in anything the file leaves out.
    """
    model_config = SettingsConfigDict(env_prefix='NORP_', env_file='.env', extra='ignore')

    # Path to the JSON world file. Relative paths resolve against the
    # process working directory, not the config file.
    locations_file: Path

    log_file: str = "norp.log"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_case_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class SettingsLoader:
    """
    Loads Settings from a TOML file and validates them.
    Every failure surfaces as a ConfigurationError.
    """

    def load(self, file_path: Optional[Path] = None) -> Settings:
        file_path = Path(file_path) if file_path is not None else DEFAULT_CONFIG_PATH
        if not file_path.exists():
            raise ConfigurationError(file_path, "File not found.")

        try:
            with open(file_path, 'rb') as f:
                raw_config = tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(file_path, "File could not be read.") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(file_path, f"Invalid TOML: {e}") from e

        try:
            return Settings(**raw_config)
        except ValidationError as e:
            missing = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ConfigurationError(file_path, f"Invalid or missing keys: {missing}.") from e


def load_settings(file_path: Optional[Path] = None) -> Settings:
    """Convenience wrapper used by the DI container."""
    return SettingsLoader().load(file_path)
