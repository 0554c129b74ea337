import os
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from dotenv import load_dotenv
from .exceptions import ConfigError

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseModel):
    """Runtime settings. The supported year range is fixed and not configurable."""
    log_level: str = Field(default="WARNING")
    log_file: bool = Field(default=False, description="Also write logs to logs/dayofweek_YYYYMMDD.log")
    banner: bool = Field(default=True, description="Print the calculator banner before prompting")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}. Use one of {', '.join(LOG_LEVELS)}.")
        return level

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        raw = {}
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise ConfigError(f"Config file not found: {path}")

            try:
                raw = yaml.safe_load(p.read_text()) or {}
            except Exception as e:
                raise ConfigError(f"Failed to parse YAML: {e}")

            if not isinstance(raw, dict):
                raise ConfigError(f"Invalid configuration: expected a mapping in {path}")

        # Environment variable overrides
        if level := os.getenv("DAYOFWEEK_LOG_LEVEL"):
            raw["log_level"] = level
        if log_file := os.getenv("DAYOFWEEK_LOG_FILE"):
            raw["log_file"] = log_file
        if banner := os.getenv("DAYOFWEEK_BANNER"):
            raw["banner"] = banner

        try:
            return cls(**raw)
        except Exception as e:
            raise ConfigError(f"Invalid configuration: {e}")

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with non-None overrides applied (e.g. from CLI flags)"""
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        try:
            return type(self)(**{**self.model_dump(), **values})
        except Exception as e:
            raise ConfigError(f"Invalid configuration: {e}")
