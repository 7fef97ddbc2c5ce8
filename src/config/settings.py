"""Centralized configuration management using Pydantic Settings.

This module provides a single source of truth for all configuration values
of the toll fee calculator. All settings can be overridden via environment
variables or a ``.env`` file.
"""

from pathlib import Path
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support.

    For example, FINAL_DAY_FOLD=capped switches the calculator to cap the
    last day of a calculation like every other day.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ========== Policy Source ==========
    toll_policy_json: Optional[Path] = Field(
        default=None,
        description="Policy JSON file replacing the built-in policy tables"
    )

    # ========== Aggregation Behaviour ==========
    final_day_fold: Literal["legacy", "capped"] = Field(
        default="legacy",
        description=(
            "How the last day is added to the total. 'legacy' adds the last "
            "entry's fee plus the closed windows without the daily cap; "
            "'capped' folds it like every other day"
        )
    )
    empty_chargeable_policy: Literal["raise", "zero"] = Field(
        default="raise",
        description="Raise or return 0 when no chargeable entries remain after filtering"
    )

    # ========== Logging ==========
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file in addition to the console"
    )

    def get_toll_policy_path(self, project_dir: Path) -> Optional[Path]:
        """Get absolute path to the configured policy JSON file.

        Args:
            project_dir: Project root directory

        Returns:
            Absolute path to the policy file, or None when the built-in
            policy is in use.
        """
        if self.toll_policy_json is None:
            return None
        if self.toll_policy_json.is_absolute():
            return self.toll_policy_json
        return project_dir / self.toll_policy_json


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Creates and caches a Settings instance on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


settings = get_settings()
