"""
Dashboard Configuration

Loads dashboard settings from YAML, falling back to built-in defaults when
no configuration file is present.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field

from fantasy_hockey.processors.game_day import DEFAULT_HIGHLIGHTS_PER_TEAM
from fantasy_hockey.processors.roster_join import UNMATCHED_ID_BASE

DEFAULT_CONFIG_PATH = Path("config/dashboard.yaml")


class BracketConfig(BaseModel):
    """Bracket resolution settings."""

    placeholder_abbrevs: list[str] = Field(default_factory=lambda: ["TBD"])


class RosterJoinConfig(BaseModel):
    """Roster join settings."""

    unmatched_id_base: int = Field(default=UNMATCHED_ID_BASE, gt=0)


class DailyRankingsConfig(BaseModel):
    """Daily ranking settings."""

    highlights_per_team: int = Field(default=DEFAULT_HIGHLIGHTS_PER_TEAM, ge=0)


class CacheConfig(BaseModel):
    """Derived-state memoization settings."""

    enabled: bool = True
    max_entries: int = Field(default=32, ge=1)


class LoggingConfig(BaseModel):
    level: str = "WARNING"


class DashboardConfig(BaseModel):
    """Complete dashboard configuration."""

    bracket: BracketConfig = Field(default_factory=BracketConfig)
    roster_join: RosterJoinConfig = Field(default_factory=RosterJoinConfig)
    daily_rankings: DailyRankingsConfig = Field(default_factory=DailyRankingsConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_yaml(config_path: Path) -> dict[str, Any]:
    with open(config_path) as f:
        data = yaml.safe_load(f)
    return data or {}


def load_config(config_path: str | Path | None = None) -> DashboardConfig:
    """
    Load dashboard configuration.

    Args:
        config_path: Path to a YAML file. Defaults to config/dashboard.yaml

    Returns:
        DashboardConfig; defaults when the file does not exist

    Raises:
        yaml.YAMLError: If the file is not valid YAML
        pydantic.ValidationError: If a setting has an invalid value
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        logger.warning(f"Dashboard config not found at {config_path}, using defaults")
        return DashboardConfig()

    config = DashboardConfig.model_validate(_read_yaml(config_path))
    logger.debug(f"Loaded dashboard config from {config_path}")
    return config
