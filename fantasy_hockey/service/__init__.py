"""Service layer coordinating derived views and snapshot decoding."""

from .cache import DerivedStateCache
from .dashboard import DashboardService, DashboardSnapshot
from .snapshots import (
    load_snapshot,
    parse_bracket,
    parse_games,
    parse_rankings,
    parse_registry,
    parse_team_bets,
    parse_team_points,
    read_json,
    unwrap_envelope,
)

__all__ = [
    "DerivedStateCache",
    "DashboardService",
    "DashboardSnapshot",
    "load_snapshot",
    "parse_bracket",
    "parse_games",
    "parse_rankings",
    "parse_registry",
    "parse_team_bets",
    "parse_team_points",
    "read_json",
    "unwrap_envelope",
]
