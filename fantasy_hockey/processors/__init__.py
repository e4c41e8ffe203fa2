"""
Processors Module

Pure derived-state computations over already-decoded datasets. None of
them perform I/O or raise on missing data; absent inputs yield empty
results.

Components:
    - resolve_bracket: bracket elimination/advancement state
    - build_fantasy_team_counts: per-day roster join
    - compose_playoff_rankings: playoff-readiness ranking
    - summarize_games, build_daily_rankings: game-day views
"""

from fantasy_hockey.processors.bracket_state import (
    DEFAULT_PLACEHOLDER_ABBREVS,
    BracketState,
    TeamPlayoffStatus,
    resolve_bracket,
)
from fantasy_hockey.processors.roster_join import (
    UNMATCHED_ID_BASE,
    FantasyTeamIndex,
    JoinResult,
    MatchedTeam,
    UnmatchedTeam,
    build_fantasy_team_counts,
)
from fantasy_hockey.processors.ranking_composer import (
    PLAYER_ALIVE_WEIGHT,
    TEAM_ALIVE_WEIGHT,
    compose_playoff_rankings,
    playoff_score,
)
from fantasy_hockey.processors.game_day import (
    DEFAULT_HIGHLIGHTS_PER_TEAM,
    build_daily_rankings,
    summarize_games,
)

__all__ = [
    # Bracket
    "DEFAULT_PLACEHOLDER_ABBREVS",
    "BracketState",
    "TeamPlayoffStatus",
    "resolve_bracket",
    # Roster join
    "UNMATCHED_ID_BASE",
    "FantasyTeamIndex",
    "JoinResult",
    "MatchedTeam",
    "UnmatchedTeam",
    "build_fantasy_team_counts",
    # Ranking
    "PLAYER_ALIVE_WEIGHT",
    "TEAM_ALIVE_WEIGHT",
    "compose_playoff_rankings",
    "playoff_score",
    # Game day
    "DEFAULT_HIGHLIGHTS_PER_TEAM",
    "build_daily_rankings",
    "summarize_games",
]
