"""
Data Models Module

Pydantic models for the upstream datasets the dashboard consumes and the
derived records it produces.

Models:
    - Game, GamePlayer: a day's games and their fantasy-owned players
    - PlayoffBracket: rounds and series of the playoff bracket
    - FantasyTeam, TeamBets, TeamPoints: fantasy registry and season data
    - FantasyTeamCount, PlayoffTeamRanking, DailyFantasyRanking: derived views
    - NHLTeam: franchise reference data
"""

from fantasy_hockey.models.base import DashboardModel, coerce_points, coerce_stat
from fantasy_hockey.models.game import (
    Game,
    GameDaySummary,
    GamePlayer,
    GamesResponse,
    RosterAppearance,
    SeriesStatus,
    TeamPlayerCount,
)
from fantasy_hockey.models.playoffs import (
    SERIES_WINS_TO_ADVANCE,
    PlayoffBracket,
    PlayoffRound,
    PlayoffSeries,
    SeedTeam,
)
from fantasy_hockey.models.fantasy import (
    FantasyTeam,
    FantasyTeamCount,
    SkaterStats,
    TeamBet,
    TeamBets,
    TeamPoints,
    TeamTotals,
)
from fantasy_hockey.models.rankings import (
    DailyFantasyRanking,
    PlayerHighlight,
    PlayoffTeamRanking,
    Ranking,
)
from fantasy_hockey.models.nhl_team import (
    NHL_TEAMS,
    NHLTeam,
    get_logo_url,
    get_nhl_team,
    get_url_slug,
    to_abbreviation,
)

__all__ = [
    "DashboardModel",
    "coerce_points",
    "coerce_stat",
    # Games
    "Game",
    "GameDaySummary",
    "GamePlayer",
    "GamesResponse",
    "RosterAppearance",
    "SeriesStatus",
    "TeamPlayerCount",
    # Playoffs
    "SERIES_WINS_TO_ADVANCE",
    "PlayoffBracket",
    "PlayoffRound",
    "PlayoffSeries",
    "SeedTeam",
    # Fantasy
    "FantasyTeam",
    "FantasyTeamCount",
    "SkaterStats",
    "TeamBet",
    "TeamBets",
    "TeamPoints",
    "TeamTotals",
    # Rankings
    "DailyFantasyRanking",
    "PlayerHighlight",
    "PlayoffTeamRanking",
    "Ranking",
    # Reference
    "NHL_TEAMS",
    "NHLTeam",
    "get_logo_url",
    "get_nhl_team",
    "get_url_slug",
    "to_abbreviation",
]
