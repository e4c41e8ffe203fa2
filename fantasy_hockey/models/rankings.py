"""
Ranking Data Model

Season standings, the playoff-readiness ranking built on top of them,
and per-day fantasy rankings.
"""

from typing import Any

from pydantic import Field, field_validator

from fantasy_hockey.models.base import DashboardModel, coerce_stat


class Ranking(DashboardModel):
    """A fantasy team's season standing."""

    rank: int = 0
    team_id: int
    team_name: str = ""
    goals: int = 0
    assists: int = 0
    total_points: int = 0

    @field_validator("rank", "goals", "assists", "total_points", mode="before")
    @classmethod
    def _stat_as_int(cls, value: Any) -> int:
        return coerce_stat(value)


class PlayoffTeamRanking(Ranking):
    """Season standing extended with playoff survival counts."""

    teams_in_playoffs: int = 0
    total_teams: int = 0
    players_in_playoffs: int = 0
    total_players: int = 0
    playoff_score: int = 0


class PlayerHighlight(DashboardModel):
    """A point-scoring player featured in the daily ranking."""

    player_name: str = ""
    points: int | float = 0
    nhl_team: str = ""
    image_url: str | None = None
    nhl_id: int | None = None


class DailyFantasyRanking(DashboardModel):
    """A fantasy team's standing for a single day."""

    rank: int
    team_id: int
    team_name: str
    daily_points: int | float = 0
    player_highlights: list[PlayerHighlight] = Field(default_factory=list)
