"""
Fantasy Team Data Model

Registry entries, NHL-team bets, season point snapshots, and the per-day
fantasy team rollup produced by the roster join.
"""

from typing import Any

from pydantic import Field, field_validator

from fantasy_hockey.models.base import DashboardModel, coerce_stat
from fantasy_hockey.models.game import RosterAppearance


class FantasyTeam(DashboardModel):
    """A fantasy team as listed in the upstream registry."""

    id: int
    name: str
    abbreviation: str | None = None
    team_logo: str | None = None


class TeamBet(DashboardModel):
    """An NHL team a fantasy team has bet on."""

    nhl_team: str
    nhl_team_name: str = ""
    num_players: int = 0
    team_logo: str | None = None

    @field_validator("num_players", mode="before")
    @classmethod
    def _stat_as_int(cls, value: Any) -> int:
        return coerce_stat(value)


class TeamBets(DashboardModel):
    """All NHL-team bets declared by one fantasy team."""

    team_id: int
    team_name: str = ""
    bets: list[TeamBet] = Field(default_factory=list)

    @field_validator("bets", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SkaterStats(DashboardModel):
    """A rostered skater with season totals."""

    name: str = ""
    nhl_team: str = ""
    nhl_id: int | None = None
    position: str = ""
    goals: int = 0
    assists: int = 0
    total_points: int = 0
    image_url: str | None = None
    team_logo: str | None = None

    @field_validator("nhl_team", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("goals", "assists", "total_points", mode="before")
    @classmethod
    def _stat_as_int(cls, value: Any) -> int:
        return coerce_stat(value)


class TeamTotals(DashboardModel):
    goals: int = 0
    assists: int = 0
    total_points: int = 0

    @field_validator("goals", "assists", "total_points", mode="before")
    @classmethod
    def _stat_as_int(cls, value: Any) -> int:
        return coerce_stat(value)


class TeamPoints(DashboardModel):
    """Season roster and point totals for one fantasy team."""

    team_id: int | None = None
    team_name: str = ""
    players: list[SkaterStats] = Field(default_factory=list)
    team_totals: TeamTotals | None = None

    @field_validator("players", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class FantasyTeamCount(DashboardModel):
    """
    Per-day rollup of a fantasy team's players in action.

    Built fresh by the roster join for every date window; never persisted.
    """

    team_id: int
    team_name: str
    team_logo: str | None = None
    player_count: int = 0
    players: list[RosterAppearance] = Field(default_factory=list)
    total_points: int | float = 0
    # False when the name on the roster entries matched no registry team
    matched: bool = True

    def is_consistent(self) -> bool:
        """Check count and point totals against the player list."""
        return self.player_count == len(self.players) and self.total_points == sum(
            player.point_value for player in self.players
        )
