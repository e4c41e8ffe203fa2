"""
Game Data Model

Pydantic models for a day's NHL games and the fantasy-owned players
dressed in them.
"""

from typing import Any, Iterator

from pydantic import Field, field_validator

from fantasy_hockey.models.base import DashboardModel, coerce_points, coerce_stat


class GamePlayer(DashboardModel):
    """A roster entry for one game, optionally owned by a fantasy team."""

    fantasy_team: str | None = None
    fantasy_team_id: int | None = None
    player_name: str = ""
    position: str = ""
    nhl_id: int | None = None
    image_url: str | None = None
    goals: int | None = None
    assists: int | None = None
    # Raw upstream value; use point_value for arithmetic
    points: Any = None

    @field_validator("fantasy_team_id", mode="before")
    @classmethod
    def _optional_id(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @field_validator("goals", "assists", mode="before")
    @classmethod
    def _optional_stat(cls, value: Any) -> int | None:
        return None if value is None else coerce_stat(value)

    @property
    def point_value(self) -> int | float:
        """Points as a number, 0 when absent or malformed."""
        return coerce_points(self.points)

    @property
    def has_fantasy_team(self) -> bool:
        """Whether the entry names a fantasy team owner."""
        return bool(self.fantasy_team and self.fantasy_team.strip())


class RosterAppearance(GamePlayer):
    """A GamePlayer annotated with the game it appeared in."""

    game_id: int
    nhl_team: str = ""
    team_logo: str | None = None


class SeriesStatus(DashboardModel):
    """Playoff series context attached to a game."""

    round: int = 0
    series_title: str = ""
    top_seed_team_abbrev: str = ""
    top_seed_wins: int = 0
    bottom_seed_team_abbrev: str = ""
    bottom_seed_wins: int = 0
    game_number_of_series: int = 0

    @field_validator("round", "top_seed_wins", "bottom_seed_wins", "game_number_of_series", mode="before")
    @classmethod
    def _stat_as_int(cls, value: Any) -> int:
        return coerce_stat(value)


class Game(DashboardModel):
    """A single NHL game with fantasy-relevant home and away rosters."""

    id: int
    home_team: str = ""
    away_team: str = ""
    start_time: str | None = None
    venue: str | None = None
    home_team_players: list[GamePlayer] = Field(default_factory=list)
    away_team_players: list[GamePlayer] = Field(default_factory=list)
    home_team_logo: str | None = None
    away_team_logo: str | None = None
    home_score: int | None = None
    away_score: int | None = None
    game_state: str | None = None
    period: str | int | None = None
    series_status: SeriesStatus | None = None

    @field_validator("home_team_players", "away_team_players", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("home_team", "away_team", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_playoff_game(self) -> bool:
        """Whether the game carries playoff series metadata."""
        return self.series_status is not None

    def rosters(self) -> Iterator[tuple[list[GamePlayer], str, str]]:
        """
        Iterate over both rosters, home first.

        Yields:
            (players, nhl_team, team_logo) tuples
        """
        yield self.home_team_players, self.home_team, self.home_team_logo or ""
        yield self.away_team_players, self.away_team, self.away_team_logo or ""


class TeamPlayerCount(DashboardModel):
    """Number of rostered players an NHL team dresses on a given day."""

    nhl_team: str
    player_count: int = 0


class GameDaySummary(DashboardModel):
    """Aggregate view over a day's games."""

    total_games: int = 0
    playoff_games: int = 0
    total_teams_playing: int = 0
    team_players_count: list[TeamPlayerCount] = Field(default_factory=list)


class GamesResponse(DashboardModel):
    """Games payload for a calendar date."""

    date: str = ""
    games: list[Game] = Field(default_factory=list)
    summary: GameDaySummary | None = None

    @field_validator("games", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
