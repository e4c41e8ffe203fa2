"""
Playoff Bracket Data Model

Rounds and best-of-seven series as published by the NHL bracket feed.
"""

from typing import Any

from pydantic import Field, field_validator

from fantasy_hockey.models.base import DashboardModel, coerce_stat

# A best-of-seven series ends when either side reaches four wins
SERIES_WINS_TO_ADVANCE = 4


class SeedTeam(DashboardModel):
    """One side of a playoff series."""

    id: int | None = None
    abbrev: str = ""
    wins: int = 0

    @field_validator("abbrev", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("wins", mode="before")
    @classmethod
    def _stat_as_int(cls, value: Any) -> int:
        return coerce_stat(value)

    @property
    def has_clinched(self) -> bool:
        """Whether this side has won the series."""
        return self.wins == SERIES_WINS_TO_ADVANCE


class PlayoffSeries(DashboardModel):
    """A best-of-seven matchup between two seeds."""

    series_letter: str = ""
    round_number: int = 0
    series_label: str = ""
    top_seed: SeedTeam = Field(default_factory=SeedTeam)
    bottom_seed: SeedTeam = Field(default_factory=SeedTeam)

    @property
    def seeds(self) -> tuple[SeedTeam, SeedTeam]:
        return self.top_seed, self.bottom_seed

    @property
    def is_complete(self) -> bool:
        """Whether either side has clinched."""
        return self.top_seed.has_clinched or self.bottom_seed.has_clinched

    def winners(self) -> list[SeedTeam]:
        """Sides that have clinched (normally zero or one)."""
        return [seed for seed in self.seeds if seed.has_clinched]

    def losers(self) -> list[SeedTeam]:
        """Sides whose opponent has clinched."""
        losers = []
        if self.top_seed.has_clinched:
            losers.append(self.bottom_seed)
        if self.bottom_seed.has_clinched:
            losers.append(self.top_seed)
        return losers


class PlayoffRound(DashboardModel):
    """A numbered round of the bracket."""

    round_number: int
    round_label: str = ""
    round_abbrev: str = ""
    series: list[PlayoffSeries] = Field(default_factory=list)

    @field_validator("series", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class PlayoffBracket(DashboardModel):
    """The full bracket snapshot plus the current round pointer."""

    current_round: int = 0
    rounds: list[PlayoffRound] = Field(default_factory=list)

    @field_validator("current_round", mode="before")
    @classmethod
    def _round_as_int(cls, value: Any) -> int:
        return coerce_stat(value)

    @field_validator("rounds", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def get_round(self, round_number: int) -> PlayoffRound | None:
        """Get a round by number."""
        for playoff_round in self.rounds:
            if playoff_round.round_number == round_number:
                return playoff_round
        return None

    @property
    def active_round(self) -> int:
        """
        Round the bracket is currently in.

        Falls back to the highest round present when the feed omits the
        current round pointer (NHL rounds are numbered from 1).
        """
        if self.current_round > 0 or not self.rounds:
            return self.current_round
        return max(playoff_round.round_number for playoff_round in self.rounds)
