"""
Bracket State Resolver

Classifies every NHL team that appears in a playoff bracket snapshot as
eliminated, active in the current round, advanced and awaiting its next
opponent, or otherwise still alive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from loguru import logger

from fantasy_hockey.models.nhl_team import to_abbreviation
from fantasy_hockey.models.playoffs import PlayoffBracket, SeedTeam

DEFAULT_PLACEHOLDER_ABBREVS: frozenset[str] = frozenset({"TBD"})


class TeamPlayoffStatus(str, Enum):
    """Single classification of a team against a bracket snapshot."""

    ELIMINATED = "eliminated"
    ACTIVE_CURRENT_ROUND = "active_current_round"
    ADVANCED_PENDING_OPPONENT = "advanced_pending_opponent"
    ALIVE = "alive"
    NOT_IN_BRACKET = "not_in_bracket"


@dataclass(frozen=True)
class BracketState:
    """
    Derived team sets for one bracket snapshot.

    The four predicates are plain set lookups. ``statuses`` holds the
    single-pass classification where each team gets exactly one status:
    eliminated, then still playing an undecided current-round series, then
    advanced (won a series or seeded into a later round), then alive.
    """

    current_round: int = 0
    eliminated: frozenset[str] = frozenset()
    in_playoffs: frozenset[str] = frozenset()
    advanced: frozenset[str] = frozenset()
    current_round_active: frozenset[str] = frozenset()
    statuses: dict[str, TeamPlayoffStatus] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> BracketState:
        """State for an absent bracket: every predicate is False."""
        return cls()

    @property
    def teams(self) -> list[str]:
        """All non-placeholder abbreviations seen in the bracket."""
        return sorted(self.statuses)

    def is_team_in_playoffs(self, team: str | None) -> bool:
        """Whether the team appears in the bracket and is not eliminated."""
        return _team_key(team) in self.in_playoffs

    def is_team_eliminated(self, team: str | None) -> bool:
        """Whether the team has lost a series."""
        return _team_key(team) in self.eliminated

    def has_team_advanced(self, team: str | None) -> bool:
        """Whether the team has won a series or been seeded into a later round."""
        return _team_key(team) in self.advanced

    def is_team_in_current_round(self, team: str | None) -> bool:
        """Whether the team is playing a live series in the current round."""
        return _team_key(team) in self.current_round_active

    def status(self, team: str | None) -> TeamPlayoffStatus:
        """Get the single classification for a team."""
        return self.statuses.get(_team_key(team), TeamPlayoffStatus.NOT_IN_BRACKET)

    def to_dict(self) -> dict:
        """Convert to a camelCase dictionary for display."""
        return {
            "currentRound": self.current_round,
            "eliminated": sorted(self.eliminated),
            "inPlayoffs": sorted(self.in_playoffs),
            "advanced": sorted(self.advanced),
            "currentRoundActive": sorted(self.current_round_active),
            "teams": [
                {"abbrev": abbrev, "status": self.statuses[abbrev].value}
                for abbrev in self.teams
            ],
        }


def _team_key(team: str | None) -> str:
    return to_abbreviation(team)


def _normalize_placeholders(placeholder_abbrevs: Iterable[str] | None) -> frozenset[str]:
    if placeholder_abbrevs is None:
        return DEFAULT_PLACEHOLDER_ABBREVS
    return frozenset(p.strip().upper() for p in placeholder_abbrevs if p and p.strip())


def _is_placeholder(seed: SeedTeam, placeholders: frozenset[str]) -> bool:
    abbrev = seed.abbrev.strip()
    return not abbrev or abbrev.upper() in placeholders


def resolve_bracket(
    bracket: PlayoffBracket | None,
    placeholder_abbrevs: Iterable[str] | None = None,
) -> BracketState:
    """
    Resolve a bracket snapshot into elimination and advancement sets.

    Args:
        bracket: Bracket snapshot, or None when not yet available
        placeholder_abbrevs: Seed abbreviations meaning "not yet decided"
            (defaults to {"TBD"}); blank abbreviations always count

    Returns:
        BracketState; empty when the bracket is absent. A missing current
        round pointer is read as the highest round present.
    """
    if bracket is None or not bracket.rounds:
        return BracketState.empty()

    placeholders = _normalize_placeholders(placeholder_abbrevs)
    current_round = bracket.active_round
    if current_round != bracket.current_round:
        logger.debug(f"Bracket has no current round, using round {current_round}")

    seen: set[str] = set()
    eliminated: set[str] = set()
    series_winners: set[str] = set()
    seeded_later: set[str] = set()
    in_current: set[str] = set()
    # Current-round teams whose series is still undecided
    playing_current: set[str] = set()

    for playoff_round in bracket.rounds:
        round_number = playoff_round.round_number
        for series in playoff_round.series:
            teams = [
                _team_key(seed.abbrev)
                for seed in series.seeds
                if not _is_placeholder(seed, placeholders)
            ]
            seen.update(teams)

            for loser in series.losers():
                if not _is_placeholder(loser, placeholders):
                    eliminated.add(_team_key(loser.abbrev))

            if round_number <= current_round:
                for winner in series.winners():
                    if not _is_placeholder(winner, placeholders):
                        series_winners.add(_team_key(winner.abbrev))
            if round_number > current_round:
                seeded_later.update(teams)
            if round_number == current_round:
                in_current.update(teams)
                if not series.is_complete:
                    playing_current.update(teams)

    in_playoffs = seen - eliminated
    advanced = (series_winners | seeded_later) - eliminated
    current_round_active = in_current - eliminated

    statuses: dict[str, TeamPlayoffStatus] = {}
    for abbrev in seen:
        if abbrev in eliminated:
            statuses[abbrev] = TeamPlayoffStatus.ELIMINATED
        elif abbrev in playing_current:
            statuses[abbrev] = TeamPlayoffStatus.ACTIVE_CURRENT_ROUND
        elif abbrev in advanced:
            statuses[abbrev] = TeamPlayoffStatus.ADVANCED_PENDING_OPPONENT
        else:
            statuses[abbrev] = TeamPlayoffStatus.ALIVE

    logger.debug(
        f"Resolved bracket (round {current_round}): {len(seen)} teams, "
        f"{len(eliminated)} eliminated, {len(current_round_active)} active, "
        f"{len(advanced)} advanced"
    )

    return BracketState(
        current_round=current_round,
        eliminated=frozenset(eliminated),
        in_playoffs=frozenset(in_playoffs),
        advanced=frozenset(advanced),
        current_round_active=frozenset(current_round_active),
        statuses=statuses,
    )
