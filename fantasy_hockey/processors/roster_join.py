"""
Roster Join Engine

Rolls a day's games up into per-fantasy-team player groupings and point
totals. Roster entries name their fantasy team with a free-form string, so
the join is best-effort: names are resolved against the registry and
anything unresolved is kept visible as its own unmatched team.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from loguru import logger

from fantasy_hockey.models.fantasy import FantasyTeam, FantasyTeamCount
from fantasy_hockey.models.game import Game, RosterAppearance

# Synthetic ids for unmatched names start here, clear of real registry ids
UNMATCHED_ID_BASE = 10000


@dataclass(frozen=True)
class MatchedTeam:
    """A roster name that resolved to a registry team."""

    team_id: int
    team_name: str
    team_logo: str | None = None


@dataclass(frozen=True)
class UnmatchedTeam:
    """A roster name with no registry counterpart."""

    raw_name: str


JoinResult = Union[MatchedTeam, UnmatchedTeam]


class FantasyTeamIndex:
    """
    Name lookup over the fantasy team registry.

    A name matches a team by exact name or abbreviation, then by case-folded
    name or abbreviation. When the name matches nothing, the id declared on
    the roster entry is tried. The first registry entry wins when two teams
    share a key.
    """

    def __init__(self, registry: Iterable[FantasyTeam]) -> None:
        self._exact: dict[str, FantasyTeam] = {}
        self._folded: dict[str, FantasyTeam] = {}
        self._by_id: dict[int, FantasyTeam] = {}
        self._size = 0
        for team in registry:
            self._size += 1
            self._by_id.setdefault(team.id, team)
            for key in (team.name, team.abbreviation):
                if not key:
                    continue
                self._exact.setdefault(key, team)
                self._folded.setdefault(key.casefold(), team)

    def __len__(self) -> int:
        return self._size

    def resolve(self, raw_name: str, declared_id: int | None = None) -> JoinResult:
        """
        Resolve a roster-supplied fantasy team name.

        Args:
            raw_name: The fantasyTeam string from a roster entry
            declared_id: The fantasyTeamId from the same entry, if any

        Returns:
            MatchedTeam or UnmatchedTeam
        """
        name = raw_name.strip()
        team = self._exact.get(name) or self._folded.get(name.casefold())
        if team is None and declared_id is not None:
            team = self._by_id.get(declared_id)
        if team is None:
            return UnmatchedTeam(raw_name=name)
        return MatchedTeam(team_id=team.id, team_name=team.name, team_logo=team.team_logo)


def _new_team_count(
    match: JoinResult,
    unmatched_ids: dict[str, int],
    unmatched_id_base: int,
) -> FantasyTeamCount:
    if isinstance(match, MatchedTeam):
        return FantasyTeamCount(
            team_id=match.team_id,
            team_name=match.team_name,
            team_logo=match.team_logo,
        )

    team_id = unmatched_id_base + len(unmatched_ids)
    unmatched_ids[match.raw_name] = team_id
    logger.warning(
        f"No fantasy team found for '{match.raw_name}', "
        f"grouping as unmatched team {team_id}"
    )
    return FantasyTeamCount(team_id=team_id, team_name=match.raw_name, matched=False)


def build_fantasy_team_counts(
    games: Sequence[Game] | None,
    registry: Sequence[FantasyTeam] | None,
    unmatched_id_base: int = UNMATCHED_ID_BASE,
) -> list[FantasyTeamCount]:
    """
    Group a day's rostered players by fantasy team.

    Every roster entry with a non-blank fantasyTeam is counted once per game
    appearance. Players within each team are ordered by points, descending,
    with ties kept in encounter order. Teams are returned in the order they
    are first encountered (games in input order, home roster before away).

    Unmatched names are split into one synthetic team per distinct name,
    with ids ``unmatched_id_base + n`` assigned in first-encounter order.

    Args:
        games: The day's games, or None when not yet loaded
        registry: Known fantasy teams, or None when not yet loaded
        unmatched_id_base: First synthetic id for unmatched names

    Returns:
        List of FantasyTeamCount, empty when either input is missing or empty
    """
    if not games or not registry:
        return []

    index = FantasyTeamIndex(registry)
    counts: dict[JoinResult, FantasyTeamCount] = {}
    unmatched_ids: dict[str, int] = {}

    for game in games:
        for players, nhl_team, team_logo in game.rosters():
            for player in players:
                if not player.has_fantasy_team:
                    continue

                match = index.resolve(player.fantasy_team, player.fantasy_team_id)
                entry = counts.get(match)
                if entry is None:
                    entry = _new_team_count(match, unmatched_ids, unmatched_id_base)
                    counts[match] = entry

                entry.player_count += 1
                entry.total_points += player.point_value
                entry.players.append(
                    RosterAppearance(
                        **player.model_dump(),
                        game_id=game.id,
                        nhl_team=nhl_team,
                        team_logo=team_logo,
                    )
                )

    for entry in counts.values():
        entry.players.sort(key=lambda p: p.point_value, reverse=True)

    result = [entry for entry in counts.values() if entry.player_count > 0]
    logger.debug(
        f"Joined {len(games)} games into {len(result)} fantasy teams "
        f"({len(unmatched_ids)} unmatched)"
    )
    return result
