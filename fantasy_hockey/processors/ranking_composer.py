"""
Ranking Composer

Blends season standings with playoff survival into a single
playoff-readiness ranking.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from loguru import logger

from fantasy_hockey.models.fantasy import SkaterStats, TeamBet, TeamBets, TeamPoints
from fantasy_hockey.models.rankings import PlayoffTeamRanking, Ranking

# Fixed weights; part of the ranking contract
TEAM_ALIVE_WEIGHT = 10
PLAYER_ALIVE_WEIGHT = 5

PlayoffPredicate = Callable[[str], bool]


def playoff_score(teams_in_playoffs: int, players_in_playoffs: int) -> int:
    """Composite score: teams alive x 10 + players alive x 5."""
    return teams_in_playoffs * TEAM_ALIVE_WEIGHT + players_in_playoffs * PLAYER_ALIVE_WEIGHT


def _lookup_points(
    team_points_by_team_id: Mapping[int | str, TeamPoints],
    team_id: int,
) -> TeamPoints | None:
    # Decoded JSON objects carry string keys
    snapshot = team_points_by_team_id.get(team_id)
    if snapshot is None:
        snapshot = team_points_by_team_id.get(str(team_id))
    return snapshot


def _count_alive(bets: Sequence[TeamBet], players: Sequence[SkaterStats],
                 is_team_in_playoffs: PlayoffPredicate) -> tuple[int, int]:
    teams_alive = sum(1 for bet in bets if is_team_in_playoffs(bet.nhl_team))
    players_alive = sum(1 for player in players if is_team_in_playoffs(player.nhl_team or ""))
    return teams_alive, players_alive


def compose_playoff_rankings(
    rankings: Sequence[Ranking] | None,
    team_bets: Sequence[TeamBets] | None,
    team_points_by_team_id: Mapping[int | str, TeamPoints] | None,
    is_team_in_playoffs: PlayoffPredicate | None,
) -> list[PlayoffTeamRanking]:
    """
    Compose the playoff-readiness ranking.

    Args:
        rankings: Season rankings
        team_bets: Each fantasy team's NHL-team bets
        team_points_by_team_id: Season roster snapshot per fantasy team id
        is_team_in_playoffs: Predicate over NHL team abbreviations

    Returns:
        Rankings sorted by playoff score, descending (ties keep season
        order); empty if any input is not yet available
    """
    if (
        rankings is None
        or team_bets is None
        or team_points_by_team_id is None
        or is_team_in_playoffs is None
    ):
        logger.debug("Playoff rankings skipped: input datasets incomplete")
        return []

    bets_by_team: dict[int, list[TeamBet]] = {}
    for entry in team_bets:
        bets_by_team.setdefault(entry.team_id, entry.bets)

    rows: list[PlayoffTeamRanking] = []
    for ranking in rankings:
        bets = bets_by_team.get(ranking.team_id, [])
        snapshot = _lookup_points(team_points_by_team_id, ranking.team_id)
        players = snapshot.players if snapshot is not None else []

        teams_alive, players_alive = _count_alive(bets, players, is_team_in_playoffs)
        rows.append(
            PlayoffTeamRanking(
                **ranking.model_dump(),
                teams_in_playoffs=teams_alive,
                total_teams=len(bets),
                players_in_playoffs=players_alive,
                total_players=len(players),
                playoff_score=playoff_score(teams_alive, players_alive),
            )
        )

    rows.sort(key=lambda row: row.playoff_score, reverse=True)
    return rows
