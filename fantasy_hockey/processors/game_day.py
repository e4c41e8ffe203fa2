"""
Game Day Processor

Day-level views over games and fantasy team rollups: the game-day summary
and the daily fantasy ranking.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from fantasy_hockey.models.fantasy import FantasyTeamCount
from fantasy_hockey.models.game import Game, GameDaySummary, TeamPlayerCount
from fantasy_hockey.models.rankings import DailyFantasyRanking, PlayerHighlight

DEFAULT_HIGHLIGHTS_PER_TEAM = 3


def summarize_games(games: Sequence[Game] | None) -> GameDaySummary:
    """
    Summarize a day's games.

    Args:
        games: The day's games

    Returns:
        GameDaySummary with the number of games (and of playoff games) and
        rostered-player counts per NHL team, sorted by count descending then
        team name
    """
    if not games:
        return GameDaySummary()

    player_counts: Counter[str] = Counter()
    for game in games:
        for players, nhl_team, _ in game.rosters():
            if not nhl_team:
                continue
            player_counts[nhl_team] += len(players)

    team_counts = [
        TeamPlayerCount(nhl_team=team, player_count=count)
        for team, count in sorted(player_counts.items(), key=lambda item: (-item[1], item[0]))
    ]

    return GameDaySummary(
        total_games=len(games),
        playoff_games=sum(1 for game in games if game.is_playoff_game),
        total_teams_playing=len(player_counts),
        team_players_count=team_counts,
    )


def build_daily_rankings(
    team_counts: Sequence[FantasyTeamCount] | None,
    highlights_per_team: int = DEFAULT_HIGHLIGHTS_PER_TEAM,
) -> list[DailyFantasyRanking]:
    """
    Rank fantasy teams by the points their players scored today.

    Tied teams share a rank and the following rank is skipped (1, 2, 2, 4).

    Args:
        team_counts: Output of the roster join
        highlights_per_team: Maximum point-scoring players to feature

    Returns:
        Daily rankings, best first
    """
    if not team_counts:
        return []

    ordered = sorted(team_counts, key=lambda team: team.total_points, reverse=True)

    rankings: list[DailyFantasyRanking] = []
    previous_points = None
    rank = 0
    for position, team in enumerate(ordered, start=1):
        if team.total_points != previous_points:
            rank = position
            previous_points = team.total_points

        scorers = sorted(
            (player for player in team.players if player.point_value > 0),
            key=lambda player: player.point_value,
            reverse=True,
        )
        highlights = [
            PlayerHighlight(
                player_name=player.player_name,
                points=player.point_value,
                nhl_team=player.nhl_team,
                image_url=player.image_url,
                nhl_id=player.nhl_id,
            )
            for player in scorers[: max(highlights_per_team, 0)]
        ]

        rankings.append(
            DailyFantasyRanking(
                rank=rank,
                team_id=team.team_id,
                team_name=team.team_name,
                daily_points=team.total_points,
                player_highlights=highlights,
            )
        )

    return rankings
