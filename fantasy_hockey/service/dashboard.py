"""
Dashboard Service

Coordinates the derived-state components in dependency order:

  1. Bracket state from the playoff bracket
  2. Fantasy team rollups from the day's games and the team registry
  3. Playoff-readiness rankings from standings, bets, season rosters and
     the bracket state

Each dataset is optional. A missing dataset only blanks the views that
depend on it. Results are memoized by input fingerprint when caching is
enabled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence, TypeVar

from loguru import logger

from fantasy_hockey.config import DashboardConfig
from fantasy_hockey.models.fantasy import FantasyTeam, FantasyTeamCount, TeamBets, TeamPoints
from fantasy_hockey.models.game import Game, GameDaySummary
from fantasy_hockey.models.playoffs import PlayoffBracket
from fantasy_hockey.models.rankings import DailyFantasyRanking, PlayoffTeamRanking, Ranking
from fantasy_hockey.processors.bracket_state import BracketState, resolve_bracket
from fantasy_hockey.processors.game_day import build_daily_rankings, summarize_games
from fantasy_hockey.processors.ranking_composer import compose_playoff_rankings
from fantasy_hockey.processors.roster_join import build_fantasy_team_counts
from fantasy_hockey.service.cache import DerivedStateCache

T = TypeVar("T")


@dataclass
class DashboardSnapshot:
    """Every derived view for one set of inputs."""

    bracket_state: BracketState = field(default_factory=BracketState.empty)
    fantasy_team_counts: list[FantasyTeamCount] = field(default_factory=list)
    daily_rankings: list[DailyFantasyRanking] = field(default_factory=list)
    game_day_summary: GameDaySummary = field(default_factory=GameDaySummary)
    playoff_rankings: list[PlayoffTeamRanking] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a camelCase dictionary for presentation."""
        return {
            "bracket": self.bracket_state.to_dict(),
            "fantasyTeamCounts": [team.to_payload() for team in self.fantasy_team_counts],
            "dailyRankings": [ranking.to_payload() for ranking in self.daily_rankings],
            "gameDaySummary": self.game_day_summary.to_payload(),
            "playoffRankings": [ranking.to_payload() for ranking in self.playoff_rankings],
        }


class DashboardService:
    """
    Entry point for the presentation layer.

    Holds configuration and the memoization cache; holds no dataset state
    between calls.
    """

    def __init__(self, config: DashboardConfig | None = None) -> None:
        self.config = config or DashboardConfig()
        self.cache: DerivedStateCache | None = None
        if self.config.cache.enabled:
            self.cache = DerivedStateCache(max_entries=self.config.cache.max_entries)

        logger.info(f"DashboardService initialized (cache {'on' if self.cache else 'off'})")

    def _memoized(self, namespace: str, inputs: tuple[Any, ...], compute: Callable[[], T]) -> T:
        if self.cache is None:
            return compute()
        key = DerivedStateCache.fingerprint(namespace, *inputs)
        return self.cache.get_or_compute(key, compute)

    def bracket_state(self, bracket: PlayoffBracket | None) -> BracketState:
        """Resolve the bracket, or an empty state when it is absent."""
        placeholders = self.config.bracket.placeholder_abbrevs
        return self._memoized(
            "bracket",
            (bracket, placeholders),
            lambda: resolve_bracket(bracket, placeholders),
        )

    def fantasy_team_counts(
        self,
        games: Sequence[Game] | None,
        registry: Sequence[FantasyTeam] | None,
    ) -> list[FantasyTeamCount]:
        """Roll a day's games up by fantasy team."""
        id_base = self.config.roster_join.unmatched_id_base
        return self._memoized(
            "fantasy_team_counts",
            (games, registry, id_base),
            lambda: build_fantasy_team_counts(games, registry, unmatched_id_base=id_base),
        )

    def daily_rankings(self, team_counts: Sequence[FantasyTeamCount] | None) -> list[DailyFantasyRanking]:
        return build_daily_rankings(
            team_counts,
            highlights_per_team=self.config.daily_rankings.highlights_per_team,
        )

    def game_day_summary(self, games: Sequence[Game] | None) -> GameDaySummary:
        return summarize_games(games)

    def playoff_rankings(
        self,
        rankings: Sequence[Ranking] | None,
        team_bets: Sequence[TeamBets] | None,
        team_points_by_team_id: Mapping[int | str, TeamPoints] | None,
        bracket: PlayoffBracket | None,
    ) -> list[PlayoffTeamRanking]:
        """
        Compose playoff-readiness rankings.

        An absent bracket counts as a missing dataset, so the result is
        empty rather than scoring every team as eliminated.
        """
        if bracket is None:
            return []
        state = self.bracket_state(bracket)
        return self._memoized(
            "playoff_rankings",
            (rankings, team_bets, team_points_by_team_id, bracket,
             self.config.bracket.placeholder_abbrevs),
            lambda: compose_playoff_rankings(
                rankings, team_bets, team_points_by_team_id, state.is_team_in_playoffs
            ),
        )

    def build_snapshot(
        self,
        *,
        games: Sequence[Game] | None = None,
        registry: Sequence[FantasyTeam] | None = None,
        bracket: PlayoffBracket | None = None,
        rankings: Sequence[Ranking] | None = None,
        team_bets: Sequence[TeamBets] | None = None,
        team_points_by_team_id: Mapping[int | str, TeamPoints] | None = None,
    ) -> DashboardSnapshot:
        """
        Compute every derived view from whichever datasets are available.

        Returns:
            DashboardSnapshot; views whose inputs are missing are empty
        """
        team_counts = self.fantasy_team_counts(games, registry)
        snapshot = DashboardSnapshot(
            bracket_state=self.bracket_state(bracket),
            fantasy_team_counts=team_counts,
            daily_rankings=self.daily_rankings(team_counts),
            game_day_summary=self.game_day_summary(games),
            playoff_rankings=self.playoff_rankings(
                rankings, team_bets, team_points_by_team_id, bracket
            ),
        )
        logger.debug(
            f"Built snapshot: {len(snapshot.fantasy_team_counts)} fantasy teams, "
            f"{len(snapshot.playoff_rankings)} playoff rankings"
        )
        return snapshot
