#!/usr/bin/env python3
"""
Command-line views over dashboard snapshots.

Reads JSON snapshots written by the fetch layer and prints the derived
views the dashboard renders.

Usage:
    python -m cli.main bracket --bracket data/playoffs.json
    python -m cli.main fantasy-teams --games data/games.json --teams data/teams.json
    python -m cli.main daily --games data/games.json --teams data/teams.json
    python -m cli.main playoff-rankings --rankings data/rankings.json \\
        --bets data/team_bets.json --points data/team_points.json \\
        --bracket data/playoffs.json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

import yaml
from loguru import logger
from pydantic import ValidationError

from fantasy_hockey.config import load_config
from fantasy_hockey.models.fantasy import FantasyTeamCount
from fantasy_hockey.models.game import GameDaySummary
from fantasy_hockey.models.nhl_team import get_logo_url, get_nhl_team, get_url_slug
from fantasy_hockey.models.playoffs import PlayoffBracket
from fantasy_hockey.models.rankings import DailyFantasyRanking, PlayoffTeamRanking
from fantasy_hockey.processors.bracket_state import BracketState
from fantasy_hockey.service.dashboard import DashboardService
from fantasy_hockey.service.snapshots import (
    load_snapshot,
    parse_bracket,
    parse_games,
    parse_rankings,
    parse_registry,
    parse_team_bets,
    parse_team_points,
)


def configure_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Configure logging for CLI usage."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else level,
        format="<level>{level}</level>: {message}",
    )


def print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def bracket_rows(state: BracketState, teams: Sequence[str] | None = None) -> list[dict[str, str]]:
    """
    Build one display row per team.

    Args:
        state: Resolved bracket state
        teams: Team identifiers to show (default: every team in the bracket)

    Returns:
        Rows with abbreviation, name, status, nhl.com slug and logo URL
    """
    rows = []
    for identifier in (list(teams) if teams else state.teams):
        nhl_team = get_nhl_team(identifier)
        abbrev = nhl_team.abbreviation if nhl_team else identifier.strip().upper()
        rows.append({
            "abbrev": abbrev,
            "name": nhl_team.full_name if nhl_team else abbrev,
            "status": state.status(identifier).value,
            "urlSlug": get_url_slug(identifier),
            "logoUrl": nhl_team.logo_url if nhl_team else get_logo_url(abbrev),
        })
    return rows


def print_bracket(
    state: BracketState,
    bracket: PlayoffBracket | None = None,
    teams: Sequence[str] | None = None,
) -> None:
    """Print the current round's series followed by a per-team status table."""
    print(f"\nPlayoff Bracket (current round: {state.current_round})")
    print("-" * 50)

    current = bracket.get_round(state.current_round) if bracket is not None else None
    if current is not None and current.series:
        for series in current.series:
            top, bottom = series.top_seed, series.bottom_seed
            print(f"  {top.abbrev or 'TBD':>3} {top.wins} - {bottom.wins} {bottom.abbrev or 'TBD'}")
        print()

    rows = bracket_rows(state, teams)
    if not rows:
        print("  No bracket data")
        return

    for row in rows:
        print(f"  [{row['abbrev']:>3}] {row['name']:<25} {row['status']}")
    print()


def print_fantasy_teams(team_counts: Sequence[FantasyTeamCount]) -> None:
    """Print each fantasy team's players in action."""
    if not team_counts:
        print("\nNo fantasy players in action")
        return

    for team in team_counts:
        marker = "" if team.matched else " (unmatched)"
        print(f"\n{team.team_name}{marker}: {team.player_count} players, {team.total_points} pts")
        print("-" * 50)
        for player in team.players:
            print(f"  {player.player_name:<25} {player.nhl_team:<25} {player.point_value:>3}")
    print()


def print_daily(rankings: Sequence[DailyFantasyRanking], summary: GameDaySummary) -> None:
    """Print daily rankings followed by the game-day summary."""
    print("\nDaily Rankings")
    print("-" * 50)
    if not rankings:
        print("  No rankings for this date")
    for ranking in rankings:
        print(f"  {ranking.rank:>2}. {ranking.team_name:<30} {ranking.daily_points:>4} pts")
        for highlight in ranking.player_highlights:
            print(f"        {highlight.player_name} ({highlight.nhl_team}) {highlight.points}")

    print(
        f"\nGames: {summary.total_games} ({summary.playoff_games} playoff)   "
        f"Teams playing: {summary.total_teams_playing}"
    )
    for team_count in summary.team_players_count:
        print(f"  {team_count.nhl_team:<25} {team_count.player_count:>3} players")
    print()


def print_playoff_rankings(rankings: Sequence[PlayoffTeamRanking]) -> None:
    """Print the playoff-readiness table."""
    print("\nPlayoff Rankings")
    print("-" * 70)
    if not rankings:
        print("  Rankings unavailable")
        return

    print(f"  {'#':>2}  {'Team':<30} {'Teams':>7} {'Players':>9} {'Score':>6}")
    for position, row in enumerate(rankings, start=1):
        teams = f"{row.teams_in_playoffs}/{row.total_teams}"
        players = f"{row.players_in_playoffs}/{row.total_players}"
        print(f"  {position:>2}  {row.team_name:<30} {teams:>7} {players:>9} {row.playoff_score:>6}")
    print()


def cmd_bracket(args: argparse.Namespace, service: DashboardService) -> int:
    bracket = load_snapshot(args.bracket, parse_bracket)
    state = service.bracket_state(bracket)
    if args.json:
        payload = state.to_dict()
        payload["teams"] = bracket_rows(state, args.team)
        print_json(payload)
    else:
        print_bracket(state, bracket, args.team)
    return 0


def cmd_fantasy_teams(args: argparse.Namespace, service: DashboardService) -> int:
    team_counts = service.fantasy_team_counts(
        load_snapshot(args.games, parse_games),
        load_snapshot(args.teams, parse_registry),
    )
    if args.json:
        print_json([team.to_payload() for team in team_counts])
    else:
        print_fantasy_teams(team_counts)
    return 0


def cmd_daily(args: argparse.Namespace, service: DashboardService) -> int:
    games = load_snapshot(args.games, parse_games)
    team_counts = service.fantasy_team_counts(games, load_snapshot(args.teams, parse_registry))
    rankings = service.daily_rankings(team_counts)
    summary = service.game_day_summary(games)
    if args.json:
        print_json({
            "rankings": [ranking.to_payload() for ranking in rankings],
            "summary": summary.to_payload(),
        })
    else:
        print_daily(rankings, summary)
    return 0


def cmd_playoff_rankings(args: argparse.Namespace, service: DashboardService) -> int:
    rankings = service.playoff_rankings(
        load_snapshot(args.rankings, parse_rankings),
        load_snapshot(args.bets, parse_team_bets),
        load_snapshot(args.points, parse_team_points),
        load_snapshot(args.bracket, parse_bracket),
    )
    if args.json:
        print_json([row.to_payload() for row in rankings])
    else:
        print_playoff_rankings(rankings)
    return 0


COMMANDS = {
    "bracket": cmd_bracket,
    "fantasy-teams": cmd_fantasy_teams,
    "daily": cmd_daily,
    "playoff-rankings": cmd_playoff_rankings,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fantasy Hockey Dashboard views",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Status of every team in the bracket
  python -m cli.main bracket --bracket data/playoffs.json

  # Status of specific teams, as JSON
  python -m cli.main --json bracket --bracket data/playoffs.json --team BOS --team TOR

  # Fantasy teams in action on a date
  python -m cli.main fantasy-teams --games data/games.json --teams data/teams.json
        """,
    )
    parser.add_argument("--config", type=str, default=None,
                        help="Path to config file (default: config/dashboard.yaml)")
    parser.add_argument("--json", action="store_true", help="Print camelCase JSON payloads")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="View to print")

    bracket_parser = subparsers.add_parser("bracket", help="Playoff bracket status per team")
    bracket_parser.add_argument("--bracket", required=True, help="Playoff bracket JSON")
    bracket_parser.add_argument("--team", action="append", default=None,
                                help="Team abbreviation to show (repeatable)")

    teams_parser = subparsers.add_parser("fantasy-teams", help="Fantasy teams in action")
    teams_parser.add_argument("--games", required=True, help="Games JSON for the date")
    teams_parser.add_argument("--teams", required=True, help="Fantasy team registry JSON")

    daily_parser = subparsers.add_parser("daily", help="Daily rankings and game-day summary")
    daily_parser.add_argument("--games", required=True, help="Games JSON for the date")
    daily_parser.add_argument("--teams", required=True, help="Fantasy team registry JSON")

    playoff_parser = subparsers.add_parser("playoff-rankings", help="Playoff-readiness rankings")
    playoff_parser.add_argument("--rankings", required=True, help="Season rankings JSON")
    playoff_parser.add_argument("--bets", required=True, help="Team bets JSON")
    playoff_parser.add_argument("--points", required=True, help="Team points JSON")
    playoff_parser.add_argument("--bracket", required=True, help="Playoff bracket JSON")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command not in COMMANDS:
        parser.print_help()
        return 0

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.error(f"Invalid config {args.config}: {e}")
        return 1
    configure_logging(args.verbose, config.logging.level)

    service = DashboardService(config)
    try:
        return COMMANDS[args.command](args, service)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Could not read snapshot: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
