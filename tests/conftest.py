"""
Pytest Configuration and Fixtures

Shared fixtures and configuration for the fantasy hockey dashboard test suite.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from fantasy_hockey.models import (
    FantasyTeam,
    Game,
    PlayoffBracket,
    Ranking,
    TeamBets,
    TeamPoints,
)


def _series(letter: str, round_number: int, top: tuple[str, int], bottom: tuple[str, int]) -> dict[str, Any]:
    return {
        "seriesLetter": letter,
        "roundNumber": round_number,
        "seriesLabel": f"{top[0]} vs {bottom[0]}",
        "topSeed": {"abbrev": top[0], "wins": top[1]},
        "bottomSeed": {"abbrev": bottom[0], "wins": bottom[1]},
    }


@pytest.fixture
def sample_bracket_payload() -> dict[str, Any]:
    """
    Bracket in the middle of round 2.

    Round 1 is complete (TBL, BOS, LAK, NSH out). In round 2, FLA-TOR is
    still being played and EDM has just beaten VAN. Round 3 has EDM seeded
    against an undecided opponent.
    """
    return {
        "currentRound": 2,
        "rounds": [
            {
                "roundNumber": 1,
                "roundLabel": "1st-round",
                "roundAbbrev": "R1",
                "series": [
                    _series("A", 1, ("FLA", 4), ("TBL", 1)),
                    _series("B", 1, ("BOS", 3), ("TOR", 4)),
                    _series("E", 1, ("EDM", 4), ("LAK", 2)),
                    _series("F", 1, ("VAN", 4), ("NSH", 2)),
                ],
            },
            {
                "roundNumber": 2,
                "roundLabel": "2nd-round",
                "roundAbbrev": "R2",
                "series": [
                    _series("I", 2, ("FLA", 2), ("TOR", 1)),
                    _series("K", 2, ("EDM", 4), ("VAN", 3)),
                ],
            },
            {
                "roundNumber": 3,
                "roundLabel": "conference-finals",
                "roundAbbrev": "CF",
                "series": [
                    _series("M", 3, ("TBD", 0), ("TBD", 0)),
                    _series("N", 3, ("EDM", 0), ("TBD", 0)),
                ],
            },
        ],
    }


@pytest.fixture
def sample_bracket(sample_bracket_payload) -> PlayoffBracket:
    return PlayoffBracket.model_validate(sample_bracket_payload)


@pytest.fixture
def scenario_a_bracket() -> PlayoffBracket:
    """One round, one finished series: BOS beat TOR 4-2."""
    return PlayoffBracket.model_validate({
        "currentRound": 1,
        "rounds": [
            {
                "roundNumber": 1,
                "series": [_series("A", 1, ("BOS", 4), ("TOR", 2))],
            }
        ],
    })


@pytest.fixture
def fantasy_registry_payload() -> list[dict[str, Any]]:
    return [
        {"id": 1, "name": "Alpha", "abbreviation": "ALP", "teamLogo": "alpha.png"},
        {"id": 2, "name": "Beta", "abbreviation": "BET"},
        {"id": 3, "name": "Gamma Rays"},
    ]


@pytest.fixture
def fantasy_registry(fantasy_registry_payload) -> list[FantasyTeam]:
    return [FantasyTeam.model_validate(team) for team in fantasy_registry_payload]


@pytest.fixture
def sample_games_payload() -> list[dict[str, Any]]:
    """Two games on the same night; McDavid's entry appears in both."""
    return [
        {
            "id": 2024030221,
            "homeTeam": "Florida Panthers",
            "awayTeam": "Toronto Maple Leafs",
            "homeTeamLogo": "fla.svg",
            "awayTeamLogo": "tor.svg",
            "gameState": "LIVE",
            "homeTeamPlayers": [
                {"fantasyTeam": "Alpha", "playerName": "Sam Reinhart", "nhlId": 8477933,
                 "position": "C", "goals": 1, "assists": 1, "points": 2},
                {"fantasyTeam": "beta", "playerName": "Aleksander Barkov", "nhlId": 8477493,
                 "position": "C", "goals": 0, "assists": 1, "points": 1},
                {"fantasyTeam": "", "playerName": "Matthew Tkachuk", "points": 3},
            ],
            "awayTeamPlayers": [
                {"fantasyTeam": "Alpha", "playerName": "Auston Matthews", "nhlId": 8479318,
                 "position": "C", "points": None},
                {"fantasyTeam": "Unknown Skaters", "playerName": "Mitch Marner",
                 "nhlId": 8478483, "position": "RW", "points": 2},
            ],
            "seriesStatus": {
                "round": 2,
                "topSeedTeamAbbrev": "FLA",
                "topSeedWins": 2,
                "bottomSeedTeamAbbrev": "TOR",
                "bottomSeedWins": 1,
                "gameNumberOfSeries": 4,
            },
        },
        {
            "id": 2024030222,
            "homeTeam": "Edmonton Oilers",
            "awayTeam": "Vancouver Canucks",
            "homeTeamLogo": "edm.svg",
            "awayTeamLogo": "van.svg",
            "homeTeamPlayers": [
                {"fantasyTeam": "BET", "playerName": "Connor McDavid", "nhlId": 8478402,
                 "position": "C", "points": 3},
                {"fantasyTeam": "ALPHA", "playerName": "Leon Draisaitl", "nhlId": 8477934,
                 "position": "C", "points": "n/a"},
            ],
            "awayTeamPlayers": None,
        },
    ]


@pytest.fixture
def sample_games(sample_games_payload) -> list[Game]:
    return [Game.model_validate(game) for game in sample_games_payload]


@pytest.fixture
def season_rankings() -> list[Ranking]:
    return [
        Ranking(rank=1, team_id=1, team_name="Alpha", goals=40, assists=60, total_points=100),
        Ranking(rank=2, team_id=2, team_name="Beta", goals=35, assists=55, total_points=90),
        Ranking(rank=3, team_id=3, team_name="Gamma Rays", goals=30, assists=40, total_points=70),
    ]


@pytest.fixture
def team_bets() -> list[TeamBets]:
    return [
        TeamBets.model_validate({
            "teamId": 1,
            "teamName": "Alpha",
            "bets": [{"nhlTeam": "FLA"}, {"nhlTeam": "BOS"}, {"nhlTeam": "TBL"}],
        }),
        TeamBets.model_validate({
            "teamId": 2,
            "teamName": "Beta",
            "bets": [{"nhlTeam": "EDM"}, {"nhlTeam": "TOR"}],
        }),
    ]


@pytest.fixture
def team_points_by_team_id() -> dict[int, TeamPoints]:
    return {
        1: TeamPoints.model_validate({
            "teamId": 1,
            "teamName": "Alpha",
            "players": [
                {"name": "Sam Reinhart", "nhlTeam": "FLA", "totalPoints": 20},
                {"name": "David Pastrnak", "nhlTeam": "BOS", "totalPoints": 18},
            ],
        }),
        2: TeamPoints.model_validate({
            "teamId": 2,
            "teamName": "Beta",
            "players": [
                {"name": "Connor McDavid", "nhlTeam": "EDM", "totalPoints": 30},
                {"name": "Leon Draisaitl", "nhlTeam": "EDM", "totalPoints": 28},
                {"name": "Auston Matthews", "nhlTeam": "TOR", "totalPoints": 15},
            ],
        }),
        3: TeamPoints.model_validate({
            "teamId": 3,
            "teamName": "Gamma Rays",
            "players": [{"name": "Quinn Hughes", "nhlTeam": "VAN", "totalPoints": 12}],
        }),
    }


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a payload to a JSON file under tmp_path and return its path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload))
        return path

    return _write
