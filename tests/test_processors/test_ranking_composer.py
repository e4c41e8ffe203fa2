"""
Tests for the Ranking Composer

Validates playoff score composition, ordering, and the all-or-nothing
handling of missing datasets.
"""

import pytest

from fantasy_hockey.models import Ranking, TeamBets, TeamPoints
from fantasy_hockey.processors.bracket_state import resolve_bracket
from fantasy_hockey.service.snapshots import parse_rankings, parse_team_points
from fantasy_hockey.processors.ranking_composer import (
    PLAYER_ALIVE_WEIGHT,
    TEAM_ALIVE_WEIGHT,
    compose_playoff_rankings,
    playoff_score,
)


def test_weights():
    """Test the fixed score weights."""
    assert TEAM_ALIVE_WEIGHT == 10
    assert PLAYER_ALIVE_WEIGHT == 5
    assert playoff_score(1, 2) == 20
    assert playoff_score(0, 0) == 0


def test_single_team_scenario(scenario_a_bracket):
    """Test two bets (one alive) and two players on the surviving team."""
    state = resolve_bracket(scenario_a_bracket)
    rankings = [Ranking(rank=1, team_id=7, team_name="Solo", total_points=50)]
    bets = [TeamBets.model_validate({"teamId": 7, "bets": [{"nhlTeam": "BOS"}, {"nhlTeam": "TOR"}]})]
    points = {7: TeamPoints.model_validate({"players": [{"nhlTeam": "BOS"}, {"nhlTeam": "BOS"}]})}

    (row,) = compose_playoff_rankings(rankings, bets, points, state.is_team_in_playoffs)

    assert row.teams_in_playoffs == 1
    assert row.total_teams == 2
    assert row.players_in_playoffs == 2
    assert row.total_players == 2
    assert row.playoff_score == 20
    assert row.team_name == "Solo"
    assert row.total_points == 50


def test_sample_league(season_rankings, team_bets, team_points_by_team_id, sample_bracket):
    """Test scores and counts for a three-team league mid round 2."""
    state = resolve_bracket(sample_bracket)

    rows = compose_playoff_rankings(
        season_rankings, team_bets, team_points_by_team_id, state.is_team_in_playoffs
    )

    assert [(r.team_name, r.playoff_score) for r in rows] == [
        ("Beta", 35),
        ("Alpha", 15),
        ("Gamma Rays", 0),
    ]
    beta, alpha, gamma = rows
    assert (beta.teams_in_playoffs, beta.total_teams) == (2, 2)
    assert (beta.players_in_playoffs, beta.total_players) == (3, 3)
    assert (alpha.teams_in_playoffs, alpha.total_teams) == (1, 3)
    assert (alpha.players_in_playoffs, alpha.total_players) == (1, 2)
    # No bets registered for Gamma Rays
    assert (gamma.teams_in_playoffs, gamma.total_teams) == (0, 0)
    assert (gamma.players_in_playoffs, gamma.total_players) == (0, 1)
    # Season fields carried through
    assert beta.rank == 2


def test_score_formula_and_order_hold(season_rankings, team_bets, team_points_by_team_id, sample_bracket):
    """Test every row obeys the score formula and rows are sorted by score."""
    state = resolve_bracket(sample_bracket)

    rows = compose_playoff_rankings(
        season_rankings, team_bets, team_points_by_team_id, state.is_team_in_playoffs
    )

    for row in rows:
        assert row.playoff_score == row.teams_in_playoffs * 10 + row.players_in_playoffs * 5
    scores = [row.playoff_score for row in rows]
    assert scores == sorted(scores, reverse=True)


def test_ties_keep_season_order():
    """Test tied scores keep season ranking order."""
    rankings = [
        Ranking(rank=1, team_id=1, team_name="First"),
        Ranking(rank=2, team_id=2, team_name="Second"),
        Ranking(rank=3, team_id=3, team_name="Third"),
    ]
    bets = [
        TeamBets(team_id=2, bets=[{"nhlTeam": "BOS"}]),
        TeamBets(team_id=3, bets=[{"nhlTeam": "BOS"}]),
    ]

    rows = compose_playoff_rankings(rankings, bets, {}, lambda abbrev: abbrev == "BOS")

    assert [r.team_name for r in rows] == ["Second", "Third", "First"]


def test_string_keyed_points():
    """Test points decoded straight from JSON with string keys."""
    rankings = [Ranking(team_id=4, team_name="Keys")]
    points = {"4": TeamPoints.model_validate({"players": [{"nhlTeam": "EDM"}]})}

    (row,) = compose_playoff_rankings(rankings, [], points, lambda abbrev: abbrev == "EDM")

    assert row.players_in_playoffs == 1
    assert row.playoff_score == 5


def test_first_bets_entry_wins():
    """Test the first bets entry for a team is used."""
    rankings = [Ranking(team_id=1)]
    bets = [
        TeamBets(team_id=1, bets=[{"nhlTeam": "BOS"}]),
        TeamBets(team_id=1, bets=[{"nhlTeam": "BOS"}, {"nhlTeam": "TOR"}]),
    ]

    (row,) = compose_playoff_rankings(rankings, bets, {}, lambda abbrev: True)

    assert row.total_teams == 1


def test_players_without_team_are_not_alive(scenario_a_bracket):
    """Test players with no NHL team never count as alive."""
    state = resolve_bracket(scenario_a_bracket)
    points = {1: TeamPoints.model_validate({"players": [{"name": "Free Agent", "nhlTeam": None}]})}

    (row,) = compose_playoff_rankings([Ranking(team_id=1)], [], points, state.is_team_in_playoffs)

    assert row.total_players == 1
    assert row.players_in_playoffs == 0


@pytest.mark.parametrize("missing", ["rankings", "team_bets", "points", "predicate"])
def test_missing_dataset_returns_empty(missing, season_rankings, team_bets, team_points_by_team_id):
    """Test any missing dataset gives an empty ranking."""
    inputs = {
        "rankings": season_rankings,
        "team_bets": team_bets,
        "points": team_points_by_team_id,
        "predicate": lambda abbrev: True,
    }
    inputs[missing] = None

    assert compose_playoff_rankings(
        inputs["rankings"], inputs["team_bets"], inputs["points"], inputs["predicate"]
    ) == []


def test_payload_keys(scenario_a_bracket):
    """Test payload keys are camelCase."""
    state = resolve_bracket(scenario_a_bracket)

    (row,) = compose_playoff_rankings([Ranking(team_id=1)], [], {}, state.is_team_in_playoffs)
    payload = row.to_payload()

    assert set(payload) >= {
        "teamId", "teamsInPlayoffs", "totalTeams", "playersInPlayoffs", "totalPlayers", "playoffScore",
    }


def test_null_stats_do_not_drop_teams(scenario_a_bracket):
    """Test null or malformed season stats decode to 0 and still rank."""
    state = resolve_bracket(scenario_a_bracket)
    rankings = parse_rankings([
        {"rank": 1, "teamId": 1, "teamName": "Alpha", "goals": None, "assists": "n/a", "totalPoints": 12},
        {"rank": None, "teamId": 2, "teamName": "Beta", "goals": 3, "totalPoints": None},
    ])
    points = parse_team_points({
        "1": {"players": [{"nhlTeam": "BOS", "goals": None, "totalPoints": "7"}]},
        "2": {"players": [{"nhlTeam": "TOR", "assists": None}]},
    })
    bets = [TeamBets.model_validate({"teamId": 2, "bets": [{"nhlTeam": "BOS", "numPlayers": None}]})]

    rows = compose_playoff_rankings(rankings, bets, points, state.is_team_in_playoffs)

    assert [(r.team_name, r.playoff_score) for r in rows] == [("Beta", 10), ("Alpha", 5)]
    beta, alpha = rows
    assert (alpha.goals, alpha.assists, alpha.total_points) == (0, 0, 12)
    assert (beta.rank, beta.total_points) == (0, 0)
    assert points[1].players[0].total_points == 7
