"""
Snapshot Decoding

Turns JSON payloads produced by the external fetch layer into dashboard
models. Payloads may arrive wrapped in a ``{"success": ..., "data": ...}``
envelope, which is unwrapped transparently.

Decoding errors propagate (json.JSONDecodeError, pydantic.ValidationError);
callers at the process boundary decide how to report them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, TypeVar

from loguru import logger
from pydantic import TypeAdapter

from fantasy_hockey.models.fantasy import FantasyTeam, TeamBets, TeamPoints
from fantasy_hockey.models.game import Game, GamesResponse
from fantasy_hockey.models.playoffs import PlayoffBracket
from fantasy_hockey.models.rankings import Ranking

T = TypeVar("T")

_GAMES = TypeAdapter(list[Game])
_REGISTRY = TypeAdapter(list[FantasyTeam])
_RANKINGS = TypeAdapter(list[Ranking])
_TEAM_BETS = TypeAdapter(list[TeamBets])
_TEAM_POINTS_LIST = TypeAdapter(list[TeamPoints])


def unwrap_envelope(payload: Any) -> Any:
    """Strip the API success/data envelope if present."""
    if isinstance(payload, dict) and "success" in payload and "data" in payload:
        return payload["data"]
    return payload


def read_json(path: str | Path) -> Any:
    """Read a JSON file and unwrap its envelope."""
    with open(path) as f:
        return unwrap_envelope(json.load(f))


def parse_games(payload: Any) -> list[Game]:
    """Decode a games payload: either a bare list or a dated games response."""
    payload = unwrap_envelope(payload)
    if isinstance(payload, dict):
        return GamesResponse.model_validate(payload).games
    return _GAMES.validate_python(payload or [])


def parse_registry(payload: Any) -> list[FantasyTeam]:
    return _REGISTRY.validate_python(unwrap_envelope(payload) or [])


def parse_bracket(payload: Any) -> PlayoffBracket:
    return PlayoffBracket.model_validate(unwrap_envelope(payload) or {})


def parse_rankings(payload: Any) -> list[Ranking]:
    return _RANKINGS.validate_python(unwrap_envelope(payload) or [])


def parse_team_bets(payload: Any) -> list[TeamBets]:
    return _TEAM_BETS.validate_python(unwrap_envelope(payload) or [])


def parse_team_points(payload: Any) -> dict[int, TeamPoints]:
    """
    Decode per-team season points.

    Accepts either a mapping of team id to points payload (keys may be
    strings) or a list of points payloads carrying their own teamId.
    """
    payload = unwrap_envelope(payload) or {}
    points_by_team: dict[int, TeamPoints] = {}

    if isinstance(payload, dict):
        for key, data in payload.items():
            try:
                team_id = int(key)
            except (TypeError, ValueError):
                logger.warning(f"Skipping team points under non-numeric key {key!r}")
                continue
            points_by_team[team_id] = TeamPoints.model_validate(data)
        return points_by_team

    for team_points in _TEAM_POINTS_LIST.validate_python(payload):
        if team_points.team_id is None:
            logger.warning(f"Skipping team points without teamId: {team_points.team_name!r}")
            continue
        points_by_team[team_points.team_id] = team_points
    return points_by_team


def load_snapshot(path: str | Path, parser: Callable[[Any], T]) -> T:
    """
    Read and decode a snapshot file.

    Args:
        path: JSON file written by the fetch layer
        parser: One of the parse_* functions

    Returns:
        Decoded models
    """
    logger.debug(f"Loading snapshot {path}")
    return parser(read_json(path))
