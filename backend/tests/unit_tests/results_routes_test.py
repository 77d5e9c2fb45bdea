from typing import Any

import pytest
from starlette.exceptions import HTTPException

from pokerleague.logic.scoring.game_result import GameType
from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.logic.scoring.scorer import build_game_scorer
from pokerleague.models.db.player import Player
from pokerleague.models.db.result import (
    RecordResultsBody,
    TournamentPlayerInsertable,
    TournamentResultView,
)
from pokerleague.models.db.series import Series
from pokerleague.routes import results as results_routes
from pokerleague.routes import util as route_util
from pokerleague.utils.dummy_records import DUMMY_SERIES, DUMMY_TOURNAMENT, dummy_player
from pokerleague.utils.id_types import PlayerId, SeriesId, TournamentId


def _patch_lookups(
    monkeypatch: pytest.MonkeyPatch,
    stored: dict[str, Any],
    series: Series = DUMMY_SERIES,
    known_players: tuple[int, ...] = (1, 2, 3),
) -> None:
    async def fake_get_players_by_ids(player_ids: list[PlayerId]) -> list[Player]:
        return [
            dummy_player(player_id, f"P{player_id}")
            for player_id in player_ids
            if player_id in known_players
        ]

    async def fake_get_series_by_id(_: SeriesId) -> Series:
        return series

    async def fake_replace(
        tournament_id: TournamentId,
        game_type: GameType,
        rows: list[TournamentPlayerInsertable],
        total_players: int,
    ) -> None:
        stored["tournament_id"] = tournament_id
        stored["game_type"] = game_type
        stored["rows"] = rows
        stored["total_players"] = total_players

    async def fake_get_results(_: TournamentId) -> list[TournamentResultView]:
        return []

    monkeypatch.setattr(results_routes, "get_players_by_ids", fake_get_players_by_ids)
    monkeypatch.setattr(results_routes, "get_series_by_id", fake_get_series_by_id)
    monkeypatch.setattr(results_routes, "sql_replace_results", fake_replace)
    monkeypatch.setattr(results_routes, "get_results_for_tournament", fake_get_results)


@pytest.mark.asyncio
async def test_record_results_persists_scored_points(monkeypatch: pytest.MonkeyPatch) -> None:
    stored: dict[str, Any] = {}
    _patch_lookups(monkeypatch, stored)
    body = RecordResultsBody.model_validate(
        {
            "total_players": 20,
            "bounty_point_value": 2,
            "results": [
                {"player_id": 1, "rank": 1, "bounty_count": 1},
                {"player_id": 2, "rank": 1},
                {"player_id": 3, "rank": 3},
            ],
        }
    )

    await results_routes.record_tournament_results(body, DUMMY_TOURNAMENT, build_game_scorer())

    assert stored["game_type"] is GameType.TOURNAMENT
    assert {row.player_id: row.points for row in stored["rows"]} == {1: 200, 2: 200, 3: 160}
    assert stored["rows"][0].bounty_points == 2


@pytest.mark.asyncio
async def test_record_consolation_results(monkeypatch: pytest.MonkeyPatch) -> None:
    stored: dict[str, Any] = {}
    _patch_lookups(monkeypatch, stored)
    body = RecordResultsBody.model_validate(
        {
            "game_type": "CONSOLATION",
            "results": [{"player_id": 1, "rank": 2}, {"player_id": 2, "rank": 2}],
        }
    )

    await results_routes.record_tournament_results(body, DUMMY_TOURNAMENT, build_game_scorer())

    assert stored["game_type"] is GameType.CONSOLATION
    assert [row.consolation_points for row in stored["rows"]] == [50, 50]


@pytest.mark.asyncio
async def test_record_results_uses_series_points_system(monkeypatch: pytest.MonkeyPatch) -> None:
    stored: dict[str, Any] = {}
    fixed_series = DUMMY_SERIES.model_copy(update={"points_system": PointsSystem.FIXED})
    _patch_lookups(monkeypatch, stored, series=fixed_series)
    body = RecordResultsBody.model_validate(
        {"results": [{"player_id": 1, "rank": 1}, {"player_id": 2, "rank": 2}]}
    )

    await results_routes.record_tournament_results(body, DUMMY_TOURNAMENT, build_game_scorer())

    assert [row.points for row in stored["rows"]] == [100, 80]


@pytest.mark.asyncio
async def test_record_results_unknown_player(monkeypatch: pytest.MonkeyPatch) -> None:
    stored: dict[str, Any] = {}
    _patch_lookups(monkeypatch, stored, known_players=(1,))
    body = RecordResultsBody.model_validate(
        {"results": [{"player_id": 1, "rank": 1}, {"player_id": 99, "rank": 2}]}
    )

    with pytest.raises(HTTPException) as exc_info:
        await results_routes.record_tournament_results(body, DUMMY_TOURNAMENT, build_game_scorer())

    assert exc_info.value.status_code == 404
    assert "99" in str(exc_info.value.detail)
    assert stored == {}


@pytest.mark.asyncio
async def test_finalized_tournament_rejects_changes() -> None:
    finalized = DUMMY_TOURNAMENT.model_copy(update={"is_finalized": True})

    with pytest.raises(HTTPException) as exc_info:
        await route_util.disallow_finalized_tournament(finalized)

    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_corrected_submission_replaces_previous_results(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    stored: dict[str, Any] = {}
    _patch_lookups(monkeypatch, stored)
    body = RecordResultsBody.model_validate(
        {"results": [{"player_id": 2, "rank": 1}, {"player_id": 3, "rank": 2}]}
    )

    await results_routes.record_tournament_results(body, DUMMY_TOURNAMENT, build_game_scorer())

    assert stored["tournament_id"] == DUMMY_TOURNAMENT.id
    assert stored["total_players"] == 2
    assert [row.player_id for row in stored["rows"]] == [2, 3]
    assert [row.final_position for row in stored["rows"]] == [1, 2]


@pytest.mark.asyncio
async def test_delete_missing_result(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_result_exists(_: TournamentId, __: PlayerId) -> bool:
        return False

    monkeypatch.setattr(results_routes, "sql_result_exists", fake_result_exists)

    with pytest.raises(HTTPException) as exc_info:
        await results_routes.delete_tournament_result(PlayerId(5), DUMMY_TOURNAMENT)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_existing_result(monkeypatch: pytest.MonkeyPatch) -> None:
    deleted: list[tuple[TournamentId, PlayerId]] = []

    async def fake_result_exists(_: TournamentId, __: PlayerId) -> bool:
        return True

    async def fake_delete(tournament_id: TournamentId, player_id: PlayerId) -> None:
        deleted.append((tournament_id, player_id))

    monkeypatch.setattr(results_routes, "sql_result_exists", fake_result_exists)
    monkeypatch.setattr(results_routes, "sql_delete_result", fake_delete)

    response = await results_routes.delete_tournament_result(PlayerId(5), DUMMY_TOURNAMENT)

    assert response.success is True
    assert deleted == [(DUMMY_TOURNAMENT.id, PlayerId(5))]
