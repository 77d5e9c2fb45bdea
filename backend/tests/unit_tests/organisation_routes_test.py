import datetime
from typing import Any

import pytest
from starlette.exceptions import HTTPException

from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.logic.scoring.scorer import GameScorer, build_game_scorer
from pokerleague.models.db.season import SeasonUpdateBody
from pokerleague.models.db.series import Series, SeriesUpdateBody
from pokerleague.models.db.tournament import Tournament, TournamentBody
from pokerleague.routes import seasons as seasons_routes
from pokerleague.routes import series as series_routes
from pokerleague.routes import tournaments as tournaments_routes
from pokerleague.routes import util as route_util
from pokerleague.utils.dummy_records import (
    DUMMY_DATE,
    DUMMY_SEASON,
    DUMMY_SERIES,
    DUMMY_TOURNAMENT,
)
from pokerleague.utils.id_types import SeriesId, TournamentId


def _tournament_body() -> TournamentBody:
    return TournamentBody(series_id=DUMMY_SERIES.id, name="Night 3", date=DUMMY_DATE)


@pytest.mark.asyncio
async def test_create_tournament_respects_series_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    limited_series = DUMMY_SERIES.model_copy(update={"max_tournaments": 2})

    async def fake_series_dependency(_: SeriesId) -> Series:
        return limited_series

    async def fake_count(_: SeriesId) -> int:
        return 2

    monkeypatch.setattr(tournaments_routes, "series_dependency", fake_series_dependency)
    monkeypatch.setattr(tournaments_routes, "get_tournament_count_for_series", fake_count)

    with pytest.raises(HTTPException) as exc_info:
        await tournaments_routes.create_tournament(_tournament_body())

    assert exc_info.value.status_code == 400
    assert "maximum of 2" in str(exc_info.value.detail)


@pytest.mark.asyncio
async def test_create_tournament_below_series_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    limited_series = DUMMY_SERIES.model_copy(update={"max_tournaments": 2})
    calls: dict[str, Any] = {}

    async def fake_series_dependency(_: SeriesId) -> Series:
        return limited_series

    async def fake_count(_: SeriesId) -> int:
        return 1

    async def fake_create(body: TournamentBody, series: Series) -> TournamentId:
        calls["series"] = series
        return TournamentId(7)

    async def fake_get(tournament_id: TournamentId) -> Tournament:
        return DUMMY_TOURNAMENT.model_copy(update={"id": tournament_id})

    monkeypatch.setattr(tournaments_routes, "series_dependency", fake_series_dependency)
    monkeypatch.setattr(tournaments_routes, "get_tournament_count_for_series", fake_count)
    monkeypatch.setattr(tournaments_routes, "sql_create_tournament", fake_create)
    monkeypatch.setattr(tournaments_routes, "sql_get_tournament", fake_get)

    response = await tournaments_routes.create_tournament(_tournament_body())

    assert response.data.id == 7
    assert calls["series"] is limited_series


@pytest.mark.asyncio
async def test_tournament_dependency_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    async def fake_get(_: TournamentId) -> None:
        return None

    monkeypatch.setattr(route_util, "sql_get_tournament", fake_get)

    with pytest.raises(HTTPException) as exc_info:
        await route_util.tournament_dependency(TournamentId(404))

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_update_season_rejects_inverted_range(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = {"update": 0}

    async def fake_update(*_: Any) -> None:
        calls["update"] += 1

    monkeypatch.setattr(seasons_routes, "sql_update_season", fake_update)
    body = SeasonUpdateBody(end_date=DUMMY_SEASON.start_date - datetime.timedelta(days=1))

    with pytest.raises(HTTPException) as exc_info:
        await seasons_routes.update_season(body, DUMMY_SEASON)

    assert exc_info.value.status_code == 400
    assert calls["update"] == 0


@pytest.mark.asyncio
async def test_post_recalculate_series_points(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[SeriesId] = []

    async def fake_recalculate(series: Series, _: GameScorer) -> int:
        calls.append(series.id)
        return 42

    monkeypatch.setattr(series_routes, "recalculate_series_points", fake_recalculate)

    response = await series_routes.post_recalculate_series_points(
        DUMMY_SERIES, build_game_scorer()
    )

    assert response.data.success is True
    assert response.data.duration_ms == 42
    assert response.data.recalculated_at != ""
    assert calls == [DUMMY_SERIES.id]


@pytest.mark.asyncio
async def test_changing_points_system_recalculates_series(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    fixed_series = DUMMY_SERIES.model_copy(update={"points_system": PointsSystem.FIXED})
    recalculated: list[PointsSystem] = []

    async def fake_update(*_: Any) -> None:
        pass

    async def fake_get_series(_: SeriesId) -> Series:
        return fixed_series

    async def fake_recalculate(series: Series, _: GameScorer) -> int:
        recalculated.append(series.points_system)
        return 0

    monkeypatch.setattr(series_routes, "sql_update_series", fake_update)
    monkeypatch.setattr(series_routes, "get_series_by_id", fake_get_series)
    monkeypatch.setattr(series_routes, "recalculate_series_points", fake_recalculate)

    response = await series_routes.update_series(
        SeriesUpdateBody(points_system=PointsSystem.FIXED), DUMMY_SERIES, build_game_scorer()
    )

    assert response.data.points_system is PointsSystem.FIXED
    assert recalculated == [PointsSystem.FIXED]


@pytest.mark.asyncio
async def test_renaming_series_does_not_recalculate(monkeypatch: pytest.MonkeyPatch) -> None:
    renamed_series = DUMMY_SERIES.model_copy(update={"name": "Spring Series"})
    calls = {"recalculate": 0}

    async def fake_update(*_: Any) -> None:
        pass

    async def fake_get_series(_: SeriesId) -> Series:
        return renamed_series

    async def fake_recalculate(*_: Any) -> int:
        calls["recalculate"] += 1
        return 0

    monkeypatch.setattr(series_routes, "sql_update_series", fake_update)
    monkeypatch.setattr(series_routes, "get_series_by_id", fake_get_series)
    monkeypatch.setattr(series_routes, "recalculate_series_points", fake_recalculate)

    response = await series_routes.update_series(
        SeriesUpdateBody(name="Spring Series"), DUMMY_SERIES, build_game_scorer()
    )

    assert response.data.name == "Spring Series"
    assert calls["recalculate"] == 0
