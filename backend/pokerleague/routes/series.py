from fastapi import APIRouter, Depends, Query
from heliclockter import datetime_utc

from pokerleague.config import config
from pokerleague.logic.scoring.scorer import GameScorer
from pokerleague.models.db.series import (
    Series,
    SeriesBody,
    SeriesRecalculateView,
    SeriesUpdateBody,
)
from pokerleague.routes.models import (
    SeriesListResponse,
    SeriesRecalculateResponse,
    SeriesResponse,
    SuccessResponse,
)
from pokerleague.routes.seasons import check_updated_date_range
from pokerleague.routes.util import get_game_scorer, season_dependency, series_dependency
from pokerleague.sql.results import recalculate_series_points
from pokerleague.sql.series import (
    get_series_by_id,
    get_series_for_season,
    sql_create_series,
    sql_delete_series,
    sql_update_series,
)
from pokerleague.utils.errors import ForeignKey, check_foreign_key_violation
from pokerleague.utils.id_types import SeasonId
from pokerleague.utils.logging import logger
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/series", response_model=SeriesListResponse)
async def list_series(
    season_id: SeasonId | None = Query(default=None),
    is_active: bool | None = Query(default=None),
    query: str | None = Query(default=None),
) -> SeriesListResponse:
    return SeriesListResponse(
        data=await get_series_for_season(season_id, is_active=is_active, search_query=query)
    )


@router.get("/series/{series_id}", response_model=SeriesResponse)
async def get_series(series: Series = Depends(series_dependency)) -> SeriesResponse:
    return SeriesResponse(data=series)


@router.post("/series", response_model=SeriesResponse)
async def create_series(body: SeriesBody) -> SeriesResponse:
    season = await season_dependency(body.season_id)

    with check_foreign_key_violation({ForeignKey.series_season_id_fkey}):
        series_id = await sql_create_series(body, season)

    logger.info(
        f"Created series {series_id} ({body.name}) in season {season.id} "
        f"using {body.points_system.value} points"
    )
    return SeriesResponse(data=assert_some(await get_series_by_id(series_id)))


@router.put("/series/{series_id}", response_model=SeriesResponse)
async def update_series(
    body: SeriesUpdateBody,
    series: Series = Depends(series_dependency),
    game_scorer: GameScorer = Depends(get_game_scorer),
) -> SeriesResponse:
    check_updated_date_range(
        body.start_date or series.start_date,
        body.end_date if body.end_date is not None else series.end_date,
    )
    await sql_update_series(series.id, body)
    updated_series = assert_some(await get_series_by_id(series.id))

    if updated_series.points_system != series.points_system:
        await recalculate_series_points(updated_series, game_scorer)

    return SeriesResponse(data=updated_series)


@router.post("/series/{series_id}/recalculate", response_model=SeriesRecalculateResponse)
async def post_recalculate_series_points(
    series: Series = Depends(series_dependency),
    game_scorer: GameScorer = Depends(get_game_scorer),
) -> SeriesRecalculateResponse:
    duration_ms = await recalculate_series_points(series, game_scorer)
    return SeriesRecalculateResponse(
        data=SeriesRecalculateView(
            recalculated_at=datetime_utc.now().isoformat(), duration_ms=duration_ms
        )
    )


@router.delete("/series/{series_id}", response_model=SuccessResponse)
async def delete_series(series: Series = Depends(series_dependency)) -> SuccessResponse:
    await sql_delete_series(series.id)
    logger.info(f"Deleted series {series.id}")
    return SuccessResponse()
