import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from pokerleague.config import config
from pokerleague.models.db.season import Season, SeasonBody, SeasonUpdateBody
from pokerleague.routes.models import SeasonResponse, SeasonsResponse, SuccessResponse
from pokerleague.routes.util import league_dependency, season_dependency
from pokerleague.sql.seasons import (
    get_season_by_id,
    get_seasons,
    sql_create_season,
    sql_delete_season,
    sql_update_season,
)
from pokerleague.utils.errors import ForeignKey, check_foreign_key_violation
from pokerleague.utils.id_types import LeagueId
from pokerleague.utils.logging import logger
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


def check_updated_date_range(
    start_date: datetime.date, end_date: datetime.date | None
) -> None:
    if end_date is not None and start_date > end_date:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Start date cannot be after end date")


@router.get("/seasons", response_model=SeasonsResponse)
async def list_seasons(
    league_id: LeagueId | None = Query(default=None),
    is_active: bool | None = Query(default=None),
    query: str | None = Query(default=None),
) -> SeasonsResponse:
    return SeasonsResponse(
        data=await get_seasons(league_id=league_id, is_active=is_active, search_query=query)
    )


@router.get("/seasons/{season_id}", response_model=SeasonResponse)
async def get_season(season: Season = Depends(season_dependency)) -> SeasonResponse:
    return SeasonResponse(data=season)


@router.post("/seasons", response_model=SeasonResponse)
async def create_season(body: SeasonBody) -> SeasonResponse:
    await league_dependency(body.league_id)

    with check_foreign_key_violation({ForeignKey.seasons_league_id_fkey}):
        season_id = await sql_create_season(body)

    logger.info(f"Created season {season_id} ({body.name}) in league {body.league_id}")
    return SeasonResponse(data=assert_some(await get_season_by_id(season_id)))


@router.put("/seasons/{season_id}", response_model=SeasonResponse)
async def update_season(
    body: SeasonUpdateBody, season: Season = Depends(season_dependency)
) -> SeasonResponse:
    check_updated_date_range(
        body.start_date or season.start_date,
        body.end_date if body.end_date is not None else season.end_date,
    )
    await sql_update_season(season.id, body)
    return SeasonResponse(data=assert_some(await get_season_by_id(season.id)))


@router.delete("/seasons/{season_id}", response_model=SuccessResponse)
async def delete_season(season: Season = Depends(season_dependency)) -> SuccessResponse:
    await sql_delete_season(season.id)
    logger.info(f"Deleted season {season.id}")
    return SuccessResponse()
