from fastapi import APIRouter, Depends, Query

from pokerleague.config import config
from pokerleague.models.db.league import League, LeagueBody, LeagueUpdateBody
from pokerleague.routes.models import LeagueResponse, LeaguesResponse, SuccessResponse
from pokerleague.routes.util import league_dependency
from pokerleague.sql.leagues import (
    get_league_by_id,
    get_leagues,
    sql_create_league,
    sql_delete_league,
    sql_update_league,
)
from pokerleague.utils.logging import logger
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/leagues", response_model=LeaguesResponse)
async def list_leagues(
    is_active: bool | None = Query(default=None),
    query: str | None = Query(default=None),
) -> LeaguesResponse:
    return LeaguesResponse(data=await get_leagues(is_active=is_active, search_query=query))


@router.get("/leagues/{league_id}", response_model=LeagueResponse)
async def get_league(league: League = Depends(league_dependency)) -> LeagueResponse:
    return LeagueResponse(data=league)


@router.post("/leagues", response_model=LeagueResponse)
async def create_league(body: LeagueBody) -> LeagueResponse:
    league_id = await sql_create_league(body)
    logger.info(f"Created league {league_id} ({body.name})")
    return LeagueResponse(data=assert_some(await get_league_by_id(league_id)))


@router.put("/leagues/{league_id}", response_model=LeagueResponse)
async def update_league(
    body: LeagueUpdateBody, league: League = Depends(league_dependency)
) -> LeagueResponse:
    await sql_update_league(league.id, body)
    return LeagueResponse(data=assert_some(await get_league_by_id(league.id)))


@router.delete("/leagues/{league_id}", response_model=SuccessResponse)
async def delete_league(league: League = Depends(league_dependency)) -> SuccessResponse:
    await sql_delete_league(league.id)
    logger.info(f"Deleted league {league.id}")
    return SuccessResponse()
