from fastapi import APIRouter, Depends, Query

from pokerleague.config import config
from pokerleague.logic.standings import summarize_player_results
from pokerleague.models.db.player import Player, PlayerBody, PlayerUpdateBody
from pokerleague.models.standings import PlayerProfile
from pokerleague.routes.models import (
    PaginatedPlayers,
    PlayerProfileResponse,
    PlayerSearchResponse,
    PlayersResponse,
    SinglePlayerResponse,
    SuccessResponse,
)
from pokerleague.routes.util import player_dependency
from pokerleague.sql.players import (
    get_all_players,
    get_player_by_id,
    get_player_count,
    insert_player,
    search_players,
    sql_delete_player,
    sql_update_player,
)
from pokerleague.sql.results import get_player_result_rows
from pokerleague.utils.id_types import SeasonId
from pokerleague.utils.logging import logger
from pokerleague.utils.pagination import PaginationPlayers
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/players", response_model=PlayersResponse)
async def get_players(
    is_active: bool | None = Query(default=None),
    query: str | None = Query(default=None),
    pagination: PaginationPlayers = Depends(),
) -> PlayersResponse:
    return PlayersResponse(
        data=PaginatedPlayers(
            players=await get_all_players(
                is_active=is_active, search_query=query, pagination=pagination
            ),
            count=await get_player_count(is_active=is_active, search_query=query),
        )
    )


@router.get("/players/search", response_model=PlayerSearchResponse)
async def search_players_by_name(
    query: str = Query(min_length=1),
    limit: int = Query(default=10, ge=1, le=50),
) -> PlayerSearchResponse:
    return PlayerSearchResponse(data=await search_players(query, limit))


@router.get("/players/{player_id}", response_model=SinglePlayerResponse)
async def get_player(player: Player = Depends(player_dependency)) -> SinglePlayerResponse:
    return SinglePlayerResponse(data=player)


@router.get("/players/{player_id}/profile", response_model=PlayerProfileResponse)
async def get_player_profile(
    season_id: SeasonId | None = Query(default=None),
    player: Player = Depends(player_dependency),
) -> PlayerProfileResponse:
    results = await get_player_result_rows(player_id=player.id, season_id=season_id)
    return PlayerProfileResponse(
        data=PlayerProfile(
            player=player,
            summary=summarize_player_results(player.id, player.name, results),
            results=results,
        )
    )


@router.post("/players", response_model=SinglePlayerResponse)
async def create_player(body: PlayerBody) -> SinglePlayerResponse:
    player_id = await insert_player(body)
    logger.info(f"Created player {player_id} ({body.name})")
    return SinglePlayerResponse(data=assert_some(await get_player_by_id(player_id)))


@router.put("/players/{player_id}", response_model=SinglePlayerResponse)
async def update_player_by_id(
    body: PlayerUpdateBody, player: Player = Depends(player_dependency)
) -> SinglePlayerResponse:
    await sql_update_player(player.id, body)
    return SinglePlayerResponse(data=assert_some(await get_player_by_id(player.id)))


@router.delete("/players/{player_id}", response_model=SuccessResponse)
async def delete_player(player: Player = Depends(player_dependency)) -> SuccessResponse:
    await sql_delete_player(player.id)
    logger.info(f"Deleted player {player.id}")
    return SuccessResponse()
