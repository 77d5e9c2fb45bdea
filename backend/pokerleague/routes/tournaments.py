from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from pokerleague.config import config
from pokerleague.models.db.tournament import (
    Tournament,
    TournamentBody,
    TournamentStatus,
    TournamentUpdateBody,
)
from pokerleague.routes.models import SuccessResponse, TournamentResponse, TournamentsResponse
from pokerleague.routes.util import (
    disallow_finalized_tournament,
    series_dependency,
    tournament_dependency,
)
from pokerleague.sql.tournaments import (
    get_tournament_count_for_series,
    sql_create_tournament,
    sql_delete_tournament,
    sql_finalize_tournament,
    sql_get_tournament,
    sql_get_tournaments,
    sql_update_tournament,
)
from pokerleague.utils.errors import ForeignKey, check_foreign_key_violation
from pokerleague.utils.id_types import SeasonId, SeriesId
from pokerleague.utils.logging import logger
from pokerleague.utils.pagination import PaginationTournaments
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/tournaments", response_model=TournamentsResponse)
async def list_tournaments(
    series_id: SeriesId | None = Query(default=None),
    season_id: SeasonId | None = Query(default=None),
    status_filter: TournamentStatus | None = Query(default=None, alias="status"),
    pagination: PaginationTournaments = Depends(),
) -> TournamentsResponse:
    return TournamentsResponse(
        data=await sql_get_tournaments(
            series_id=series_id,
            season_id=season_id,
            status_filter=status_filter,
            pagination=pagination,
        )
    )


@router.get("/tournaments/{tournament_id}", response_model=TournamentResponse)
async def get_tournament(
    tournament: Tournament = Depends(tournament_dependency),
) -> TournamentResponse:
    return TournamentResponse(data=tournament)


@router.post("/tournaments", response_model=TournamentResponse)
async def create_tournament(body: TournamentBody) -> TournamentResponse:
    series = await series_dependency(body.series_id)

    if series.max_tournaments is not None:
        existing_count = await get_tournament_count_for_series(series.id)
        if existing_count >= series.max_tournaments:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                f"Series already has the maximum of {series.max_tournaments} tournaments",
            )

    with check_foreign_key_violation({ForeignKey.tournaments_series_id_fkey}):
        tournament_id = await sql_create_tournament(body, series)

    logger.info(f"Created tournament {tournament_id} ({body.name}) in series {series.id}")
    return TournamentResponse(data=assert_some(await sql_get_tournament(tournament_id)))


@router.put("/tournaments/{tournament_id}", response_model=TournamentResponse)
async def update_tournament(
    body: TournamentUpdateBody,
    tournament: Tournament = Depends(disallow_finalized_tournament),
) -> TournamentResponse:
    await sql_update_tournament(tournament.id, body)
    return TournamentResponse(data=assert_some(await sql_get_tournament(tournament.id)))


@router.post("/tournaments/{tournament_id}/finalize", response_model=TournamentResponse)
async def finalize_tournament(
    tournament: Tournament = Depends(disallow_finalized_tournament),
) -> TournamentResponse:
    await sql_finalize_tournament(tournament.id)
    logger.info(f"Finalized tournament {tournament.id}")
    return TournamentResponse(data=assert_some(await sql_get_tournament(tournament.id)))


@router.delete("/tournaments/{tournament_id}", response_model=SuccessResponse)
async def delete_tournament(
    tournament: Tournament = Depends(tournament_dependency),
) -> SuccessResponse:
    await sql_delete_tournament(tournament.id)
    logger.info(f"Deleted tournament {tournament.id}")
    return SuccessResponse()
