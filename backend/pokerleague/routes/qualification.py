import asyncio

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from pokerleague.config import config
from pokerleague.logic.qualification import (
    QualificationRules,
    determine_qualified_players,
    filter_qualified_players,
    get_qualification_status,
)
from pokerleague.logic.standings import build_standings
from pokerleague.models.db.qualification import (
    QualificationBody,
    QualificationUpdateBody,
    SeasonEventBody,
)
from pokerleague.models.db.season import Season
from pokerleague.models.standings import QualifiedPlayer, SeasonEventView
from pokerleague.routes.models import (
    QualificationResponse,
    QualificationsResponse,
    QualificationStatusResponse,
    QualifiedPlayersResponse,
    SeasonEventsResponse,
    SuccessResponse,
)
from pokerleague.routes.util import season_dependency
from pokerleague.sql.qualifications import (
    get_manual_qualifications,
    get_qualification_by_id,
    get_qualifications,
    sql_create_qualification,
    sql_delete_qualification,
    sql_update_qualification,
)
from pokerleague.sql.results import get_player_result_rows
from pokerleague.sql.season_events import (
    get_season_event_results,
    get_season_events,
    sql_create_season_event,
)
from pokerleague.sql.series import get_series_for_season
from pokerleague.utils.errors import (
    ForeignKey,
    UniqueIndex,
    check_foreign_key_violation,
    check_unique_constraint_violation,
)
from pokerleague.utils.id_types import QualificationId
from pokerleague.utils.logging import logger
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


def qualification_rules_for_season(season: Season) -> QualificationRules:
    return QualificationRules(
        max_players=season.finale_max_players,
        min_tournaments=config.qualification_min_tournaments,
        top_per_series=config.qualification_top_per_series,
    )


async def get_qualified_players_for_season(season: Season) -> list[QualifiedPlayer]:
    series_list = await get_series_for_season(season.id)
    season_results, manual_qualifications, *series_results = await asyncio.gather(
        get_player_result_rows(season_id=season.id),
        get_manual_qualifications(season.id),
        *(get_player_result_rows(series_id=series.id) for series in series_list),
    )
    return determine_qualified_players(
        season_standings=build_standings(season_results),
        series_standings=[build_standings(results) for results in series_results],
        manual_qualifications=manual_qualifications,
        rules=qualification_rules_for_season(season),
    )


@router.get(
    "/seasons/{season_id}/qualification/status", response_model=QualificationStatusResponse
)
async def get_season_qualification_status(
    season: Season = Depends(season_dependency),
) -> QualificationStatusResponse:
    qualified = await get_qualified_players_for_season(season)
    return QualificationStatusResponse(
        data=get_qualification_status(qualified, season.finale_max_players)
    )


@router.get(
    "/seasons/{season_id}/qualification/players", response_model=QualifiedPlayersResponse
)
async def get_season_qualified_players(
    query: str | None = Query(default=None),
    season: Season = Depends(season_dependency),
) -> QualifiedPlayersResponse:
    qualified = await get_qualified_players_for_season(season)
    return QualifiedPlayersResponse(data=filter_qualified_players(qualified, query))


@router.get("/seasons/{season_id}/qualifications", response_model=QualificationsResponse)
async def list_qualifications(
    is_active: bool | None = Query(default=None),
    season: Season = Depends(season_dependency),
) -> QualificationsResponse:
    return QualificationsResponse(data=await get_qualifications(season.id, is_active=is_active))


@router.post("/seasons/{season_id}/qualifications", response_model=QualificationResponse)
async def create_qualification(
    body: QualificationBody, season: Season = Depends(season_dependency)
) -> QualificationResponse:
    with (
        check_foreign_key_violation(
            {
                ForeignKey.qualifications_player_id_fkey,
                ForeignKey.qualifications_tournament_id_fkey,
            }
        ),
        check_unique_constraint_violation({UniqueIndex.qualifications_season_id_player_id_key}),
    ):
        qualification_id = await sql_create_qualification(season.id, body)

    logger.info(
        f"Recorded {body.qualification_type.value} qualification of player {body.player_id} "
        f"for season {season.id}"
    )
    return QualificationResponse(
        data=assert_some(await get_qualification_by_id(season.id, qualification_id))
    )


@router.put(
    "/seasons/{season_id}/qualifications/{qualification_id}",
    response_model=QualificationResponse,
)
async def update_qualification(
    qualification_id: QualificationId,
    body: QualificationUpdateBody,
    season: Season = Depends(season_dependency),
) -> QualificationResponse:
    if await get_qualification_by_id(season.id, qualification_id) is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, "Could not find qualification with the given ID"
        )

    with check_foreign_key_violation({ForeignKey.qualifications_tournament_id_fkey}):
        await sql_update_qualification(qualification_id, body)

    return QualificationResponse(
        data=assert_some(await get_qualification_by_id(season.id, qualification_id))
    )


@router.delete(
    "/seasons/{season_id}/qualifications/{qualification_id}", response_model=SuccessResponse
)
async def delete_qualification(
    qualification_id: QualificationId, season: Season = Depends(season_dependency)
) -> SuccessResponse:
    if await get_qualification_by_id(season.id, qualification_id) is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, "Could not find qualification with the given ID"
        )

    await sql_delete_qualification(qualification_id)
    return SuccessResponse()


@router.get("/seasons/{season_id}/events", response_model=SeasonEventsResponse)
async def list_season_events(
    season: Season = Depends(season_dependency),
) -> SeasonEventsResponse:
    events = await get_season_events(season.id)
    results = await get_season_event_results([event.id for event in events])

    views = []
    for event in events:
        event_results = [result for result in results if result.season_event_id == event.id]
        views.append(
            SeasonEventView(
                id=event.id,
                name=event.name,
                date=event.date,
                player_count=len(event_results),
                results=event_results,
            )
        )
    return SeasonEventsResponse(data=views)


@router.post("/seasons/{season_id}/events", response_model=SeasonEventsResponse)
async def record_season_event(
    body: SeasonEventBody, season: Season = Depends(season_dependency)
) -> SeasonEventsResponse:
    qualified = await get_qualified_players_for_season(season)
    starting_chips = {player.player_id: player.total_chips for player in qualified}

    with (
        check_foreign_key_violation({ForeignKey.season_event_results_player_id_fkey}),
        check_unique_constraint_violation(
            {UniqueIndex.season_event_results_season_event_id_player_id_key}
        ),
    ):
        event_id = await sql_create_season_event(season.id, body, starting_chips)

    logger.info(f"Recorded season event {event_id} ({body.event_name}) for season {season.id}")
    return await list_season_events(season)
