from typing import Any

from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.models.db.series import Series
from pokerleague.models.db.tournament import (
    Tournament,
    TournamentBody,
    TournamentInsertable,
    TournamentStatus,
    TournamentUpdateBody,
)
from pokerleague.schema import tournaments
from pokerleague.utils.id_types import SeasonId, SeriesId, TournamentId
from pokerleague.utils.pagination import PaginationTournaments
from pokerleague.utils.types import dict_without_none


async def sql_get_tournament(tournament_id: TournamentId) -> Tournament | None:
    query = """
        SELECT *
        FROM tournaments
        WHERE id = :tournament_id
        """
    result = await database.fetch_one(query=query, values={"tournament_id": tournament_id})
    return Tournament.model_validate(dict(result._mapping)) if result is not None else None


async def sql_get_tournaments(
    series_id: SeriesId | None = None,
    season_id: SeasonId | None = None,
    status_filter: TournamentStatus | None = None,
    pagination: PaginationTournaments | None = None,
) -> list[Tournament]:
    limit_filter = "LIMIT :limit" if pagination is not None and pagination.limit is not None else ""
    offset_filter = (
        "OFFSET :offset" if pagination is not None and pagination.offset is not None else ""
    )
    sort_by = pagination.sort_by if pagination is not None else "date"
    sort_direction = pagination.sort_direction if pagination is not None else ""
    query = """
        SELECT *
        FROM tournaments
        WHERE TRUE
        """
    params: dict[str, Any] = {}

    if series_id is not None:
        query += "AND series_id = :series_id "
        params["series_id"] = series_id

    if season_id is not None:
        query += "AND season_id = :season_id "
        params["season_id"] = season_id

    if status_filter is not None:
        query += "AND status = CAST(:status_filter AS tournament_status) "
        params["status_filter"] = status_filter.value

    query += f"""
        ORDER BY {sort_by} {sort_direction}, id
        {limit_filter}
        {offset_filter}
        """
    result = await database.fetch_all(
        query=query,
        values=dict_without_none(
            {
                **params,
                "offset": pagination.offset if pagination is not None else None,
                "limit": pagination.limit if pagination is not None else None,
            }
        ),
    )
    return [Tournament.model_validate(dict(x._mapping)) for x in result]


async def get_tournament_count_for_series(series_id: SeriesId) -> int:
    query = """
        SELECT count(*)
        FROM tournaments
        WHERE series_id = :series_id
        """
    return int(await database.fetch_val(query=query, values={"series_id": series_id}))


async def sql_create_tournament(body: TournamentBody, series: Series) -> TournamentId:
    now = datetime_utc.now()
    new_id = await database.execute(
        query=tournaments.insert(),
        values=TournamentInsertable(
            **body.model_dump(),
            season_id=series.season_id,
            league_id=series.league_id,
            created=now,
            updated=now,
        ).model_dump(),
    )
    return TournamentId(new_id)


async def sql_update_tournament(tournament_id: TournamentId, body: TournamentUpdateBody) -> None:
    await database.execute(
        query=tournaments.update().where(tournaments.c.id == tournament_id),
        values={**dict_without_none(body.model_dump()), "updated": datetime_utc.now()},
    )


async def sql_finalize_tournament(tournament_id: TournamentId) -> None:
    query = """
        UPDATE tournaments
        SET
            is_finalized = TRUE,
            status = 'FINISHED'::tournament_status,
            updated = :updated
        WHERE tournaments.id = :tournament_id
        """
    await database.execute(
        query=query, values={"tournament_id": tournament_id, "updated": datetime_utc.now()}
    )


async def sql_delete_tournament(tournament_id: TournamentId) -> None:
    query = """
        DELETE FROM tournaments
        WHERE id = :tournament_id
        """
    await database.execute(query=query, values={"tournament_id": tournament_id})
