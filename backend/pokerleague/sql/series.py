from typing import Any

from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.models.db.season import Season
from pokerleague.models.db.series import Series, SeriesBody, SeriesInsertable, SeriesUpdateBody
from pokerleague.schema import series
from pokerleague.utils.db import fetch_one_parsed
from pokerleague.utils.id_types import SeasonId, SeriesId
from pokerleague.utils.types import dict_without_none


async def get_series_for_season(
    season_id: SeasonId | None = None,
    is_active: bool | None = None,
    search_query: str | None = None,
) -> list[Series]:
    query = """
        SELECT *
        FROM series
        WHERE TRUE
        """
    params: dict[str, Any] = {}

    if season_id is not None:
        query += "AND season_id = :season_id "
        params["season_id"] = season_id

    if is_active is not None:
        query += "AND is_active = :is_active "
        params["is_active"] = is_active

    if search_query:
        query += "AND name ILIKE :search_query "
        params["search_query"] = f"%{search_query.strip()}%"

    query += "ORDER BY start_date, lower(name), id"
    result = await database.fetch_all(query=query, values=params)
    return [Series.model_validate(dict(x._mapping)) for x in result]


async def get_series_by_id(series_id: SeriesId) -> Series | None:
    return await fetch_one_parsed(
        database, Series, series.select().where(series.c.id == series_id)
    )


async def sql_create_series(body: SeriesBody, season: Season) -> SeriesId:
    now = datetime_utc.now()
    new_id = await database.execute(
        query=series.insert(),
        values=SeriesInsertable(
            **body.model_dump(),
            league_id=season.league_id,
            created=now,
            updated=now,
        ).model_dump(),
    )
    return SeriesId(new_id)


async def sql_update_series(series_id: SeriesId, body: SeriesUpdateBody) -> None:
    await database.execute(
        query=series.update().where(series.c.id == series_id),
        values={**dict_without_none(body.model_dump()), "updated": datetime_utc.now()},
    )


async def sql_delete_series(series_id: SeriesId) -> None:
    query = "DELETE FROM series WHERE id = :series_id"
    await database.execute(query=query, values={"series_id": series_id})
