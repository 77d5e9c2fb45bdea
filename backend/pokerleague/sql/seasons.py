from typing import Any

from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.models.db.season import Season, SeasonBody, SeasonInsertable, SeasonUpdateBody
from pokerleague.schema import seasons
from pokerleague.utils.db import fetch_one_parsed
from pokerleague.utils.id_types import LeagueId, SeasonId
from pokerleague.utils.types import dict_without_none


async def get_seasons(
    league_id: LeagueId | None = None,
    is_active: bool | None = None,
    search_query: str | None = None,
) -> list[Season]:
    query = """
        SELECT *
        FROM seasons
        WHERE TRUE
        """
    params: dict[str, Any] = {}

    if league_id is not None:
        query += "AND league_id = :league_id "
        params["league_id"] = league_id

    if is_active is not None:
        query += "AND is_active = :is_active "
        params["is_active"] = is_active

    if search_query:
        query += "AND name ILIKE :search_query "
        params["search_query"] = f"%{search_query.strip()}%"

    query += "ORDER BY start_date DESC, lower(name), id"
    result = await database.fetch_all(query=query, values=params)
    return [Season.model_validate(dict(x._mapping)) for x in result]


async def get_season_by_id(season_id: SeasonId) -> Season | None:
    return await fetch_one_parsed(
        database, Season, seasons.select().where(seasons.c.id == season_id)
    )


async def sql_create_season(body: SeasonBody) -> SeasonId:
    now = datetime_utc.now()
    new_id = await database.execute(
        query=seasons.insert(),
        values=SeasonInsertable(**body.model_dump(), created=now, updated=now).model_dump(),
    )
    return SeasonId(new_id)


async def sql_update_season(season_id: SeasonId, body: SeasonUpdateBody) -> None:
    await database.execute(
        query=seasons.update().where(seasons.c.id == season_id),
        values={**dict_without_none(body.model_dump()), "updated": datetime_utc.now()},
    )


async def sql_delete_season(season_id: SeasonId) -> None:
    query = "DELETE FROM seasons WHERE id = :season_id"
    await database.execute(query=query, values={"season_id": season_id})
