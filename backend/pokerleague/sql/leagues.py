from typing import Any

from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.models.db.league import League, LeagueBody, LeagueInsertable, LeagueUpdateBody
from pokerleague.schema import leagues
from pokerleague.utils.db import fetch_one_parsed
from pokerleague.utils.id_types import LeagueId
from pokerleague.utils.types import dict_without_none


async def get_leagues(is_active: bool | None = None, search_query: str | None = None) -> list[League]:
    query = """
        SELECT *
        FROM leagues
        WHERE TRUE
        """
    params: dict[str, Any] = {}

    if is_active is not None:
        query += "AND is_active = :is_active "
        params["is_active"] = is_active

    if search_query:
        query += "AND name ILIKE :search_query "
        params["search_query"] = f"%{search_query.strip()}%"

    query += "ORDER BY lower(name), id"
    result = await database.fetch_all(query=query, values=params)
    return [League.model_validate(dict(x._mapping)) for x in result]


async def get_league_by_id(league_id: LeagueId) -> League | None:
    return await fetch_one_parsed(
        database, League, leagues.select().where(leagues.c.id == league_id)
    )


async def sql_create_league(body: LeagueBody) -> LeagueId:
    now = datetime_utc.now()
    new_id = await database.execute(
        query=leagues.insert(),
        values=LeagueInsertable(**body.model_dump(), created=now, updated=now).model_dump(),
    )
    return LeagueId(new_id)


async def sql_update_league(league_id: LeagueId, body: LeagueUpdateBody) -> None:
    await database.execute(
        query=leagues.update().where(leagues.c.id == league_id),
        values={**dict_without_none(body.model_dump()), "updated": datetime_utc.now()},
    )


async def sql_delete_league(league_id: LeagueId) -> None:
    query = "DELETE FROM leagues WHERE id = :league_id"
    await database.execute(query=query, values={"league_id": league_id})
