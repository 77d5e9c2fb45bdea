from typing import Any

from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.models.db.player import Player, PlayerBody, PlayerInsertable, PlayerUpdateBody
from pokerleague.schema import players
from pokerleague.utils.id_types import PlayerId
from pokerleague.utils.pagination import PaginationPlayers
from pokerleague.utils.types import dict_without_none


def _player_filters(is_active: bool | None, search_query: str | None) -> tuple[str, dict[str, Any]]:
    filters = ""
    params: dict[str, Any] = {}
    if is_active is not None:
        filters += "AND players.is_active = :is_active "
        params["is_active"] = is_active
    if search_query:
        filters += "AND players.name ILIKE :search_query "
        params["search_query"] = f"%{search_query.strip()}%"
    return filters, params


async def get_all_players(
    *,
    is_active: bool | None = None,
    search_query: str | None = None,
    pagination: PaginationPlayers | None = None,
) -> list[Player]:
    filters, params = _player_filters(is_active, search_query)
    limit_filter = "LIMIT :limit" if pagination is not None and pagination.limit is not None else ""
    offset_filter = (
        "OFFSET :offset" if pagination is not None and pagination.offset is not None else ""
    )
    sort_by = pagination.sort_by if pagination is not None else "name"
    sort_direction = pagination.sort_direction if pagination is not None else ""
    query = f"""
        SELECT *
        FROM players
        WHERE TRUE
        {filters}
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
    return [Player.model_validate(dict(x._mapping)) for x in result]


async def get_player_count(*, is_active: bool | None = None, search_query: str | None = None) -> int:
    filters, params = _player_filters(is_active, search_query)
    query = f"""
        SELECT count(*)
        FROM players
        WHERE TRUE
        {filters}
        """
    return int(await database.fetch_val(query=query, values=params))


async def search_players(search_query: str, limit: int = 10) -> list[Player]:
    """Players whose name starts with `search_query` come first, then substring matches."""
    query = """
        SELECT *
        FROM players
        WHERE name ILIKE :contains
        ORDER BY (name ILIKE :prefix) DESC, lower(name), id
        LIMIT :limit
        """
    term = search_query.strip()
    result = await database.fetch_all(
        query=query,
        values={"contains": f"%{term}%", "prefix": f"{term}%", "limit": limit},
    )
    return [Player.model_validate(dict(x._mapping)) for x in result]


async def get_player_by_id(player_id: PlayerId) -> Player | None:
    query = """
        SELECT *
        FROM players
        WHERE id = :player_id
    """
    result = await database.fetch_one(query=query, values={"player_id": player_id})
    return Player.model_validate(dict(result._mapping)) if result is not None else None


async def get_players_by_ids(player_ids: list[PlayerId]) -> list[Player]:
    query = """
        SELECT *
        FROM players
        WHERE id = any(:player_ids)
    """
    result = await database.fetch_all(query=query, values={"player_ids": player_ids})
    return [Player.model_validate(dict(x._mapping)) for x in result]


async def insert_player(player_body: PlayerBody) -> PlayerId:
    now = datetime_utc.now()
    new_id = await database.execute(
        query=players.insert(),
        values=PlayerInsertable(**player_body.model_dump(), created=now, updated=now).model_dump(),
    )
    return PlayerId(new_id)


async def sql_update_player(player_id: PlayerId, body: PlayerUpdateBody) -> None:
    await database.execute(
        query=players.update().where(players.c.id == player_id),
        values={**dict_without_none(body.model_dump()), "updated": datetime_utc.now()},
    )


async def sql_delete_player(player_id: PlayerId) -> None:
    query = "DELETE FROM players WHERE id = :player_id"
    await database.execute(query=query, values={"player_id": player_id})
