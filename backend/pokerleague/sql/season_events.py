from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.models.db.qualification import SeasonEvent, SeasonEventBody, SeasonEventResult
from pokerleague.utils.db import fetch_all_parsed
from pokerleague.utils.id_types import PlayerId, SeasonEventId, SeasonId


async def sql_create_season_event(
    season_id: SeasonId, body: SeasonEventBody, starting_chips: dict[PlayerId, int]
) -> SeasonEventId:
    async with database.transaction():
        event_id = await database.fetch_val(
            query="""
                INSERT INTO season_events (season_id, name, date, user_id, created)
                VALUES (:season_id, :name, :date, :user_id, :created)
                RETURNING id
                """,
            values={
                "season_id": season_id,
                "name": body.event_name,
                "date": body.event_date,
                "user_id": body.user_id,
                "created": datetime_utc.now(),
            },
        )
        for result in body.results:
            await database.execute(
                query="""
                    INSERT INTO season_event_results (
                        season_event_id, player_id, position, starting_chips, prize
                    )
                    VALUES (:season_event_id, :player_id, :position, :starting_chips, :prize)
                    """,
                values={
                    "season_event_id": event_id,
                    "player_id": result.player_id,
                    "position": result.position,
                    "starting_chips": starting_chips.get(result.player_id, 0),
                    "prize": result.prize,
                },
            )

    return SeasonEventId(event_id)


async def get_season_events(season_id: SeasonId) -> list[SeasonEvent]:
    query = """
        SELECT *
        FROM season_events
        WHERE season_id = :season_id
        ORDER BY date DESC, id DESC
        """
    return await fetch_all_parsed(database, SeasonEvent, query, {"season_id": season_id})


async def get_season_event_results(
    season_event_ids: list[SeasonEventId],
) -> list[SeasonEventResult]:
    query = """
        SELECT ser.*, p.name AS player_name
        FROM season_event_results ser
        JOIN players p ON p.id = ser.player_id
        WHERE ser.season_event_id = any(:season_event_ids)
        ORDER BY ser.season_event_id, ser.position
        """
    result = await database.fetch_all(query=query, values={"season_event_ids": season_event_ids})
    return [SeasonEventResult.model_validate(dict(x._mapping)) for x in result]
