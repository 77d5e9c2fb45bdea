from typing import Any

from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.models.db.qualification import (
    Qualification,
    QualificationBody,
    QualificationInsertable,
    QualificationUpdateBody,
)
from pokerleague.schema import qualifications
from pokerleague.utils.id_types import PlayerId, QualificationId, SeasonId
from pokerleague.utils.types import dict_without_none


async def get_qualifications(
    season_id: SeasonId, is_active: bool | None = None
) -> list[Qualification]:
    query = """
        SELECT *
        FROM qualifications
        WHERE season_id = :season_id
        """
    params: dict[str, Any] = {"season_id": season_id}

    if is_active is not None:
        query += "AND is_active = :is_active "
        params["is_active"] = is_active

    query += "ORDER BY qualification_date, id"
    result = await database.fetch_all(query=query, values=params)
    return [Qualification.model_validate(dict(x._mapping)) for x in result]


async def get_manual_qualifications(season_id: SeasonId) -> list[tuple[PlayerId, str]]:
    query = """
        SELECT q.player_id, p.name AS player_name
        FROM qualifications q
        JOIN players p ON p.id = q.player_id
        WHERE q.season_id = :season_id
        AND q.is_active IS TRUE
        AND q.qualification_type = 'MANUAL'::qualification_type
        ORDER BY q.qualification_date, q.id
        """
    result = await database.fetch_all(query=query, values={"season_id": season_id})
    return [
        (PlayerId(x._mapping["player_id"]), str(x._mapping["player_name"])) for x in result
    ]


async def get_qualification_by_id(
    season_id: SeasonId, qualification_id: QualificationId
) -> Qualification | None:
    query = """
        SELECT *
        FROM qualifications
        WHERE id = :qualification_id
        AND season_id = :season_id
        """
    result = await database.fetch_one(
        query=query, values={"qualification_id": qualification_id, "season_id": season_id}
    )
    return Qualification.model_validate(dict(result._mapping)) if result is not None else None


async def sql_create_qualification(season_id: SeasonId, body: QualificationBody) -> QualificationId:
    new_id = await database.execute(
        query=qualifications.insert(),
        values=QualificationInsertable(
            **body.model_dump(), season_id=season_id, created=datetime_utc.now()
        ).model_dump(),
    )
    return QualificationId(new_id)


async def sql_update_qualification(
    qualification_id: QualificationId, body: QualificationUpdateBody
) -> None:
    values = dict_without_none(body.model_dump())
    if len(values) < 1:
        return

    await database.execute(
        query=qualifications.update().where(qualifications.c.id == qualification_id),
        values=values,
    )


async def sql_delete_qualification(qualification_id: QualificationId) -> None:
    query = "DELETE FROM qualifications WHERE id = :qualification_id"
    await database.execute(query=query, values={"qualification_id": qualification_id})
