from typing import Any

from databases import Database
from pydantic import BaseModel
from sqlalchemy.sql import Select


async def fetch_one_parsed[BaseModelT: BaseModel](
    database: Database, model: type[BaseModelT], query: Select | str, values: dict[str, Any] | None = None
) -> BaseModelT | None:
    record = await database.fetch_one(query, values=values)
    return model.model_validate(dict(record._mapping)) if record is not None else None


async def fetch_all_parsed[BaseModelT: BaseModel](
    database: Database, model: type[BaseModelT], query: Select | str, values: dict[str, Any] | None = None
) -> list[BaseModelT]:
    records = await database.fetch_all(query, values=values)
    return [model.model_validate(dict(record._mapping)) for record in records]
