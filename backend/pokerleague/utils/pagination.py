from typing import Literal

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    limit: int | None = Field(default=None, ge=1, le=200)
    offset: int | None = Field(default=None, ge=0)
    sort_direction: Literal["asc", "desc"] = "asc"


class PaginationPlayers(Pagination):
    sort_by: Literal["name", "created", "join_date"] = "name"


class PaginationTournaments(Pagination):
    sort_by: Literal["name", "date", "created"] = "date"
