from heliclockter import datetime_utc

from pokerleague.models.db.shared import BaseModelORM, NonEmptyName
from pokerleague.utils.id_types import LeagueId


class LeagueBody(BaseModelORM):
    name: NonEmptyName
    user_id: str
    description: str | None = None
    is_active: bool = True
    image_url: str | None = None


class LeagueUpdateBody(BaseModelORM):
    name: NonEmptyName | None = None
    description: str | None = None
    is_active: bool | None = None
    image_url: str | None = None


class LeagueInsertable(LeagueBody):
    created: datetime_utc
    updated: datetime_utc


class League(LeagueInsertable):
    id: LeagueId
