import datetime

from heliclockter import datetime_utc

from pokerleague.models.db.shared import BaseModelORM, NonEmptyName
from pokerleague.utils.id_types import PlayerId


class PlayerBody(BaseModelORM):
    name: NonEmptyName
    user_id: str
    email: str | None = None
    phone: str | None = None
    join_date: datetime.date | None = None
    is_active: bool = True
    notes: str | None = None


class PlayerUpdateBody(BaseModelORM):
    name: NonEmptyName | None = None
    email: str | None = None
    phone: str | None = None
    join_date: datetime.date | None = None
    is_active: bool | None = None
    notes: str | None = None


class PlayerInsertable(PlayerBody):
    created: datetime_utc
    updated: datetime_utc


class Player(PlayerInsertable):
    id: PlayerId
