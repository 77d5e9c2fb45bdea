import datetime

from heliclockter import datetime_utc
from pydantic import Field, model_validator

from pokerleague.models.db.shared import BaseModelORM, NonEmptyName
from pokerleague.utils.id_types import LeagueId, SeasonId


class DateRangeMixin(BaseModelORM):
    start_date: datetime.date
    end_date: datetime.date | None = None

    @model_validator(mode="after")
    def check_date_range(self) -> "DateRangeMixin":
        if self.end_date is not None and self.start_date > self.end_date:
            raise ValueError("Start date cannot be after end date")
        return self


class SeasonBody(DateRangeMixin):
    league_id: LeagueId
    name: NonEmptyName
    is_active: bool = True
    description: str | None = None
    finale_max_players: int = Field(default=30, ge=1)


class SeasonUpdateBody(BaseModelORM):
    name: NonEmptyName | None = None
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    is_active: bool | None = None
    description: str | None = None
    finale_max_players: int | None = Field(default=None, ge=1)


class SeasonInsertable(SeasonBody):
    created: datetime_utc
    updated: datetime_utc


class Season(SeasonInsertable):
    id: SeasonId
