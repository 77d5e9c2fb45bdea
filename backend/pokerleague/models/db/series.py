import datetime

from heliclockter import datetime_utc
from pydantic import BaseModel, Field

from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.models.db.season import DateRangeMixin
from pokerleague.models.db.shared import BaseModelORM, NonEmptyName
from pokerleague.utils.id_types import LeagueId, SeasonId, SeriesId


class SeriesBody(DateRangeMixin):
    season_id: SeasonId
    name: NonEmptyName
    is_active: bool = True
    description: str | None = None
    points_system: PointsSystem = PointsSystem.WEIGHTED
    max_tournaments: int | None = Field(default=None, gt=0)


class SeriesUpdateBody(BaseModelORM):
    name: NonEmptyName | None = None
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    is_active: bool | None = None
    description: str | None = None
    points_system: PointsSystem | None = None
    max_tournaments: int | None = Field(default=None, gt=0)


class SeriesInsertable(SeriesBody):
    league_id: LeagueId
    created: datetime_utc
    updated: datetime_utc


class Series(SeriesInsertable):
    id: SeriesId


class SeriesRecalculateView(BaseModel):
    success: bool = True
    recalculated_at: str
    duration_ms: int = 0
