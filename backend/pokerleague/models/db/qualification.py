import datetime
from enum import auto

from heliclockter import datetime_utc
from pydantic import Field, model_validator

from pokerleague.models.db.shared import BaseModelORM, NonEmptyName
from pokerleague.utils.id_types import (
    PlayerId,
    QualificationId,
    SeasonEventId,
    SeasonEventResultId,
    SeasonId,
    TournamentId,
)
from pokerleague.utils.types import EnumAutoStr


class QualificationType(EnumAutoStr):
    MANUAL = auto()
    TOURNAMENT_WINNER = auto()
    SERIES_TOP_TEN = auto()
    POINTS = auto()


class QualificationBody(BaseModelORM):
    player_id: PlayerId
    tournament_id: TournamentId | None = None
    qualification_type: QualificationType = QualificationType.MANUAL
    qualification_date: datetime.date
    notes: str | None = None
    is_active: bool = True


class QualificationUpdateBody(BaseModelORM):
    tournament_id: TournamentId | None = None
    qualification_type: QualificationType | None = None
    qualification_date: datetime.date | None = None
    notes: str | None = None
    is_active: bool | None = None


class QualificationInsertable(QualificationBody):
    season_id: SeasonId
    created: datetime_utc


class Qualification(QualificationInsertable):
    id: QualificationId


class SeasonEventResultBody(BaseModelORM):
    player_id: PlayerId
    position: int = Field(ge=1)
    prize: int = Field(default=0, ge=0)


class SeasonEventBody(BaseModelORM):
    event_name: NonEmptyName
    event_date: datetime.date
    user_id: str
    results: list[SeasonEventResultBody] = Field(min_length=1)

    @model_validator(mode="after")
    def check_unique_players(self) -> "SeasonEventBody":
        player_ids = [result.player_id for result in self.results]
        if len(player_ids) != len(set(player_ids)):
            raise ValueError("Each player can only appear once in the results")
        return self


class SeasonEvent(BaseModelORM):
    id: SeasonEventId
    season_id: SeasonId
    name: str
    date: datetime.date
    user_id: str
    created: datetime_utc


class SeasonEventResult(BaseModelORM):
    id: SeasonEventResultId
    season_event_id: SeasonEventId
    player_id: PlayerId
    player_name: str
    position: int
    starting_chips: int
    prize: int
