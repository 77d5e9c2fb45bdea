import datetime
from enum import auto

from heliclockter import datetime_utc
from pydantic import Field

from pokerleague.models.db.shared import BaseModelORM, NonEmptyName
from pokerleague.utils.id_types import LeagueId, SeasonId, SeriesId, TournamentId
from pokerleague.utils.types import EnumAutoStr

DEFAULT_POKER_VARIANT = "Texas Hold'em"


class TournamentStatus(EnumAutoStr):
    PLANNED = auto()
    IN_PROGRESS = auto()
    FINISHED = auto()


class TournamentBody(BaseModelORM):
    series_id: SeriesId
    name: NonEmptyName
    date: datetime.date
    start_time: str | None = None
    location: str | None = None
    poker_variant: str = DEFAULT_POKER_VARIANT
    buy_in: int = Field(default=0, ge=0)
    rebuy_allowed: bool = False
    rebuy_amount: int = Field(default=0, ge=0)
    starting_chips: int | None = Field(default=None, gt=0)
    status: TournamentStatus = TournamentStatus.PLANNED
    max_players: int | None = Field(default=None, gt=0)
    notes: str | None = None


class TournamentUpdateBody(BaseModelORM):
    name: NonEmptyName | None = None
    date: datetime.date | None = None
    start_time: str | None = None
    location: str | None = None
    poker_variant: str | None = None
    buy_in: int | None = Field(default=None, ge=0)
    rebuy_allowed: bool | None = None
    rebuy_amount: int | None = Field(default=None, ge=0)
    starting_chips: int | None = Field(default=None, gt=0)
    status: TournamentStatus | None = None
    max_players: int | None = Field(default=None, gt=0)
    notes: str | None = None


class TournamentInsertable(TournamentBody):
    season_id: SeasonId
    league_id: LeagueId
    is_finalized: bool = False
    total_players: int | None = None
    created: datetime_utc
    updated: datetime_utc


class Tournament(TournamentInsertable):
    id: TournamentId
