import datetime

from pydantic import BaseModel, Field

from pokerleague.models.db.player import Player
from pokerleague.models.db.qualification import QualificationType, SeasonEventResult
from pokerleague.models.db.result import PlayerResultRow
from pokerleague.utils.id_types import (
    LeagueId,
    PlayerId,
    SeasonEventId,
    SeasonId,
    SeriesId,
)


class StandingsRow(BaseModel):
    rank: int = 0
    player_id: PlayerId
    player_name: str
    total_points: int = 0
    regular_points: int = 0
    bounty_points: int = 0
    consolation_points: int = 0
    tournament_count: int = 0
    best_finish: int | None = None
    average_finish: float | None = None
    wins: int = 0
    top_three_finishes: int = 0
    total_payout: int = 0


class DetailedStandingsRow(StandingsRow):
    tournament_results: list[PlayerResultRow] = Field(default_factory=list)


class SeriesStandingsView(BaseModel):
    series_id: SeriesId
    series_name: str
    standings: list[StandingsRow] = Field(default_factory=list)


class SeasonStandingsView(BaseModel):
    season_id: SeasonId
    season_name: str
    league_id: LeagueId
    league_name: str
    series: list[SeriesStandingsView] = Field(default_factory=list)


class StandingsOverview(BaseModel):
    seasons: list[SeasonStandingsView] = Field(default_factory=list)


class DetailedSeriesStandingsView(BaseModel):
    series_id: SeriesId
    series_name: str
    season_id: SeasonId
    season_name: str
    league_id: LeagueId
    league_name: str
    standings: list[DetailedStandingsRow] = Field(default_factory=list)


class PlayerProfile(BaseModel):
    player: Player
    summary: StandingsRow
    results: list[PlayerResultRow] = Field(default_factory=list)


class QualifiedPlayer(BaseModel):
    player_id: PlayerId
    player_name: str
    qualification_type: QualificationType
    tournament_count: int = 0
    season_points: int = 0
    total_chips: int = 0


class QualificationStatus(BaseModel):
    total_qualified: int
    max_players: int
    tournament_winners: int
    top_qualifiers: int
    remaining_spots: int


class SeasonEventView(BaseModel):
    id: SeasonEventId
    name: str
    date: datetime.date
    player_count: int
    results: list[SeasonEventResult] = Field(default_factory=list)
