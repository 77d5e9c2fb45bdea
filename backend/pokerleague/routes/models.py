from pydantic import BaseModel

from pokerleague.logic.scoring.calculation import PointsCalculation
from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.models.db.league import League
from pokerleague.models.db.player import Player
from pokerleague.models.db.qualification import Qualification
from pokerleague.models.db.result import TournamentResultView
from pokerleague.models.db.season import Season
from pokerleague.models.db.series import Series, SeriesRecalculateView
from pokerleague.models.db.tournament import Tournament
from pokerleague.models.standings import (
    DetailedSeriesStandingsView,
    PlayerProfile,
    QualificationStatus,
    QualifiedPlayer,
    SeasonEventView,
    StandingsOverview,
    StandingsRow,
)


class SuccessResponse(BaseModel):
    success: bool = True


class DataResponse[DataT](BaseModel):
    data: DataT


class LeaguesResponse(DataResponse[list[League]]):
    pass


class LeagueResponse(DataResponse[League]):
    pass


class SeasonsResponse(DataResponse[list[Season]]):
    pass


class SeasonResponse(DataResponse[Season]):
    pass


class SeriesListResponse(DataResponse[list[Series]]):
    pass


class SeriesResponse(DataResponse[Series]):
    pass


class SeriesRecalculateResponse(DataResponse[SeriesRecalculateView]):
    pass


class TournamentsResponse(DataResponse[list[Tournament]]):
    pass


class TournamentResponse(DataResponse[Tournament]):
    pass


class PaginatedPlayers(BaseModel):
    count: int
    players: list[Player]


class PlayersResponse(DataResponse[PaginatedPlayers]):
    pass


class PlayerSearchResponse(DataResponse[list[Player]]):
    pass


class SinglePlayerResponse(DataResponse[Player]):
    pass


class PlayerProfileResponse(DataResponse[PlayerProfile]):
    pass


class TournamentResultsResponse(DataResponse[list[TournamentResultView]]):
    pass


class StandingsOverviewResponse(DataResponse[StandingsOverview]):
    pass


class SeriesStandingsResponse(DataResponse[DetailedSeriesStandingsView]):
    pass


class QualifiedPlayersResponse(DataResponse[list[QualifiedPlayer]]):
    pass


class QualificationStatusResponse(DataResponse[QualificationStatus]):
    pass


class QualificationsResponse(DataResponse[list[Qualification]]):
    pass


class QualificationResponse(DataResponse[Qualification]):
    pass


class SeasonEventsResponse(DataResponse[list[SeasonEventView]]):
    pass


class PointsCalculationResponse(DataResponse[PointsCalculation]):
    pass


class PointsSystemDescription(BaseModel):
    points_system: PointsSystem
    description: str


class PointsSystemsResponse(DataResponse[list[PointsSystemDescription]]):
    pass


class SeasonStandingsResponse(DataResponse[list[StandingsRow]]):
    pass
