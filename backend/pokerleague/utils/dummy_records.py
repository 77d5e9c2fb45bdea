import datetime

from heliclockter import datetime_utc

from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.models.db.league import League
from pokerleague.models.db.player import Player
from pokerleague.models.db.result import PlayerResultRow, TournamentResultView
from pokerleague.models.db.season import Season
from pokerleague.models.db.series import Series
from pokerleague.models.db.tournament import Tournament, TournamentStatus
from pokerleague.utils.id_types import (
    LeagueId,
    PlayerId,
    SeasonId,
    SeriesId,
    TournamentId,
    TournamentPlayerId,
)

DUMMY_MOCK_TIME = datetime_utc(2026, 1, 15, 19, 0, 0, tzinfo=datetime.UTC)
DUMMY_DATE = datetime.date(2026, 1, 15)

DUMMY_LEAGUE = League(
    id=LeagueId(1),
    name="Thursday Night Poker",
    user_id="owner-1",
    created=DUMMY_MOCK_TIME,
    updated=DUMMY_MOCK_TIME,
)

DUMMY_SEASON = Season(
    id=SeasonId(1),
    league_id=DUMMY_LEAGUE.id,
    name="Season 2026",
    start_date=DUMMY_DATE,
    created=DUMMY_MOCK_TIME,
    updated=DUMMY_MOCK_TIME,
)

DUMMY_SERIES = Series(
    id=SeriesId(1),
    season_id=DUMMY_SEASON.id,
    league_id=DUMMY_LEAGUE.id,
    name="Winter Series",
    start_date=DUMMY_DATE,
    points_system=PointsSystem.WEIGHTED,
    created=DUMMY_MOCK_TIME,
    updated=DUMMY_MOCK_TIME,
)

DUMMY_TOURNAMENT = Tournament(
    id=TournamentId(1),
    series_id=DUMMY_SERIES.id,
    season_id=DUMMY_SEASON.id,
    league_id=DUMMY_LEAGUE.id,
    name="Night 1",
    date=DUMMY_DATE,
    status=TournamentStatus.PLANNED,
    created=DUMMY_MOCK_TIME,
    updated=DUMMY_MOCK_TIME,
)


def dummy_player(player_id: int, name: str) -> Player:
    return Player(
        id=PlayerId(player_id),
        name=name,
        user_id="owner-1",
        created=DUMMY_MOCK_TIME,
        updated=DUMMY_MOCK_TIME,
    )


def dummy_result_row(
    player_id: int,
    player_name: str,
    tournament_id: int = 1,
    *,
    final_position: int | None = None,
    points: int = 0,
    consolation_points: int = 0,
    bounty_points: int = 0,
    series_id: int = 1,
) -> PlayerResultRow:
    return PlayerResultRow(
        tournament_id=TournamentId(tournament_id),
        tournament_name=f"Night {tournament_id}",
        tournament_date=DUMMY_DATE + datetime.timedelta(days=7 * tournament_id),
        series_id=series_id,
        player_id=PlayerId(player_id),
        player_name=player_name,
        final_position=final_position,
        points=points,
        consolation_points=consolation_points,
        bounty_points=bounty_points,
    )


def dummy_tournament_result(
    player_id: int,
    player_name: str,
    tournament_id: int = 1,
    *,
    final_position: int | None = None,
    points: int = 0,
    consolation_position: int | None = None,
    consolation_points: int = 0,
) -> TournamentResultView:
    return TournamentResultView(
        id=TournamentPlayerId(tournament_id * 1000 + player_id),
        tournament_id=TournamentId(tournament_id),
        player_id=PlayerId(player_id),
        player_name=player_name,
        final_position=final_position,
        points=points,
        consolation_position=consolation_position,
        consolation_points=consolation_points,
        created=DUMMY_MOCK_TIME,
        updated=DUMMY_MOCK_TIME,
    )
