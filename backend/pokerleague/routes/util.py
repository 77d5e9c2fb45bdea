from fastapi import Depends, HTTPException, Request
from starlette import status

from pokerleague.logic.scoring.scorer import GameScorer
from pokerleague.models.db.league import League
from pokerleague.models.db.player import Player
from pokerleague.models.db.season import Season
from pokerleague.models.db.series import Series
from pokerleague.models.db.tournament import Tournament
from pokerleague.sql.leagues import get_league_by_id
from pokerleague.sql.players import get_player_by_id
from pokerleague.sql.seasons import get_season_by_id
from pokerleague.sql.series import get_series_by_id
from pokerleague.sql.tournaments import sql_get_tournament
from pokerleague.utils.id_types import LeagueId, PlayerId, SeasonId, SeriesId, TournamentId


async def league_dependency(league_id: LeagueId) -> League:
    league = await get_league_by_id(league_id)
    if league is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Could not find league with the given ID")
    return league


async def season_dependency(season_id: SeasonId) -> Season:
    season = await get_season_by_id(season_id)
    if season is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Could not find season with the given ID")
    return season


async def series_dependency(series_id: SeriesId) -> Series:
    series = await get_series_by_id(series_id)
    if series is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Could not find series with the given ID")
    return series


async def tournament_dependency(tournament_id: TournamentId) -> Tournament:
    tournament = await sql_get_tournament(tournament_id)
    if tournament is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, "Could not find tournament with the given ID"
        )
    return tournament


async def disallow_finalized_tournament(
    tournament: Tournament = Depends(tournament_dependency),
) -> Tournament:
    if tournament.is_finalized:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "Tournament is finalized and can no longer be changed"
        )
    return tournament


async def player_dependency(player_id: PlayerId) -> Player:
    player = await get_player_by_id(player_id)
    if player is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Could not find player with the given ID")
    return player


def get_game_scorer(request: Request) -> GameScorer:
    return request.app.state.game_scorer  # type: ignore[no-any-return]
