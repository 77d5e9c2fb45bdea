from collections.abc import Iterator
from contextlib import contextmanager
from enum import auto

from asyncpg.exceptions import ForeignKeyViolationError, UniqueViolationError
from fastapi import HTTPException
from starlette import status

from pokerleague.utils.logging import logger
from pokerleague.utils.types import EnumAutoStr


class UniqueIndex(EnumAutoStr):
    qualifications_season_id_player_id_key = auto()
    season_event_results_season_event_id_player_id_key = auto()


class ForeignKey(EnumAutoStr):
    seasons_league_id_fkey = auto()
    series_season_id_fkey = auto()
    tournaments_series_id_fkey = auto()
    tournament_players_player_id_fkey = auto()
    qualifications_player_id_fkey = auto()
    qualifications_tournament_id_fkey = auto()
    season_event_results_player_id_fkey = auto()


unique_index_violation_error_lookup = {
    UniqueIndex.qualifications_season_id_player_id_key: (
        "This player already has a qualification record for this season"
    ),
    UniqueIndex.season_event_results_season_event_id_player_id_key: (
        "Each player can only appear once in a season event"
    ),
}


foreign_key_violation_error_lookup = {
    ForeignKey.seasons_league_id_fkey: "League does not exist",
    ForeignKey.series_season_id_fkey: "Season does not exist",
    ForeignKey.tournaments_series_id_fkey: "Series does not exist",
    ForeignKey.tournament_players_player_id_fkey: "One or more players do not exist",
    ForeignKey.qualifications_player_id_fkey: "Player does not exist",
    ForeignKey.qualifications_tournament_id_fkey: "Tournament does not exist",
    ForeignKey.season_event_results_player_id_fkey: "One or more players do not exist",
}


@contextmanager
def check_unique_constraint_violation(expected_violations: set[UniqueIndex]) -> Iterator[None]:
    try:
        yield
    except UniqueViolationError as exc:
        constraint_name = exc.constraint_name
        if constraint_name not in {violation.value for violation in expected_violations}:
            logger.error(f"Unexpected unique constraint violation: {constraint_name}")
            raise

        raise HTTPException(
            status.HTTP_409_CONFLICT,
            unique_index_violation_error_lookup[UniqueIndex(constraint_name)],
        ) from exc


@contextmanager
def check_foreign_key_violation(expected_violations: set[ForeignKey]) -> Iterator[None]:
    try:
        yield
    except ForeignKeyViolationError as exc:
        constraint_name = exc.constraint_name
        if constraint_name not in {violation.value for violation in expected_violations}:
            logger.error(f"Unexpected foreign key violation: {constraint_name}")
            raise

        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            foreign_key_violation_error_lookup[ForeignKey(constraint_name)],
        ) from exc
