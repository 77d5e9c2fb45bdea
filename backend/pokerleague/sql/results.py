import time
from typing import Any

from heliclockter import datetime_utc

from pokerleague.database import database
from pokerleague.logic.results import rescore_stored_results
from pokerleague.logic.scoring.game_result import GameType
from pokerleague.logic.scoring.scorer import GameScorer
from pokerleague.models.db.result import (
    PlayerResultRow,
    TournamentPlayerInsertable,
    TournamentResultView,
)
from pokerleague.models.db.series import Series
from pokerleague.sql.tournaments import sql_get_tournaments
from pokerleague.utils.id_types import PlayerId, SeasonId, SeriesId, TournamentId
from pokerleague.utils.logging import logger

_UPSERT_TOURNAMENT_RESULT = """
    INSERT INTO tournament_players (
        tournament_id, player_id, final_position, points, bounty_count, bounty_points,
        payout, rebuy_count, notes, created, updated
    )
    VALUES (
        :tournament_id, :player_id, :final_position, :points, :bounty_count, :bounty_points,
        :payout, :rebuy_count, :notes, :created, :updated
    )
    ON CONFLICT (tournament_id, player_id) DO UPDATE
    SET
        final_position = EXCLUDED.final_position,
        points = EXCLUDED.points,
        bounty_count = EXCLUDED.bounty_count,
        bounty_points = EXCLUDED.bounty_points,
        payout = EXCLUDED.payout,
        rebuy_count = EXCLUDED.rebuy_count,
        notes = EXCLUDED.notes,
        updated = EXCLUDED.updated
    """

_UPSERT_CONSOLATION_RESULT = """
    INSERT INTO tournament_players (
        tournament_id, player_id, consolation_position, consolation_points, created, updated
    )
    VALUES (
        :tournament_id, :player_id, :consolation_position, :consolation_points, :created, :updated
    )
    ON CONFLICT (tournament_id, player_id) DO UPDATE
    SET
        consolation_position = EXCLUDED.consolation_position,
        consolation_points = EXCLUDED.consolation_points,
        updated = EXCLUDED.updated
    """

_TOURNAMENT_COLUMNS = {
    "tournament_id",
    "player_id",
    "final_position",
    "points",
    "bounty_count",
    "bounty_points",
    "payout",
    "rebuy_count",
    "notes",
    "created",
    "updated",
}

_CONSOLATION_COLUMNS = {
    "tournament_id",
    "player_id",
    "consolation_position",
    "consolation_points",
    "created",
    "updated",
}

_CLEAR_TOURNAMENT_RESULTS = """
    UPDATE tournament_players
    SET
        final_position = NULL,
        points = 0,
        bounty_count = 0,
        bounty_points = 0,
        payout = 0,
        rebuy_count = 0,
        notes = NULL,
        updated = :updated
    WHERE tournament_id = :tournament_id
    AND NOT (player_id = any(:player_ids))
    """

_CLEAR_CONSOLATION_RESULTS = """
    UPDATE tournament_players
    SET
        consolation_position = NULL,
        consolation_points = 0,
        updated = :updated
    WHERE tournament_id = :tournament_id
    AND NOT (player_id = any(:player_ids))
    """

_DELETE_EMPTY_RESULTS = """
    DELETE FROM tournament_players
    WHERE tournament_id = :tournament_id
    AND final_position IS NULL
    AND consolation_position IS NULL
    """

_SET_TOURNAMENT_TOTAL_PLAYERS = """
    UPDATE tournaments
    SET total_players = :total_players, updated = :updated
    WHERE id = :tournament_id
    """

_SET_RESULT_POINTS = """
    UPDATE tournament_players
    SET points = :points
    WHERE tournament_id = :tournament_id
    AND player_id = :player_id
    """


async def get_results_for_tournament(tournament_id: TournamentId) -> list[TournamentResultView]:
    query = """
        SELECT tp.*, p.name AS player_name
        FROM tournament_players tp
        JOIN players p ON p.id = tp.player_id
        WHERE tp.tournament_id = :tournament_id
        ORDER BY tp.final_position ASC NULLS LAST,
            tp.consolation_position ASC NULLS LAST,
            lower(p.name)
        """
    result = await database.fetch_all(query=query, values={"tournament_id": tournament_id})
    return [TournamentResultView.model_validate(dict(x._mapping)) for x in result]


async def sql_result_exists(tournament_id: TournamentId, player_id: PlayerId) -> bool:
    query = """
        SELECT EXISTS (
            SELECT 1
            FROM tournament_players
            WHERE tournament_id = :tournament_id
            AND player_id = :player_id
        )
        """
    return bool(
        await database.fetch_val(
            query=query, values={"tournament_id": tournament_id, "player_id": player_id}
        )
    )


async def sql_replace_results(
    tournament_id: TournamentId,
    game_type: GameType,
    rows: list[TournamentPlayerInsertable],
    total_players: int,
) -> None:
    """
    Store a submission as the complete result set of one game type for a tournament.

    A tournament game only touches the finishing columns and a consolation game only touches the
    consolation columns, so recording one never clears the other. Players left out of a
    re-submission lose their columns for this game type, and rows left with neither a finishing
    nor a consolation position are removed. The field size of the main event is kept on the
    tournament so its points can be recalculated later.
    """
    match game_type:
        case GameType.TOURNAMENT:
            query, columns, clear_query = (
                _UPSERT_TOURNAMENT_RESULT,
                _TOURNAMENT_COLUMNS,
                _CLEAR_TOURNAMENT_RESULTS,
            )
        case GameType.CONSOLATION:
            query, columns, clear_query = (
                _UPSERT_CONSOLATION_RESULT,
                _CONSOLATION_COLUMNS,
                _CLEAR_CONSOLATION_RESULTS,
            )

    now = datetime_utc.now()
    async with database.transaction():
        for row in rows:
            await database.execute(query=query, values=row.model_dump(include=columns))

        await database.execute(
            query=clear_query,
            values={
                "tournament_id": tournament_id,
                "player_ids": [row.player_id for row in rows],
                "updated": now,
            },
        )
        await database.execute(query=_DELETE_EMPTY_RESULTS, values={"tournament_id": tournament_id})

        if game_type is GameType.TOURNAMENT:
            await database.execute(
                query=_SET_TOURNAMENT_TOTAL_PLAYERS,
                values={
                    "tournament_id": tournament_id,
                    "total_players": total_players,
                    "updated": now,
                },
            )

    logger.info(f"Stored {len(rows)} {game_type.value.lower()} results")


async def recalculate_series_points(series: Series, game_scorer: GameScorer) -> int:
    """Re-score the stored finishing positions of every tournament in a series."""
    started_at = time.monotonic()
    scorer = game_scorer.with_points_system(series.points_system)
    tournaments = await sql_get_tournaments(series_id=series.id)

    async with database.transaction():
        for tournament in tournaments:
            results = await get_results_for_tournament(tournament.id)
            points = rescore_stored_results(results, tournament.total_players, scorer)
            for player_id, value in points.items():
                await database.execute(
                    query=_SET_RESULT_POINTS,
                    values={
                        "tournament_id": tournament.id,
                        "player_id": player_id,
                        "points": value,
                    },
                )

    duration_ms = int((time.monotonic() - started_at) * 1000)
    logger.info(
        f"Recalculated {len(tournaments)} tournaments of series {series.id} using "
        f"{series.points_system.value} points in {duration_ms}ms"
    )
    return duration_ms


async def sql_delete_result(tournament_id: TournamentId, player_id: PlayerId) -> None:
    query = """
        DELETE FROM tournament_players
        WHERE tournament_id = :tournament_id
        AND player_id = :player_id
        """
    await database.execute(
        query=query, values={"tournament_id": tournament_id, "player_id": player_id}
    )


async def get_player_result_rows(
    *,
    series_id: SeriesId | None = None,
    season_id: SeasonId | None = None,
    player_id: PlayerId | None = None,
) -> list[PlayerResultRow]:
    query = """
        SELECT
            t.id AS tournament_id,
            t.name AS tournament_name,
            t.date AS tournament_date,
            t.series_id,
            p.id AS player_id,
            p.name AS player_name,
            tp.final_position,
            tp.points,
            tp.consolation_position,
            tp.consolation_points,
            tp.bounty_points,
            tp.payout
        FROM tournament_players tp
        JOIN tournaments t ON t.id = tp.tournament_id
        JOIN players p ON p.id = tp.player_id
        WHERE TRUE
        """
    params: dict[str, Any] = {}

    if series_id is not None:
        query += "AND t.series_id = :series_id "
        params["series_id"] = series_id

    if season_id is not None:
        query += "AND t.season_id = :season_id "
        params["season_id"] = season_id

    if player_id is not None:
        query += "AND tp.player_id = :player_id "
        params["player_id"] = player_id

    query += "ORDER BY t.date, t.id, tp.final_position NULLS LAST"
    result = await database.fetch_all(query=query, values=params)
    return [PlayerResultRow.model_validate(dict(x._mapping)) for x in result]
