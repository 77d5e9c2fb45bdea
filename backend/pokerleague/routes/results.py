from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from pokerleague.config import config
from pokerleague.logic.results import build_result_rows, score_recorded_results
from pokerleague.logic.scoring.scorer import GameScorer
from pokerleague.models.db.result import RecordResultsBody
from pokerleague.models.db.tournament import Tournament
from pokerleague.routes.models import SuccessResponse, TournamentResultsResponse
from pokerleague.routes.util import (
    disallow_finalized_tournament,
    get_game_scorer,
    tournament_dependency,
)
from pokerleague.sql.players import get_players_by_ids
from pokerleague.sql.results import (
    get_results_for_tournament,
    sql_delete_result,
    sql_replace_results,
    sql_result_exists,
)
from pokerleague.sql.series import get_series_by_id
from pokerleague.utils.errors import ForeignKey, check_foreign_key_violation
from pokerleague.utils.id_types import PlayerId
from pokerleague.utils.logging import logger
from pokerleague.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/tournaments/{tournament_id}/results", response_model=TournamentResultsResponse)
async def get_tournament_results(
    tournament: Tournament = Depends(tournament_dependency),
) -> TournamentResultsResponse:
    return TournamentResultsResponse(data=await get_results_for_tournament(tournament.id))


@router.post("/tournaments/{tournament_id}/results", response_model=TournamentResultsResponse)
async def record_tournament_results(
    body: RecordResultsBody,
    tournament: Tournament = Depends(disallow_finalized_tournament),
    game_scorer: GameScorer = Depends(get_game_scorer),
) -> TournamentResultsResponse:
    submitted_ids = {entry.player_id for entry in body.results}
    known_ids = {player.id for player in await get_players_by_ids(list(submitted_ids))}
    if missing_ids := submitted_ids - known_ids:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            f"Could not find players with IDs: {sorted(missing_ids)}",
        )

    series = assert_some(await get_series_by_id(tournament.series_id))
    scorer = game_scorer.with_points_system(series.points_system)
    points = score_recorded_results(body, scorer)

    bounty_point_value = (
        body.bounty_point_value
        if body.bounty_point_value is not None
        else config.default_bounty_point_value
    )
    rows = build_result_rows(tournament.id, body, points, bounty_point_value)

    with check_foreign_key_violation({ForeignKey.tournament_players_player_id_fkey}):
        await sql_replace_results(tournament.id, body.game_type, rows, body.field_size())

    logger.info(
        f"Recorded {len(rows)} {body.game_type.value.lower()} results for tournament "
        f"{tournament.id} using {series.points_system.value} points"
    )
    return TournamentResultsResponse(data=await get_results_for_tournament(tournament.id))


@router.delete(
    "/tournaments/{tournament_id}/results/{player_id}", response_model=SuccessResponse
)
async def delete_tournament_result(
    player_id: PlayerId,
    tournament: Tournament = Depends(disallow_finalized_tournament),
) -> SuccessResponse:
    if not await sql_result_exists(tournament.id, player_id):
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, "Could not find a result for this player in the tournament"
        )

    await sql_delete_result(tournament.id, player_id)
    logger.info(f"Deleted result of player {player_id} in tournament {tournament.id}")
    return SuccessResponse()
