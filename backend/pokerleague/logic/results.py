from heliclockter import datetime_utc

from pokerleague.logic.scoring.game_result import (
    GameResult,
    GameType,
    PlayerResult,
    default_field_size,
)
from pokerleague.logic.scoring.points_systems import bounty_points
from pokerleague.logic.scoring.scorer import GameScorer
from pokerleague.models.db.result import (
    RecordResultsBody,
    TournamentPlayerInsertable,
    TournamentResultView,
)
from pokerleague.utils.id_types import PlayerId, TournamentId
from pokerleague.utils.types import assert_some


def to_game_result(body: RecordResultsBody) -> GameResult:
    return GameResult(
        game_type=body.game_type,
        total_players=body.field_size(),
        results=tuple(
            PlayerResult(player_id=str(entry.player_id), rank=entry.rank)
            for entry in body.results
        ),
    )


def score_recorded_results(body: RecordResultsBody, scorer: GameScorer) -> dict[PlayerId, int]:
    """Points per submitted player; players the strategy leaves out are worth 0."""
    points = scorer.score(to_game_result(body))
    return {entry.player_id: points.get(str(entry.player_id), 0) for entry in body.results}


def rescore_stored_results(
    results: list[TournamentResultView], total_players: int | None, scorer: GameScorer
) -> dict[PlayerId, int]:
    """
    Main event points for already stored finishing positions.

    Rows without a finishing position only hold consolation results and are left out.
    """
    finishers = [result for result in results if result.final_position is not None]
    ranks = [assert_some(result.final_position) for result in finishers]
    game_result = GameResult(
        game_type=GameType.TOURNAMENT,
        total_players=total_players if total_players is not None else default_field_size(ranks),
        results=tuple(
            PlayerResult(player_id=str(result.player_id), rank=rank)
            for result, rank in zip(finishers, ranks, strict=True)
        ),
    )
    points = scorer.score(game_result)
    return {result.player_id: points.get(str(result.player_id), 0) for result in finishers}


def build_result_rows(
    tournament_id: TournamentId,
    body: RecordResultsBody,
    points: dict[PlayerId, int],
    bounty_point_value: int,
) -> list[TournamentPlayerInsertable]:
    now = datetime_utc.now()
    rows = []

    for entry in body.results:
        match body.game_type:
            case GameType.TOURNAMENT:
                row = TournamentPlayerInsertable(
                    tournament_id=tournament_id,
                    player_id=entry.player_id,
                    final_position=entry.rank,
                    points=points[entry.player_id],
                    bounty_count=entry.bounty_count,
                    bounty_points=bounty_points(entry.bounty_count, bounty_point_value),
                    payout=entry.payout,
                    rebuy_count=entry.rebuy_count,
                    notes=entry.notes,
                    created=now,
                    updated=now,
                )
            case GameType.CONSOLATION:
                row = TournamentPlayerInsertable(
                    tournament_id=tournament_id,
                    player_id=entry.player_id,
                    consolation_position=entry.rank,
                    consolation_points=points[entry.player_id],
                    created=now,
                    updated=now,
                )
        rows.append(row)

    return rows
