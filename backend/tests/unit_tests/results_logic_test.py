from pokerleague.logic.results import (
    build_result_rows,
    rescore_stored_results,
    score_recorded_results,
    to_game_result,
)
from pokerleague.logic.scoring.game_result import GameType, default_field_size
from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.logic.scoring.scorer import build_game_scorer
from pokerleague.models.db.result import RecordResultsBody
from pokerleague.utils.dummy_records import dummy_tournament_result
from pokerleague.utils.id_types import PlayerId, TournamentId


def test_to_game_result_uses_string_player_ids() -> None:
    body = RecordResultsBody.model_validate(
        {"total_players": 9, "results": [{"player_id": 4, "rank": 1}]}
    )

    game_result = to_game_result(body)

    assert game_result.total_players == 9
    assert game_result.results[0].player_id == "4"


def test_players_without_points_are_stored_with_zero() -> None:
    body = RecordResultsBody.model_validate(
        {
            "total_players": 12,
            "results": [{"player_id": 1, "rank": 1}, {"player_id": 2, "rank": 12}],
        }
    )

    points = score_recorded_results(body, build_game_scorer())

    assert points == {PlayerId(1): 120, PlayerId(2): 0}


def test_series_points_system_selects_tournament_strategy() -> None:
    body = RecordResultsBody.model_validate(
        {"results": [{"player_id": 1, "rank": 1}, {"player_id": 2, "rank": 2}]}
    )
    scorer = build_game_scorer().with_points_system(PointsSystem.WINNER_TAKES_ALL)

    assert score_recorded_results(body, scorer) == {PlayerId(1): 100, PlayerId(2): 0}


def test_build_tournament_rows() -> None:
    body = RecordResultsBody.model_validate(
        {
            "results": [
                {"player_id": 1, "rank": 1, "bounty_count": 2, "payout": 150},
                {"player_id": 2, "rank": 2, "rebuy_count": 1},
            ]
        }
    )
    points = score_recorded_results(body, build_game_scorer())

    rows = build_result_rows(TournamentId(3), body, points, bounty_point_value=5)

    assert [(row.player_id, row.final_position, row.points) for row in rows] == [
        (1, 1, 20),
        (2, 2, 18),
    ]
    assert rows[0].bounty_points == 10
    assert rows[0].payout == 150
    assert rows[1].rebuy_count == 1
    assert all(row.tournament_id == 3 and row.consolation_position is None for row in rows)


def test_build_consolation_rows() -> None:
    body = RecordResultsBody.model_validate(
        {
            "game_type": GameType.CONSOLATION,
            "results": [
                {"player_id": 1, "rank": 2, "bounty_count": 4},
                {"player_id": 2, "rank": 2},
                {"player_id": 3, "rank": 4},
            ],
        }
    )
    points = score_recorded_results(body, build_game_scorer())

    rows = build_result_rows(TournamentId(3), body, points, bounty_point_value=5)

    assert [(row.consolation_position, row.consolation_points) for row in rows] == [
        (2, 50),
        (2, 50),
        (4, 0),
    ]
    assert all(row.final_position is None and row.bounty_points == 0 for row in rows)


def test_default_field_size_covers_gaps_and_ties() -> None:
    assert default_field_size([1, 1, 2]) == 3
    assert default_field_size([1, 7]) == 7
    assert default_field_size([]) == 0


def test_rescore_stored_results_with_stored_field_size() -> None:
    results = [
        dummy_tournament_result(1, "Alice", final_position=1, points=100),
        dummy_tournament_result(2, "Bob", final_position=1, points=100),
        dummy_tournament_result(3, "Carol", final_position=3, points=60),
    ]

    points = rescore_stored_results(results, 20, build_game_scorer())

    assert points == {1: 200, 2: 200, 3: 160}


def test_rescore_stored_results_skips_consolation_only_rows() -> None:
    results = [
        dummy_tournament_result(1, "Alice", final_position=1),
        dummy_tournament_result(2, "Bob", final_position=12),
        dummy_tournament_result(3, "Carol", consolation_position=1, consolation_points=100),
    ]

    points = rescore_stored_results(results, None, build_game_scorer())

    assert points == {1: 120, 2: 0}


def test_rescore_stored_results_uses_series_points_system() -> None:
    scorer = build_game_scorer().with_points_system(PointsSystem.WINNER_TAKES_ALL)
    results = [
        dummy_tournament_result(1, "Alice", final_position=1),
        dummy_tournament_result(2, "Bob", final_position=2),
    ]

    assert rescore_stored_results(results, 8, scorer) == {1: 100, 2: 0}
