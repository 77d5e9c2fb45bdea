from pokerleague.logic.standings import (
    assign_competition_ranks,
    build_detailed_standings,
    build_standings,
    summarize_player_results,
)
from pokerleague.models.standings import StandingsRow
from pokerleague.utils.dummy_records import dummy_result_row
from pokerleague.utils.id_types import PlayerId


def _row(player_id: int, name: str, total: int, wins: int = 0, best: int | None = None) -> StandingsRow:
    return StandingsRow(
        player_id=PlayerId(player_id),
        player_name=name,
        total_points=total,
        wins=wins,
        best_finish=best,
    )


def test_summarize_player_results() -> None:
    results = [
        dummy_result_row(1, "Ada", 1, final_position=1, points=100, bounty_points=3),
        dummy_result_row(1, "Ada", 2, final_position=4, points=70, consolation_points=0),
        dummy_result_row(1, "Ada", 3, final_position=None, consolation_points=50),
    ]

    summary = summarize_player_results(PlayerId(1), "Ada", results)

    assert summary.total_points == 223
    assert summary.regular_points == 170
    assert summary.bounty_points == 3
    assert summary.consolation_points == 50
    assert summary.tournament_count == 3
    assert summary.best_finish == 1
    assert summary.average_finish == 2.5
    assert summary.wins == 1
    assert summary.top_three_finishes == 1


def test_summarize_player_without_finishes() -> None:
    summary = summarize_player_results(PlayerId(7), "Nobody", [])
    assert summary.total_points == 0
    assert summary.best_finish is None
    assert summary.average_finish is None


def test_competition_ranking_shares_ranks_and_skips() -> None:
    ranked = assign_competition_ranks(
        [
            _row(1, "Ada", 300),
            _row(2, "Ben", 200),
            _row(3, "Cleo", 200),
            _row(4, "Dev", 100),
        ]
    )
    assert [(row.player_name, row.rank) for row in ranked] == [
        ("Ada", 1),
        ("Ben", 2),
        ("Cleo", 2),
        ("Dev", 4),
    ]


def test_sort_order_uses_wins_then_best_finish_then_name() -> None:
    ranked = assign_competition_ranks(
        [
            _row(1, "zed", 100, wins=0, best=2),
            _row(2, "Amy", 100, wins=0, best=2),
            _row(3, "Bob", 100, wins=1, best=1),
            _row(4, "Cat", 100, wins=0, best=None),
            _row(5, "Dan", 100, wins=0, best=3),
        ]
    )
    assert [row.player_name for row in ranked] == ["Bob", "Amy", "zed", "Dan", "Cat"]
    assert {row.rank for row in ranked} == {1}


def test_build_standings_groups_by_player() -> None:
    results = [
        dummy_result_row(1, "Ada", 1, final_position=1, points=200),
        dummy_result_row(2, "Ben", 1, final_position=2, points=180),
        dummy_result_row(2, "Ben", 2, final_position=1, points=200),
        dummy_result_row(1, "Ada", 2, final_position=3, points=160),
    ]

    standings = build_standings(results)

    assert [(row.player_name, row.total_points, row.rank) for row in standings] == [
        ("Ben", 380, 1),
        ("Ada", 360, 2),
    ]


def test_build_detailed_standings_orders_results_by_date() -> None:
    results = [
        dummy_result_row(1, "Ada", 3, final_position=2, points=90),
        dummy_result_row(1, "Ada", 1, final_position=1, points=100),
    ]

    [row] = build_detailed_standings(results)

    assert row.rank == 1
    assert [result.tournament_id for result in row.tournament_results] == [1, 3]
