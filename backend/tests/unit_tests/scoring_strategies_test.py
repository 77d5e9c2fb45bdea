from pokerleague.logic.scoring.game_result import GameResult, GameType, PlayerResult
from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.logic.scoring.strategies import (
    ConsolationScoringStrategy,
    PointsSystemScoringStrategy,
    TournamentScoringStrategy,
)


def _game(
    total_players: int, ranks: list[tuple[str, int]], game_type: GameType = GameType.TOURNAMENT
) -> GameResult:
    return GameResult(
        game_type=game_type,
        total_players=total_players,
        results=tuple(PlayerResult(player_id=player_id, rank=rank) for player_id, rank in ranks),
    )


def test_tournament_single_winner() -> None:
    assert TournamentScoringStrategy().calculate_points(_game(20, [("p1", 1)])) == {"p1": 200}


def test_tournament_tie_shares_points_and_next_rank_keeps_its_value() -> None:
    points = TournamentScoringStrategy().calculate_points(
        _game(20, [("p1", 1), ("p2", 1), ("p3", 3)])
    )
    assert points == {"p1": 200, "p2": 200, "p3": 160}


def test_tournament_every_scoring_rank_without_ties() -> None:
    total_players = 12
    game = _game(total_players, [(f"p{rank}", rank) for rank in range(1, 13)])

    points = TournamentScoringStrategy().calculate_points(game)

    for rank in range(1, 11):
        assert points[f"p{rank}"] == total_players * (11 - rank)
    assert "p11" not in points
    assert "p12" not in points


def test_tournament_rank_beyond_ten_is_absent() -> None:
    assert TournamentScoringStrategy().calculate_points(_game(10, [("p1", 11)])) == {}


def test_tournament_results_are_scored_regardless_of_submission_order() -> None:
    points = TournamentScoringStrategy().calculate_points(
        _game(8, [("p3", 3), ("p1", 1), ("p2", 2), ("p2b", 2)])
    )
    assert points == {"p1": 80, "p2": 72, "p2b": 72, "p3": 64}


def test_tournament_tie_straddling_the_cutoff() -> None:
    points = TournamentScoringStrategy().calculate_points(
        _game(15, [("p1", 10), ("p2", 10), ("p3", 11)])
    )
    assert points == {"p1": 15, "p2": 15}


def test_tournament_rank_gap_uses_literal_rank() -> None:
    points = TournamentScoringStrategy().calculate_points(_game(10, [("p1", 1), ("p2", 5)]))
    assert points == {"p1": 100, "p2": 60}


def test_tournament_rank_zero_is_not_clamped() -> None:
    assert TournamentScoringStrategy().calculate_points(_game(20, [("p1", 0)])) == {"p1": 220}


def test_tournament_empty_results() -> None:
    assert TournamentScoringStrategy().calculate_points(_game(5, [])) == {}


def test_consolation_fixed_table() -> None:
    game = _game(
        12,
        [("p1", 1), ("p2", 2), ("p3", 3), ("p4", 4), ("p5", 5)],
        GameType.CONSOLATION,
    )
    assert ConsolationScoringStrategy().calculate_points(game) == {"p1": 100, "p2": 50, "p3": 25}


def test_consolation_tie_shares_value() -> None:
    game = _game(4, [("p1", 2), ("p2", 2)], GameType.CONSOLATION)
    assert ConsolationScoringStrategy().calculate_points(game) == {"p1": 50, "p2": 50}


def test_consolation_independent_of_field_size() -> None:
    small = _game(3, [("p1", 1)], GameType.CONSOLATION)
    large = _game(300, [("p1", 1)], GameType.CONSOLATION)
    strategy = ConsolationScoringStrategy()
    assert strategy.calculate_points(small) == strategy.calculate_points(large) == {"p1": 100}


def test_consolation_rank_below_one_gets_no_entry() -> None:
    game = _game(4, [("p0", 0), ("p1", 1)], GameType.CONSOLATION)
    assert ConsolationScoringStrategy().calculate_points(game) == {"p1": 100}


def test_scoring_is_idempotent() -> None:
    game = _game(9, [("a", 2), ("b", 1), ("c", 2), ("d", 7)])
    strategy = TournamentScoringStrategy()
    assert strategy.calculate_points(game) == strategy.calculate_points(game)


def test_points_system_strategy_fixed_table() -> None:
    points = PointsSystemScoringStrategy(PointsSystem.FIXED).calculate_points(
        _game(30, [("p1", 1), ("p2", 2), ("p3", 2), ("p4", 4), ("p11", 11)])
    )
    assert points == {"p1": 100, "p2": 80, "p3": 80, "p4": 50}


def test_points_system_strategy_winner_takes_all_omits_zero_values() -> None:
    points = PointsSystemScoringStrategy(PointsSystem.WINNER_TAKES_ALL).calculate_points(
        _game(6, [("p1", 1), ("p2", 2)])
    )
    assert points == {"p1": 100}


def test_points_system_strategy_weighted_matches_tournament_strategy() -> None:
    game = _game(14, [("a", 1), ("b", 2), ("c", 2), ("d", 4), ("e", 12)])
    assert PointsSystemScoringStrategy(PointsSystem.WEIGHTED).calculate_points(
        game
    ) == TournamentScoringStrategy().calculate_points(game)


def test_points_system_strategy_percentage_tie_and_zero_value_rank() -> None:
    points = PointsSystemScoringStrategy(PointsSystem.PERCENTAGE).calculate_points(
        _game(4, [("a", 1), ("b", 1), ("c", 4)])
    )
    assert points == {"a": 75, "b": 75}
