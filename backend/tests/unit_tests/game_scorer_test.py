import pytest

from pokerleague.logic.scoring.game_result import GameResult, GameType, PlayerResult
from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.logic.scoring.scorer import GameScorer, UnknownGameTypeError, build_game_scorer
from pokerleague.logic.scoring.strategies import (
    ConsolationScoringStrategy,
    PointsSystemScoringStrategy,
    TournamentScoringStrategy,
)


def _game(game_type: GameType) -> GameResult:
    return GameResult(
        game_type=game_type,
        total_players=10,
        results=(PlayerResult(player_id="p1", rank=1), PlayerResult(player_id="p2", rank=2)),
    )


def test_build_game_scorer_dispatches_on_game_type() -> None:
    scorer = build_game_scorer()
    assert scorer.score(_game(GameType.TOURNAMENT)) == {"p1": 100, "p2": 90}
    assert scorer.score(_game(GameType.CONSOLATION)) == {"p1": 100, "p2": 50}


def test_unregistered_game_type_raises() -> None:
    scorer = GameScorer({GameType.TOURNAMENT: TournamentScoringStrategy()})

    with pytest.raises(UnknownGameTypeError, match="CONSOLATION") as exc_info:
        scorer.score(_game(GameType.CONSOLATION))

    assert exc_info.value.game_type is GameType.CONSOLATION


def test_with_points_system_weighted_keeps_the_scorer() -> None:
    scorer = build_game_scorer()
    assert scorer.with_points_system(PointsSystem.WEIGHTED) is scorer


def test_with_points_system_replaces_only_the_tournament_strategy() -> None:
    scorer = build_game_scorer()
    fixed = scorer.with_points_system(PointsSystem.FIXED)

    assert isinstance(fixed.strategy_for(GameType.TOURNAMENT), PointsSystemScoringStrategy)
    assert isinstance(fixed.strategy_for(GameType.CONSOLATION), ConsolationScoringStrategy)
    assert isinstance(scorer.strategy_for(GameType.TOURNAMENT), TournamentScoringStrategy)
    assert fixed.score(_game(GameType.TOURNAMENT)) == {"p1": 100, "p2": 80}
