from collections.abc import Mapping

from pokerleague.logic.scoring.game_result import GameResult, GameType
from pokerleague.logic.scoring.points_systems import PointsSystem
from pokerleague.logic.scoring.strategies import (
    ConsolationScoringStrategy,
    PointsSystemScoringStrategy,
    ScoringStrategy,
    TournamentScoringStrategy,
)


class UnknownGameTypeError(Exception):
    def __init__(self, game_type: GameType) -> None:
        super().__init__(f"No scoring strategy for game type: {game_type.value}")
        self.game_type = game_type


class GameScorer:
    def __init__(self, strategies: Mapping[GameType, ScoringStrategy]) -> None:
        self.strategies = dict(strategies)

    def strategy_for(self, game_type: GameType) -> ScoringStrategy:
        strategy = self.strategies.get(game_type)
        if strategy is None:
            raise UnknownGameTypeError(game_type)
        return strategy

    def score(self, game_result: GameResult) -> dict[str, int]:
        return self.strategy_for(game_result.game_type).calculate_points(game_result)

    def with_points_system(self, points_system: PointsSystem) -> "GameScorer":
        """Copy of this scorer whose main tournament strategy follows `points_system`."""
        if points_system is PointsSystem.WEIGHTED:
            return self

        return GameScorer(
            {
                **self.strategies,
                GameType.TOURNAMENT: PointsSystemScoringStrategy(points_system),
            }
        )


def build_game_scorer() -> GameScorer:
    return GameScorer(
        {
            GameType.TOURNAMENT: TournamentScoringStrategy(),
            GameType.CONSOLATION: ConsolationScoringStrategy(),
        }
    )
