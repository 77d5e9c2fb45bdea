import itertools
from collections.abc import Callable
from typing import Protocol

from pokerleague.logic.scoring.game_result import GameResult
from pokerleague.logic.scoring.points_systems import (
    CONSOLATION_POINTS,
    MAX_POINT_POSITIONS,
    PointsSystem,
    points_for_position,
)


class ScoringStrategy(Protocol):
    def calculate_points(self, game_result: GameResult) -> dict[str, int]: ...


def award_points_per_tie_group(
    game_result: GameResult,
    last_scored_rank: int,
    points_for_rank: Callable[[int], int | None],
) -> dict[str, int]:
    """
    Walk the results in ascending rank order, one tie group at a time.

    Every player in a group gets the value of the group's literal rank number, so a large tie never
    shifts the scale for the ranks after it. The walk stops at the first group ranked beyond
    `last_scored_rank`. A `None` value means the group is skipped without an entry.
    """
    points: dict[str, int] = {}
    ordered_results = sorted(game_result.results, key=lambda result: result.rank)

    for rank, tied_results in itertools.groupby(ordered_results, key=lambda result: result.rank):
        if rank > last_scored_rank:
            break

        value = points_for_rank(rank)
        if value is None:
            continue

        for result in tied_results:
            points[result.player_id] = value

    return points


class TournamentScoringStrategy:
    """Main event: `total_players * (11 - rank)` for the top 10, scaled by field size."""

    def calculate_points(self, game_result: GameResult) -> dict[str, int]:
        return award_points_per_tie_group(
            game_result,
            MAX_POINT_POSITIONS,
            lambda rank: game_result.total_players * (MAX_POINT_POSITIONS + 1 - rank),
        )


class ConsolationScoringStrategy:
    """Consolation bracket: fixed 100/50/25 payouts for the top three."""

    def calculate_points(self, game_result: GameResult) -> dict[str, int]:
        return award_points_per_tie_group(
            game_result,
            max(CONSOLATION_POINTS),
            CONSOLATION_POINTS.get,
        )


class PointsSystemScoringStrategy:
    """
    Main event scored with one of the alternative points systems a series can pick.

    Ranks worth zero points under the chosen system get no entry.
    """

    def __init__(self, points_system: PointsSystem) -> None:
        self.points_system = points_system

    def calculate_points(self, game_result: GameResult) -> dict[str, int]:
        def points_for_rank(rank: int) -> int | None:
            value = points_for_position(self.points_system, rank, game_result.total_players)
            return value if value > 0 else None

        return award_points_per_tie_group(game_result, MAX_POINT_POSITIONS, points_for_rank)
