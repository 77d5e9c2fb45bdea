import math
from enum import auto

from pokerleague.utils.types import EnumAutoStr

MAX_POINT_POSITIONS = 10
CONSOLATION_POINTS: dict[int, int] = {1: 100, 2: 50, 3: 25}
DEFAULT_FIXED_POINTS: dict[int, int] = {
    1: 100,
    2: 80,
    3: 60,
    4: 50,
    5: 40,
    6: 30,
    7: 25,
    8: 20,
    9: 15,
    10: 10,
}
PERCENTAGE_MAX_POINTS = 100
WINNER_TAKES_ALL_POINTS = 100


class PointsSystem(EnumAutoStr):
    WEIGHTED = auto()
    FIXED = auto()
    PERCENTAGE = auto()
    WINNER_TAKES_ALL = auto()


def weighted_points(
    rank: int, total_players: int, max_positions: int = MAX_POINT_POSITIONS
) -> int:
    if rank > max_positions:
        return 0
    return total_players * (max_positions + 1 - rank)


def fixed_points(rank: int, points_table: dict[int, int] = DEFAULT_FIXED_POINTS) -> int:
    return points_table.get(rank, 0)


def percentage_points(
    rank: int,
    total_players: int,
    max_points: int = PERCENTAGE_MAX_POINTS,
    max_positions: int = MAX_POINT_POSITIONS,
) -> int:
    """Points proportional to the share of the field finishing behind this rank."""
    if rank > max_positions or total_players < 1:
        return 0
    share_behind = (total_players - rank) / total_players
    return max(0, math.floor(share_behind * max_points + 0.5))


def winner_takes_all_points(rank: int, winner_points: int = WINNER_TAKES_ALL_POINTS) -> int:
    return winner_points if rank == 1 else 0


def points_for_position(points_system: PointsSystem, rank: int, total_players: int) -> int:
    match points_system:
        case PointsSystem.WEIGHTED:
            return weighted_points(rank, total_players)
        case PointsSystem.FIXED:
            return fixed_points(rank)
        case PointsSystem.PERCENTAGE:
            return percentage_points(rank, total_players)
        case PointsSystem.WINNER_TAKES_ALL:
            return winner_takes_all_points(rank)


def describe_points_system(points_system: PointsSystem) -> str:
    match points_system:
        case PointsSystem.WEIGHTED:
            return (
                f"Points = total players x ({MAX_POINT_POSITIONS + 1} - position) "
                f"for the top {MAX_POINT_POSITIONS} positions"
            )
        case PointsSystem.FIXED:
            examples = ", ".join(
                f"{position}: {points}"
                for position, points in sorted(DEFAULT_FIXED_POINTS.items())[:3]
            )
            return f"Fixed points per position ({examples}, ...)"
        case PointsSystem.PERCENTAGE:
            return (
                f"Points based on the share of the field beaten (max {PERCENTAGE_MAX_POINTS} "
                f"points, top {MAX_POINT_POSITIONS} positions only)"
            )
        case PointsSystem.WINNER_TAKES_ALL:
            return f"Winner gets {WINNER_TAKES_ALL_POINTS} points, all others get 0"


def bounty_points(bounty_count: int, bounty_point_value: int) -> int:
    return bounty_count * bounty_point_value
