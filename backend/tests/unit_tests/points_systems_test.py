import pytest

from pokerleague.logic.scoring.calculation import ScoringInputError, calculate_points_for_position
from pokerleague.logic.scoring.points_systems import (
    PointsSystem,
    bounty_points,
    describe_points_system,
    fixed_points,
    percentage_points,
    points_for_position,
    weighted_points,
    winner_takes_all_points,
)


def test_weighted_points() -> None:
    assert weighted_points(1, 20) == 200
    assert weighted_points(10, 20) == 20
    assert weighted_points(11, 20) == 0


def test_fixed_points() -> None:
    assert fixed_points(1) == 100
    assert fixed_points(2) == 80
    assert fixed_points(10) == 10
    assert fixed_points(11) == 0


def test_percentage_points_rounds_half_up() -> None:
    assert percentage_points(1, 10) == 90
    assert percentage_points(1, 8) == 88
    assert percentage_points(5, 10) == 50
    assert percentage_points(11, 20) == 0


def test_percentage_points_last_place_gets_nothing() -> None:
    assert percentage_points(4, 4) == 0


def test_winner_takes_all_points() -> None:
    assert winner_takes_all_points(1) == 100
    assert winner_takes_all_points(2) == 0


def test_points_for_position_dispatches_on_system() -> None:
    assert points_for_position(PointsSystem.WEIGHTED, 2, 10) == 90
    assert points_for_position(PointsSystem.FIXED, 2, 10) == 80
    assert points_for_position(PointsSystem.PERCENTAGE, 2, 10) == 80
    assert points_for_position(PointsSystem.WINNER_TAKES_ALL, 2, 10) == 0


def test_every_points_system_has_a_description() -> None:
    for points_system in PointsSystem:
        assert describe_points_system(points_system) != ""


def test_bounty_points() -> None:
    assert bounty_points(3, 5) == 15
    assert bounty_points(0, 5) == 0


def test_calculate_points_for_position() -> None:
    calculation = calculate_points_for_position(
        3, 12, points_system=PointsSystem.WEIGHTED, bounty_count=2, bounty_point_value=4
    )
    assert calculation.base_points == 96
    assert calculation.bounty_points == 8
    assert calculation.total_points == 104
    assert calculation.points_system is PointsSystem.WEIGHTED


@pytest.mark.parametrize(
    ("position", "total_players", "bounty_count", "bounty_point_value", "message"),
    [
        (0, 10, 0, 1, "Position must be greater than 0"),
        (1, 0, 0, 1, "Total players must be greater than 0"),
        (11, 10, 0, 1, "Position cannot be greater than total players"),
        (1, 10, -1, 1, "Bounty count cannot be negative"),
        (1, 10, 0, -1, "Bounty point value cannot be negative"),
    ],
)
def test_calculate_points_for_position_rejects_invalid_input(
    position: int, total_players: int, bounty_count: int, bounty_point_value: int, message: str
) -> None:
    with pytest.raises(ScoringInputError, match=message):
        calculate_points_for_position(
            position,
            total_players,
            bounty_count=bounty_count,
            bounty_point_value=bounty_point_value,
        )
