from pydantic import BaseModel

from pokerleague.logic.scoring.points_systems import (
    PointsSystem,
    bounty_points,
    points_for_position,
)


class ScoringInputError(Exception):
    pass


class PointsCalculation(BaseModel):
    base_points: int
    bounty_points: int
    total_points: int
    points_system: PointsSystem


def calculate_points_for_position(
    position: int,
    total_players: int,
    points_system: PointsSystem = PointsSystem.WEIGHTED,
    bounty_count: int = 0,
    bounty_point_value: int = 1,
) -> PointsCalculation:
    if position < 1:
        raise ScoringInputError("Position must be greater than 0")
    if total_players < 1:
        raise ScoringInputError("Total players must be greater than 0")
    if position > total_players:
        raise ScoringInputError("Position cannot be greater than total players")
    if bounty_count < 0:
        raise ScoringInputError("Bounty count cannot be negative")
    if bounty_point_value < 0:
        raise ScoringInputError("Bounty point value cannot be negative")

    base = points_for_position(points_system, position, total_players)
    bounty = bounty_points(bounty_count, bounty_point_value)
    return PointsCalculation(
        base_points=base,
        bounty_points=bounty,
        total_points=base + bounty,
        points_system=points_system,
    )
