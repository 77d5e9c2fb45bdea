from fastapi import APIRouter, Query

from pokerleague.config import config
from pokerleague.logic.scoring.calculation import calculate_points_for_position
from pokerleague.logic.scoring.points_systems import PointsSystem, describe_points_system
from pokerleague.routes.models import (
    PointsCalculationResponse,
    PointsSystemDescription,
    PointsSystemsResponse,
)

router = APIRouter(prefix=config.api_prefix)


@router.get("/scoring/points_systems", response_model=PointsSystemsResponse)
async def list_points_systems() -> PointsSystemsResponse:
    return PointsSystemsResponse(
        data=[
            PointsSystemDescription(
                points_system=points_system, description=describe_points_system(points_system)
            )
            for points_system in PointsSystem
        ]
    )


@router.get("/scoring/calculate", response_model=PointsCalculationResponse)
async def calculate_points(
    position: int = Query(),
    total_players: int = Query(),
    points_system: PointsSystem = Query(default=PointsSystem.WEIGHTED),
    bounty_count: int = Query(default=0),
    bounty_point_value: int = Query(default=config.default_bounty_point_value),
) -> PointsCalculationResponse:
    return PointsCalculationResponse(
        data=calculate_points_for_position(
            position,
            total_players,
            points_system=points_system,
            bounty_count=bounty_count,
            bounty_point_value=bounty_point_value,
        )
    )
