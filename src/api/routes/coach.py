"""
Coach endpoint.

Exposes the container-managed coach bean over HTTP.
"""

from fastapi import APIRouter

from ..dependencies import CoachDep

router = APIRouter()


@router.get("/dailyworkout", response_model=str, summary="Today's workout")
async def get_daily_workout(coach: CoachDep) -> str:
    return coach.get_daily_workout()
