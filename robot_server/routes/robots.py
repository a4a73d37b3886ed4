import logging

from fastapi import APIRouter

from robot_server.models import RobotStatus

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/start", response_model=RobotStatus)
async def start_robot():
    logger.info("Robot start requested")
    return RobotStatus(status="robot started")


@router.post("/stop", response_model=RobotStatus)
async def stop_robot():
    logger.info("Robot stop requested")
    return RobotStatus(status="robot stopped")
