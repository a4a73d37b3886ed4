from pydantic import BaseModel, Field


class RobotStatus(BaseModel):
    status: str = Field(..., description="Human readable acknowledgement.")


class HealthStatus(BaseModel):
    status: str = "ok"
