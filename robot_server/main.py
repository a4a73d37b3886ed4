import logging
import os

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from robot_server.models import HealthStatus
from robot_server.routes.robots import router as robots_router

app = FastAPI(title="Robot Route Server")

app.add_api_route("/", endpoint=lambda: "Http Server Test", methods=["GET"], response_class=PlainTextResponse)
app.add_api_route("/health", endpoint=lambda: HealthStatus(), methods=["GET"], response_model=HealthStatus)

app.include_router(robots_router, prefix="/robots", tags=["robots"])


def setup_logger(name):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[ROBOT SERVER] %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def main() -> None:
    logger = setup_logger("robot_server")
    port = int(os.environ.get("PORT", "3000"))
    address = os.environ.get("ADDRESS", "0.0.0.0")
    logger.info(f"Server running on port {port}")
    uvicorn.run(app, host=address, port=port)


if __name__ == "__main__":
    main()
