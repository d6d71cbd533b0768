# server.py
# FastAPI app and uvicorn listener for TimeToTravelTo

import logging
from typing import List, Optional
import socket

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from health import router as health_router
from timetotravel.config import ServerConfig

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# FastAPI app setup
# -------------------------------------------------------------------
APP_VERSION = "1.0.0"
GREETING = "TimeToTravelTo is live!"

app = FastAPI(
    title="TimeToTravelTo",
    version=APP_VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)
app.include_router(health_router)

@app.get("/", response_class=PlainTextResponse)
def root():
    return GREETING

# -------------------------------------------------------------------
# Listener
# -------------------------------------------------------------------
class ListeningServer(uvicorn.Server):
    """uvicorn server that announces the listening URL once the socket is bound."""

    async def startup(self, sockets: Optional[List[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server listening on http://localhost:{self.config.port}")


def build_server(config: ServerConfig) -> ListeningServer:
    uv_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=getattr(logging, config.log_level),
    )
    return ListeningServer(uv_config)


def serve(config: ServerConfig) -> None:
    """Run until interrupted. Exits non-zero if the port cannot be bound."""
    build_server(config).run()
