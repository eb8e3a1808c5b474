"""
HTTP API of the PollChat server.

    GET  /  -> 200, JSON array of {"id": int, "message": str}, ascending by id
    POST /  -> body is the raw UTF-8 message text; 200 echoes it back
"""

from typing import List

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from PollChat import __version__ as __main_version__
from PollChat.config import ServerSettings
from PollChat.core.logging import get_logger
from PollChat.core.server import MessageLog

logger = get_logger(__name__)


class MessageOut(BaseModel):
    id: int
    message: str


def create_app(log: MessageLog) -> FastAPI:
    """
    Build the FastAPI application serving one message log.

    Args:
        log (MessageLog): Storage for the chat log

    Returns:
        FastAPI: The application
    """
    app = FastAPI(title="PollChat", version=__main_version__)

    @app.get("/", response_model=List[MessageOut])
    def dump_log():
        return [MessageOut(id=m.id, message=m.text) for m in log.read_all()]

    @app.post("/", response_class=PlainTextResponse)
    async def send_message(request: Request):
        raw = await request.body()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            raise HTTPException(status_code=400, detail="Message body must be UTF-8 text")

        stored = log.append(text)
        logger.info("Message %d received: %s", stored.id, text)
        return PlainTextResponse(text)

    return app


def run(settings: ServerSettings) -> None:
    """
    Open the message log and serve it with uvicorn until interrupted.

    Args:
        settings (ServerSettings): Bind address and database path
    """
    log = MessageLog(settings.db_path)
    app = create_app(log)
    logger.info("Serving message log %s on %s:%d", settings.db_path, settings.host, settings.port)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    finally:
        log.close()
