import logging

from fastapi import FastAPI, HTTPException, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from config.logging_config import setup_logging
from contracts.history import PingRequest, PingResponse, SessionState
from core.exceptions import SessionBusyError
from core.metrics_manager import MetricsManager
from core.ping_session import PingSession
from core.probe_factory import get_default_probe

setup_logging()
logger = logging.getLogger(__name__)

metrics_manager = MetricsManager()
session = PingSession(get_default_probe(), metrics_manager=metrics_manager)

app = FastAPI()


@app.get("/", response_model=SessionState)
async def read_session():
    return session.snapshot()


@app.post("/ping", response_model=PingResponse)
async def ping(request: PingRequest):
    try:
        entry = await session.ping(request.address)
    except SessionBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if entry is None:
        raise HTTPException(status_code=400, detail=session.error_text)
    return PingResponse(
        entry=entry,
        line=entry.render(session.time_format),
        state=session.snapshot(),
    )


@app.get("/metrics")
def metrics():
    return Response(
        generate_latest(metrics_manager.registry), media_type=CONTENT_TYPE_LATEST
    )


logger.info(f"Ping server module loaded with {session.probe.variant.value} probe.")
