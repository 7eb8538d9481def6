"""FastAPI entrypoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI, WebSocket
from fastapi.responses import JSONResponse

from .config import settings
from .history import JsonlHistoryStore
from .telemetry import NetworkError, build_fetcher
from .ws import telemetry_stream

logger = logging.getLogger(__name__)

app = FastAPI(title="iris-monitor", version="0.1.0")


@app.on_event("startup")
def startup() -> None:
    app.state.fetcher = build_fetcher(settings)
    app.state.history = JsonlHistoryStore(settings.history_path) if settings.history_enabled else None
    logger.info(
        "Telemetry source=%s url=%s history=%s",
        settings.telemetry_source,
        settings.esp32_data_url,
        settings.history_path if settings.history_enabled else "disabled",
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "service": settings.service_name, "source": settings.telemetry_source}


@app.get("/telemetry")
async def telemetry():
    try:
        reading = await app.state.fetcher.fetch()
    except NetworkError as exc:
        return JSONResponse({"ok": False, "error": "device_unreachable", "detail": str(exc)}, status_code=502)
    return reading.to_payload()


@app.get("/api/history/last")
def history_last() -> dict:
    history = app.state.history
    reading = history.last_reading() if history is not None else None
    return {"reading": reading.to_payload() if reading is not None else None}


@app.post("/api/history/reset")
def history_reset() -> dict:
    history = app.state.history
    if history is None:
        return {"ok": True, "history_cleared": False}
    history.clear()
    return {"ok": True, "history_cleared": True}


@app.websocket("/ws/telemetry")
async def telemetry_ws(websocket: WebSocket) -> None:
    await telemetry_stream(websocket, app.state.fetcher, app.state.history)
