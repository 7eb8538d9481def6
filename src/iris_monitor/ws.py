"""WebSocket handlers."""

from __future__ import annotations

import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from .config import settings
from .history import JsonlHistoryStore
from .telemetry import Esp32Fetcher, MockFetcher, NetworkError

logger = logging.getLogger(__name__)


async def telemetry_stream(
    websocket: WebSocket,
    fetcher: Esp32Fetcher | MockFetcher,
    history: JsonlHistoryStore | None = None,
) -> None:
    await websocket.accept()
    try:
        while True:
            try:
                reading = await fetcher.fetch()
            except NetworkError as exc:
                # Keep pushing; the device often drops off the hotspot briefly.
                await websocket.send_json({"type": "error", "ok": False, "error": str(exc)})
            else:
                await websocket.send_json({"type": "reading", **reading.to_payload()})
                if history is not None:
                    history.append(reading)
            await asyncio.sleep(settings.telemetry_interval_sec)
    except WebSocketDisconnect:
        logger.debug("Telemetry client disconnected")
        return
