"""Telemetry fetchers: the ESP32 data endpoint and a mock stand-in."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable

import httpx

from .config import Settings
from .reading import (
    ACCELERATION_MAX,
    LUX_CHANGE_MAX,
    LUX_MAX,
    POSITION_STEPS,
    SPEED_MAX,
    Reading,
)

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """The device could not be reached or answered with a non-success status."""


class Esp32Fetcher:
    """Fetches one reading per call with a plain HTTP GET."""

    def __init__(
        self,
        url: str,
        timeout_sec: float = 2.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout_sec = timeout_sec
        self._transport = transport

    async def fetch(self) -> Reading:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_sec, transport=self._transport) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to fetch data from ESP32 at %s: %s", self.url, exc)
            raise NetworkError(f"{self.url}: {exc}") from exc
        return Reading.from_payload(response.json())


class MockFetcher:
    """Fabricates readings after an artificial network delay. Never fails."""

    def __init__(
        self,
        delay_sec: float = 1.0,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.delay_sec = delay_sec
        self._rng = rng or random.Random()
        self._sleep = sleep

    def _uniform(self, upper: float) -> float:
        return round(self._rng.uniform(0.0, upper), 2)

    async def fetch(self) -> Reading:
        await self._sleep(self.delay_sec)
        reading = Reading(
            lux=self._uniform(LUX_MAX),
            smoothed_lux=self._uniform(LUX_MAX),
            lux_change=self._uniform(LUX_CHANGE_MAX),
            adjusted_speed=self._uniform(SPEED_MAX),
            adjusted_acceleration=self._uniform(ACCELERATION_MAX),
            target_position=self._rng.randrange(POSITION_STEPS),
            current_position=self._rng.randrange(POSITION_STEPS),
        )
        logger.debug("Mock reading: %s", reading)
        return reading


def build_fetcher(settings: Settings) -> Esp32Fetcher | MockFetcher:
    source = settings.telemetry_source.strip().lower()
    if source == "esp32":
        return Esp32Fetcher(url=settings.esp32_data_url, timeout_sec=settings.esp32_timeout_sec)
    if source == "mock":
        return MockFetcher(delay_sec=settings.mock_delay_sec)
    raise ValueError(f"Unsupported telemetry source: {settings.telemetry_source}")
