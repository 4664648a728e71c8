"""
Shared test fixtures.

Upstream responses are served by ``httpx.MockTransport`` so tests never
touch the network.  Payload builders mirror the JUMP JSON shapes.
"""

from __future__ import annotations

import json
import os
from typing import Any, Callable

import httpx
import pytest

from bikealert.infrastructure.jump_client import JumpClient

# San Francisco, Market St & 4th
ORIGIN_LAT, ORIGIN_LNG = 37.7855, -122.4056


# ── Payload builders ──────────────────────────────────────────────────


def bike_payload(
    id: int, lat: float, lng: float, *, name: str | None = None,
    address: str = "Market St", battery: int | None = 80,
) -> dict[str, Any]:
    return {
        "id": id,
        "name": name or f"{id:04d}",
        "network_id": 3,
        "battery_level": 100,
        "vehicle_type": "bike",
        "unlocking_methods": ["app"],
        "sponsored": False,
        "ebike_battery_level": battery,
        "ebike_battery_distance": 20.5,
        "inside_area": True,
        "address": address,
        "current_position": {"type": "Point", "coordinates": [lng, lat]},
    }


def hub_payload(
    id: int, lat: float, lng: float, *, name: str | None = None,
    address: str = "Mission St", bikes: int = 2, ebikes: int = 3,
) -> dict[str, Any]:
    return {
        "id": id,
        "name": name or f"Hub {id}",
        "description": "",
        "address": address,
        "area_id": 1,
        "available_bikes": bikes,
        "available_ebikes": ebikes,
        "free_racks": 4,
        "has_charging_infrastructure": True,
        "middle_point": {"type": "Point", "coordinates": [lng, lat]},
        "polygon": {"type": "Polygon", "coordinates": []},
        "warehouse": False,
    }


def envelope(items: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "current_page": 1,
        "per_page": 999,
        "total_entries": len(items),
        "items": items,
    }


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Start every test with no coordinates, no overrides and no .env."""
    monkeypatch.chdir(tmp_path)
    for name in ("LAT", "LNG"):
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith("BIKEALERT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_client() -> Callable[..., JumpClient]:
    """Build a ``JumpClient`` whose HTTP layer is *handler*."""

    def _make(handler, **kwargs) -> JumpClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        kwargs.setdefault("network_id", "3")
        kwargs.setdefault("base_url", "https://jump.test")
        return JumpClient(http=http, **kwargs)

    return _make


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())
