"""Pydantic models for the JUMP ``/bikes`` and ``/hubs`` payloads."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bikealert.domain.entities import Coordinate


class _VendorModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # The vendor sends null for unset fields; treat it as absent
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ── Records ───────────────────────────────────────────────────────────


class Position(_VendorModel):
    # GeoJSON order: [longitude, latitude]
    coordinates: Optional[list[float]] = None


class Bike(_VendorModel):
    id: int
    name: str = ""
    address: str = ""
    network_id: Optional[int] = None
    battery_level: Optional[int] = None
    vehicle_type: Optional[str] = None
    unlocking_methods: list[str] = Field(default_factory=list)
    sponsored: bool = False
    ebike_battery_level: Optional[int] = None
    ebike_battery_distance: Optional[float] = None
    inside_area: Optional[bool] = None
    current_position: Optional[Position] = None

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.current_position is None:
            return None
        return Coordinate.from_lng_lat(self.current_position.coordinates)


class Hub(_VendorModel):
    id: int
    name: str = ""
    description: Optional[str] = None
    address: str = ""
    area_id: Optional[int] = None
    available_bikes: int = 0
    available_ebikes: int = 0
    available_scooters: Optional[int] = None
    available_vehicles: Optional[int] = None
    current_bikes: Optional[int] = None
    free_racks: Optional[int] = None
    racks_amount: Optional[float] = None
    has_charging_infrastructure: bool = False
    has_kiosk: bool = False
    public: Optional[bool] = None
    visible: Optional[bool] = None
    warehouse: bool = False
    middle_point: Optional[Position] = None

    @property
    def available_count(self) -> int:
        return self.available_bikes + self.available_ebikes

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.middle_point is None:
            return None
        return Coordinate.from_lng_lat(self.middle_point.coordinates)


# ── Envelopes ─────────────────────────────────────────────────────────


class _Envelope(_VendorModel):
    current_page: Optional[int] = None
    per_page: Optional[int] = None
    total_entries: Optional[int] = None


class BikesEnvelope(_Envelope):
    items: list[Bike]


class HubsEnvelope(_Envelope):
    items: list[Hub]
