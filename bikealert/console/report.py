"""Plain-text rendering of the nearest bikes and hubs."""

from __future__ import annotations

from typing import Sequence

from bikealert.domain.entities import Ranked
from bikealert.infrastructure.schemas import Bike, Hub


def format_bike(ranked: Ranked[Bike]) -> str:
    bike = ranked.item
    details = f"{ranked.distance_miles:.2f} miles"
    if bike.ebike_battery_level is not None:
        details += f", {bike.ebike_battery_level}%"
    return f"{bike.name} {bike.address} ({details})"


def format_hub(ranked: Ranked[Hub]) -> str:
    hub = ranked.item
    return (
        f"{hub.name} {hub.address} ({hub.available_count} bikes) "
        f"({ranked.distance_miles:.2f} miles)"
    )


def render_report(bikes: Sequence[Ranked[Bike]], hubs: Sequence[Ranked[Hub]]) -> str:
    lines = ["Bikes"]
    lines.extend(format_bike(b) for b in bikes)
    lines.append("")
    lines.append("Hubs")
    lines.extend(format_hub(h) for h in hubs)
    return "\n".join(lines)
