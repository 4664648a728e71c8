"""Domain enumerations."""

import enum


class ResourceKind(str, enum.Enum):
    """Listings exposed by the vendor, named after their URL path segment."""

    BIKES = "bikes"
    HUBS = "hubs"
