"""API models and conversions between them and the storage models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from parcelmeadow.database import Parcel, Route, Stop

_STRING_FIELDS = {"id": "id", "status": "status", "postCode": "post_code", "address": "address"}


@dataclass
class ParcelV1:
    """A parcel as exchanged over the API."""

    id: str = ""
    weight: float = 0.0
    status: str = ""
    post_code: str = ""
    address: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ParcelV1:
        """Build a parcel from its JSON object form."""
        if not isinstance(data, Mapping):
            raise TypeError("parcel must be a JSON object")
        values: dict[str, Any] = {}
        for key, attribute in _STRING_FIELDS.items():
            if key in data:
                if not isinstance(data[key], str):
                    raise TypeError(f"{key} must be a string")
                values[attribute] = data[key]
        if "weight" in data:
            weight = data["weight"]
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise TypeError("weight must be a number")
            values["weight"] = float(weight)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the parcel."""
        return {
            "id": self.id,
            "weight": self.weight,
            "status": self.status,
            "postCode": self.post_code,
            "address": self.address,
        }


@dataclass
class StopV1:
    """A delivery stop as exchanged over the API."""

    id: str = ""
    address: str = ""
    parcels: list[ParcelV1] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "address": self.address,
            "parcels": [parcel.to_dict() for parcel in self.parcels],
        }


@dataclass
class RouteV1:
    """A delivery route as exchanged over the API."""

    id: str = ""
    stops: list[StopV1] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "stops": [stop.to_dict() for stop in self.stops]}


def parcel_api_to_db(parcel: ParcelV1) -> Parcel:
    """Convert an API parcel to a storage parcel created now."""
    return Parcel(
        id=parcel.id,
        weight=parcel.weight,
        status=parcel.status,
        post_code=parcel.post_code,
        address=parcel.address,
        created_at=datetime.now(timezone.utc),
    )


def parcel_db_to_api(parcel: Parcel) -> ParcelV1:
    return ParcelV1(parcel.id, parcel.weight, parcel.status, parcel.post_code, parcel.address)


def stop_db_to_api(stop: Stop) -> StopV1:
    return StopV1(stop.id, stop.address, [parcel_db_to_api(p) for p in stop.parcels])


def route_db_to_api(route: Route) -> RouteV1:
    return RouteV1(route.id, [stop_db_to_api(s) for s in route.stops.values()])