"""In-memory storage of parcels and their assignment to delivery routes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class RouteName(str, Enum):
    """Names of the delivery routes parcels are distributed over."""

    UNKNOWN = "unknown"
    ROUTE1 = "R001"
    ROUTE2 = "R002"
    ROUTE3 = "R003"
    ROUTE4 = "R004"
    ROUTE5 = "R005"


_ROUTE_CYCLE = (
    RouteName.ROUTE1,
    RouteName.ROUTE2,
    RouteName.ROUTE3,
    RouteName.ROUTE4,
    RouteName.ROUTE5,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _is_today(moment: datetime) -> bool:
    # Only the day of the month is compared.
    return _utc_now().day == moment.day


@dataclass
class Parcel:
    """A parcel as held by the storage."""

    id: str
    status: str = ""
    weight: float = 0.0
    post_code: str = ""
    address: str = ""
    created_at: datetime = field(default_factory=_utc_now)


@dataclass
class Stop:
    """A delivery stop: one address and the parcels delivered there."""

    id: str
    address: str
    parcels: list[Parcel] = field(default_factory=list)


@dataclass
class Route:
    """A delivery route; its stops are keyed by address."""

    id: str
    stops: dict[str, Stop] = field(default_factory=dict)

    def has_parcel_from_today(self) -> bool:
        return any(
            _is_today(parcel.created_at)
            for stop in self.stops.values()
            for parcel in stop.parcels
        )


class DuplicateParcelError(ValueError):
    """Raised when a parcel with an already stored id is saved."""


class InMemoryStorage:
    """Keeps parcels in memory and spreads them round-robin over the routes."""

    def __init__(self) -> None:
        self._parcels: list[Parcel] = []
        self._routes: dict[RouteName, Route] = {}
        self._latest_route = RouteName.UNKNOWN

    def save_parcel(self, parcel: Parcel) -> Parcel:
        """Store a parcel and assign it to the next route in turn."""
        if any(stored.id == parcel.id for stored in self._parcels):
            raise DuplicateParcelError(f"parcel with id {parcel.id} already exists")
        self._parcels.append(parcel)
        self._assign_route(parcel)
        return parcel

    def get_today_parcels(self) -> list[Parcel]:
        """Return the parcels created today."""
        return [parcel for parcel in self._parcels if _is_today(parcel.created_at)]

    def get_today_routes(self) -> list[Route]:
        """Return the routes holding at least one parcel created today."""
        return [
            route
            for route in self._routes.values()
            if route.stops and route.has_parcel_from_today()
        ]

    def _assign_route(self, parcel: Parcel) -> None:
        name = self._next_route_name()
        route = self._routes.setdefault(name, Route(id=name.value))
        stop = route.stops.get(parcel.address)
        if stop is None:
            route.stops[parcel.address] = Stop(
                id=str(uuid.uuid4()), address=parcel.address, parcels=[parcel]
            )
        else:
            stop.parcels.append(parcel)

    def _next_route_name(self) -> RouteName:
        if self._latest_route in _ROUTE_CYCLE:
            position = _ROUTE_CYCLE.index(self._latest_route)
            self._latest_route = _ROUTE_CYCLE[(position + 1) % len(_ROUTE_CYCLE)]
        else:
            self._latest_route = RouteName.ROUTE1
        return self._latest_route