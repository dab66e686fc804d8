"""Business operations on parcels and routes, backed by a storage."""

from __future__ import annotations

from typing import Protocol

from parcelmeadow.convert import (
    ParcelV1,
    RouteV1,
    parcel_api_to_db,
    parcel_db_to_api,
    route_db_to_api,
)
from parcelmeadow.database import Parcel, Route


class Storage(Protocol):
    """What the service needs from a storage."""

    def save_parcel(self, parcel: Parcel) -> Parcel: ...

    def get_today_parcels(self) -> list[Parcel]: ...

    def get_today_routes(self) -> list[Route]: ...


class ServiceError(RuntimeError):
    """Raised when the storage fails to carry out an operation."""


class ParcelmeadowService:
    """Creates parcels and lists today's parcels and routes."""

    def __init__(self, storage: Storage) -> None:
        if storage is None:
            raise ValueError("storage is nil")
        self._storage = storage

    def create_parcel(self, parcel: ParcelV1 | None) -> ParcelV1:
        """Store a parcel and return it as it was saved."""
        if parcel is None:
            raise ValueError("parcel is nil")
        try:
            saved = self._storage.save_parcel(parcel_api_to_db(parcel))
        except Exception as exc:
            raise ServiceError(f"failed to save parcel: {exc}") from exc
        return parcel_db_to_api(saved)

    def get_today_parcels(self) -> list[ParcelV1]:
        """Return the parcels created today."""
        try:
            parcels = self._storage.get_today_parcels()
        except Exception as exc:
            raise ServiceError(f"failed to get today's parcels: {exc}") from exc
        return [parcel_db_to_api(parcel) for parcel in parcels]

    def get_today_routes(self) -> list[RouteV1]:
        """Return the routes that carry parcels created today."""
        try:
            routes = self._storage.get_today_routes()
        except Exception as exc:
            raise ServiceError(f"failed to get today's routes: {exc}") from exc
        return [route_db_to_api(route) for route in routes]