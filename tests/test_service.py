import uuid
from datetime import datetime, timezone

import pytest

from parcelmeadow.convert import ParcelV1
from parcelmeadow.database import DuplicateParcelError, InMemoryStorage, Parcel, Route, Stop
from parcelmeadow.service import ParcelmeadowService, ServiceError


class FakeStorage:
    def __init__(self, parcels=None, routes=None, error=None):
        self.parcels = parcels if parcels is not None else []
        self.routes = routes if routes is not None else []
        self.error = error
        self.saved = []

    def save_parcel(self, parcel):
        if self.error:
            raise self.error
        self.saved.append(parcel)
        return parcel

    def get_today_parcels(self):
        if self.error:
            raise self.error
        return self.parcels

    def get_today_routes(self):
        if self.error:
            raise self.error
        return self.routes


def make_api_parcel():
    return ParcelV1(
        id=str(uuid.uuid4()),
        weight=1.5,
        status="created",
        post_code="12345",
        address="123 Meadow Lane",
    )


def make_db_parcel():
    return Parcel(
        id=str(uuid.uuid4()),
        weight=1.5,
        status="created",
        post_code="12345",
        address="123 Meadow Lane",
        created_at=datetime.now(timezone.utc),
    )


def test_requires_storage():
    with pytest.raises(ValueError):
        ParcelmeadowService(None)


def test_create_parcel():
    storage = FakeStorage()
    service = ParcelmeadowService(storage)
    parcel = make_api_parcel()

    saved = service.create_parcel(parcel)

    assert saved == parcel
    assert len(storage.saved) == 1
    assert storage.saved[0].id == parcel.id
    assert storage.saved[0].post_code == "12345"


def test_create_parcel_none():
    service = ParcelmeadowService(FakeStorage())
    with pytest.raises(ValueError):
        service.create_parcel(None)


def test_create_parcel_storage_fails():
    service = ParcelmeadowService(FakeStorage(error=RuntimeError("error")))
    with pytest.raises(ServiceError) as info:
        service.create_parcel(make_api_parcel())
    assert "failed to save parcel" in str(info.value)


def test_create_parcel_duplicate_in_memory():
    service = ParcelmeadowService(InMemoryStorage())
    parcel = make_api_parcel()
    service.create_parcel(parcel)
    with pytest.raises(ServiceError) as info:
        service.create_parcel(parcel)
    assert isinstance(info.value.__cause__, DuplicateParcelError)


def test_get_today_parcels():
    expected = [make_db_parcel()]
    service = ParcelmeadowService(FakeStorage(parcels=expected))

    parcels = service.get_today_parcels()

    assert len(parcels) == 1
    assert parcels[0].id == expected[0].id


def test_get_today_parcels_empty():
    service = ParcelmeadowService(FakeStorage(parcels=[]))
    assert service.get_today_parcels() == []


def test_get_today_parcels_storage_fails():
    service = ParcelmeadowService(FakeStorage(error=RuntimeError("error")))
    with pytest.raises(ServiceError):
        service.get_today_parcels()


def test_get_today_routes():
    parcel = make_db_parcel()
    expected = [
        Route(
            id=str(uuid.uuid4()),
            stops={"stop1": Stop(id="stop1", address="123 Meadow Lane", parcels=[parcel])},
        )
    ]
    service = ParcelmeadowService(FakeStorage(routes=expected))

    routes = service.get_today_routes()

    assert len(routes) == 1
    assert routes[0].id == expected[0].id
    assert routes[0].stops[0].parcels[0].id == parcel.id


def test_get_today_routes_empty():
    service = ParcelmeadowService(FakeStorage(routes=[]))
    assert service.get_today_routes() == []


def test_get_today_routes_storage_fails():
    service = ParcelmeadowService(FakeStorage(error=RuntimeError("error")))
    with pytest.raises(ServiceError):
        service.get_today_routes()