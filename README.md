# parcelmeadow

A small library for local parcel delivery. Parcels are registered with a
service and handed out in turn to five delivery routes (`R001` to `R005`).
Within a route, parcels going to the same address share one stop. The
service lists the parcels and routes that were created today.

Data is kept in memory, so it is lost when the process ends.

## Installation

```
pip install .
```

## Modules

- `parcelmeadow.database` holds the storage models (`Parcel`, `Stop`,
  `Route`, `RouteName`) and `InMemoryStorage`.
  - `save_parcel(parcel)` stores a parcel and assigns it to the next route in
    the cycle `R001`, `R002`, ... `R005`, then `R001` again. A parcel whose id
    is already stored raises `DuplicateParcelError` (a `ValueError`).
  - `get_today_parcels()` returns the stored parcels created today.
  - `get_today_routes()` returns the routes holding at least one parcel
    created today. Each route's stops are keyed by address; a new stop gets a
    random UUID as its id.

  "Today" is decided by comparing only the day of the month (UTC) of a
  parcel's `created_at` with the current one.

- `parcelmeadow.convert` holds the API models `ParcelV1`, `StopV1` and
  `RouteV1`, each with `to_dict()`, and `ParcelV1.from_dict(data)`, which
  raises `TypeError` when the data is not an object or a field has the wrong
  type. The functions `parcel_api_to_db`, `parcel_db_to_api`,
  `stop_db_to_api` and `route_db_to_api` convert between the API and storage
  models; `parcel_api_to_db` stamps the parcel with the current UTC time.

- `parcelmeadow.service` holds `ParcelmeadowService`, which works on any
  object that has the methods of the `Storage` protocol.
  - `create_parcel(parcel)` raises `ValueError` for `None`, and
    `ServiceError` when the storage fails (for example on a duplicate id).
  - `get_today_parcels()` and `get_today_routes()` raise `ServiceError` when
    the storage fails.

A parcel in its object form looks like this:

```json
{
  "id": "a1b2c3",
  "weight": 1.5,
  "status": "created",
  "postCode": "12345",
  "address": "123 Meadow Lane"
}
```

## Example

```python
from parcelmeadow.database import InMemoryStorage
from parcelmeadow.service import ParcelmeadowService
from parcelmeadow.convert import ParcelV1

service = ParcelmeadowService(InMemoryStorage())
service.create_parcel(ParcelV1.from_dict({
    "id": "p-1",
    "weight": 2.0,
    "status": "created",
    "postCode": "12345",
    "address": "123 Meadow Lane",
}))

for route in service.get_today_routes():
    print(route.to_dict())
```

## What it does not do

The package has no HTTP server, no request handlers and no command to run:
it provides the storage, the models and the service only. Serving them over
HTTP is left to the application that uses it. Nothing is stored on disk.

## Tests

```
pip install .[test]
pytest
```