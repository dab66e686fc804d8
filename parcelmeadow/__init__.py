"""In-memory parcel storage, API models and a service that groups parcels into daily delivery routes."""

__version__ = "0.1.0"
__all__ = ["__version__"]