"""Domain models for the property registry."""

from property_ledger.models.base import Event, Result
from property_ledger.models.enums import Currency, ErrorCode, ZoningType
from property_ledger.models.property import (
    Property,
    PropertyUpdate,
    RegistrationRequest,
    Transfer,
)

__all__ = [
    "Currency",
    "ErrorCode",
    "Event",
    "Property",
    "PropertyUpdate",
    "RegistrationRequest",
    "Result",
    "Transfer",
    "ZoningType",
]
