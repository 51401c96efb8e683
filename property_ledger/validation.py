"""Field checks applied before any registry mutation.

Each check maps to exactly one ``ErrorCode``. Checks run in a fixed order
and stop at the first failure, so the same input always yields the same
code.
"""

from enum import Enum
from typing import Any, TypeVar

from property_ledger.models.enums import Currency, ErrorCode, ZoningType

E = TypeVar("E", bound=Enum)

HASH_LENGTH = 32
MAX_DESCRIPTION_LENGTH = 512
MAX_ADDRESS_LENGTH = 256
MAX_LOCATION_LENGTH = 128
MAX_TAX_ID_LENGTH = 100


def is_valid_text(value: Any, max_length: int) -> bool:
    """Non-empty string of at most ``max_length`` characters."""
    return isinstance(value, str) and 0 < len(value) <= max_length


def is_valid_hash(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) and len(value) == HASH_LENGTH


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_positive(value: Any) -> bool:
    return _is_int(value) and value > 0


def is_non_negative(value: Any) -> bool:
    return _is_int(value) and value >= 0


def parse_enum(enum_cls: type[E], value: Any) -> E | None:
    """Return the enum member for ``value``, or None if it is not a member."""
    try:
        return enum_cls(value)
    except ValueError:
        return None


def check_registration(
    legal_description: Any,
    document_hash: Any,
    address: Any,
    location: Any,
    currency: Any,
    size_sqft: Any,
    zoning_type: Any,
    tax_id: Any,
    assessment_value: Any,
    lien_amount: Any,
    mortgage_amount: Any,
) -> ErrorCode | None:
    """Run the field checks of a registration.

    Returns
    -------
    ErrorCode | None
        Code of the first failing field, or None when every field passes.
    """
    if not is_valid_text(legal_description, MAX_DESCRIPTION_LENGTH):
        return ErrorCode.INVALID_DESCRIPTION
    if not is_valid_hash(document_hash):
        return ErrorCode.INVALID_HASH
    if not is_valid_text(address, MAX_ADDRESS_LENGTH):
        return ErrorCode.INVALID_ADDRESS
    if not is_valid_text(location, MAX_LOCATION_LENGTH):
        return ErrorCode.INVALID_LOCATION
    if parse_enum(Currency, currency) is None:
        return ErrorCode.INVALID_CURRENCY
    if not is_positive(size_sqft):
        return ErrorCode.INVALID_SIZE
    if parse_enum(ZoningType, zoning_type) is None:
        return ErrorCode.INVALID_ZONING
    if not is_valid_text(tax_id, MAX_TAX_ID_LENGTH):
        return ErrorCode.INVALID_TAX_ID
    if not is_positive(assessment_value):
        return ErrorCode.INVALID_ASSESSMENT
    if not is_non_negative(lien_amount):
        return ErrorCode.INVALID_LIEN
    if not is_non_negative(mortgage_amount):
        return ErrorCode.INVALID_MORTGAGE
    return None


def check_update(
    description: Any,
    address: Any,
    size_sqft: Any,
    zoning_type: Any,
) -> ErrorCode | None:
    """Run the field checks of an owner update, same limits as registration."""
    if not is_valid_text(description, MAX_DESCRIPTION_LENGTH):
        return ErrorCode.INVALID_DESCRIPTION
    if not is_valid_text(address, MAX_ADDRESS_LENGTH):
        return ErrorCode.INVALID_ADDRESS
    if not is_positive(size_sqft):
        return ErrorCode.INVALID_SIZE
    if parse_enum(ZoningType, zoning_type) is None:
        return ErrorCode.INVALID_ZONING
    return None
