"""Enumeration types for registry entities."""

from enum import Enum, IntEnum


class Currency(str, Enum):
    STX = "STX"
    USD = "USD"
    BTC = "BTC"


class ZoningType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class ErrorCode(IntEnum):
    """Closed set of registry rejection codes.

    Codes are compared by identity, never as ranges.
    """

    NOT_AUTHORIZED = 100
    PROPERTY_EXISTS = 101
    INVALID_HASH = 102
    INVALID_DESCRIPTION = 104
    INVALID_ADDRESS = 105
    AUTHORITY_NOT_VERIFIED = 107
    INVALID_OWNER = 108
    PROPERTY_NOT_FOUND = 109
    INVALID_UPDATE_PARAM = 110
    MAX_PROPERTIES_EXCEEDED = 111
    INVALID_LOCATION = 113
    INVALID_CURRENCY = 114
    INVALID_SIZE = 115
    INVALID_ZONING = 116
    INVALID_TAX_ID = 117
    INVALID_ASSESSMENT = 118
    INVALID_LIEN = 119
    INVALID_MORTGAGE = 120
