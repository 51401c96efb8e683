"""Property records for the registry."""

from dataclasses import dataclass

from property_ledger.models.enums import Currency, ZoningType


@dataclass(frozen=True)
class Property:
    """Registered real-estate property.

    ``registered_at`` is the block height of creation and is refreshed on
    every owner update, so it reads as "last modified".
    """

    owner: str
    legal_description: str
    document_hash: bytes  # 32 bytes, unique across the registry
    address: str
    registered_at: int
    location: str
    currency: Currency
    size_sqft: int
    zoning_type: ZoningType
    tax_id: str
    assessment_value: int
    lien_amount: int = 0
    mortgage_amount: int = 0
    status: bool = True

    @property
    def has_lien(self) -> bool:
        return self.lien_amount > 0

    @property
    def has_mortgage(self) -> bool:
        return self.mortgage_amount > 0


@dataclass(frozen=True)
class PropertyUpdate:
    """Latest owner update applied to a property."""

    update_description: str
    update_address: str
    update_timestamp: int
    updater: str
    update_size_sqft: int
    update_zoning_type: ZoningType


@dataclass(frozen=True)
class Transfer:
    """Registration fee moved from a registrant to the authority."""

    amount: int
    sender: str
    recipient: str


@dataclass
class RegistrationRequest:
    """Inputs of a single property registration."""

    legal_description: str
    document_hash: bytes
    address: str
    location: str
    currency: str
    size_sqft: int
    zoning_type: str
    tax_id: str
    assessment_value: int
    lien_amount: int = 0
    mortgage_amount: int = 0
