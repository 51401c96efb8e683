"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from property_ledger.registry import BlockClock, PropertyRegistry
from property_ledger.store import RegistryState

AUTHORITY = "ST2TEST"
OWNER = "ST1TEST"
STRANGER = "ST3FAKE"


def make_hash(fill: int, length: int = 32) -> bytes:
    """Document hash made of one repeated byte."""
    return bytes([fill]) * length


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> BlockClock:
    return BlockClock()


@pytest.fixture
def registry(clock: BlockClock) -> PropertyRegistry:
    """Fresh registry with no authority configured."""
    return PropertyRegistry(RegistryState(), clock=clock)


@pytest.fixture
def live_registry(registry: PropertyRegistry) -> PropertyRegistry:
    """Registry with the test authority configured."""
    assert registry.set_authority_contract(AUTHORITY).ok
    return registry


@pytest.fixture
def property_fields() -> dict[str, Any]:
    """Valid register_property keyword arguments."""
    return {
        "legal_description": "Legal Desc",
        "document_hash": make_hash(1),
        "address": "123 Main St",
        "location": "City",
        "currency": "STX",
        "size_sqft": 2000,
        "zoning_type": "residential",
        "tax_id": "TAX123",
        "assessment_value": 100000,
        "lien_amount": 0,
        "mortgage_amount": 50000,
    }
