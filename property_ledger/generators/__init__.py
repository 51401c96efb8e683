"""Synthetic data generators for the property registry."""

from property_ledger.generators.property import (
    PrincipalGenerator,
    RegistrationRequestGenerator,
)

__all__ = ["PrincipalGenerator", "RegistrationRequestGenerator"]
