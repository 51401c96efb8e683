"""Scenarios that drive a registry through realistic activity."""

from property_ledger.scenarios.registry_activity import RegistryActivityScenario

__all__ = ["RegistryActivityScenario"]
