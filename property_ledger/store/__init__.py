"""In-memory registry state with the id and hash indexes."""

from property_ledger.store.registry import RegistryState

__all__ = ["RegistryState"]
