"""Registry state: property store, update history and hash index."""

from dataclasses import dataclass, field

from property_ledger.exceptions import LedgerError
from property_ledger.models import Property, PropertyUpdate, Transfer


@dataclass
class RegistryState:
    """In-memory state of one property registry.

    The state is a plain container: it performs no validation beyond keeping
    the indexes consistent. ``PropertyRegistry`` decides what may be written.
    """

    max_properties: int = 10000
    registration_fee: int = 5000
    authority: str | None = None
    next_property_id: int = 0

    properties: dict[int, Property] = field(default_factory=dict)
    property_updates: dict[int, PropertyUpdate] = field(default_factory=dict)
    transfers: list[Transfer] = field(default_factory=list)

    # document hash -> property id
    _hash_index: dict[bytes, int] = field(default_factory=dict)

    def insert_property(self, prop: Property) -> int:
        """Store a new property under the next id and index its hash."""
        key = bytes(prop.document_hash)
        if key in self._hash_index:
            raise LedgerError(f"Document hash {key.hex()} already indexed")

        property_id = self.next_property_id
        self.properties[property_id] = prop
        self._hash_index[key] = property_id
        self.next_property_id += 1
        return property_id

    def replace_property(self, property_id: int, prop: Property) -> None:
        """Swap the stored record for an existing id."""
        if property_id not in self.properties:
            raise LedgerError(f"Property {property_id} not found")
        self.properties[property_id] = prop

    def record_update(self, property_id: int, update: PropertyUpdate) -> None:
        """Keep ``update`` as the only history entry for the property."""
        self.property_updates[property_id] = update

    def record_transfer(self, transfer: Transfer) -> None:
        self.transfers.append(transfer)

    # Query methods
    def get_property(self, property_id: int) -> Property | None:
        return self.properties.get(property_id)

    def get_update(self, property_id: int) -> PropertyUpdate | None:
        return self.property_updates.get(property_id)

    def has_hash(self, document_hash: bytes) -> bool:
        return bytes(document_hash) in self._hash_index

    def id_for_hash(self, document_hash: bytes) -> int | None:
        return self._hash_index.get(bytes(document_hash))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all stored entities."""
        return {
            "properties": len(self.properties),
            "property_updates": len(self.property_updates),
            "hashes": len(self._hash_index),
            "transfers": len(self.transfers),
            "next_property_id": self.next_property_id,
        }
