"""Property registry operations.

``PropertyRegistry`` is the only writer of a ``RegistryState``. Every
mutating operation runs all of its checks before touching the state, so a
rejected call leaves the stores, the transfer log and the event journal
exactly as they were.
"""

import dataclasses
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from property_ledger.config import RegistryConfig
from property_ledger.models import (
    Currency,
    ErrorCode,
    Event,
    Property,
    PropertyUpdate,
    RegistrationRequest,
    Result,
    Transfer,
    ZoningType,
)
from property_ledger.store import RegistryState
from property_ledger.validation import (
    check_registration,
    check_update,
    is_non_negative,
    is_valid_hash,
    parse_enum,
)

logger = logging.getLogger(__name__)


class BlockClock:
    """Block height source for registry timestamps."""

    def __init__(self, height: int = 0) -> None:
        self.height = height

    def now(self) -> int:
        return self.height

    def advance(self, blocks: int = 1) -> int:
        """Move the chain forward and return the new height."""
        if blocks < 0:
            raise ValueError("blocks must be non-negative")
        self.height += blocks
        return self.height


class PropertyRegistry:
    """Fee-gated property registry.

    Parameters
    ----------
    state : RegistryState
        State to operate on. It is owned by the caller and passed in
        explicitly; the registry keeps no module-level state.
    config : RegistryConfig | None
        Burn address and fee authorization settings.
    clock : BlockClock | None
        Source of ``registered_at`` and update timestamps.
    """

    SOURCE = "property-registry"

    def __init__(
        self,
        state: RegistryState,
        config: RegistryConfig | None = None,
        clock: BlockClock | None = None,
    ) -> None:
        self.state = state
        self.config = config or RegistryConfig()
        self.clock = clock or BlockClock()
        self.events: list[Event] = []

    @classmethod
    def from_config(
        cls,
        config: RegistryConfig,
        clock: BlockClock | None = None,
    ) -> "PropertyRegistry":
        """Create a registry on a fresh state seeded from ``config``."""
        state = RegistryState(
            max_properties=config.max_properties,
            registration_fee=config.registration_fee,
        )
        return cls(state, config=config, clock=clock)

    # Configuration
    def set_authority_contract(self, principal: str) -> Result[bool]:
        """Configure the authority that receives registration fees.

        The authority can be set once. The burn address is never accepted.
        """
        if principal == self.config.burn_address:
            return self._reject("set_authority_contract", ErrorCode.INVALID_OWNER)
        if self.state.authority is not None:
            return self._reject("set_authority_contract", ErrorCode.NOT_AUTHORIZED)

        self.state.authority = principal
        logger.info("Authority set to %s", principal)
        self._emit("authority.set", principal, principal, {"authority": principal})
        return Result.success(True)

    def set_registration_fee(self, caller: str, amount: int) -> Result[bool]:
        """Change the fee charged on each registration.

        Requires a configured authority. The caller is only checked against
        the authority when ``enforce_fee_authority`` is enabled.
        """
        if self.state.authority is None:
            return self._reject("set_registration_fee", ErrorCode.AUTHORITY_NOT_VERIFIED)
        if self.config.enforce_fee_authority and caller != self.state.authority:
            return self._reject("set_registration_fee", ErrorCode.NOT_AUTHORIZED)
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            return self._reject("set_registration_fee", ErrorCode.INVALID_UPDATE_PARAM)

        previous = self.state.registration_fee
        self.state.registration_fee = amount
        logger.info("Registration fee changed from %d to %d by %s", previous, amount, caller)
        self._emit(
            "fee.changed",
            caller,
            self.state.authority,
            {"previous": previous, "fee": amount},
        )
        return Result.success(True)

    # Registration
    def register_property(
        self,
        caller: str,
        legal_description: str,
        document_hash: bytes,
        address: str,
        location: str,
        currency: str,
        size_sqft: int,
        zoning_type: str,
        tax_id: str,
        assessment_value: int,
        lien_amount: int = 0,
        mortgage_amount: int = 0,
    ) -> Result[int]:
        """Register a property owned by ``caller``.

        Returns
        -------
        Result[int]
            The new property id, or the ``ErrorCode`` of the first failed
            check.
        """
        state = self.state
        if state.next_property_id >= state.max_properties:
            return self._reject("register_property", ErrorCode.MAX_PROPERTIES_EXCEEDED)

        code = check_registration(
            legal_description,
            document_hash,
            address,
            location,
            currency,
            size_sqft,
            zoning_type,
            tax_id,
            assessment_value,
            lien_amount,
            mortgage_amount,
        )
        if code is not None:
            return self._reject("register_property", code)

        if state.has_hash(document_hash):
            return self._reject("register_property", ErrorCode.PROPERTY_EXISTS)
        if state.authority is None:
            return self._reject("register_property", ErrorCode.AUTHORITY_NOT_VERIFIED)

        transfer = Transfer(
            amount=state.registration_fee,
            sender=caller,
            recipient=state.authority,
        )
        prop = Property(
            owner=caller,
            legal_description=legal_description,
            document_hash=bytes(document_hash),
            address=address,
            registered_at=self.clock.now(),
            location=location,
            currency=Currency(currency),
            size_sqft=size_sqft,
            zoning_type=ZoningType(zoning_type),
            tax_id=tax_id,
            assessment_value=assessment_value,
            lien_amount=lien_amount,
            mortgage_amount=mortgage_amount,
        )
        property_id = state.insert_property(prop)
        state.record_transfer(transfer)

        logger.info(
            "Registered property %d for %s (hash=%s, fee=%d)",
            property_id,
            caller,
            prop.document_hash.hex(),
            transfer.amount,
        )
        self._emit(
            "fee.transferred",
            caller,
            str(property_id),
            dataclasses.asdict(transfer),
        )
        self._emit(
            "property.registered",
            caller,
            str(property_id),
            {
                "property_id": property_id,
                "owner": caller,
                "document_hash": prop.document_hash.hex(),
                "registered_at": prop.registered_at,
                "has_lien": prop.has_lien,
                "has_mortgage": prop.has_mortgage,
            },
        )
        return Result.success(property_id)

    def register(self, caller: str, request: RegistrationRequest) -> Result[int]:
        """Register the property described by ``request``."""
        return self.register_property(
            caller,
            legal_description=request.legal_description,
            document_hash=request.document_hash,
            address=request.address,
            location=request.location,
            currency=request.currency,
            size_sqft=request.size_sqft,
            zoning_type=request.zoning_type,
            tax_id=request.tax_id,
            assessment_value=request.assessment_value,
            lien_amount=request.lien_amount,
            mortgage_amount=request.mortgage_amount,
        )

    # Owner updates
    def update_property(
        self,
        caller: str,
        property_id: int,
        description: str,
        address: str,
        size_sqft: int,
        zoning_type: str,
    ) -> Result[bool]:
        """Amend the mutable fields of a property owned by ``caller``.

        Only the latest update is kept; a new update replaces the previous
        history entry.
        """
        current = self.get_property(property_id)
        if current is None:
            return self._reject("update_property", ErrorCode.PROPERTY_NOT_FOUND)
        if current.owner != caller:
            return self._reject("update_property", ErrorCode.NOT_AUTHORIZED)

        code = check_update(description, address, size_sqft, zoning_type)
        if code is not None:
            return self._reject("update_property", code)

        now = self.clock.now()
        zoning = parse_enum(ZoningType, zoning_type)
        updated = dataclasses.replace(
            current,
            legal_description=description,
            address=address,
            size_sqft=size_sqft,
            zoning_type=zoning,
            registered_at=now,
        )
        self.state.replace_property(property_id, updated)
        self.state.record_update(
            property_id,
            PropertyUpdate(
                update_description=description,
                update_address=address,
                update_timestamp=now,
                updater=caller,
                update_size_sqft=size_sqft,
                update_zoning_type=zoning,
            ),
        )

        logger.info("Property %d updated by %s at height %d", property_id, caller, now)
        self._emit(
            "property.updated",
            caller,
            str(property_id),
            {
                "property_id": property_id,
                "description": description,
                "address": address,
                "size_sqft": size_sqft,
                "zoning_type": zoning.value,
                "updated_at": now,
            },
        )
        return Result.success(True)

    # Queries
    def get_property(self, property_id: int) -> Property | None:
        # bools hash equal to 0 and 1
        if not is_non_negative(property_id):
            return None
        return self.state.get_property(property_id)

    def get_property_update(self, property_id: int) -> PropertyUpdate | None:
        if not is_non_negative(property_id):
            return None
        return self.state.get_update(property_id)

    def get_property_count(self) -> int:
        """Total successful registrations, failed attempts excluded."""
        return self.state.next_property_id

    def check_property_existence(self, document_hash: bytes) -> bool:
        if not is_valid_hash(document_hash):
            return False
        return self.state.has_hash(document_hash)

    def get_property_id_by_hash(self, document_hash: bytes) -> int | None:
        if not is_valid_hash(document_hash):
            return None
        return self.state.id_for_hash(document_hash)

    @property
    def transfers(self) -> list[Transfer]:
        return self.state.transfers

    def _reject(self, operation: str, code: ErrorCode) -> Result[Any]:
        logger.debug("%s rejected: %s (%d)", operation, code.name, code)
        return Result.failure(code)

    def _emit(self, event_type: str, source: str, subject: str, data: dict) -> None:
        self.events.append(
            Event(
                event_id=uuid.uuid4().hex,
                event_type=event_type,
                event_time=datetime.now(timezone.utc),
                source=source,
                subject=subject,
                data=data,
                metadata={"block_height": self.clock.now(), "origin": self.SOURCE},
            )
        )
