"""Registry activity scenario: registrations, owner updates and rejections."""

from __future__ import annotations

import logging
import random

from property_ledger.config import RegistryConfig
from property_ledger.exceptions import ConfigurationError
from property_ledger.generators import PrincipalGenerator, RegistrationRequestGenerator
from property_ledger.models import ErrorCode, ZoningType
from property_ledger.registry import BlockClock, PropertyRegistry

logger = logging.getLogger(__name__)


class RegistryActivityScenario:
    """Populate a registry the way a live deployment would see it.

    This scenario:
    - configures an authority and optionally a custom fee
    - registers generated properties from a pool of owners, one block apart
    - replays a share of document hashes to exercise duplicate rejection
    - applies owner updates to a share of the registered properties
    """

    def __init__(
        self,
        num_properties: int = 100,
        num_owners: int = 10,
        update_rate: float = 0.2,
        duplicate_rate: float = 0.05,
        registration_fee: int | None = None,
        seed: int | None = None,
        *,
        config: RegistryConfig | None = None,
    ) -> None:
        """Initialize registry activity scenario.

        Parameters
        ----------
        num_properties : int
            Number of registrations to submit.
        num_owners : int
            Size of the owner pool registrations are drawn from.
        update_rate : float
            Share of registered properties that receive an owner update.
        duplicate_rate : float
            Share of registrations followed by a replay of the same hash.
        registration_fee : int | None
            Fee set after the authority is configured. None keeps the
            configured default.
        seed : int | None
            Random seed for reproducibility.
        config : RegistryConfig | None
            Registry limits. Defaults to ``RegistryConfig()``.

        Raises
        ------
        ConfigurationError
            If ``num_owners`` is less than 1.
        """
        if num_owners < 1:
            raise ConfigurationError(f"num_owners must be at least 1, got {num_owners}")

        self.num_properties = num_properties
        self.num_owners = num_owners
        self.update_rate = update_rate
        self.duplicate_rate = duplicate_rate
        self.registration_fee = registration_fee
        self.seed = seed

        self._rng = random.Random(seed)
        self._principals = PrincipalGenerator(seed=seed)
        self._requests = RegistrationRequestGenerator(seed=seed)

        self.clock = BlockClock()
        self.registry = PropertyRegistry.from_config(config or RegistryConfig(), clock=self.clock)
        self.authority = self._principals.generate()
        self.owners = self._principals.generate_batch(num_owners)
        self.rejections: dict[ErrorCode, int] = {}

    def generate(self) -> PropertyRegistry:
        """Run the scenario and return the populated registry."""
        logger.info(
            "Running registry scenario: %d properties, %d owners",
            self.num_properties,
            self.num_owners,
        )
        self.registry.set_authority_contract(self.authority).unwrap()
        if self.registration_fee is not None:
            self.registry.set_registration_fee(self.authority, self.registration_fee).unwrap()

        registered: list[int] = []
        for request in self._requests.generate_batch(self.num_properties):
            self.clock.advance()
            owner = self._rng.choice(self.owners)
            result = self.registry.register(owner, request)
            if not result.ok:
                self._count_rejection(result.error)
                continue
            registered.append(result.value)

            if self._rng.random() < self.duplicate_rate:
                replay = self.registry.register(self._rng.choice(self.owners), request)
                self._count_rejection(replay.error)

        for property_id in registered:
            if self._rng.random() >= self.update_rate:
                continue
            self.clock.advance()
            self._update(property_id)

        logger.info(
            "Scenario complete: %s, rejections=%s",
            self.registry.state.summary(),
            {code.name: count for code, count in self.rejections.items()},
        )
        return self.registry

    def _update(self, property_id: int) -> None:
        prop = self.registry.get_property(property_id)
        result = self.registry.update_property(
            prop.owner,
            property_id,
            description=self._requests.legal_description(),
            address=self._requests.fake.street_address(),
            size_sqft=max(1, prop.size_sqft + self._rng.randint(-200, 800)),
            zoning_type=self._rng.choice(list(ZoningType)).value,
        )
        if not result.ok:
            self._count_rejection(result.error)

    def _count_rejection(self, code: ErrorCode | None) -> None:
        if code is not None:
            self.rejections[code] = self.rejections.get(code, 0) + 1
