"""Generate registration requests and principals."""

from __future__ import annotations

from typing import Iterator

from property_ledger.generators.base import BaseGenerator
from property_ledger.models import Currency, RegistrationRequest, ZoningType

_C32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"


class PrincipalGenerator(BaseGenerator):
    """Generate testnet-style standard principals (``ST`` + 38 c32 chars)."""

    def generate(self) -> str:
        return "ST" + "".join(self.rng.choice(_C32_ALPHABET) for _ in range(38))

    def generate_batch(self, count: int) -> list[str]:
        return [self.generate() for _ in range(count)]


class RegistrationRequestGenerator(BaseGenerator):
    """Generate valid property registration requests.

    Document hashes are SHA-256 digests of generated text and are unique
    within one generator instance.
    """

    SIZE_RANGE = (400, 12000)  # square feet
    ASSESSMENT_RANGE = (50_000, 5_000_000)

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        super().__init__(seed, locale)
        self._seen_hashes: set[bytes] = set()

    def document_hash(self) -> bytes:
        """Return a 32-byte hash not produced before by this generator."""
        while True:
            digest = self.fake.sha256(raw_output=True)
            if digest not in self._seen_hashes:
                self._seen_hashes.add(digest)
                return digest

    def generate(self) -> RegistrationRequest:
        """Generate a registration request.

        Returns
        -------
        RegistrationRequest
            Request that passes every registration field check.
        """
        assessment = self.rng.randint(*self.ASSESSMENT_RANGE)
        has_lien = self.rng.random() < 0.1
        has_mortgage = self.rng.random() < 0.6

        return RegistrationRequest(
            legal_description=self.legal_description(),
            document_hash=self.document_hash(),
            address=self.fake.street_address()[:256],
            location=f"{self.fake.city()}, {self.fake.state_abbr()}"[:128],
            currency=self.rng.choice(list(Currency)).value,
            size_sqft=self.rng.randint(*self.SIZE_RANGE),
            zoning_type=self.rng.choice(list(ZoningType)).value,
            tax_id=self.tax_id(),
            assessment_value=assessment,
            lien_amount=self.rng.randint(1_000, assessment // 4) if has_lien else 0,
            mortgage_amount=self.rng.randint(10_000, assessment) if has_mortgage else 0,
        )

    def generate_batch(self, count: int) -> Iterator[RegistrationRequest]:
        for _ in range(count):
            yield self.generate()

    def legal_description(self) -> str:
        lot = self.rng.randint(1, 400)
        block = self.rng.randint(1, 60)
        subdivision = self.fake.last_name()
        return f"Lot {lot}, Block {block}, {subdivision} Subdivision, {self.fake.city()} County"[:512]

    def tax_id(self) -> str:
        return f"{self.rng.randint(100, 999)}-{self.rng.randint(10, 99)}-{self.rng.randint(1000, 9999)}"
