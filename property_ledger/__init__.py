"""property-ledger: property registration ledger with fee-gated registration."""

__version__ = "0.1.0"
