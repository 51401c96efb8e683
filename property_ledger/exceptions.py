"""Custom exception hierarchy for property-ledger."""


class LedgerError(Exception):
    """Base exception for all property-ledger errors."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(LedgerError):
    """Raised when a sink operation fails."""


class OperationRejectedError(LedgerError):
    """Raised when a rejected registry result is unwrapped."""

    def __init__(self, code) -> None:
        super().__init__(f"Operation rejected: {code.name} ({int(code)})")
        self.code = code
