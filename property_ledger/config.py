"""Configuration management for property-ledger."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from property_ledger.exceptions import ConfigurationError

BURN_ADDRESS = "SP000000000000000000002Q6VF78"


@dataclass
class RegistryConfig:
    """Registry limits and fee settings."""

    max_properties: int = 10000
    registration_fee: int = 5000
    burn_address: str = BURN_ADDRESS
    # When set, only the configured authority may change the fee
    enforce_fee_authority: bool = False


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    topic_prefix: str = "dev.registry"

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    """Read a non-negative integer from the environment."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in ("1", "true", "yes")


@dataclass
class LedgerConfig:
    """Main configuration for property-ledger."""

    registry: RegistryConfig = field(default_factory=RegistryConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables.

        Raises
        ------
        ConfigurationError
            If a numeric variable is not an integer or is out of range.
        """
        registry = RegistryConfig(
            max_properties=_env_int("REGISTRY_MAX_PROPERTIES", 10000),
            registration_fee=_env_int("REGISTRY_FEE", 5000),
            burn_address=os.getenv("REGISTRY_BURN_ADDRESS", BURN_ADDRESS),
            enforce_fee_authority=_env_bool("REGISTRY_ENFORCE_FEE_AUTHORITY", False),
        )

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.registry"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_bool("PRETTY_JSON", False),
        )

        seed = _env_int("SEED", 0) if os.getenv("SEED") else None

        return cls(
            registry=registry,
            kafka=kafka,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
