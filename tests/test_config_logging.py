"""Tests for config and logging."""

import json
import logging
import sys
from pathlib import Path

import pytest

from property_ledger.config import (
    BURN_ADDRESS,
    KafkaConfig,
    LedgerConfig,
    OutputConfig,
    RegistryConfig,
)
from property_ledger.exceptions import ConfigurationError
from property_ledger.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = [
    "REGISTRY_MAX_PROPERTIES",
    "REGISTRY_FEE",
    "REGISTRY_BURN_ADDRESS",
    "REGISTRY_ENFORCE_FEE_AUTHORITY",
    "KAFKA_BOOTSTRAP_SERVERS",
    "KAFKA_ACKS",
    "TOPIC_PREFIX",
    "OUTPUT_DIR",
    "PRETTY_JSON",
    "SEED",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable read by LedgerConfig.from_env."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRegistryConfig:
    """Tests for RegistryConfig."""

    def test_default_values(self) -> None:
        config = RegistryConfig()

        assert config.max_properties == 10000
        assert config.registration_fee == 5000
        assert config.burn_address == BURN_ADDRESS
        assert config.enforce_fee_authority is False


class TestKafkaConfig:
    """Tests for KafkaConfig."""

    def test_default_values(self) -> None:
        config = KafkaConfig()

        assert config.bootstrap_servers == "localhost:9092"
        assert config.acks == "all"
        assert config.topic_prefix == "dev.registry"

    def test_to_dict(self) -> None:
        config = KafkaConfig(bootstrap_servers="kafka:9092", acks="1", retries=5)

        result = config.to_dict()

        assert result["bootstrap.servers"] == "kafka:9092"
        assert result["acks"] == "1"
        assert result["batch.size"] == 16384
        assert result["linger.ms"] == 5
        assert result["compression.type"] == "snappy"
        assert result["retries"] == 5
        assert "topic_prefix" not in result


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        config = LedgerConfig()

        assert isinstance(config.registry, RegistryConfig)
        assert isinstance(config.kafka, KafkaConfig)
        assert isinstance(config.output, OutputConfig)
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = LedgerConfig.from_env()

        assert config.registry == RegistryConfig()
        assert config.kafka.bootstrap_servers == "localhost:9092"
        assert config.output.json_output_dir == Path("output")
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        values = {
            "REGISTRY_MAX_PROPERTIES": "50",
            "REGISTRY_FEE": "0",
            "REGISTRY_BURN_ADDRESS": "ST0BURN",
            "REGISTRY_ENFORCE_FEE_AUTHORITY": "true",
            "KAFKA_BOOTSTRAP_SERVERS": "kafka-cluster:9092",
            "KAFKA_ACKS": "1",
            "TOPIC_PREFIX": "prod.registry",
            "OUTPUT_DIR": "/data/output",
            "PRETTY_JSON": "true",
            "SEED": "12345",
            "LOG_LEVEL": "DEBUG",
        }
        for name, value in values.items():
            clean_env.setenv(name, value)

        config = LedgerConfig.from_env()

        assert config.registry.max_properties == 50
        assert config.registry.registration_fee == 0
        assert config.registry.burn_address == "ST0BURN"
        assert config.registry.enforce_fee_authority is True
        assert config.kafka.bootstrap_servers == "kafka-cluster:9092"
        assert config.kafka.acks == "1"
        assert config.kafka.topic_prefix == "prod.registry"
        assert config.output.json_output_dir == Path("/data/output")
        assert config.output.pretty_json is True
        assert config.seed == 12345
        assert config.log_level == "DEBUG"

    def test_from_env_rejects_non_integer(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("REGISTRY_FEE", "five")

        with pytest.raises(ConfigurationError, match="REGISTRY_FEE"):
            LedgerConfig.from_env()

    def test_from_env_rejects_negative(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("REGISTRY_MAX_PROPERTIES", "-1")

        with pytest.raises(ConfigurationError, match=">= 0"):
            LedgerConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("property_ledger").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        root = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(root.handlers) == 1

    def test_setup_logging_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "registry.log"
        setup_logging(log_file=log_file)

        logging.getLogger("property_ledger.registry").info("Registered property %d", 0)
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Registered property 0" in log_file.read_text(encoding="utf-8")
        setup_logging()

    def test_external_loggers_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("confluent_kafka").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs: object) -> logging.LogRecord:
        values = {
            "name": "property_ledger.registry",
            "level": logging.INFO,
            "pathname": __file__,
            "lineno": 1,
            "msg": "Registered property %d",
            "args": (0,),
            "exc_info": None,
        }
        values.update(kwargs)
        return logging.LogRecord(**values)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "property_ledger.registry"
        assert data["message"] == "Registered property 0"
        assert data["function"] is None
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ConfigurationError("bad fee")
        except ConfigurationError:
            exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info)))

        assert "ConfigurationError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"property_id": 0}

        data = json.loads(JsonFormatter().format(record))

        assert data["property_id"] == 0


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("property_ledger.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "property_ledger.test"


class TestPackageInit:
    """Tests for property_ledger __init__.py."""

    def test_version_exported(self) -> None:
        from property_ledger import __version__

        assert isinstance(__version__, str)
