"""Output sinks for exporting registry data."""

from property_ledger.config import LedgerConfig
from property_ledger.exceptions import ConfigurationError
from property_ledger.sinks.console import ConsoleSink
from property_ledger.sinks.json_file import JsonFileSink
from property_ledger.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink", "SINK_KINDS", "create_sink"]

SINK_KINDS = ("console", "json", "kafka")


def create_sink(kind: str, config: LedgerConfig) -> ConsoleSink | JsonFileSink | KafkaSink:
    """Build the sink named ``kind`` from ``config``.

    Raises
    ------
    ConfigurationError
        If ``kind`` is not one of ``SINK_KINDS``.
    """
    if kind == "console":
        return ConsoleSink(pretty=config.output.pretty_json)
    if kind == "json":
        return JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    if kind == "kafka":
        return KafkaSink(config.kafka)
    raise ConfigurationError(f"Unknown sink {kind!r}, expected one of {', '.join(SINK_KINDS)}")
