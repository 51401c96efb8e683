#!/usr/bin/env python3
"""Seed a property registry with generated activity and export it.

The registry is populated by ``RegistryActivityScenario`` and the resulting
properties, latest updates, fee transfers and event journal are written to
the chosen sink (console, JSON files or Kafka topics).
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_ledger.config import LedgerConfig
from property_ledger.exceptions import ConfigurationError, LedgerError
from property_ledger.logging import setup_logging
from property_ledger.scenarios import RegistryActivityScenario
from property_ledger.sinks import SINK_KINDS, create_sink

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed a property registry and export its records"
    )
    parser.add_argument(
        "--properties",
        type=int,
        default=100,
        help="Number of registrations to submit (default: 100)",
    )
    parser.add_argument(
        "--owners",
        type=int,
        default=10,
        help="Number of distinct owners (default: 10)",
    )
    parser.add_argument(
        "--update-rate",
        type=float,
        default=0.2,
        help="Share of properties that receive an owner update (default: 0.2)",
    )
    parser.add_argument(
        "--fee",
        type=int,
        default=None,
        help="Registration fee to set after configuring the authority",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED env var)",
    )
    parser.add_argument(
        "--sink",
        choices=SINK_KINDS,
        default="console",
        help="Where to export the registry (default: console)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format",
    )
    args = parser.parse_args()

    try:
        config = LedgerConfig.from_env()
    except LedgerError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    setup_logging(level=config.log_level, format_type=args.log_format, log_file=args.log_file)
    seed = args.seed if args.seed is not None else config.seed

    try:
        scenario = RegistryActivityScenario(
            num_properties=args.properties,
            num_owners=args.owners,
            update_rate=args.update_rate,
            registration_fee=args.fee,
            seed=seed,
            config=config.registry,
        )
    except ConfigurationError as exc:
        print(f"Invalid arguments: {exc}", file=sys.stderr)
        return 2
    registry = scenario.generate()
    state = registry.state

    sink = create_sink(args.sink, config)
    try:
        sink.write_batch("properties", list(state.properties.values()))
        sink.write_batch("property_updates", list(state.property_updates.values()))
        sink.write_batch("transfers", list(state.transfers))
        sink.write_batch("events", list(registry.events))
        sink.close()
    except LedgerError:
        logger.exception("Export to %s failed", args.sink)
        return 1

    logger.info("Registry summary: %s", state.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
