#!/usr/bin/env python3
"""Generate sample customer prototypes and their clones as JSON files.

Builds a pool of regular and VIP prototypes with Faker, registers them,
clones each one a few times and writes everything to the output folder
for manual inspection.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from customer_prototype.config import AppConfig
from customer_prototype.generators import CustomerGenerator, VipCustomerGenerator
from customer_prototype.logging import setup_logging
from customer_prototype.sinks import JsonFileSink
from customer_prototype.store import PrototypeRegistry

logger = logging.getLogger("generate_sample_data")


def build_registry(config: AppConfig, num_prototypes: int) -> PrototypeRegistry:
    """Generate prototypes and register them under stable names."""
    num_vip = round(num_prototypes * config.generator.vip_ratio)
    locale = config.generator.locale

    registry = PrototypeRegistry()
    customer_gen = CustomerGenerator(seed=config.seed, locale=locale)
    # Distinct seed, otherwise both generators emit the same customer IDs
    vip_seed = config.seed + 1 if config.seed is not None else None
    vip_gen = VipCustomerGenerator(seed=vip_seed, locale=locale)

    for i, customer in enumerate(customer_gen.generate_batch(num_prototypes - num_vip)):
        registry.register(f"regular-{i:03d}", customer)
    for i, customer in enumerate(vip_gen.generate_batch(num_vip)):
        registry.register(f"vip-{i:03d}", customer)

    logger.info(
        "Registered %d prototypes (%d VIP)", len(registry), num_vip
    )
    return registry


def main() -> None:
    """Generate prototypes, clone them and write JSON files."""
    config = AppConfig.from_env()

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--prototypes",
        type=int,
        default=10,
        help="Number of prototypes to generate (default: 10)",
    )
    parser.add_argument(
        "--clones",
        type=int,
        default=2,
        help="Clones produced per prototype (default: 2)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed (default: SEED env var or 42)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Output directory (default: OUTPUT_DIR env var or ./output)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON",
    )
    args = parser.parse_args()

    config.seed = args.seed
    config.output.json_output_dir = args.output_dir
    config.output.pretty_json = args.pretty

    setup_logging(config.log_level, config.log_format)

    registry = build_registry(config, args.prototypes)

    clones = []
    for name in registry.names():
        clones.extend(registry.clone_batch(name, args.clones))
    logger.info("Produced %d clones", len(clones))

    sink = JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    sink.write_batch("prototypes", [registry.get(name) for name in registry.names()])
    sink.write_batch("clones", clones)
    sink.close()


if __name__ == "__main__":
    main()
