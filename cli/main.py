"""Command line entry point: compile a SANN network and report its layout."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable

from sann import compile as compile_network
from sann import config as network_config
from sann.reporting import write_layout

logger = logging.getLogger("sann.cli")


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    preset_names = sorted(network_config.presets().keys())
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--preset",
        choices=preset_names,
        default="linear-3-2-1",
        help="Preset network to compile",
    )
    parser.add_argument(
        "--config", type=Path, help="Optional JSON/YAML network description or override"
    )
    parser.add_argument("--seed", type=int, help="Seed used for weight initialisation")
    parser.add_argument(
        "--list-presets", action="store_true", help="List available presets and exit"
    )
    parser.add_argument(
        "--dump-layout", type=Path, help="Write the compiled layout to a JSON file"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_presets:
        for name in sorted(network_config.presets().keys()):
            print(name)
        raise SystemExit(0)

    config = network_config.load_preset(args.preset)
    if args.config:
        override = network_config.load_config(args.config)
        if {"layers", "output"} <= set(override.keys()):
            config = override
        else:
            config = dict(network_config.merge(config, override))
    if args.seed is not None:
        config["seed"] = int(args.seed)

    output = network_config.build_network(config)
    seed = config.get("seed")
    compiled = compile_network(output, seed=None if seed is None else int(seed))
    logger.info(
        "Compiled %d layers (%d parameters)", len(compiled), compiled.parameter_count()
    )

    summary = compiled.summary()
    if args.dump_layout:
        summary["layout_path"] = write_layout(args.dump_layout, compiled, config=config)
    print(json.dumps(summary, sort_keys=True))


if __name__ == "__main__":
    main()
