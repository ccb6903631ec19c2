import argparse
import os
import sys

import yaml

from partition_utils.data.partition import get_partitioner
from partition_utils.util.collection_utils import safe_iter
from partition_utils.util.helper import print0
from partition_utils.util.strings import limit

DEFAULT_CONFIG = {"strategy": "chunk", "num-partitions": 1, "max-item-length": 40}


def main(argv=None):
    # 1. Parse arguments
    run_config = parse_configs(argv)

    # 2. Load items
    items = load_items(run_config)

    # 3. Resolve strategy
    partitioner = get_partitioner(run_config["strategy"])

    # 4. Partition
    partitions = partitioner.partition(run_config["num-partitions"], items)

    # 5. Report
    summarize(partitions, run_config["max-item-length"])
    print(yaml.safe_dump(partitions, default_flow_style=None, sort_keys=False), end="")
    return partitions


def parse_configs(argv=None) -> dict:
    parser = argparse.ArgumentParser(
        prog="partition-utils",
        description="Split a list of items into chunk or round-robin partitions.",
    )
    parser.add_argument("--config_path", type=str, default="run-config.yaml")
    parser.add_argument("--strategy", type=str, default=None)
    parser.add_argument("--num_partitions", type=int, default=None)
    parser.add_argument("--items_path", type=str, default=None)

    args = parser.parse_args(argv)

    run_config = dict(DEFAULT_CONFIG)
    if os.path.exists(args.config_path):
        with open(args.config_path, "r") as f:
            run_config.update(yaml.safe_load(f) or {})

    # Flags take precedence over the config file.
    if args.strategy is not None:
        run_config["strategy"] = args.strategy
    if args.num_partitions is not None:
        run_config["num-partitions"] = args.num_partitions
    if args.items_path is not None:
        run_config["items-path"] = args.items_path

    run_config["max-item-length"] = get_max_item_length(run_config)
    return run_config


def get_max_item_length(run_config: dict) -> int:
    """Summary truncation length; null in the config falls back to the default."""
    value = run_config.get("max-item-length")
    if value is None:
        return DEFAULT_CONFIG["max-item-length"]
    try:
        max_item_length = int(value)
    except (TypeError, ValueError):
        raise ValueError(
            f"max-item-length must be a non-negative integer, got {value!r}"
        ) from None
    if isinstance(value, bool) or max_item_length < 0:
        raise ValueError(
            f"max-item-length must be a non-negative integer, got {value!r}"
        )
    return max_item_length


def load_items(run_config: dict) -> list:
    """Items listed in the config, else read from items-path, one per line."""
    if run_config.get("items") is not None:
        return list(safe_iter(run_config["items"]))
    path = run_config.get("items-path")
    if path is None:
        return []
    with open(path, "r") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


def summarize(partitions: list, max_item_length: int):
    for i, partition in enumerate(partitions):
        preview = limit(", ".join(str(item) for item in partition), max_item_length)
        print0(f"Partition {i}: {len(partition)} item(s) [{preview}]", file=sys.stderr)


def run():
    """Console script entry point."""
    main()


if __name__ == "__main__":
    main()
