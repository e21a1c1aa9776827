#!/usr/bin/env python3
"""Generate a synthetic seed dataset for the HR store.

Writes a JSON document with the same shape as the bundled
``thoth_hr/data/seed.json`` (members, loans, savings, payrolls,
transactions, contracts; users left empty).
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from thoth_hr.logging import get_logger, setup_logging
from thoth_hr.repositories.serialization import snapshot_to_dict
from thoth_hr.scenarios import SeedDatasetScenario

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a synthetic HR seed dataset")
    parser.add_argument(
        "--members",
        type=int,
        default=25,
        help="Number of members to generate (default: 25)",
    )
    parser.add_argument(
        "--months",
        type=int,
        default=3,
        help="Months of payroll history (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/seed.json"),
        help="Output file (default: data/seed.json)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log level (default: INFO)",
    )
    args = parser.parse_args()

    setup_logging(args.log_level)

    scenario = SeedDatasetScenario(
        num_members=args.members,
        payroll_months=args.months,
        seed=args.seed,
    )
    snapshot = scenario.snapshot()

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(snapshot_to_dict(snapshot), f, indent=2, ensure_ascii=False)
        f.write("\n")

    logger.info("Wrote %s to %s", snapshot.summary(), args.output)


if __name__ == "__main__":
    main()
