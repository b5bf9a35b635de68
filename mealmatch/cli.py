"""CLI for allocating one batch from recipient and volunteer tables.

    python -m mealmatch data/ --quantity 20 --batch-id 1001 --donor-id 501

``data/`` must hold ``recipients.csv`` and ``volunteers.csv`` (file names can
be changed in the config under ``data.recipients_file`` and
``data.volunteers_file``).
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .allocator import allocate
from .data import BatchStatus, MealBatch
from .report import assignments_to_frame, format_assignments, summarize
from .stores import RecipientStore, VolunteerStore
from .utils import AppConfig, get_logger


def _read_table(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing required input table: {path}")
    return pd.read_csv(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mealmatch", description=__doc__.splitlines()[0])
    parser.add_argument("data_dir", type=Path, help="Directory with the input tables")
    parser.add_argument("--quantity", type=int, required=True, help="Units in the batch")
    parser.add_argument("--batch-id", type=int, default=1)
    parser.add_argument("--donor-id", type=int, default=None)
    parser.add_argument("--donor-location", default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--output", type=Path, default=None, help="Write assignments to this CSV")
    parser.add_argument("--log-level", default=None)
    return parser


def run(args: argparse.Namespace) -> int:
    cfg = AppConfig.load(args.config) if args.config else AppConfig()
    logger = get_logger("mealmatch", args.log_level or cfg.y("logging.level", "INFO"))

    recipients = RecipientStore.from_frame(
        _read_table(args.data_dir / cfg.y("data.recipients_file", "recipients.csv"))
    )
    volunteers = VolunteerStore.from_frame(
        _read_table(args.data_dir / cfg.y("data.volunteers_file", "volunteers.csv"))
    )

    donor_id = args.donor_id if args.donor_id is not None else cfg.y("batch.donor_id", 0)
    donor_location = args.donor_location or cfg.y("batch.donor_location", "")
    batch = MealBatch(
        id=args.batch_id,
        donor_id=int(donor_id),
        quantity=args.quantity,
        donor_location=str(donor_location),
    )

    logger.info("Processing batch %s with quantity %d", batch.id, batch.quantity)
    assignments = allocate(batch, recipients, volunteers)

    print(f"Assignments created: {len(assignments)}")
    for line in format_assignments(assignments):
        print(line)

    summary = summarize(batch, assignments)
    print(f"\nBatch {summary['batch_id']}: {summary['status']}, "
          f"allocated {summary['allocated']}/{summary['initial_quantity']}, "
          f"remaining {summary['remaining']}")

    print("\nFinal recipient capacities:")
    for recipient in recipients:
        print(f"Recipient {recipient.id} remaining capacity: {recipient.capacity}")

    if args.output is not None:
        assignments_to_frame(assignments).to_csv(args.output, index=False)
        logger.info("Wrote %d assignments to %s", len(assignments), args.output)

    return 0 if batch.status is BatchStatus.ASSIGNED else 1


def main(argv: Optional[List[str]] = None) -> int:
    return run(build_parser().parse_args(argv))
