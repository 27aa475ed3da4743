#!/usr/bin/env python3
"""
Command line check of a single organisationsnummer.

Usage:
    organisationsnummer 202100-5489
    python -m organisationsnummer.cli 5567037485 --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Optional

from organisationsnummer.config import settings
from organisationsnummer.validation import validate

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate a Swedish organisationsnummer")
    parser.add_argument("number", help="Organisationsnummer to check, e.g. 556703-7485")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    outcome = validate(args.number)
    if not outcome.is_valid:
        logger.info("Rejected input: %s", outcome.error)
        print(f"{args.number}: invalid ({outcome.error})")
        print("valid: False")
        return 1

    org = outcome.identifier
    print(f"{org.format().long()}: {org.type()}, vat number {org.vat_number()}")
    print("valid: True")
    return 0


if __name__ == "__main__":
    sys.exit(main())
