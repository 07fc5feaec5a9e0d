"""
chordie.cli
~~~~~~~~~~~

Command-line front end.

Usage::

    chordie C4 E4 G4
    chordie 58 63 67 --key Eb
    chordie --csv snapshots.csv --column notes --output labelled.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from chordie.core import resolve
from chordie.data.batch import label_note_table, load_note_table, parse_note_token
from chordie.theory.spelling import KEY_SIGNATURES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chordie",
        description="Name the chord formed by a set of MIDI notes.",
    )
    parser.add_argument(
        "notes", nargs="*",
        help="MIDI note numbers or note names (e.g. 60 or C4, Eb3).",
    )
    parser.add_argument(
        "--key", default=None,
        help=f"Key signature for spelling, one of: {', '.join(sorted(KEY_SIGNATURES))}.",
    )
    parser.add_argument(
        "--enforce-root", action="store_true",
        help="Use the lowest note as the chord root.",
    )
    parser.add_argument("--csv", default=None, help="Label every row of a CSV file.")
    parser.add_argument("--column", default="notes", help="CSV column holding the notes.")
    parser.add_argument("--output", default=None, help="Write the labelled CSV here.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.key is not None and args.key not in KEY_SIGNATURES:
        logger.warning(f"Unrecognised key {args.key!r}; spelling with sharps")

    if args.csv is None and not args.notes:
        parser.error("give notes or --csv")
    if args.csv is not None and args.notes:
        parser.error("give notes or --csv, not both")

    try:
        if args.csv is not None:
            table = label_note_table(
                load_note_table(args.csv), args.column, args.enforce_root, args.key
            )
            if args.output:
                table.to_csv(args.output, index=False)
                logger.info(f"Wrote {len(table)} labelled rows to {args.output}")
            else:
                table.to_csv(sys.stdout, index=False)
            return 0

        notes = [parse_note_token(tok) for tok in args.notes]
    except (ValueError, KeyError, OSError) as exc:
        logger.error(str(exc))
        return 1

    result = resolve(notes, args.enforce_root, args.key)
    logger.debug(f"Resolved via {result.stage}")
    print(result.label)
    return 0


if __name__ == "__main__":
    sys.exit(main())
