"""Command-line entry point: align a query FASTA against a reference FASTA."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from aligner.algorithms import NeedlemanWunschAligner
from aligner.errors import AlignerError
from aligner.types import EndGapPolicy, ScoringScheme
from aligner.types.sequence import SEQUENCE_CLASSES
from aligner.utils import (
    ensure_local_file,
    format_alignment,
    load_scoring,
    read_fasta_sequence,
    write_alignment_output,
)
from aligner.utils.download import DEFAULT_BASE_URL


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nw-align",
        description="Needleman-Wunsch alignment of a query sequence against a reference.",
    )
    parser.add_argument(
        "-q",
        "--query",
        type=Path,
        required=True,
        help="Query sequence file in FASTA format.",
    )
    parser.add_argument(
        "-r",
        "--reference",
        type=Path,
        required=True,
        help="Reference sequence file in FASTA format.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Output alignment file.",
    )
    parser.add_argument(
        "-g", "--gap", type=int, help="Gap penalty (negative integer)."
    )
    parser.add_argument(
        "-p", "--mismatch", type=int, help="Mismatch penalty (negative integer)."
    )
    parser.add_argument(
        "-m", "--match", type=int, help="Match score (positive integer)."
    )
    end_gaps = parser.add_mutually_exclusive_group()
    end_gaps.add_argument(
        "-u",
        "--unpenalized",
        dest="unpenalized",
        action="store_true",
        default=None,
        help="Do not penalize start and end gaps.",
    )
    end_gaps.add_argument(
        "--penalized",
        dest="unpenalized",
        action="store_false",
        default=None,
        help="Penalize start and end gaps, overriding the config file.",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="sequence_type",
        type=str.lower,
        choices=sorted(SEQUENCE_CLASSES),
        required=True,
        help="Sequence type: 'nucleotide' or 'aminoacid'.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML scoring file; explicit flags override its values.",
    )
    parser.add_argument(
        "--fetch-missing",
        action="store_true",
        help="Download query/reference files that do not exist locally.",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="Base URL used by --fetch-missing.",
    )
    return parser


def resolve_scoring(args: argparse.Namespace) -> ScoringScheme:
    """Merge the optional YAML scoring file with explicit command-line flags."""
    values = {}
    if args.config is not None:
        base = load_scoring(args.config)
        values = {
            "match_score": base.match_score,
            "mismatch_penalty": base.mismatch_penalty,
            "gap_penalty": base.gap_penalty,
            "end_gaps": base.end_gaps,
        }

    overrides = {
        "match_score": args.match,
        "mismatch_penalty": args.mismatch,
        "gap_penalty": args.gap,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    if args.unpenalized is not None:
        values["end_gaps"] = EndGapPolicy.from_flag(args.unpenalized)

    missing = [
        flag
        for key, flag in (
            ("match_score", "--match"),
            ("mismatch_penalty", "--mismatch"),
            ("gap_penalty", "--gap"),
        )
        if key not in values
    ]
    if missing:
        raise argparse.ArgumentTypeError(
            f"missing scoring values {missing}; pass them or use --config"
        )
    return ScoringScheme(**values)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        scoring = resolve_scoring(args)
    except (argparse.ArgumentTypeError, AlignerError, OSError) as e:
        parser.error(str(e))

    print(f"Sequence Type: {args.sequence_type}")
    print(f"Unpenalized End Gaps: {scoring.end_gaps.free_end_gaps}")

    if args.fetch_missing:
        ensure_local_file(args.query, args.base_url)
        ensure_local_file(args.reference, args.base_url)

    for path in (args.query, args.reference):
        if not path.exists():
            parser.error(f"FASTA file not found: {path}")

    try:
        query = read_fasta_sequence(str(args.query), args.sequence_type)
        reference = read_fasta_sequence(str(args.reference), args.sequence_type)
        result = NeedlemanWunschAligner().align(reference, query, scoring)
    except AlignerError as e:
        parser.error(str(e))

    write_alignment_output(args.output, result)
    print(format_alignment(result.alignment))
    print(f"Alignment score: {result.score}")
    print(f"Wrote alignment to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
