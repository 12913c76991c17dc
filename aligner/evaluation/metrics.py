"""Per-column alignment metrics and score recomputation."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from aligner.types import GAP, Alignment, AlignmentStats, ScoringScheme

MATCH_SYMBOL = "|"
MISMATCH_SYMBOL = "x"
GAP_SYMBOL = " "

Column = Tuple[str, str]


def extract_columns(alignment: Alignment) -> List[Column]:
    """Return the alignment columns as pairs of residues (gaps retained)."""
    seq_x, seq_y = alignment.aligned_sequences
    return list(zip(seq_x.residues, seq_y.residues))


def _column_symbol(residue_x: str, residue_y: str) -> str:
    if residue_x == GAP or residue_y == GAP:
        return GAP_SYMBOL
    return MATCH_SYMBOL if residue_x == residue_y else MISMATCH_SYMBOL


def match_line(alignment: Alignment) -> str:
    """Visual line with '|' for matches, 'x' for mismatches and a space for gaps."""
    return "".join(_column_symbol(x, y) for x, y in extract_columns(alignment))


def alignment_stats(alignment: Alignment) -> AlignmentStats:
    """Count match, mismatch and gap columns."""
    return stats_from_match_line(match_line(alignment))


def stats_from_match_line(line: str) -> AlignmentStats:
    """Count match, mismatch and gap symbols in a rendered match line."""
    return AlignmentStats(
        matches=line.count(MATCH_SYMBOL),
        mismatches=line.count(MISMATCH_SYMBOL),
        gaps=line.count(GAP_SYMBOL),
    )


def residue_differences(alignment: Alignment) -> List[str]:
    """Describe every column that is not a match, with 1-based positions."""
    differences = []
    for position, (x, y) in enumerate(extract_columns(alignment), start=1):
        if _column_symbol(x, y) != MATCH_SYMBOL:
            differences.append(f"Position {position}: {x} vs {y}")
    return differences


def _end_gap_run(columns: Sequence[Column]) -> int:
    """Length of the run of gap columns on a single side at the start of columns."""
    if not columns:
        return 0
    first_x, first_y = columns[0]
    if first_x == GAP:
        side = 0
    elif first_y == GAP:
        side = 1
    else:
        return 0

    run = 0
    for column in columns:
        if column[side] != GAP:
            break
        run += 1
    return run


def score_alignment(alignment: Alignment, scoring: ScoringScheme) -> int:
    """Recompute the score implied by the aligned rows.

    With free end gaps, the leading and trailing runs of gaps on one side
    are not charged.
    """
    columns = extract_columns(alignment)
    start, stop = 0, len(columns)
    if scoring.end_gaps.free_end_gaps:
        start = _end_gap_run(columns)
        stop = max(start, len(columns) - _end_gap_run(columns[::-1]))

    total = 0
    for x, y in columns[start:stop]:
        if x == GAP or y == GAP:
            total += scoring.gap_penalty
        else:
            total += scoring.substitution(x, y)
    return total


__all__ = [
    "MATCH_SYMBOL",
    "MISMATCH_SYMBOL",
    "GAP_SYMBOL",
    "extract_columns",
    "match_line",
    "alignment_stats",
    "stats_from_match_line",
    "residue_differences",
    "score_alignment",
]
