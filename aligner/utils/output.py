"""Writing and parsing alignment output files.

An output file holds six lines: the score, the reference header, the aligned
reference, the match line, the aligned query and the query header. Gaps are
written as underscores so the match line's spaces stay unambiguous.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from aligner.evaluation.metrics import match_line
from aligner.types import GAP, Alignment, AlignmentResult

OUTPUT_GAP = "_"
OUTPUT_LINES = 6


@dataclass(frozen=True)
class AlignmentRecord:
    """Contents of an alignment output file."""

    score: int
    reference_header: str
    aligned_reference: str
    match_line: str
    aligned_query: str
    query_header: str


def format_alignment(alignment: Alignment) -> str:
    """Return a human-readable two-line alignment string."""
    lines = []
    for seq in alignment.aligned_sequences:
        residues = "".join(seq.residues)
        lines.append(f"{seq.identifier:>10}: {residues}")
    return "\n".join(lines)


def format_alignment_output(result: AlignmentResult) -> List[str]:
    """Render an alignment result as the six output-file lines."""
    reference, query = result.alignment.aligned_sequences
    original_reference, original_query = result.alignment.original_sequences
    return [
        str(result.score),
        original_reference.header,
        "".join(reference.residues).replace(GAP, OUTPUT_GAP),
        match_line(result.alignment),
        "".join(query.residues).replace(GAP, OUTPUT_GAP),
        original_query.header,
    ]


def write_alignment_output(output_path: Path, result: AlignmentResult) -> None:
    """Write an alignment result to an output file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        for line in format_alignment_output(result):
            f.write(f"{line}\n")


def read_alignment_output(file_path: Path) -> AlignmentRecord:
    """Parse an alignment output file; gaps come back as '-'."""
    with Path(file_path).open("r", encoding="utf-8") as f:
        lines = [line.rstrip("\n") for line in f]

    if len(lines) < OUTPUT_LINES:
        raise ValueError(
            f"Alignment file '{file_path}' needs {OUTPUT_LINES} lines, found {len(lines)}."
        )

    try:
        score = int(lines[0].strip())
    except ValueError:
        raise ValueError(
            f"Alignment file '{file_path}' does not start with an integer score: {lines[0]!r}"
        ) from None

    return AlignmentRecord(
        score=score,
        reference_header=lines[1],
        aligned_reference=lines[2].replace(OUTPUT_GAP, GAP),
        match_line=lines[3],
        aligned_query=lines[4].replace(OUTPUT_GAP, GAP),
        query_header=lines[5],
    )


__all__ = [
    "AlignmentRecord",
    "format_alignment",
    "format_alignment_output",
    "write_alignment_output",
    "read_alignment_output",
]
