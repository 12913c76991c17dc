#!/usr/bin/env python3
"""Run the preset alignments and summarize them in a report."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .constants import (
    ALIGNMENT_OUTPUT_FOLDER,
    ANALYSIS_RUNS,
    GAP_PENALTY,
    MATCH_SCORE,
    MISMATCH_PENALTY,
    QUERY_FASTA,
    QUERY_PROTEIN_FASTA,
    REFERENCE_FASTA,
    REFERENCE_PROTEIN_FASTA,
    REPORT_CSV,
    SIGNIFICANCE_LEVEL,
)

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from aligner.algorithms import NeedlemanWunschAligner
from aligner.evaluation import (
    gc_content,
    gc_z_test,
    residue_differences,
    stats_from_match_line,
)
from aligner.types import AlignmentResult, EndGapPolicy, ScoringScheme
from aligner.utils import (
    ensure_local_file,
    read_alignment_output,
    read_fasta_sequence,
    write_alignment_output,
    write_fasta,
)


def translate_inputs() -> None:
    """Translate both nucleotide inputs and save them as amino acid FASTA files."""
    print("[analysis] Translating sequences to amino acids.")
    for source, target in (
        (REFERENCE_FASTA, REFERENCE_PROTEIN_FASTA),
        (QUERY_FASTA, QUERY_PROTEIN_FASTA),
    ):
        protein = read_fasta_sequence(str(source), "nucleotide").translate()
        write_fasta(str(target), [protein])


def run_preset(run: Dict[str, object], aligner: NeedlemanWunschAligner) -> AlignmentResult:
    """Align one preset pair and write its output file."""
    scoring = ScoringScheme(
        match_score=MATCH_SCORE,
        mismatch_penalty=MISMATCH_PENALTY,
        gap_penalty=GAP_PENALTY,
        end_gaps=EndGapPolicy.from_flag(bool(run["unpenalized"])),
    )
    kind = str(run["sequence_type"])
    query = read_fasta_sequence(str(run["query"]), kind)
    reference = read_fasta_sequence(str(run["reference"]), kind)

    print(
        f"\nRunning alignment with {run['description']}. "
        f"Query is {Path(str(run['query'])).name}. "
        f"Reference is {Path(str(run['reference'])).name}. "
        f"Gap penalty is {GAP_PENALTY}, mismatch penalty is {MISMATCH_PENALTY}, "
        f"and match score is {MATCH_SCORE}."
    )
    result = aligner.align(reference, query, scoring)
    write_alignment_output(ALIGNMENT_OUTPUT_FOLDER / f"{run['name']}.txt", result)
    return result


def summarize_outputs(runs: List[Dict[str, object]]) -> pd.DataFrame:
    """Read the written output files back and tabulate scores and column counts."""
    rows: List[Dict[str, object]] = []
    for run in runs:
        record = read_alignment_output(ALIGNMENT_OUTPUT_FOLDER / f"{run['name']}.txt")
        stats = stats_from_match_line(record.match_line)
        rows.append(
            {
                "Run": run["name"],
                "Score": record.score,
                "Matches": stats.matches,
                "Mismatches": stats.mismatches,
                "Gaps": stats.gaps,
                "Total mismatches": stats.total_mismatches,
            }
        )
    return pd.DataFrame(rows)


def report_gc_content() -> None:
    """Print GC content of both nucleotide inputs and a Z-test between them."""
    reference = read_fasta_sequence(str(REFERENCE_FASTA), "nucleotide")
    query = read_fasta_sequence(str(QUERY_FASTA), "nucleotide")
    gc_reference = gc_content(reference.residues)
    gc_query = gc_content(query.residues)

    for path, gc in ((REFERENCE_FASTA, gc_reference), (QUERY_FASTA, gc_query)):
        print(
            f"{path.name} GC Content: {gc.percent:.2f}% "
            f"(GC Count: {gc.gc_count}, Total: {gc.total})"
        )

    print("\nPerforming Z-Test on GC Content...")
    z_test = gc_z_test(gc_reference, gc_query)
    print(f"Z-Score: {z_test.z_score:.4f}")
    p_value = "< 1e-10" if z_test.p_value == 0.0 else f"{z_test.p_value:.4f}"
    print(f"P-Value: {p_value}")
    if z_test.is_significant(SIGNIFICANCE_LEVEL):
        print("Result: Significant difference in GC content.")
    else:
        print("Result: No significant difference in GC content.")


def main() -> None:
    """Run the preset alignments, then print and save the report."""
    parser = argparse.ArgumentParser(description="Run the preset alignment analysis.")
    parser.add_argument(
        "--download",
        action="store_true",
        help="Download missing nucleotide inputs before running (default: skip)",
    )
    opts = parser.parse_args()

    if opts.download:
        ensure_local_file(REFERENCE_FASTA)
        ensure_local_file(QUERY_FASTA)
    for path in (REFERENCE_FASTA, QUERY_FASTA):
        if not path.exists():
            raise FileNotFoundError(f"Input FASTA not found: {path}")

    translate_inputs()
    ALIGNMENT_OUTPUT_FOLDER.mkdir(parents=True, exist_ok=True)

    aligner = NeedlemanWunschAligner()
    results = {run["name"]: run_preset(run, aligner) for run in ANALYSIS_RUNS}

    summary = summarize_outputs(ANALYSIS_RUNS)
    print("\nAlignment summary:")
    print(summary.to_string(index=False))

    for name, result in results.items():
        if result.alignment.original_sequences[0].kind != "aminoacid":
            continue
        print(f"\nDifferences between a.a. sequences ({name}):")
        differences = residue_differences(result.alignment)
        if not differences:
            print("No differences found")
        for difference in differences:
            print(difference)

    print()
    report_gc_content()

    REPORT_CSV.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(REPORT_CSV, index=False)
    print(f"\nWrote summary to {REPORT_CSV}")


if __name__ == "__main__":
    main()
