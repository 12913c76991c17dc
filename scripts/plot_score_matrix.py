#!/usr/bin/env python3
"""Plot the Needleman-Wunsch score matrix with the traceback path on top."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

# Ensure repo importability
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from aligner.algorithms import NeedlemanWunschAligner
from aligner.types import AlignmentResult, EndGapPolicy, ScoringScheme
from aligner.utils import read_fasta_sequence

from scripts.constants import (
    GAP_PENALTY,
    MATCH_SCORE,
    MISMATCH_PENALTY,
    PATH_COLOR,
    PLOT_DPI,
    PLOT_TITLE_FONTSIZE,
    PLOT_XLABEL_FONTSIZE,
    PLOT_YLABEL_FONTSIZE,
    SCORE_MATRIX_FIGURES_FOLDER,
)


def plot_score_matrix(result: AlignmentResult, out_path: Path, dpi: int = PLOT_DPI):
    if result.score_matrix is None:
        raise ValueError("Alignment result carries no score matrix; use keep_matrix=True.")

    arr = np.asarray(result.score_matrix)
    seq_x, seq_y = result.alignment.original_sequences

    plt.figure(figsize=(6, 5))
    im = plt.imshow(arr.T, origin="lower", aspect="auto", cmap="viridis")
    plt.colorbar(im, label="Score")
    plt.xlabel(f"i (position in {seq_x.identifier})", fontsize=PLOT_XLABEL_FONTSIZE)
    plt.ylabel(f"j (position in {seq_y.identifier})", fontsize=PLOT_YLABEL_FONTSIZE)
    plt.title(f"{out_path.stem} (score {result.score})", fontsize=PLOT_TITLE_FONTSIZE)

    xs = [i for i, j in result.path]
    ys = [j for i, j in result.path]
    plt.plot(xs, ys, c=PATH_COLOR, linewidth=1.5, label="traceback")
    plt.scatter([result.end_cell[0]], [result.end_cell[1]], c=PATH_COLOR, s=12)
    plt.legend(loc="upper left")

    plt.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_path, dpi=dpi)
    plt.close()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Plot the score matrix and traceback of one alignment."
    )
    parser.add_argument("-q", "--query", type=Path, required=True)
    parser.add_argument("-r", "--reference", type=Path, required=True)
    parser.add_argument(
        "-t", "--type", dest="sequence_type", default="nucleotide", type=str.lower
    )
    parser.add_argument("-u", "--unpenalized", action="store_true")
    parser.add_argument("--fmt", default="png", choices=["png", "pdf", "svg"])
    args = parser.parse_args()

    scoring = ScoringScheme(
        match_score=MATCH_SCORE,
        mismatch_penalty=MISMATCH_PENALTY,
        gap_penalty=GAP_PENALTY,
        end_gaps=EndGapPolicy.from_flag(args.unpenalized),
    )
    query = read_fasta_sequence(str(args.query), args.sequence_type)
    reference = read_fasta_sequence(str(args.reference), args.sequence_type)
    result = NeedlemanWunschAligner(keep_matrix=True).align(reference, query, scoring)

    out_path = SCORE_MATRIX_FIGURES_FOLDER / (
        f"{reference.identifier}_vs_{query.identifier}_{scoring.end_gaps.value}.{args.fmt}"
    )
    plot_score_matrix(result, out_path)
    print(f"Wrote score matrix heatmap to {out_path}")


if __name__ == "__main__":
    main()
