"""Needleman-Wunsch alignment with a linear gap penalty."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple

import numpy as np

from aligner.algorithms.base import PairwiseAligner
from aligner.errors import InvalidConfiguration, InvalidInput
from aligner.types import (
    GAP,
    Alignment,
    AlignmentResult,
    EndGapPolicy,
    ScoringScheme,
    SequenceType,
)
from aligner.types.alignment import Cell


class Move(IntEnum):
    """Predecessor of a matrix cell. Ties resolve in declaration order."""

    STOP = 0
    DIAGONAL = 1
    UP = 2
    LEFT = 3


class NeedlemanWunschAligner(PairwiseAligner):
    """Optimal global or semi-global alignment by dynamic programming.

    Sequence X indexes the rows of the score matrix and sequence Y its
    columns, so an UP move consumes a residue of X against a gap.
    """

    def __init__(self, keep_matrix: bool = False) -> None:
        """Initialize the aligner.

        Args:
            keep_matrix: Attach the filled score matrix to each result.
        """
        self.keep_matrix = keep_matrix

    def _check_inputs(
        self,
        x_seq: SequenceType,
        y_seq: SequenceType,
        scoring: ScoringScheme,
    ) -> None:
        """Reject empty or pre-aligned sequences and invalid scoring before allocation."""
        if not isinstance(scoring, ScoringScheme):
            raise InvalidConfiguration(
                f"Expected a ScoringScheme, got {type(scoring).__name__}"
            )
        scoring.validate()

        for seq in (x_seq, y_seq):
            if len(seq) == 0:
                raise InvalidInput(f"Sequence '{seq.identifier}' is empty.")
            if seq.aligned:
                raise InvalidInput(
                    f"Sequence '{seq.identifier}' is already aligned."
                )

    def _initialize_matrices(
        self, m: int, n: int, scoring: ScoringScheme
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Allocate score and trace matrices and fill the boundary row and column."""
        score = np.zeros((m + 1, n + 1), dtype=np.int64)
        trace = np.full((m + 1, n + 1), Move.STOP, dtype=np.int8)

        policy = scoring.end_gaps
        score[:, 0] = policy.boundary_scores(m, scoring.gap_penalty)
        score[0, :] = policy.boundary_scores(n, scoring.gap_penalty)
        trace[1:, 0] = Move.UP
        trace[0, 1:] = Move.LEFT
        return score, trace

    def _fill_interior(
        self,
        score: np.ndarray,
        trace: np.ndarray,
        x: List[str],
        y: List[str],
        scoring: ScoringScheme,
    ) -> None:
        """Run the recurrence one row at a time.

        Diagonal and up candidates are independent within a row. The left
        candidate chains along the row, so M[i][j] is resolved as
        max over k <= j of (t[k] + (j - k) * gap), where t holds the boundary
        cell followed by max(diag, up); a running maximum computes this.
        """
        gap = scoring.gap_penalty
        y_residues = np.asarray(y)
        offsets = np.arange(len(y) + 1, dtype=np.int64) * gap

        for i in range(1, len(x) + 1):
            previous = score[i - 1]
            substitution = np.where(
                y_residues == x[i - 1], scoring.match_score, scoring.mismatch_penalty
            )
            diag = previous[:-1] + substitution
            up = previous[1:] + gap

            candidates = np.empty(len(y) + 1, dtype=np.int64)
            candidates[0] = score[i, 0]
            candidates[1:] = np.maximum(diag, up)
            row = np.maximum.accumulate(candidates - offsets) + offsets

            best = row[1:]
            score[i, 1:] = best
            trace[i, 1:] = np.where(
                best == diag,
                Move.DIAGONAL,
                np.where(best == up, Move.UP, Move.LEFT),
            )

    def _traceback(
        self,
        trace: np.ndarray,
        x: List[str],
        y: List[str],
        policy: EndGapPolicy,
        end_cell: Cell,
    ) -> Tuple[List[str], List[str], List[Cell]]:
        """Follow predecessor moves from end_cell and emit aligned columns.

        Residues past the end cell become free trailing gaps and residues
        left before the stop cell become free leading gaps. Columns are
        collected back to front and reversed at the end.
        """
        i, j = end_cell
        aligned_x: List[str] = []
        aligned_y: List[str] = []

        for k in range(len(x) - 1, i - 1, -1):
            aligned_x.append(x[k])
            aligned_y.append(GAP)
        for k in range(len(y) - 1, j - 1, -1):
            aligned_x.append(GAP)
            aligned_y.append(y[k])

        path: List[Cell] = [(i, j)]
        while not policy.is_terminal(i, j):
            move = trace[i, j]
            if move == Move.DIAGONAL:
                aligned_x.append(x[i - 1])
                aligned_y.append(y[j - 1])
                i -= 1
                j -= 1
            elif move == Move.UP:
                aligned_x.append(x[i - 1])
                aligned_y.append(GAP)
                i -= 1
            elif move == Move.LEFT:
                aligned_x.append(GAP)
                aligned_y.append(y[j - 1])
                j -= 1
            else:
                break
            path.append((i, j))

        for k in range(i - 1, -1, -1):
            aligned_x.append(x[k])
            aligned_y.append(GAP)
        for k in range(j - 1, -1, -1):
            aligned_x.append(GAP)
            aligned_y.append(y[k])

        aligned_x.reverse()
        aligned_y.reverse()
        return aligned_x, aligned_y, path

    def _build_alignment(
        self,
        x_seq: SequenceType,
        y_seq: SequenceType,
        aligned_x: List[str],
        aligned_y: List[str],
    ) -> Alignment:
        """Wrap aligned residue lists in an Alignment object."""
        aligned_x_seq = type(x_seq)(
            identifier=x_seq.identifier,
            residues=aligned_x,
            description=x_seq.description,
            aligned=True,
        )
        aligned_y_seq = type(y_seq)(
            identifier=y_seq.identifier,
            residues=aligned_y,
            description=y_seq.description,
            aligned=True,
        )

        return Alignment(
            name=f"NW_{x_seq.identifier}_vs_{y_seq.identifier}",
            aligned_sequences=[aligned_x_seq, aligned_y_seq],
            original_sequences=[x_seq, y_seq],
        )

    def align(
        self,
        x_seq: SequenceType,
        y_seq: SequenceType,
        scoring: ScoringScheme,
    ) -> AlignmentResult:
        """Compute one optimal alignment of x_seq against y_seq."""
        self._check_inputs(x_seq, y_seq, scoring)

        x = x_seq.residues
        y = y_seq.residues

        score, trace = self._initialize_matrices(len(x), len(y), scoring)
        self._fill_interior(score, trace, x, y, scoring)

        policy = scoring.end_gaps
        end_cell = policy.end_cell(score)
        aligned_x, aligned_y, path = self._traceback(trace, x, y, policy, end_cell)
        alignment = self._build_alignment(x_seq, y_seq, aligned_x, aligned_y)

        return AlignmentResult(
            alignment=alignment,
            score=int(score[end_cell]),
            end_cell=end_cell,
            path=tuple(path),
            score_matrix=score if self.keep_matrix else None,
        )


def align(
    x_seq: SequenceType,
    y_seq: SequenceType,
    scoring: ScoringScheme,
    keep_matrix: bool = False,
) -> AlignmentResult:
    """Align two sequences with a fresh NeedlemanWunschAligner."""
    return NeedlemanWunschAligner(keep_matrix=keep_matrix).align(x_seq, y_seq, scoring)


__all__ = ["Move", "NeedlemanWunschAligner", "align"]
