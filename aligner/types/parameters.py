"""
Scoring parameters for linear-gap Needleman-Wunsch alignment.

A scoring scheme is three flat integers plus the end-gap policy. The policy
is the only place that knows how the matrix edges behave: what the boundary
row and column hold, where traceback starts, and where it is allowed to stop.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from aligner.errors import InvalidConfiguration


class EndGapPolicy(str, Enum):
    """How gaps before the first and after the last residue are scored."""

    PENALIZED = "penalized"
    UNPENALIZED = "unpenalized"

    @property
    def free_end_gaps(self) -> bool:
        return self is EndGapPolicy.UNPENALIZED

    def boundary_scores(self, length: int, gap_penalty: int) -> np.ndarray:
        """Scores of the first row or column, index 0 included."""
        if self.free_end_gaps:
            return np.zeros(length + 1, dtype=np.int64)
        return np.arange(length + 1, dtype=np.int64) * gap_penalty

    def end_cell(self, score_matrix: np.ndarray) -> Tuple[int, int]:
        """Cell where traceback begins.

        With free end gaps the last row is scanned left to right, then the
        last column top to bottom; only a strictly greater score replaces the
        current best, so the first maximum in that order wins.
        """
        m = score_matrix.shape[0] - 1
        n = score_matrix.shape[1] - 1
        if not self.free_end_gaps:
            return m, n

        last_row = score_matrix[m, :]
        last_column = score_matrix[:, n]
        best_j = int(np.argmax(last_row))
        best_i = int(np.argmax(last_column))
        if last_column[best_i] > last_row[best_j]:
            return best_i, n
        return m, best_j

    def is_terminal(self, i: int, j: int) -> bool:
        """Whether traceback stops at (i, j)."""
        if self.free_end_gaps:
            return i == 0 or j == 0
        return i == 0 and j == 0

    @classmethod
    def from_flag(cls, unpenalized: bool) -> "EndGapPolicy":
        return cls.UNPENALIZED if unpenalized else cls.PENALIZED


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class ScoringScheme:
    """Match score, mismatch and gap penalties, and the end-gap policy.

    Attributes:
        match_score: Reward for identical residues; must be positive.
        mismatch_penalty: Score for differing residues; must be <= 0.
        gap_penalty: Score per gap position; must be <= 0.
        end_gaps: Whether leading/trailing gaps are charged.
    """

    match_score: int
    mismatch_penalty: int
    gap_penalty: int
    end_gaps: EndGapPolicy = EndGapPolicy.PENALIZED

    def __post_init__(self) -> None:
        try:
            policy = EndGapPolicy(self.end_gaps)
        except ValueError:
            raise InvalidConfiguration(
                f"Unknown end-gap policy: {self.end_gaps!r}; choose from "
                f"{[p.value for p in EndGapPolicy]}"
            ) from None
        object.__setattr__(self, "end_gaps", policy)
        self.validate()

    def validate(self) -> None:
        """Raise InvalidConfiguration unless matches are rewarded and the rest penalized."""
        _require_int("match_score", self.match_score)
        _require_int("mismatch_penalty", self.mismatch_penalty)
        _require_int("gap_penalty", self.gap_penalty)

        if self.match_score <= 0:
            raise InvalidConfiguration(
                f"match_score must be positive, got {self.match_score}"
            )
        if self.mismatch_penalty > 0:
            raise InvalidConfiguration(
                f"mismatch_penalty must be <= 0, got {self.mismatch_penalty}"
            )
        if self.gap_penalty > 0:
            raise InvalidConfiguration(
                f"gap_penalty must be <= 0, got {self.gap_penalty}"
            )
        if not isinstance(self.end_gaps, EndGapPolicy):
            raise InvalidConfiguration(f"Unknown end-gap policy: {self.end_gaps!r}")

    def substitution(self, residue_x: str, residue_y: str) -> int:
        """Score for aligning two residues against each other."""
        return self.match_score if residue_x == residue_y else self.mismatch_penalty


__all__ = ["EndGapPolicy", "ScoringScheme"]
