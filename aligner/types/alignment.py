"""Alignment types."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import numpy as np

from .sequence import SequenceType

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Alignment:
    """Pairwise alignment of two sequences."""

    name: Optional[str]
    aligned_sequences: List[SequenceType]
    original_sequences: List[SequenceType]

    def __post_init__(self):
        # Validate that this is a pairwise alignment
        if self.num_sequences != 2:
            raise ValueError("Exactly 2 aligned sequences are required.")

        # Validate that the number of aligned_sequences and original_sequences is the same
        if len(self.aligned_sequences) != len(self.original_sequences):
            raise ValueError(
                "aligned_sequences and original_sequences must have the same length."
            )

        # Validate that all aligned_sequences have aligned=True
        if any(s.aligned is False for s in self.aligned_sequences):
            raise ValueError("All aligned_sequences must have aligned=True.")

        # Validate that all original_sequences have aligned=False
        if any(s.aligned is True for s in self.original_sequences):
            raise ValueError("All original_sequences must have aligned=False.")

        # Validate that all aligned_sequences have the same length
        if any(len(s) != self.columns for s in self.aligned_sequences):
            raise ValueError("All aligned_sequences must have the same length.")

    @property
    def num_sequences(self) -> int:
        """Number of sequences in the alignment."""
        return len(self.aligned_sequences)

    @property
    def columns(self) -> int:
        """Number of columns in the alignment."""
        return len(self.aligned_sequences[0])

    @property
    def rows(self) -> Tuple[str, str]:
        """The two aligned rows as strings."""
        top, bottom = self.aligned_sequences
        return "".join(top.residues), "".join(bottom.residues)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        top, bottom = self.rows
        return (
            f"{class_name} (\n"
            f"   name: {self.name}\n"
            f"   columns: {self.columns}\n"
            f"      {top}\n"
            f"      {bottom}\n"
            f")"
        )


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment algorithm.

    Attributes:
        alignment: The pairwise alignment of two sequences
        score: Score of the traceback start cell
        end_cell: Matrix cell where traceback started
        path: Matrix cells visited by traceback, from end_cell to the stop cell
        score_matrix: Optional (m+1) x (n+1) score matrix, kept on request
    """

    alignment: Alignment
    score: int
    end_cell: Cell
    path: Tuple[Cell, ...]
    score_matrix: Optional[np.ndarray] = field(default=None, compare=False, repr=False)


__all__ = ["Cell", "Alignment", "AlignmentResult"]
