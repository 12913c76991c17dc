"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from aligner.types import AlignmentResult, ScoringScheme, SequenceType


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        x_seq: SequenceType,
        y_seq: SequenceType,
        scoring: ScoringScheme,
    ) -> AlignmentResult:
        """Align two sequences under the provided scoring scheme."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
