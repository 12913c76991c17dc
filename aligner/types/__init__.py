"""Types for the project."""

from .sequence import (
    GAP,
    SequenceType,
    NucleotideSequence,
    AminoAcidSequence,
    sequence_class,
)
from .parameters import EndGapPolicy, ScoringScheme
from .alignment import Alignment, AlignmentResult
from .evaluation import AlignmentStats, GCContent, ZTestResult


__all__ = [
    "GAP",
    "SequenceType",
    "NucleotideSequence",
    "AminoAcidSequence",
    "sequence_class",
    "EndGapPolicy",
    "ScoringScheme",
    "Alignment",
    "AlignmentResult",
    "AlignmentStats",
    "GCContent",
    "ZTestResult",
]
