"""Needleman-Wunsch pairwise sequence alignment."""

from .errors import AlignerError, InvalidConfiguration, InvalidInput
from .types import (
    AminoAcidSequence,
    EndGapPolicy,
    NucleotideSequence,
    ScoringScheme,
)
from .algorithms import NeedlemanWunschAligner, align

__version__ = "0.1.0"

__all__ = [
    "AlignerError",
    "InvalidConfiguration",
    "InvalidInput",
    "AminoAcidSequence",
    "NucleotideSequence",
    "EndGapPolicy",
    "ScoringScheme",
    "NeedlemanWunschAligner",
    "align",
]
