"""Algorithms for the project."""

from .base import PairwiseAligner
from .needleman_wunsch import Move, NeedlemanWunschAligner, align


__all__ = [
    "PairwiseAligner",
    "Move",
    "NeedlemanWunschAligner",
    "align",
]
