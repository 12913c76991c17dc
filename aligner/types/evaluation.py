"""Report data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlignmentStats:
    """Column counts for a pairwise alignment."""

    matches: int
    mismatches: int
    gaps: int

    @property
    def total_mismatches(self) -> int:
        """Mismatches plus gap columns."""
        return self.mismatches + self.gaps


@dataclass(frozen=True)
class GCContent:
    """GC content of a nucleotide sequence."""

    percent: float
    gc_count: int
    total: int


@dataclass(frozen=True)
class ZTestResult:
    """Two-proportion Z-test outcome."""

    z_score: float
    p_value: float

    def is_significant(self, alpha: float = 0.05) -> bool:
        return self.p_value < alpha


__all__ = ["AlignmentStats", "GCContent", "ZTestResult"]
