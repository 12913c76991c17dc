"""Nucleotide composition statistics."""

from __future__ import annotations

import math
from statistics import NormalDist
from typing import Iterable

from aligner.types import GCContent, ZTestResult

GC_BASES = frozenset("GC")
AT_BASES = frozenset("ATU")


def gc_content(residues: Iterable[str]) -> GCContent:
    """Percentage of G/C among the A/C/G/T/U residues; other codes are skipped."""
    gc_count = 0
    total = 0
    for residue in residues:
        base = residue.upper()
        if base in GC_BASES:
            gc_count += 1
            total += 1
        elif base in AT_BASES:
            total += 1

    if total == 0:
        return GCContent(percent=0.0, gc_count=0, total=0)
    return GCContent(percent=gc_count / total * 100.0, gc_count=gc_count, total=total)


def gc_z_test(first: GCContent, second: GCContent) -> ZTestResult:
    """Two-proportion Z-test on GC counts with a two-sided p-value."""
    if first.total == 0 or second.total == 0:
        raise ValueError("GC Z-test needs at least one A/C/G/T/U base per sequence.")

    p1 = first.gc_count / first.total
    p2 = second.gc_count / second.total
    pooled = (first.gc_count + second.gc_count) / (first.total + second.total)
    se = math.sqrt(pooled * (1.0 - pooled) * (1.0 / first.total + 1.0 / second.total))
    if se == 0.0:
        raise ValueError("Standard error is zero, cannot perform Z-test.")

    z_score = (p1 - p2) / se
    p_value = max(2.0 * (1.0 - NormalDist().cdf(abs(z_score))), 0.0)
    return ZTestResult(z_score=z_score, p_value=p_value)


__all__ = ["gc_content", "gc_z_test"]
