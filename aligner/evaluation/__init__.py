"""Evaluation module for the project."""

from .composition import gc_content, gc_z_test
from .metrics import (
    alignment_stats,
    stats_from_match_line,
    match_line,
    residue_differences,
    score_alignment,
)

__all__ = [
    "alignment_stats",
    "stats_from_match_line",
    "gc_content",
    "gc_z_test",
    "match_line",
    "residue_differences",
    "score_alignment",
    "metrics",
]
