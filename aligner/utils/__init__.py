"""Utility functions for the project."""

from .fasta import read_fasta, read_fasta_sequence, write_fasta
from .serialization import scoring_to_dict, load_scoring, dump_scoring
from .output import (
    AlignmentRecord,
    format_alignment,
    write_alignment_output,
    read_alignment_output,
)
from .download import ensure_local_file

__all__ = [
    "read_fasta",
    "read_fasta_sequence",
    "write_fasta",
    "scoring_to_dict",
    "load_scoring",
    "dump_scoring",
    "AlignmentRecord",
    "format_alignment",
    "write_alignment_output",
    "read_alignment_output",
    "ensure_local_file",
]
