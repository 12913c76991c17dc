"""Functions for working with FASTA files."""

from typing import Iterable, List, Optional

import skbio.io
from skbio import Sequence

from aligner.errors import InvalidInput
from aligner.types import SequenceType, sequence_class


def sequence_from_skbio(record: Sequence, kind: str) -> SequenceType:
    """Convert a scikit-bio record to a typed sequence."""
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None
    seq_str = b"".join(record.values).decode()

    return sequence_class(kind)(
        identifier=identifier,
        residues=list(seq_str),
        description=description,
    )


def read_fasta(
    file_path: str, kind: str = "nucleotide", ids: Optional[List[str]] = None
) -> List[SequenceType]:
    """Read a FASTA file and return its records as sequences of the given kind."""
    sequences: List[SequenceType] = []
    try:
        for record in skbio.io.read(str(file_path), format="fasta"):
            if ids and record.metadata["id"] not in ids:
                continue
            sequences.append(sequence_from_skbio(record, kind))
    except skbio.io.FASTAFormatError as e:
        raise InvalidInput(f"Malformed FASTA file {file_path}: {e}") from e
    return sequences


def read_fasta_sequence(file_path: str, kind: str = "nucleotide") -> SequenceType:
    """Return the first record of a FASTA file.

    Header-only records are rejected by the reader as malformed FASTA.
    """
    sequences = read_fasta(file_path, kind)
    if not sequences:
        raise InvalidInput(f"No FASTA records found in {file_path}")
    return sequences[0]


def write_fasta(output_path: str, sequences: Iterable[SequenceType]) -> None:
    """Write sequences to a FASTA file, one line of residues per record."""
    with open(output_path, "w", encoding="utf-8") as f:
        for sequence in sequences:
            f.write(f"{sequence.header}\n")
            f.write(f"{''.join(sequence.residues)}\n")


__all__ = ["read_fasta", "read_fasta_sequence", "write_fasta", "sequence_from_skbio"]
