"""Sequence types."""

from dataclasses import dataclass
from functools import lru_cache
from itertools import product
from typing import ClassVar, Dict, FrozenSet, List, Optional, Type
from abc import ABC

from skbio import DNA
from skbio.sequence import GeneticCode

from aligner.errors import InvalidConfiguration, InvalidInput

GAP = "-"
START_CODON = "ATG"
STOP_RESIDUE = "*"
UNKNOWN_RESIDUE = "X"

NUCLEOTIDE_ALPHABET: FrozenSet[str] = frozenset("ACGTURYSWKMBDHVN")
AMINO_ACID_ALPHABET: FrozenSet[str] = frozenset("ACDEFGHIKLMNPQRSTVWYBZXJUO*")


@dataclass(frozen=True)
class SequenceType(ABC):
    """Generic biological sequence with an identifier and optional description.

    Residues are stored exactly as given; the alphabet check ignores case.
    """

    kind: ClassVar[str] = ""
    alphabet: ClassVar[FrozenSet[str]] = frozenset()

    identifier: str
    residues: List[str]
    description: Optional[str] = None
    aligned: bool = False

    def __post_init__(self) -> None:
        # Accept plain strings as well as residue lists
        object.__setattr__(self, "residues", list(self.residues))
        self._validate()

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        joined_residues = "".join(self.residues)
        return (
            f"{class_name} (\n"
            f"   id: {self.identifier} ({'aligned' if self.aligned else 'unaligned'})\n"
            f"   description: {self.description}\n"
            f"   residues: {joined_residues}\n"
            f")"
        )

    @property
    def header(self) -> str:
        """FASTA-style header line for this sequence."""
        if self.description:
            return f">{self.identifier} {self.description}"
        return f">{self.identifier}"

    def _validate(self) -> None:
        """Validate the residues for this sequence type. Raise InvalidInput if invalid."""
        allowed = self.alphabet | {GAP} if self.aligned else self.alphabet
        invalid = {ch for ch in self.residues if ch.upper() not in allowed}
        if invalid:
            raise InvalidInput(
                f"Invalid {self.kind} residues in '{self.identifier}': "
                f"{sorted(invalid)}; allowed: {''.join(sorted(allowed))}"
            )


@lru_cache(maxsize=1)
def _standard_codon_table() -> Dict[str, str]:
    """Map every unambiguous codon to its residue under NCBI table 1."""
    code = GeneticCode.from_ncbi(1)
    table = {}
    for bases in product("TCAG", repeat=3):
        codon = "".join(bases)
        table[codon] = str(code.translate(DNA(codon)))
    return table


@dataclass(frozen=True)
class NucleotideSequence(SequenceType):
    """DNA or RNA sequence over the IUPAC nucleotide codes."""

    kind: ClassVar[str] = "nucleotide"
    alphabet: ClassVar[FrozenSet[str]] = NUCLEOTIDE_ALPHABET

    def translate(self) -> "AminoAcidSequence":
        """Translate from the first ATG up to (not including) the first stop codon.

        RNA input is read as DNA. Codons holding ambiguity codes become X and
        a trailing partial codon is dropped.
        """
        if self.aligned:
            raise InvalidInput("Cannot translate an aligned sequence.")

        dna = "".join(self.residues).upper().replace("U", "T")
        start = dna.find(START_CODON)
        if start == -1:
            raise InvalidInput(
                f"Start codon '{START_CODON}' not found in '{self.identifier}' "
                f"(length {len(dna)})."
            )

        table = _standard_codon_table()
        protein: List[str] = []
        for offset in range(start, len(dna) - 2, 3):
            amino_acid = table.get(dna[offset : offset + 3], UNKNOWN_RESIDUE)
            if amino_acid == STOP_RESIDUE:
                break
            protein.append(amino_acid)

        return AminoAcidSequence(
            identifier=self.identifier,
            residues=protein,
            description=self.description,
        )


@dataclass(frozen=True)
class AminoAcidSequence(SequenceType):
    """Protein sequence over the IUPAC amino-acid codes."""

    kind: ClassVar[str] = "aminoacid"
    alphabet: ClassVar[FrozenSet[str]] = AMINO_ACID_ALPHABET


SEQUENCE_CLASSES: Dict[str, Type[SequenceType]] = {
    NucleotideSequence.kind: NucleotideSequence,
    AminoAcidSequence.kind: AminoAcidSequence,
}


def sequence_class(kind: str) -> Type[SequenceType]:
    """Resolve a sequence type tag ('nucleotide' or 'aminoacid') to its class."""
    try:
        return SEQUENCE_CLASSES[kind.lower()]
    except KeyError:
        raise InvalidConfiguration(
            f"Invalid sequence type: '{kind}'; specify one of {sorted(SEQUENCE_CLASSES)}"
        ) from None


__all__ = [
    "GAP",
    "SequenceType",
    "NucleotideSequence",
    "AminoAcidSequence",
    "SEQUENCE_CLASSES",
    "sequence_class",
]
