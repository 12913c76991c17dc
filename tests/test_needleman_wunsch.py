"""Unit tests for NeedlemanWunschAligner (linear-gap global/semi-global alignment)."""

from __future__ import annotations

import random

import numpy as np
import pytest

from aligner.algorithms.needleman_wunsch import Move, NeedlemanWunschAligner, align
from aligner.errors import InvalidConfiguration, InvalidInput
from aligner.evaluation.metrics import score_alignment
from aligner.types import Alignment, EndGapPolicy, ScoringScheme
from aligner.types.sequence import AminoAcidSequence, NucleotideSequence


def _nt(residues: str, identifier: str = "seq") -> NucleotideSequence:
    """Build an unaligned nucleotide sequence from a string."""
    return NucleotideSequence(identifier=identifier, residues=list(residues))


def _scoring(
    match: int = 1,
    mismatch: int = -1,
    gap: int = -1,
    unpenalized: bool = False,
) -> ScoringScheme:
    return ScoringScheme(
        match_score=match,
        mismatch_penalty=mismatch,
        gap_penalty=gap,
        end_gaps=EndGapPolicy.from_flag(unpenalized),
    )


def _naive_score_matrix(x: str, y: str, scoring: ScoringScheme) -> np.ndarray:
    """Cell-by-cell recurrence used as an oracle for the vectorized fill."""
    m, n = len(x), len(y)
    gap = scoring.gap_penalty
    free = scoring.end_gaps.free_end_gaps
    M = np.zeros((m + 1, n + 1), dtype=np.int64)
    for i in range(1, m + 1):
        M[i][0] = 0 if free else i * gap
    for j in range(1, n + 1):
        M[0][j] = 0 if free else j * gap
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            M[i][j] = max(
                M[i - 1][j - 1] + scoring.substitution(x[i - 1], y[j - 1]),
                M[i - 1][j] + gap,
                M[i][j - 1] + gap,
            )
    return M


def _random_dna(rng: random.Random, length: int) -> str:
    return "".join(rng.choice("ACGT") for _ in range(length))


def test_textbook_global_alignment():
    """GATTACA vs GCATGCU with 1/-1/-1 scores 0 with the diagonal-first path."""
    result = align(_nt("GATTACA", "a"), _nt("GCATGCU", "b"), _scoring())

    assert result.score == 0
    assert result.alignment.rows == ("G-ATTACA", "GCA-TGCU")
    assert result.end_cell == (7, 7)
    assert result.path[0] == (7, 7)
    assert result.path[-1] == (0, 0)


def test_unpenalized_prefers_trailing_gaps_for_tied_end_cells():
    """AAA vs AAAAA with free ends scores three matches and ends at (3, 3)."""
    scoring = _scoring(match=2, mismatch=-1, gap=-2, unpenalized=True)
    result = align(_nt("AAA", "short"), _nt("AAAAA", "long"), scoring)

    assert result.score == 6
    assert result.end_cell == (3, 3)
    assert result.alignment.rows == ("AAA--", "AAAAA")


def test_empty_sequence_is_rejected():
    """An empty first sequence raises InvalidInput whatever the second holds."""
    aligner = NeedlemanWunschAligner()
    with pytest.raises(InvalidInput):
        aligner.align(_nt(""), _nt("ACGT"), _scoring())
    with pytest.raises(InvalidInput):
        aligner.align(_nt(""), _nt(""), _scoring())
    with pytest.raises(InvalidInput):
        aligner.align(_nt("ACGT"), _nt(""), _scoring())


def test_aligned_input_is_rejected():
    """Sequences that already carry gaps cannot be aligned again."""
    gapped = NucleotideSequence(identifier="g", residues=list("AC-T"), aligned=True)
    with pytest.raises(InvalidInput):
        align(gapped, _nt("ACT"), _scoring())


def test_invalid_match_score_rejected_before_matrix_allocation(monkeypatch):
    """A negative match score is refused before any matrix is built."""
    with pytest.raises(InvalidConfiguration):
        _scoring(match=-1)

    def _fail(*args, **kwargs):
        raise AssertionError("matrix allocated for invalid scoring")

    monkeypatch.setattr(NeedlemanWunschAligner, "_initialize_matrices", _fail)
    tampered = _scoring()
    object.__setattr__(tampered, "match_score", -1)

    with pytest.raises(InvalidConfiguration):
        NeedlemanWunschAligner().align(_nt("ACGT"), _nt("ACGT"), tampered)


def test_non_scoring_object_rejected():
    """Plain dictionaries are not accepted as scoring schemes."""
    with pytest.raises(InvalidConfiguration):
        align(_nt("A"), _nt("A"), {"match_score": 1})


def test_repeated_runs_are_identical():
    """Alignment is deterministic for fixed inputs."""
    x, y = _nt("ACGTTGCAAGT", "x"), _nt("AGTTCAGGT", "y")
    for unpenalized in (False, True):
        scoring = _scoring(unpenalized=unpenalized)
        first = align(x, y, scoring)
        second = align(x, y, scoring)
        assert first == second


def test_tie_break_prefers_up_over_left():
    """When up and left tie at the corner the up move is taken."""
    result = align(_nt("AC", "x"), _nt("CA", "y"), _scoring())

    assert result.score == -1
    assert result.alignment.rows == ("-AC", "CA-")
    assert result.path == ((2, 2), (1, 2), (0, 1), (0, 0))


def test_vectorized_fill_matches_naive_recurrence():
    """The row-wise fill reproduces the cell-by-cell recurrence exactly."""
    rng = random.Random(7)
    aligner = NeedlemanWunschAligner(keep_matrix=True)
    for trial in range(25):
        x = _random_dna(rng, rng.randint(1, 14))
        y = _random_dna(rng, rng.randint(1, 14))
        scoring = _scoring(
            match=rng.randint(1, 3),
            mismatch=rng.randint(-3, 0),
            gap=rng.randint(-3, 0),
            unpenalized=bool(trial % 2),
        )
        result = aligner.align(_nt(x), _nt(y), scoring)
        expected = _naive_score_matrix(x, y, scoring)
        np.testing.assert_array_equal(result.score_matrix, expected)


def test_score_matrix_boundaries_follow_policy():
    """Penalized boundaries grow by the gap penalty; free boundaries stay at zero."""
    aligner = NeedlemanWunschAligner(keep_matrix=True)

    penalized = aligner.align(_nt("ACG"), _nt("ACGTT"), _scoring(gap=-2))
    assert penalized.score_matrix.shape == (4, 6)
    assert penalized.score_matrix[0, 0] == 0
    assert list(penalized.score_matrix[0, :]) == [0, -2, -4, -6, -8, -10]
    assert list(penalized.score_matrix[:, 0]) == [0, -2, -4, -6]

    free = aligner.align(_nt("ACG"), _nt("ACGTT"), _scoring(gap=-2, unpenalized=True))
    assert not free.score_matrix[0, :].any()
    assert not free.score_matrix[:, 0].any()


def test_matrix_not_kept_by_default():
    """Results drop the score matrix unless asked to keep it."""
    assert align(_nt("ACG"), _nt("AG"), _scoring()).score_matrix is None


def test_reported_score_matches_emitted_columns():
    """Recomputing the score from the aligned rows gives the reported score."""
    rng = random.Random(11)
    for trial in range(40):
        x = _random_dna(rng, rng.randint(1, 20))
        y = _random_dna(rng, rng.randint(1, 20))
        scoring = _scoring(
            match=rng.randint(1, 3),
            mismatch=rng.randint(-3, 0),
            gap=rng.randint(-3, -1),
            unpenalized=bool(trial % 2),
        )
        result = align(_nt(x, "x"), _nt(y, "y"), scoring)
        assert score_alignment(result.alignment, scoring) == result.score


def test_rows_have_equal_length_and_preserve_residues():
    """Both rows have the same length, at least the longer input, and drop no residue."""
    rng = random.Random(3)
    for trial in range(30):
        x = _random_dna(rng, rng.randint(1, 15))
        y = _random_dna(rng, rng.randint(1, 15))
        result = align(_nt(x), _nt(y), _scoring(unpenalized=bool(trial % 2)))
        top, bottom = result.alignment.rows

        assert len(top) == len(bottom)
        assert len(top) >= max(len(x), len(y))
        assert top.replace("-", "") == x
        assert bottom.replace("-", "") == y
        assert not any(a == "-" and b == "-" for a, b in zip(top, bottom))


def test_traceback_path_is_monotonic():
    """Every traceback step moves up, left or diagonally by exactly one cell."""
    rng = random.Random(5)
    for trial in range(20):
        x = _random_dna(rng, rng.randint(1, 12))
        y = _random_dna(rng, rng.randint(1, 12))
        unpenalized = bool(trial % 2)
        result = align(_nt(x), _nt(y), _scoring(unpenalized=unpenalized))

        for (i, j), (next_i, next_j) in zip(result.path, result.path[1:]):
            assert (i - next_i, j - next_j) in {(1, 1), (1, 0), (0, 1)}

        last_i, last_j = result.path[-1]
        if unpenalized:
            assert last_i == 0 or last_j == 0
        else:
            assert (last_i, last_j) == (0, 0)


def test_swapping_inputs_keeps_the_score():
    """Aligning B against A scores the same as A against B, and both row sets are optimal."""
    rng = random.Random(13)
    for trial in range(20):
        x = _random_dna(rng, rng.randint(1, 15))
        y = _random_dna(rng, rng.randint(1, 15))
        scoring = _scoring(gap=-2, unpenalized=bool(trial % 2))
        forward = align(_nt(x, "x"), _nt(y, "y"), scoring)
        backward = align(_nt(y, "y"), _nt(x, "x"), scoring)
        assert forward.score == backward.score

        top, bottom = backward.alignment.rows
        assert top.replace("-", "") == y
        assert bottom.replace("-", "") == x
        assert score_alignment(backward.alignment, scoring) == forward.score

        # the forward rows, read with the roles exchanged, score the same
        transposed = Alignment(
            name="transposed",
            aligned_sequences=list(reversed(forward.alignment.aligned_sequences)),
            original_sequences=list(reversed(forward.alignment.original_sequences)),
        )
        assert score_alignment(transposed, scoring) == backward.score


def test_free_end_gaps_reward_exact_substring():
    """A substring scores length * match with free ends and strictly less otherwise."""
    short, long = _nt("GATTACA", "short"), _nt("CCGATTACAGG", "long")

    free = align(short, long, _scoring(unpenalized=True))
    assert free.score == 7
    assert free.alignment.rows == ("--GATTACA--", "CCGATTACAGG")

    penalized = align(short, long, _scoring())
    assert penalized.score < free.score
    assert penalized.score == 3


def test_free_end_cell_in_last_column():
    """A longer first sequence ends traceback in the last column."""
    scoring = _scoring(unpenalized=True)
    result = align(_nt("TTACGTT", "long"), _nt("ACG", "short"), scoring)

    assert result.end_cell == (5, 3)
    assert result.score == 3
    assert result.alignment.rows == ("TTACGTT", "--ACG--")


def test_comparison_is_case_sensitive():
    """Lowercase and uppercase residues are different symbols."""
    result = align(_nt("acgt"), _nt("ACGT"), _scoring())
    assert result.score == -4


def test_amino_acid_alignment_keeps_sequence_type():
    """Aligned rows keep the type and identifiers of their inputs."""
    x = AminoAcidSequence(identifier="p1", residues=list("MKTAYIAK"))
    y = AminoAcidSequence(identifier="p2", residues=list("MKAYIK"))
    result = align(x, y, _scoring(gap=-2))

    aligned_x, aligned_y = result.alignment.aligned_sequences
    assert isinstance(aligned_x, AminoAcidSequence)
    assert aligned_x.identifier == "p1"
    assert aligned_y.identifier == "p2"
    assert result.alignment.original_sequences == [x, y]
    assert result.alignment.name == "NW_p1_vs_p2"


def test_move_codes_are_ordered_for_tie_breaking():
    """Move codes list diagonal before up before left."""
    assert Move.STOP < Move.DIAGONAL < Move.UP < Move.LEFT
