"""Exceptions raised when alignment inputs are rejected."""


class AlignerError(ValueError):
    """Base class for rejected alignment requests."""


class InvalidInput(AlignerError):
    """A sequence is empty or holds residues outside its alphabet."""


class InvalidConfiguration(AlignerError):
    """A scoring scheme or sequence type would not penalize as expected."""


__all__ = ["AlignerError", "InvalidInput", "InvalidConfiguration"]
