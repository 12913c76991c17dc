"""Serialization utilities for scoring schemes (load and save)."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

import yaml

from aligner.errors import InvalidConfiguration
from aligner.types import EndGapPolicy, ScoringScheme

SCORING_KEYS = ("match_score", "mismatch_penalty", "gap_penalty")


def scoring_to_dict(scoring: ScoringScheme) -> Dict[str, Any]:
    """
    Convert a ScoringScheme into a plain dictionary suitable for YAML.
    """
    payload = asdict(scoring)
    payload["end_gaps"] = scoring.end_gaps.value
    return payload


def scoring_from_dict(payload: Dict[str, Any]) -> ScoringScheme:
    """Build a ScoringScheme from a mapping, optionally nested under 'scoring'."""
    if not isinstance(payload, dict):
        raise InvalidConfiguration(f"Expected a mapping of scoring values, got {payload!r}")

    params = payload.get("scoring", payload)
    if not isinstance(params, dict):
        raise InvalidConfiguration(f"'scoring' must be a mapping, got {params!r}")
    missing = [key for key in SCORING_KEYS if key not in params]
    if missing:
        raise InvalidConfiguration(f"scoring configuration missing keys: {missing}")

    return ScoringScheme(
        match_score=params["match_score"],
        mismatch_penalty=params["mismatch_penalty"],
        gap_penalty=params["gap_penalty"],
        end_gaps=params.get("end_gaps", EndGapPolicy.PENALIZED.value),
    )


def load_scoring(yaml_path: Path) -> ScoringScheme:
    """Load a ScoringScheme from a YAML file."""
    with Path(yaml_path).open("r", encoding="utf-8") as handle:
        try:
            payload = yaml.safe_load(handle)
        except yaml.YAMLError as e:
            raise InvalidConfiguration(f"Invalid YAML in {yaml_path}: {e}") from e
    return scoring_from_dict(payload)


def dump_scoring(scoring: ScoringScheme, yaml_path: Path) -> None:
    """Write a ScoringScheme to a YAML file under a 'scoring' key."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"scoring": scoring_to_dict(scoring)}, handle, sort_keys=False)


__all__ = ["scoring_to_dict", "scoring_from_dict", "load_scoring", "dump_scoring"]
