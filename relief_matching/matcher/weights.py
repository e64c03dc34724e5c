"""Cost and scoring constants for the matching engine.

The defaults reproduce the production weighting exactly. Weight files let
operators experiment with other constants without touching code.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator


class ScoringMode(str, Enum):
    """How accepted edges are turned into user-facing scores.

    COST_INVERSE: ``1 / (1 + cost)``, in (0, 1]. Used by global matching.
    WEIGHTED: ``round(0.6 * distance_score + 0.4 * urgency_score)``,
        nominally 0-100. Used by per-actor matching.
    """

    COST_INVERSE = "cost_inverse"
    WEIGHTED = "weighted"


class CostWeights(BaseModel):
    """Constants for the cost function and the weighted score.

    The cost constants are shared by both scoring modes. The weighted-score
    constants only apply to ScoringMode.WEIGHTED.
    """

    # cost = distance_km * distance_factor / max(urgency, 1)
    #        + (people_cap - min(quantity, people_cap)) * people_factor
    distance_factor: float = 0.7
    people_cap: int = 100
    people_factor: float = 0.003

    # weighted score
    distance_score_cap: float = 100.0
    urgency_points: float = 20.0
    distance_share: float = 0.6
    urgency_share: float = 0.4

    version: str = "1.0"

    @field_validator(
        'distance_factor', 'people_cap', 'people_factor', 'distance_score_cap',
        'urgency_points', 'distance_share', 'urgency_share',
    )
    @classmethod
    def non_negative(cls, v: float) -> float:
        """Negative constants could produce negative costs."""
        if v < 0:
            raise ValueError(f"Weight must be non-negative, got {v}")
        return v

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump()


DEFAULT_COST_WEIGHTS = CostWeights()


def _weights_format(path: Path) -> str:
    if path.suffix == '.json':
        return 'json'
    if path.suffix in ('.yaml', '.yml'):
        return 'yaml'
    raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")


def load_weights(filepath: Optional[str] = None) -> CostWeights:
    """Read a weight profile, or the production constants when no path is given.

    Keys missing from the file fall back to the production values, so a
    profile only needs the constants it changes.

    Raises:
        FileNotFoundError: the profile path does not exist
        ValueError: unknown extension or a constant fails validation
    """
    if not filepath:
        return DEFAULT_COST_WEIGHTS

    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Weights file not found: {filepath}")

    fmt = _weights_format(path)
    with open(path, 'r') as f:
        data = json.load(f) if fmt == 'json' else yaml.safe_load(f)

    return CostWeights(**(data or {}))


def save_weights(weights: CostWeights, filepath: str) -> None:
    """Write a weight profile that load_weights can read back."""
    path = Path(filepath)
    fmt = _weights_format(path)

    with open(path, 'w') as f:
        if fmt == 'json':
            json.dump(weights.to_dict(), f, indent=2)
        else:
            yaml.dump(weights.to_dict(), f, default_flow_style=False)
