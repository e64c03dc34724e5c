"""Greedy resource matching engine for relief offers and requests."""

from .cost import compute_cost
from .edges import build_edges
from .engine import MatchingEngine
from .geodesic import EARTH_RADIUS_KM, haversine
from .solver import cost_inverse_score, solve, weighted_score
from .weights import DEFAULT_COST_WEIGHTS, CostWeights, ScoringMode, load_weights, save_weights

__all__ = [
    "CostWeights",
    "DEFAULT_COST_WEIGHTS",
    "EARTH_RADIUS_KM",
    "MatchingEngine",
    "ScoringMode",
    "build_edges",
    "compute_cost",
    "cost_inverse_score",
    "haversine",
    "load_weights",
    "save_weights",
    "solve",
    "weighted_score",
]
