# src/planning/heuristics/__init__.py

from .base import Heuristic
from .euclidean import EuclideanHeuristic
from .reeds_shepp import ReedsSheppHeuristic


__all__ = [
    "Heuristic",
    "EuclideanHeuristic",
    "ReedsSheppHeuristic",
]
