# src/planning/reeds_shepp/__init__.py

from .path import Motion, Gear, Segment, CandidatePath, PathSample, SampledPath
from .symmetry import Symmetry
from .families import CATALOG, FamilyEntry
from .sampler import PathSampler
from .solver import ReedsSheppSolver

__all__ = [
    "Motion",
    "Gear",
    "Segment",
    "CandidatePath",
    "PathSample",
    "SampledPath",
    "Symmetry",
    "CATALOG",
    "FamilyEntry",
    "PathSampler",
    "ReedsSheppSolver",
]
