# src/frenet/__init__.py

from .types import ReferenceSample, FrenetState, CartesianState
from .conversion import (
    cartesian_to_frenet,
    frenet_to_cartesian,
    calculate_theta,
    calculate_kappa,
    calculate_cartesian_point,
    calculate_lateral_derivative,
    calculate_second_order_lateral_derivative,
)

__all__ = [
    "ReferenceSample",
    "FrenetState",
    "CartesianState",
    "cartesian_to_frenet",
    "frenet_to_cartesian",
    "calculate_theta",
    "calculate_kappa",
    "calculate_cartesian_point",
    "calculate_lateral_derivative",
    "calculate_second_order_lateral_derivative",
]
