# src/types.py
import math
from dataclasses import dataclass


def normalize_angle(angle: float) -> float:
    """把角度归一化到 (-pi, pi]"""
    a = (angle + math.pi) % (2 * math.pi) - math.pi
    if a == -math.pi:
        return math.pi
    return a


@dataclass(frozen=True)
class Pose:
    """
    统一的车辆位姿定义 (不可变)
    """
    x: float             # [m]
    y: float             # [m]
    theta_rad: float     # [rad] 构造时归一化到 (-pi, pi]

    def __post_init__(self):
        object.__setattr__(self, 'theta_rad', normalize_angle(self.theta_rad))

    @classmethod
    def from_degrees(cls, x: float, y: float, theta_deg: float) -> "Pose":
        return cls(x, y, math.radians(theta_deg))

    def distance_to(self, other: "Pose") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)
