# src/planning/heuristics/euclidean.py
import math
from src.types import Pose
from .base import Heuristic

class EuclideanHeuristic(Heuristic):
    """
    欧氏距离启发式 (Holonomic Heuristic)
    忽略朝向与转弯半径，是 ReedsSheppHeuristic 的下界。
    """
    def estimate(self, current: Pose, goal: Pose) -> float:
        return math.hypot(current.x - goal.x, current.y - goal.y)
