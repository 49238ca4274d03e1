# RS 曲线距离 (Hybrid A*)
import math

from src.types import Pose
from src.planning.reeds_shepp.solver import ReedsSheppSolver
from .base import Heuristic

class ReedsSheppHeuristic(Heuristic):
    def __init__(self, turning_radius: float, solver: ReedsSheppSolver = None):
        # [关键] 依赖的信息在这里注入，搜索算法根本不需要知道 radius 的存在
        if not math.isfinite(turning_radius) or turning_radius <= 0:
            raise ValueError(f"turning_radius must be finite and positive, got {turning_radius}")
        self.radius = turning_radius
        self.solver = solver if solver is not None else ReedsSheppSolver()

    def estimate(self, current: Pose, goal: Pose) -> float:
        """无障碍条件下的最短可行路径长度 [m]"""
        path = self.solver.shortest_path(current, goal, self.radius)
        if path is None:
            # 数值异常时退化为欧氏距离, 保证启发值仍然可采纳
            return current.distance_to(goal)
        return path.physical_length(self.radius)
