from abc import ABC, abstractmethod
from src.types import Pose

class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Pose, goal: Pose) -> float:
        """统一接口：只接受当前位姿和目标位姿"""
        pass
