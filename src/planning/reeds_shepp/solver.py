import math
from typing import List, Optional, Sequence, Tuple

from src.types import Pose, normalize_angle
from src.planning.interfaces import IPlannerObserver
from src.visualization.observers import EfficientObserver
from .families import CATALOG, FamilyEntry
from .path import CandidatePath, SampledPath
from .sampler import PathSampler


class ReedsSheppSolver:
    """
    Reeds-Shepp 最短路径求解器.

    无状态: 同一个实例可以被任意多个线程并发调用.
    目录中每个 (曲线族, 对称变换) 组合都会被求值, 在所有可行解中取总长最短者;
    长度相同时保留目录中靠前的一项.
    """

    def __init__(self, catalog: Sequence[FamilyEntry] = CATALOG):
        self.catalog = tuple(catalog)

    @staticmethod
    def normalize(start: Pose, end: Pose, radius: float) -> Tuple[float, float, float]:
        """把终点变换到起点坐标系, 并按 1/radius 缩放"""
        _check_radius(radius)
        dx = end.x - start.x
        dy = end.y - start.y
        c = math.cos(start.theta_rad)
        s = math.sin(start.theta_rad)
        x = (c * dx + s * dy) / radius
        y = (-s * dx + c * dy) / radius
        phi = normalize_angle(end.theta_rad - start.theta_rad)
        return x, y, phi

    def candidate_paths(self,
                        start: Pose,
                        end: Pose,
                        radius: float,
                        observer: IPlannerObserver = None) -> List[CandidatePath]:
        """按目录顺序返回所有可行候选路径"""
        if observer is None:
            observer = EfficientObserver()

        x, y, phi = self.normalize(start, end, radius)
        observer.log("Relative pose", level='DEBUG', payload={'x': x, 'y': y, 'phi': phi})

        candidates = []
        for entry in self.catalog:
            path = entry.evaluate(x, y, phi)
            if path is None:
                continue
            observer.record_candidate(path)
            candidates.append(path)
        return candidates

    def shortest_path(self,
                      start: Pose,
                      end: Pose,
                      radius: float,
                      observer: IPlannerObserver = None) -> Optional[CandidatePath]:
        """
        求 start -> end 的最短 Reeds-Shepp 路径.

        Returns:
            最短的 CandidatePath (长度单位为转弯半径);
            所有组合都数值不可行时返回 None. 理论上不会发生, 出现即说明遇到了数值容差边界,
            调用方应跳过后续的离散化与校验.
        """
        if observer is None:
            observer = EfficientObserver()

        best: Optional[CandidatePath] = None
        for path in self.candidate_paths(start, end, radius, observer):
            if best is None or path.total_length < best.total_length:
                best = path

        if best is None:
            observer.log("No feasible Reeds-Shepp path", level='WARN',
                         payload={'start': start, 'end': end, 'radius': radius})
            return None

        observer.record_selection(best)
        observer.log(f"Shortest path: {best}", level='INFO',
                     payload={'length_m': best.physical_length(radius)})
        return best

    def sampled_shortest_path(self,
                              start: Pose,
                              end: Pose,
                              radius: float,
                              step: float,
                              observer: IPlannerObserver = None) -> Optional[SampledPath]:
        """求解并离散化; 求解失败时不产生任何路径 (返回 None)"""
        path = self.shortest_path(start, end, radius, observer)
        if path is None:
            return None
        return PathSampler().discretize(path, start, radius, step, end=end, observer=observer)


def _check_radius(radius: float):
    if not math.isfinite(radius) or radius <= 0.0:
        raise ValueError(f"turning radius must be finite and > 0, got {radius}")
