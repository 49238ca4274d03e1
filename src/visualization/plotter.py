# 绘图逻辑 (Matplotlib)

import math
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from src.types import Pose
from src.planning.reeds_shepp.path import SampledPath
from src.vehicles.config import AckermannConfig


def transform_points(local_points: np.ndarray, pose: Pose) -> np.ndarray:
    """
    [通用工具] 将局部坐标点变换到世界坐标系
    :param local_points: (N, 2) 数组
    :param pose: 车辆位姿 (x, y, theta)
    """
    c = math.cos(pose.theta_rad)
    s = math.sin(pose.theta_rad)

    world_points = np.empty_like(local_points)
    world_points[:, 0] = local_points[:, 0] * c - local_points[:, 1] * s + pose.x
    world_points[:, 1] = local_points[:, 0] * s + local_points[:, 1] * c + pose.y
    return world_points


class PathPlotter:
    """
    把 SampledPath 画出来: 前进段蓝色, 倒车段红色, 可选车身轮廓快照
    """
    def __init__(self, vehicle_config: Optional[AckermannConfig] = None):
        self.vehicle_config = vehicle_config

    def plot(self, sampled: SampledPath, start: Pose, end: Pose, ax=None, title: str = ""):
        if ax is None:
            _, ax = plt.subplots(figsize=(10, 10))

        xs, ys, gears = sampled.xs, sampled.ys, sampled.gears

        # 第 j 段运动 (点 j -> j+1) 的档位记录在样本 j+1 上，按档位切换处分段绘制
        motion_gears = gears[1:]
        boundaries = np.flatnonzero(np.diff(motion_gears)) + 1
        begin = 0
        for stop in list(boundaries) + [len(motion_gears)]:
            color = 'b-' if motion_gears[begin] > 0 else 'r-'
            ax.plot(xs[begin:stop + 1], ys[begin:stop + 1], color, linewidth=2)
            begin = stop

        ax.plot(xs, ys, 'k.', markersize=3, alpha=0.5)

        if self.vehicle_config is not None:
            sample_interval = max(1, len(sampled) // 10)
            for i in range(0, len(sampled), sample_interval):
                poly = transform_points(self.vehicle_config.outline_coords, sampled[i].pose)
                ax.add_patch(Polygon(poly, closed=True, fill=False, edgecolor='gray', alpha=0.5))

        for pose, style in ((start, 'g'), (end, 'r')):
            ax.arrow(pose.x, pose.y, 1.0 * math.cos(pose.theta_rad), 1.0 * math.sin(pose.theta_rad),
                     head_width=0.3, color=style, zorder=5)

        ax.set_title(title or "Reeds-Shepp Path")
        ax.set_xlabel("X [m]")
        ax.set_ylabel("Y [m]")
        ax.grid(True, linestyle=':', alpha=0.3)
        ax.set_aspect('equal')
        return ax

    def save(self, sampled: SampledPath, start: Pose, end: Pose, save_path: str, title: str = ""):
        fig, ax = plt.subplots(figsize=(10, 10))
        self.plot(sampled, start, end, ax=ax, title=title)
        fig.savefig(save_path)
        plt.close(fig)
        return save_path
