import math
from typing import List, Optional

from src.types import Pose
from src.planning.interfaces import IPlannerObserver
from src.visualization.observers import EfficientObserver
from .path import CandidatePath, Gear, Motion, PathSample, SampledPath

# 终点解析位置与给定终点的允许偏差
END_TOLERANCE = 0.01

# [m] 短于该弧长的段视为数值噪声, 不产生样本
MIN_SEGMENT_ARC = 1.0e-9


class _SampleBuilder:
    """单次调用内的只追加缓冲区"""

    def __init__(self):
        self._samples: List[PathSample] = []

    def append(self, pose: Pose, gear: Gear, curvature: float):
        self._samples.append(PathSample(pose, gear, curvature))

    def replace_last(self, pose: Pose):
        last = self._samples[-1]
        self._samples[-1] = PathSample(pose, last.gear, last.curvature)

    @property
    def last(self) -> PathSample:
        return self._samples[-1]

    def __len__(self):
        return len(self._samples)

    def build(self) -> SampledPath:
        return SampledPath(tuple(self._samples))


def advance(pose: Pose, motion: Motion, arc_length: float, radius: float) -> Pose:
    """
    单轮车模型沿一段运动精确积分 arc_length (带符号, 负值表示倒车).
    圆弧段使用闭式解, 不做欧拉积分, 所以段内没有累积误差.
    """
    x, y, theta = pose.x, pose.y, pose.theta_rad
    if motion is Motion.STRAIGHT:
        return Pose(x + arc_length * math.cos(theta),
                    y + arc_length * math.sin(theta),
                    theta)
    if motion is Motion.LEFT:
        new_theta = theta + arc_length / radius
        return Pose(x + radius * (math.sin(new_theta) - math.sin(theta)),
                    y - radius * (math.cos(new_theta) - math.cos(theta)),
                    new_theta)
    new_theta = theta - arc_length / radius
    return Pose(x - radius * (math.sin(new_theta) - math.sin(theta)),
                y + radius * (math.cos(new_theta) - math.cos(theta)),
                new_theta)


def curvature_of(motion: Motion, radius: float) -> float:
    if motion is Motion.LEFT:
        return 1.0 / radius
    if motion is Motion.RIGHT:
        return -1.0 / radius
    return 0.0


class PathSampler:
    """
    把 CandidatePath 离散化为间距不超过 step 的位姿序列.
    """

    def discretize(self,
                   path: CandidatePath,
                   start: Pose,
                   radius: float,
                   step: float,
                   end: Optional[Pose] = None,
                   observer: IPlannerObserver = None) -> SampledPath:
        """
        Args:
            path: 求解器给出的路径 (长度单位为转弯半径)
            start: 起点位姿
            radius: 转弯半径 [m]
            step: 最大弧长步长 [m]
            end: 目标位姿; 给定时最后一个样本被强制替换为它, 吸收浮点漂移

        Returns:
            SampledPath, 至少包含两个样本
        """
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        if not math.isfinite(radius) or radius <= 0.0:
            raise ValueError(f"turning radius must be finite and > 0, got {radius}")
        if observer is None:
            observer = EfficientObserver()

        driven = [seg for seg in path.word if seg.length * radius > MIN_SEGMENT_ARC]
        builder = _SampleBuilder()
        if driven:
            builder.append(start, driven[0].gear, curvature_of(driven[0].motion, radius))
        else:
            builder.append(start, Gear.FORWARD, 0.0)

        pose = start
        for seg in driven:
            arc = seg.length * radius
            n_steps = max(1, int(math.ceil(arc / step)))
            ds = seg.gear.value * arc / n_steps
            kappa = curvature_of(seg.motion, radius)
            seg_start = pose
            for i in range(1, n_steps + 1):
                pose = advance(seg_start, seg.motion, ds * i, radius)
                builder.append(pose, seg.gear, kappa)

        if end is not None:
            drift = max(abs(pose.x - end.x), abs(pose.y - end.y),
                        abs(math.remainder(pose.theta_rad - end.theta_rad, 2 * math.pi)))
            if drift > END_TOLERANCE:
                observer.log("Sampled path end deviates from target", level='WARN',
                             payload={'drift': drift, 'path': str(path)})
            if len(builder) == 1:
                builder.append(end, builder.last.gear, builder.last.curvature)
            else:
                builder.replace_last(end)
        elif len(builder) == 1:
            builder.append(start, builder.last.gear, builder.last.curvature)

        sampled = builder.build()
        for sample in sampled:
            observer.record_sample(sample)
        observer.log(f"Discretized {path.pattern} into {len(sampled)} samples", level='DEBUG')
        return sampled
