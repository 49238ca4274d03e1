# src/planning/reeds_shepp/path.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from src.types import Pose


class Motion(Enum):
    STRAIGHT = "S"
    LEFT = "L"
    RIGHT = "R"


class Gear(Enum):
    FORWARD = 1
    REVERSE = -1


@dataclass(frozen=True)
class Segment:
    """路径字中的一段, 长度以转弯半径为单位"""
    motion: Motion
    gear: Gear
    length: float

    @property
    def signed_length(self) -> float:
        return self.length * self.gear.value

    def __str__(self):
        sign = "+" if self.gear is Gear.FORWARD else "-"
        return f"{self.motion.value}{sign}{self.length:.3f}"


PathWord = Tuple[Segment, ...]


def make_word(motions: Sequence[Motion], signed_lengths: Sequence[float]) -> PathWord:
    """由 (运动类型, 带符号长度) 生成路径字，符号即档位"""
    return tuple(
        Segment(motion, Gear.FORWARD if length >= 0.0 else Gear.REVERSE, abs(length))
        for motion, length in zip(motions, signed_lengths)
    )


@dataclass(frozen=True)
class CandidatePath:
    """
    一条可行的 Reeds-Shepp 路径。
    只有可行的曲线族才会被实例化，所以存在即可行。
    """
    word: PathWord
    total_length: float     # 转弯半径单位
    family: str = ""        # 例如 "LpSpLp"
    symmetry: str = ""      # 例如 "timeflip+reflect"

    def physical_length(self, radius: float) -> float:
        return self.total_length * radius

    @property
    def pattern(self) -> str:
        """如 'L+S+R-'，便于日志和统计"""
        return "".join(
            seg.motion.value + ("+" if seg.gear is Gear.FORWARD else "-")
            for seg in self.word
        )

    def __str__(self):
        return f"{self.pattern} ({self.total_length:.3f}) [{self.family}/{self.symmetry}]"


@dataclass(frozen=True)
class PathSample:
    pose: Pose
    gear: Gear
    curvature: float        # [1/m]


@dataclass(frozen=True)
class SampledPath:
    """离散化后的路径，样本按行驶顺序排列"""
    samples: Tuple[PathSample, ...]

    def __len__(self):
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def __getitem__(self, idx):
        return self.samples[idx]

    @property
    def poses(self) -> List[Pose]:
        return [s.pose for s in self.samples]

    @property
    def xs(self) -> np.ndarray:
        return np.array([s.pose.x for s in self.samples])

    @property
    def ys(self) -> np.ndarray:
        return np.array([s.pose.y for s in self.samples])

    @property
    def thetas(self) -> np.ndarray:
        return np.array([s.pose.theta_rad for s in self.samples])

    @property
    def curvatures(self) -> np.ndarray:
        return np.array([s.curvature for s in self.samples])

    @property
    def gears(self) -> np.ndarray:
        return np.array([s.gear.value for s in self.samples], dtype=int)

    def spacings(self) -> np.ndarray:
        """相邻样本间的欧氏距离"""
        return np.hypot(np.diff(self.xs), np.diff(self.ys))

    def length(self) -> float:
        return float(np.sum(self.spacings()))
