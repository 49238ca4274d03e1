# src/planning/reeds_shepp/symmetry.py
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .path import Motion

_SWAP = {Motion.LEFT: Motion.RIGHT, Motion.RIGHT: Motion.LEFT, Motion.STRAIGHT: Motion.STRAIGHT}


@dataclass(frozen=True)
class Symmetry:
    """
    Reeds-Shepp 的对称变换, 三个对合变换两两可交换, 可以任意组合:

    - timeflip:  倒放时间, (x, y, phi) -> (-x, y, -phi), 所有段长取反 (前进 <-> 倒车)
    - reflect:   关于连线轴镜像, (x, y, phi) -> (x, -y, -phi), 左转 <-> 右转
    - backwards: 交换起终点, 在终点坐标系下重新表达起点, 段顺序反转

    用法: 先用 apply() 变换相对位姿, 在规范公式上求解, 再用 restore() 把结果映射回原问题。
    """
    timeflip: bool = False
    reflect: bool = False
    backwards: bool = False

    def apply(self, x: float, y: float, phi: float) -> Tuple[float, float, float]:
        if self.backwards:
            c, s = math.cos(phi), math.sin(phi)
            x, y = x * c + y * s, x * s - y * c
        if self.timeflip:
            x, phi = -x, -phi
        if self.reflect:
            y, phi = -y, -phi
        return x, y, phi

    def restore(self,
                motions: Sequence[Motion],
                lengths: Sequence[float]) -> Tuple[List[Motion], List[float]]:
        motions = list(motions)
        lengths = list(lengths)
        if self.timeflip:
            lengths = [-l for l in lengths]
        if self.reflect:
            motions = [_SWAP[m] for m in motions]
        if self.backwards:
            motions.reverse()
            lengths.reverse()
        return motions, lengths

    def compose(self, other: "Symmetry") -> "Symmetry":
        return Symmetry(
            timeflip=self.timeflip != other.timeflip,
            reflect=self.reflect != other.reflect,
            backwards=self.backwards != other.backwards,
        )

    @property
    def name(self) -> str:
        parts = [n for n, on in (("backwards", self.backwards),
                                 ("timeflip", self.timeflip),
                                 ("reflect", self.reflect)) if on]
        return "+".join(parts) if parts else "identity"


IDENTITY = Symmetry()
TIMEFLIP = Symmetry(timeflip=True)
REFLECT = Symmetry(reflect=True)
BACKWARDS = Symmetry(backwards=True)

# 每个基础曲线族都要在这四种变换下求解
BASIC_SYMMETRIES = (IDENTITY, TIMEFLIP, REFLECT, TIMEFLIP.compose(REFLECT))
