# src/planning/reeds_shepp/families.py
"""
Reeds-Shepp 曲线族的闭式解.

每个公式都在规范坐标下求解: 起点位于原点朝向 +x, 转弯半径为 1,
终点相对位姿为 (x, y, phi). 返回规范路径字上的带符号段长
(正 = 前进, 负 = 倒车); 任何反三角函数参数越界或段长符号不满足该族的档位模式时返回 None.

公式编号参考 Reeds & Shepp (1990) 第 8 节.
"""
import math
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .path import CandidatePath, Motion, make_word
from .symmetry import BACKWARDS, BASIC_SYMMETRIES, Symmetry

L, R, S = Motion.LEFT, Motion.RIGHT, Motion.STRAIGHT

# 符号判断的容差
ZERO = 10 * sys.float_info.epsilon

HALF_PI = 0.5 * math.pi

Lengths = Tuple[float, ...]
Formula = Callable[[float, float, float], Optional[Lengths]]


def mod2pi(angle: float) -> float:
    """映射到 [-pi, pi], 与 normalize_angle 不同, +pi 保持为 +pi, -pi 保持为 -pi"""
    v = math.fmod(angle, 2.0 * math.pi)
    if v < -math.pi:
        v += 2.0 * math.pi
    elif v > math.pi:
        v -= 2.0 * math.pi
    return v


def polar(x: float, y: float) -> Tuple[float, float]:
    return math.hypot(x, y), math.atan2(y, x)


def tau_omega(u: float, v: float, xi: float, eta: float, phi: float) -> Tuple[float, float]:
    delta = mod2pi(u - v)
    a = math.sin(u) - math.sin(delta)
    b = math.cos(u) - math.cos(delta) - 1.0
    t1 = math.atan2(eta * a - xi * b, xi * a + eta * b)
    t2 = 2.0 * (math.cos(delta) - math.cos(v) - math.cos(u)) + 3.0
    tau = mod2pi(t1 + math.pi) if t2 < 0 else mod2pi(t1)
    omega = mod2pi(tau - u + v - phi)
    return tau, omega


# ---------------------------------------------------------------- CSC

def lp_sp_lp(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.1: L+ S+ L+"""
    u, t = polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if t >= -ZERO:
        v = mod2pi(phi - t)
        if v >= -ZERO:
            return t, u, v
    return None


def lp_sp_rp(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.2: L+ S+ R+"""
    u1, t1 = polar(x + math.sin(phi), y - 1.0 - math.cos(phi))
    u1 = u1 * u1
    if u1 >= 4.0:
        u = math.sqrt(u1 - 4.0)
        t = mod2pi(t1 + math.atan2(2.0, u))
        v = mod2pi(t - phi)
        if t >= -ZERO and v >= -ZERO:
            return t, u, v
    return None


# ---------------------------------------------------------------- CCC

def lp_rm_l(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.3/8.4: L+ R- L"""
    u1, theta = polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if u1 <= 4.0:
        u = -2.0 * math.asin(0.25 * u1)
        t = mod2pi(theta + 0.5 * u + math.pi)
        v = mod2pi(phi - t + u)
        if t >= -ZERO and u <= ZERO:
            return t, u, v
    return None


# ---------------------------------------------------------------- CCCC

def lp_rup_lum_rm(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.7: L+ R+ L- R-, 中间两段等长"""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = 0.25 * (2.0 + math.hypot(xi, eta))
    if rho <= 1.0:
        u = math.acos(rho)
        t, v = tau_omega(u, -u, xi, eta, phi)
        if t >= -ZERO and v <= ZERO:
            return t, u, -u, v
    return None


def lp_rum_lum_rp(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.8: L+ R- L- R+"""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho = (20.0 - xi * xi - eta * eta) / 16.0
    if 0.0 <= rho <= 1.0:
        u = -math.acos(rho)
        if u >= -HALF_PI:
            t, v = tau_omega(u, u, xi, eta, phi)
            if t >= -ZERO and v >= -ZERO:
                return t, u, u, v
    return None


# ---------------------------------------------------------------- CCSC

def lp_rm_sm_lm(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.9: L+ R-(pi/2) S- L-"""
    rho, theta = polar(x - math.sin(phi), y - 1.0 + math.cos(phi))
    if rho >= 2.0:
        r = math.sqrt(rho * rho - 4.0)
        u = 2.0 - r
        t = mod2pi(theta + math.atan2(r, -2.0))
        v = mod2pi(phi - HALF_PI - t)
        if t >= -ZERO and u <= ZERO and v <= ZERO:
            return t, -HALF_PI, u, v
    return None


def lp_rm_sm_rm(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.10: L+ R-(pi/2) S- R-"""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho, theta = polar(-eta, xi)
    if rho >= 2.0:
        t = theta
        u = 2.0 - rho
        v = mod2pi(t + HALF_PI - phi)
        if t >= -ZERO and u <= ZERO and v <= ZERO:
            return t, -HALF_PI, u, v
    return None


# ---------------------------------------------------------------- CCSCC

def lp_rm_slm_rp(x: float, y: float, phi: float) -> Optional[Lengths]:
    """8.11: L+ R-(pi/2) S- L-(pi/2) R+"""
    xi = x + math.sin(phi)
    eta = y - 1.0 - math.cos(phi)
    rho, _ = polar(xi, eta)
    if rho >= 2.0:
        u = 4.0 - math.sqrt(rho * rho - 4.0)
        if u <= ZERO:
            t = mod2pi(math.atan2((4.0 - u) * xi - 2.0 * eta, -2.0 * xi + (u - 4.0) * eta))
            v = mod2pi(t - phi)
            if t >= -ZERO and v >= -ZERO:
                return t, -HALF_PI, u, -HALF_PI, v
    return None


@dataclass(frozen=True)
class FamilyEntry:
    """
    曲线族目录中的一项: 标签 + 规范路径字 + 闭式公式 + 对称变换.
    每一项都可以单独求值和测试.
    """
    group: str                      # CSC / CCC / CCCC / CCSC / CCSCC
    tag: str                        # 公式名, 例如 "LpSpLp"
    motions: Tuple[Motion, ...]     # 规范路径字 (变换前)
    formula: Formula
    symmetry: Symmetry

    def evaluate(self, x: float, y: float, phi: float) -> Optional[CandidatePath]:
        lengths = self.formula(*self.symmetry.apply(x, y, phi))
        if lengths is None:
            return None
        motions, lengths = self.symmetry.restore(self.motions, lengths)
        return CandidatePath(
            word=make_word(motions, lengths),
            total_length=sum(abs(l) for l in lengths),
            family=self.tag,
            symmetry=self.symmetry.name,
        )

    @property
    def name(self) -> str:
        return f"{self.group}/{self.tag}/{self.symmetry.name}"


def _expand(group: str, tag: str, motions: Sequence[Motion], formula: Formula,
            with_backwards: bool = False) -> Tuple[FamilyEntry, ...]:
    symmetries = list(BASIC_SYMMETRIES)
    if with_backwards:
        symmetries += [BACKWARDS.compose(sym) for sym in BASIC_SYMMETRIES]
    return tuple(FamilyEntry(group, tag, tuple(motions), formula, sym) for sym in symmetries)


# 目录顺序即平局时的优先顺序
CATALOG: Tuple[FamilyEntry, ...] = (
    _expand("CSC", "LpSpLp", (L, S, L), lp_sp_lp)
    + _expand("CSC", "LpSpRp", (L, S, R), lp_sp_rp)
    + _expand("CCC", "LpRmL", (L, R, L), lp_rm_l, with_backwards=True)
    + _expand("CCCC", "LpRupLumRm", (L, R, L, R), lp_rup_lum_rm)
    + _expand("CCCC", "LpRumLumRp", (L, R, L, R), lp_rum_lum_rp)
    + _expand("CCSC", "LpRmSmLm", (L, R, S, L), lp_rm_sm_lm, with_backwards=True)
    + _expand("CCSC", "LpRmSmRm", (L, R, S, R), lp_rm_sm_rm, with_backwards=True)
    + _expand("CCSCC", "LpRmSLmRp", (L, R, S, L, R), lp_rm_slm_rp)
)
