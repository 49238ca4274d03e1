# src/frenet/types.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceSample:
    """参考线上的一个采样点 (通常是车辆位置在参考线上的投影)"""
    s: float          # [m] 弧长
    x: float          # [m]
    y: float          # [m]
    theta: float      # [rad] 切线方向
    kappa: float      # [1/m] 曲率
    dkappa: float     # [1/m^2] 曲率对弧长的导数


@dataclass(frozen=True)
class FrenetState:
    """
    纵向 (s, ds/dt, d2s/dt2) + 横向 (d, dd/ds, d2d/ds2)
    横向导数是对弧长 s 求导, 不是对时间.
    """
    s: float
    s_dot: float
    s_ddot: float
    d: float
    d_prime: float
    d_pprime: float

    @property
    def s_condition(self):
        return self.s, self.s_dot, self.s_ddot

    @property
    def d_condition(self):
        return self.d, self.d_prime, self.d_pprime


@dataclass(frozen=True)
class CartesianState:
    x: float          # [m]
    y: float          # [m]
    theta: float      # [rad]
    kappa: float      # [1/m]
    v: float          # [m/s]
    a: float          # [m/s^2]
