# src/frenet/conversion.py
"""
Cartesian <-> Frenet 状态转换.

所有函数都是纯函数, 一次只针对一个参考点.
调用方需保证 1 - kappa_r * d 远离 0, 这里不做保护: 接近奇点时结果发散,
恰好为 0 时直接抛出 ZeroDivisionError.
"""
import math

import numpy as np

from src.errors import PreconditionViolation
from src.types import normalize_angle
from .types import CartesianState, FrenetState, ReferenceSample

# 参考点弧长与状态弧长的匹配容差
STATION_TOLERANCE = 1.0e-6

# calculate_kappa 分母的数值稳定阈值
KAPPA_DENOMINATOR_EPS = 1.0e-8


def cartesian_to_frenet(ref: ReferenceSample, cart: CartesianState) -> FrenetState:
    """ref 必须是 cart 所在位置在参考线上的投影点"""
    dx = cart.x - ref.x
    dy = cart.y - ref.y

    cos_theta_r = math.cos(ref.theta)
    sin_theta_r = math.sin(ref.theta)

    # 叉乘符号: 正值表示在参考方向左侧
    cross_rd_nd = cos_theta_r * dy - sin_theta_r * dx
    d = math.copysign(math.hypot(dx, dy), cross_rd_nd)

    delta_theta = cart.theta - ref.theta
    tan_delta_theta = math.tan(delta_theta)
    cos_delta_theta = math.cos(delta_theta)

    one_minus_kappa_r_d = 1.0 - ref.kappa * d
    d_prime = one_minus_kappa_r_d * tan_delta_theta

    kappa_r_d_prime = ref.dkappa * d + ref.kappa * d_prime

    d_pprime = (-kappa_r_d_prime * tan_delta_theta
                + one_minus_kappa_r_d / cos_delta_theta / cos_delta_theta
                * (cart.kappa * one_minus_kappa_r_d / cos_delta_theta - ref.kappa))

    s_dot = cart.v * cos_delta_theta / one_minus_kappa_r_d

    delta_theta_prime = one_minus_kappa_r_d / cos_delta_theta * cart.kappa - ref.kappa
    s_ddot = (cart.a * cos_delta_theta
              - s_dot * s_dot * (d_prime * delta_theta_prime - kappa_r_d_prime)) / one_minus_kappa_r_d

    return FrenetState(ref.s, s_dot, s_ddot, d, d_prime, d_pprime)


def frenet_to_cartesian(ref: ReferenceSample, frenet: FrenetState) -> CartesianState:
    """
    速度 v 取模长 (v >= 0), 所以只对 s_dot >= 0 的状态可逆:
    s_dot < 0 的状态往返后得到 |s_dot|, s_ddot 也随之按前进方向解释.

    Raises:
        PreconditionViolation: ref.s 与 frenet.s 不匹配, 说明 ref 不是正确的投影点
    """
    if abs(ref.s - frenet.s) >= STATION_TOLERANCE:
        raise PreconditionViolation(
            f"reference station {ref.s} does not match state station {frenet.s}")

    cos_theta_r = math.cos(ref.theta)
    sin_theta_r = math.sin(ref.theta)

    x = ref.x - sin_theta_r * frenet.d
    y = ref.y + cos_theta_r * frenet.d

    one_minus_kappa_r_d = 1.0 - ref.kappa * frenet.d

    tan_delta_theta = frenet.d_prime / one_minus_kappa_r_d
    delta_theta = math.atan2(frenet.d_prime, one_minus_kappa_r_d)
    cos_delta_theta = math.cos(delta_theta)

    theta = normalize_angle(delta_theta + ref.theta)

    kappa_r_d_prime = ref.dkappa * frenet.d + ref.kappa * frenet.d_prime
    kappa = (((frenet.d_pprime + kappa_r_d_prime * tan_delta_theta)
              * cos_delta_theta * cos_delta_theta) / one_minus_kappa_r_d
             + ref.kappa) * cos_delta_theta / one_minus_kappa_r_d

    d_dot = frenet.d_prime * frenet.s_dot
    v = math.sqrt(one_minus_kappa_r_d * one_minus_kappa_r_d * frenet.s_dot * frenet.s_dot
                  + d_dot * d_dot)

    delta_theta_prime = one_minus_kappa_r_d / cos_delta_theta * kappa - ref.kappa
    a = (frenet.s_ddot * one_minus_kappa_r_d / cos_delta_theta
         + frenet.s_dot * frenet.s_dot / cos_delta_theta
         * (frenet.d_prime * delta_theta_prime - kappa_r_d_prime))

    return CartesianState(x, y, theta, kappa, v, a)


def calculate_theta(rtheta: float, rkappa: float, l: float, dl: float) -> float:
    """由横向偏移及其导数求航向角"""
    return normalize_angle(rtheta + math.atan2(dl, 1.0 - l * rkappa))


def calculate_kappa(rkappa: float, rdkappa: float, l: float, dl: float, ddl: float) -> float:
    """由横向偏移的一二阶导数求曲率; 分母过小时返回 0"""
    denominator = dl * dl + (1.0 - l * rkappa) * (1.0 - l * rkappa)
    if abs(denominator) < KAPPA_DENOMINATOR_EPS:
        return 0.0
    denominator = denominator ** 1.5
    numerator = (rkappa + ddl - 2.0 * l * rkappa * rkappa
                 - l * ddl * rkappa
                 + l * l * rkappa * rkappa * rkappa
                 + l * dl * rdkappa
                 + 2.0 * dl * dl * rkappa)
    return numerator / denominator


def calculate_cartesian_point(rtheta: float, rpoint, l: float) -> np.ndarray:
    """参考点沿法向偏移 l 后的笛卡尔坐标"""
    rx, ry = rpoint
    return np.array([rx - l * math.sin(rtheta), ry + l * math.cos(rtheta)])


def calculate_lateral_derivative(rtheta: float, theta: float, l: float, rkappa: float) -> float:
    return (1.0 - rkappa * l) * math.tan(theta - rtheta)


def calculate_second_order_lateral_derivative(rtheta: float, theta: float, rkappa: float,
                                              kappa: float, rdkappa: float, l: float) -> float:
    dl = calculate_lateral_derivative(rtheta, theta, l, rkappa)
    theta_diff = theta - rtheta
    cos_theta_diff = math.cos(theta_diff)
    return (-(rdkappa * l + rkappa * dl) * math.tan(theta_diff)
            + (1.0 - rkappa * l) / (cos_theta_diff * cos_theta_diff)
            * (kappa * (1.0 - rkappa * l) / cos_theta_diff - rkappa))
