# src/errors.py


class PlanningError(Exception):
    """几何内核异常基类"""


class PreconditionViolation(PlanningError):
    """
    调用方违反了前置条件，计算必须中止。
    例如 Frenet -> Cartesian 时参考点并不是该状态的投影点。
    """
