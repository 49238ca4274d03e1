# [配置] 该模块独有的配置数据类
from dataclasses import dataclass, field
import numpy as np
import math


@dataclass
class VehicleConfig:
    """所有车辆通用的配置"""
    max_velocity: float = 2.0


@dataclass
class AckermannConfig(VehicleConfig):
    """
    阿克曼车辆几何参数配置
    求解器只消费派生出的最小转弯半径，不持有整车配置。
    """
    # --- 1. 基础几何参数 (核心) ---
    wheelbase: float = 2.5       # [m] 轴距
    width: float = 2.0           # [m] 车宽
    front_hang: float = 0.9      # [m] 前悬 (前轴中心到车头)
    rear_hang: float = 0.9       # [m] 后悬 (后轴中心到车尾)

    # --- 2. 运动学限制 ---
    max_steer_deg: float = 35.0  # [deg] 最大转向角

    # --- 3. 派生属性 (自动计算，外部只读) ---
    max_steer: float = field(init=False)
    min_turning_radius: float = field(init=False)    # [m] 后轴中心的最小转弯半径
    outline_coords: np.ndarray = field(init=False)   # 用于绘图的矩形框坐标(5x2)

    def __post_init__(self):
        if self.wheelbase <= 0:
            raise ValueError(f"wheelbase must be positive, got {self.wheelbase}")
        if not 0.0 < self.max_steer_deg < 90.0:
            raise ValueError(f"max_steer_deg must be in (0, 90), got {self.max_steer_deg}")

        # A. 角度转弧度
        self.max_steer = math.radians(self.max_steer_deg)

        # B. 自行车模型: R = L / tan(delta_max)
        self.min_turning_radius = self.wheelbase / math.tan(self.max_steer)

        # C. 预计算绘图轮廓 (相对于后轴中心)
        # x轴向前，y轴向左
        front_x = self.wheelbase + self.front_hang
        rear_x = -self.rear_hang
        left_y = self.width / 2.0
        right_y = -self.width / 2.0

        self.outline_coords = np.array([
            [front_x, right_y],
            [rear_x,  right_y],
            [rear_x,  left_y],
            [front_x, left_y],
            [front_x, right_y] # 闭合
        ])
