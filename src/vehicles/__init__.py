# [入口] 负责暴露类，让外部调用更简洁

# src/vehicles/__init__.py

from .config import VehicleConfig, AckermannConfig

# 定义对外暴露的列表
__all__ = ["VehicleConfig", "AckermannConfig"]
