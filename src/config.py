# [关键] 全局配置定义

# src/config.py
from dataclasses import dataclass


@dataclass
class OpenSpaceConfig:
    step_size: float = 0.5          # [m] 离散化弧长步长
    debug_mode: bool = False
    log_dir: str = "logs/planning_debug"

    def __post_init__(self):
        if self.step_size <= 0:
            raise ValueError(f"step_size must be positive, got {self.step_size}")

    def make_observer(self):
        """debug_mode 下写文件日志，否则走高效模式"""
        # 延迟导入，避免 config 依赖可视化层
        from src.visualization.observers import DebugObserver, EfficientObserver
        if self.debug_mode:
            return DebugObserver(log_dir=self.log_dir)
        return EfficientObserver()
