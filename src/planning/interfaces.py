from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class IPlannerObserver(ABC):
    """
    规划内核观察者接口
    用于解耦几何算法与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录候选路径与采样点用于可视化
    3. Debug: 详细日志记录用于问题排查

    观察者由调用方持有，每次调用一个实例，内核本身不保存任何状态。
    """

    @abstractmethod
    def record_candidate(self, path: Any):
        """记录一条可行的候选路径"""
        pass

    @abstractmethod
    def record_selection(self, path: Any):
        """记录最终选中的路径"""
        pass

    @abstractmethod
    def record_sample(self, sample: Any):
        """记录离散化得到的一个样本"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如位姿、半径等)
        """
        pass
