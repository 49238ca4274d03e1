import logging
import time
import os
from typing import Any, List, Dict, Optional
from src.planning.interfaces import IPlannerObserver

class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def record_candidate(self, path: Any): pass
    def record_selection(self, path: Any): pass
    def record_sample(self, sample: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印，或者完全静默
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录所有可行候选、最终选择和采样点。
    这些信息主要用于曲线族统计和可视化 (Replay)。
    """
    def __init__(self):
        self.candidates: List[Any] = []
        self.selected: Optional[Any] = None
        self.samples: List[Any] = []

    def record_candidate(self, path: Any):
        self.candidates.append(path)

    def record_selection(self, path: Any):
        self.selected = path

    def record_sample(self, sample: Any):
        self.samples.append(sample)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式通常只关心结果和可视化，控制台输出保持简洁
        pass


# 所有 DebugObserver 共用的 Logger 名
DEBUG_LOGGER_NAME = "PlannerDebug"


class _SessionFilter(logging.Filter):
    """只放行属于某一个调试会话的记录"""
    def __init__(self, session: str):
        super().__init__()
        self.session = session

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, 'session', None) == self.session


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于详细分析一次求解为什么结果不对甚至失败。
    将详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        # 同一秒内可能创建多个实例，会话名里带上 id 区分
        self.session = f"{timestamp}_{id(self):x}"
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{self.session}.log")

        # 所有实例共用一个具名 Logger，每个实例只挂自己的文件 Handler
        base_logger = logging.getLogger(DEBUG_LOGGER_NAME)
        base_logger.setLevel(logging.DEBUG)

        self._handler = logging.FileHandler(self.log_file, encoding='utf-8')
        self._handler.setLevel(logging.DEBUG)
        self._handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        self._handler.addFilter(_SessionFilter(self.session))
        base_logger.addHandler(self._handler)

        self.logger = logging.LoggerAdapter(base_logger, {'session': self.session})
        self.logger.info("=== Debug Session Started ===")

    def record_candidate(self, path: Any):
        self.viz_observer.record_candidate(path)
        self.logger.debug(f"Candidate: {path}")

    def record_selection(self, path: Any):
        self.viz_observer.record_selection(path)
        self.logger.info(f"Selected: {path}")

    def record_sample(self, sample: Any):
        self.viz_observer.record_sample(sample)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        logging.getLogger(DEBUG_LOGGER_NAME).removeHandler(self._handler)
        self._handler.close()

    # Proxy properties for ExperimentObserver compatibility if needed by external tools
    @property
    def candidates(self): return self.viz_observer.candidates
    @property
    def selected(self): return self.viz_observer.selected
    @property
    def samples(self): return self.viz_observer.samples
