"""Telemetry - 统一日志和指标入口

提供统一的日志工厂和指标 facade，便于观测性追踪。

日志格式: [module:surface] msg
指标示例: command.dispatched, command.cancelled, pane.opened, session.panes
"""

import logging
import os
from collections import Counter

_LOG_FORMAT = "[%(name)s] %(message)s"
_ROOT_LOGGER = "nvimfinder"


def get_logger(name: str) -> logging.Logger:
    """获取带模块前缀的 logger

    Args:
        name: 模块名（通常使用 __name__）

    Returns:
        Logger 实例
    """
    return logging.getLogger(name)


def configure_logging(level: str) -> None:
    """设置包级日志级别

    宿主（pynvim）负责 handler 配置，这里只在没有 handler 时补一个。

    Args:
        level: 日志级别名（如 "INFO"、"DEBUG"）
    """
    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel(level.upper())
    if not root.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)


def format_pane_log(module: str, surface_name: str, msg: str) -> str:
    """格式化带 pane surface 名的日志消息

    Surface 名是完整路径，只保留最后一段（如 "finder-0"）。

    Args:
        module: 模块名
        surface_name: pane surface 标识
        msg: 日志消息

    Returns:
        格式化的消息: [module:finder-0] msg
    """
    short = os.path.basename(surface_name) if surface_name else "unknown"
    return f"[{module}:{short}] {msg}"


_MetricKey = tuple[str, tuple[tuple[str, str], ...]]


def _key(name: str, labels: dict[str, str] | None) -> _MetricKey:
    return name, tuple(sorted((labels or {}).items()))


def _render_key(key: _MetricKey) -> str:
    name, labels = key
    if not labels:
        return name
    return name + "{" + ",".join(f"{k}={v}" for k, v in labels) + "}"


class Metrics:
    """指标收集 facade

    进程内计数器与 gauge；标签按名排序，{"command": "remove"} 与
    同名不同序的标签视为同一序列。
    """

    def __init__(self):
        self._counters: Counter[_MetricKey] = Counter()
        self._gauges: dict[_MetricKey, float] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """递增计数器

        Args:
            name: 指标名（如 "command.cancelled"）
            labels: 可选标签（如 {"command": "remove"}）
            value: 递增值，默认 1
        """
        self._counters[_key(name, labels)] += value

    def gauge(self, name: str, value: float, labels: dict[str, str] | None = None) -> None:
        """设置 gauge 值（如 session.panes）"""
        self._gauges[_key(name, labels)] = value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self._counters[_key(name, labels)]

    def get_gauge(self, name: str, labels: dict[str, str] | None = None) -> float:
        return self._gauges.get(_key(name, labels), 0.0)

    def reset(self) -> None:
        """重置所有指标（用于测试）"""
        self._counters.clear()
        self._gauges.clear()

    def get_all_counters(self) -> dict[str, int]:
        """所有计数器，key 形如 command.dispatched{command=remove}"""
        return {_render_key(k): v for k, v in self._counters.items()}


# 全局指标实例
metrics = Metrics()
