"""Host Adapters 模块

提供宿主适配器接口和数据结构：
- HostAdapter: 适配器抽象接口
- WindowInfo, BufferInfo: surface / buffer 快照
- WindowOptions, BufferOptions: pane surface 的显示选项
- create_adapter: 适配器工厂函数
"""

from .base import (
    BufferInfo,
    BufferOptions,
    Completion,
    HostAdapter,
    Side,
    WindowInfo,
    WindowOptions,
)
from .factory import create_adapter

__all__ = [
    # Interface
    "HostAdapter",
    "Side",
    "Completion",
    # Snapshots / options
    "WindowInfo",
    "BufferInfo",
    "WindowOptions",
    "BufferOptions",
    # Factory
    "create_adapter",
]
