"""Pane 模块

提供 pane 层的核心组件：
- surface: SurfaceBinding 宿主 surface 绑定
- phrasing: 提示与通知文案
- interaction: PaneIO（tree-model 的交互请求对象）
- dispatcher: CommandDispatcher 命令分发
- pane: Pane
"""

from .dispatcher import CommandDispatcher
from .interaction import PaneIO
from .pane import Pane
from .phrasing import Action, cancel_notice, paths_message, prompt
from .surface import SurfaceBinding

__all__ = [
    # Surface
    "SurfaceBinding",
    # Phrasing
    "Action",
    "prompt",
    "cancel_notice",
    "paths_message",
    # Interaction
    "PaneIO",
    # Dispatch
    "CommandDispatcher",
    # Pane
    "Pane",
]
