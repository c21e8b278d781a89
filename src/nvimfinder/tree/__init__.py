"""Tree 模块

Tree-model 协作方的接口定义：
- types: Operand、CommandResult 和 NavigationContext
- base: TreeModel / CommandIO 抽象接口
- loader: 按路径加载 tree-model 工厂
"""

from .base import CommandIO, TreeFactory, TreeModel
from .loader import load_tree_factory
from .types import (
    Cancelled,
    CommandResult,
    Completed,
    Failed,
    NavigationContext,
    Operand,
    OperandKind,
)

__all__ = [
    # Types
    "Operand",
    "OperandKind",
    "Completed",
    "Cancelled",
    "Failed",
    "CommandResult",
    "NavigationContext",
    # Interfaces
    "TreeModel",
    "CommandIO",
    "TreeFactory",
    # Loader
    "load_tree_factory",
]
