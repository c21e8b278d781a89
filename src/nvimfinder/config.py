"""nvim-finder 配置

配置分为以下几类：
- 宿主变量：用户在编辑器中设置的 g: 变量名
- 默认值：变量未设置时的回退
- 日志/适配器：进程环境变量
"""

import os
from typing import Any, Callable

from pydantic import BaseModel, field_validator

from .errors import ConfigError

# === 宿主变量名 ===
VAR_BUFFER_NAME = "finder_buffer_name"
VAR_FILE_TYPE = "finder_file_type"
VAR_WIDTH = "finder_width"
VAR_TREE_MODEL = "finder_tree_model"

# === 默认值 ===
DEFAULT_BUFFER_NAME = "finder"
DEFAULT_FILE_TYPE = "finder"
DEFAULT_WIDTH = 30

# === Tree model ===
TREE_MODEL_ENV = "NVIM_FINDER_TREE_MODEL"  # fallback when g:finder_tree_model is unset

# === 日志配置 ===
LOG_LEVEL = os.environ.get("NVIM_FINDER_LOG_LEVEL", "INFO")

# === 交互配置 ===
YANK_REGISTER = '"'
CANCEL_SENTINEL = "\x1b<finder-cancel>"  # input() cancelreturn, never typed by a user


class FinderSettings(BaseModel):
    """Per-open pane settings.

    Empty strings and zero widths mean "unset" and fall back to the defaults,
    matching how the host reports unset variables.
    """

    buffer_name: str = DEFAULT_BUFFER_NAME
    file_type: str = DEFAULT_FILE_TYPE
    width: int = DEFAULT_WIDTH
    tree_model: str | None = None

    @field_validator("buffer_name", mode="before")
    @classmethod
    def _default_buffer_name(cls, value: Any) -> Any:
        return value or DEFAULT_BUFFER_NAME

    @field_validator("file_type", mode="before")
    @classmethod
    def _default_file_type(cls, value: Any) -> Any:
        return value or DEFAULT_FILE_TYPE

    @field_validator("width", mode="before")
    @classmethod
    def _default_width(cls, value: Any) -> Any:
        return value or DEFAULT_WIDTH

    @field_validator("width")
    @classmethod
    def _positive_width(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"width must be positive, got {value}")
        return value

    @field_validator("tree_model", mode="before")
    @classmethod
    def _blank_tree_model(cls, value: Any) -> Any:
        return value or None


def load_settings(get_var: Callable[[str], Any]) -> FinderSettings:
    """Resolve settings from host variables.

    Args:
        get_var: host variable reader, returns None for unset variables

    Returns:
        FinderSettings with defaults applied

    Raises:
        ConfigError: a variable is set to a value that cannot be used
    """
    raw = {
        "buffer_name": get_var(VAR_BUFFER_NAME),
        "file_type": get_var(VAR_FILE_TYPE),
        "width": get_var(VAR_WIDTH),
        "tree_model": get_var(VAR_TREE_MODEL) or os.environ.get(TREE_MODEL_ENV),
    }
    try:
        return FinderSettings(**raw)
    except ValueError as e:
        raise ConfigError(f"invalid finder settings: {e}") from e
