"""Tree-model factory resolution."""

import importlib

from ..errors import TreeModelLoadError
from ..telemetry import get_logger
from .base import TreeFactory

logger = get_logger(__name__)


def load_tree_factory(path: str | None) -> TreeFactory:
    """Resolve a tree-model factory from a dotted path.

    Args:
        path: "package.module:attribute" or "package.module.attribute"

    Returns:
        The callable found at path

    Raises:
        TreeModelLoadError: path is empty, not importable, or not callable
    """
    if not path:
        raise TreeModelLoadError(
            "no tree model configured (set g:finder_tree_model or $NVIM_FINDER_TREE_MODEL)"
        )

    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise TreeModelLoadError(f"invalid tree model path: {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TreeModelLoadError(f"cannot import {module_name!r}: {e}") from e

    factory = module
    for part in attr.split("."):
        try:
            factory = getattr(factory, part)
        except AttributeError as e:
            raise TreeModelLoadError(f"{module_name!r} has no attribute {attr!r}") from e

    if not callable(factory):
        raise TreeModelLoadError(f"tree model {path!r} is not callable")

    logger.debug(f"[TreeLoader] Resolved tree model factory: {path}")
    return factory
