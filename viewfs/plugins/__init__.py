"""Plugin system for decorating views."""

from .base import BasePlugin
from .file_ops import ViewFsPlugin, view_fs
from .registry import (
    clear_plugin_registry,
    create_plugin,
    get_plugin_registry,
    register_plugin,
)

__all__ = [
    "BasePlugin",
    "ViewFsPlugin",
    "view_fs",
    "register_plugin",
    "create_plugin",
    "get_plugin_registry",
    "clear_plugin_registry",
]
