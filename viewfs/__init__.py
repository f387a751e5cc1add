"""viewfs - read, write, delete and move views on the file system."""

__version__ = "0.1.0"

from .app import App, Collection
from .config import ConfigManager
from .events import EventEmitter, FsEvent
from .options import FsOptions, merge_options
from .plugins import BasePlugin, ViewFsPlugin, view_fs
from .view import View

__all__ = [
    "App",
    "Collection",
    "View",
    "ConfigManager",
    "EventEmitter",
    "FsEvent",
    "FsOptions",
    "merge_options",
    "BasePlugin",
    "ViewFsPlugin",
    "view_fs",
]
