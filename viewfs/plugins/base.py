"""Base plugin interface for decorating views."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..host import PluginHost
from ..view import View

_log = logging.getLogger(__name__)


class BasePlugin(ABC):
    """Abstract base class for view plugins.

    Calling a plugin with a host applies it. On anything that is not a
    ``View`` the plugin returns itself, so a host can run it again on each
    view it creates. A ``PluginHost`` is marked as registered on the first
    call, and later calls on it return None.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique plugin identifier."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description of what this plugin does."""

    def configure(self, config: dict) -> None:
        """Apply plugin configuration.

        Override in subclasses to accept plugin-specific settings.
        Default implementation is a no-op.
        """

    @abstractmethod
    def get_operations(self) -> dict[str, Callable]:
        """Return a mapping of method_name -> function to attach to each view.

        Each function takes the view as its first argument.
        """

    def __call__(self, target: Any) -> Optional["BasePlugin"]:
        if not isinstance(target, View):
            if isinstance(target, PluginHost) and target.is_registered(self.name):
                return None
            return self

        if target.is_registered(self.name):
            return None

        self.decorate(target)
        return None

    def decorate(self, view: View) -> None:
        """Attach every operation to *view* as a bound method."""
        _log.debug("decorating %r with %s", view, self.name)
        for method_name, fn in self.get_operations().items():
            view.define(method_name, fn)
