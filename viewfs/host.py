"""Plugin chaining shared by the application, collections and views.

A plugin is any callable taking the host. If it returns a callable, the
host keeps it and runs it on every object it creates afterwards, which is
how an application-level plugin reaches individual views.
"""

import types
from typing import Any, Callable, Dict, List, Optional

PluginFn = Callable[[Any], Optional[Callable]]


class PluginHost:
    """Mixin holding a registration marker and a chain of plugins."""

    def __init__(self):
        self.registered: Dict[str, bool] = {}
        self._fns: List[PluginFn] = []

    @property
    def plugins(self) -> tuple[PluginFn, ...]:
        return tuple(self._fns)

    def is_registered(self, name: str, register: bool = True) -> bool:
        """Return True if *name* was registered on this host before.

        The first call with ``register=True`` records the name and returns
        False, so a plugin can guard against running twice.
        """
        if name in self.registered:
            return True
        if register:
            self.registered[name] = True
        return False

    def use(self, fn: PluginFn) -> "PluginHost":
        """Run a plugin on this host and keep it if it asks to be chained."""
        result = fn(self)
        if callable(result):
            self._fns.append(result)
        return self

    def run(self, target: "PluginHost") -> "PluginHost":
        """Run every chained plugin on *target*."""
        for fn in self._fns:
            target.use(fn)
        return target

    def define(self, name: str, fn: Callable) -> None:
        """Attach *fn* to this host as a bound method called *name*."""
        setattr(self, name, types.MethodType(fn, self))
