"""Name-keyed registry of view plugin classes.

Plugins register themselves with ``@register_plugin``; ``create_plugin``
builds a configured instance by name.
"""

from typing import Any, Dict, Optional, Type

from .base import BasePlugin

_REGISTRY: Dict[str, Type[BasePlugin]] = {}


def register_plugin(name: str):
    """Decorator that registers a plugin class under the given name.

    Usage:
        @register_plugin("view_fs")
        class ViewFsPlugin(BasePlugin):
            ...
    """
    def decorator(cls: Type[BasePlugin]):
        if not issubclass(cls, BasePlugin):
            raise TypeError(f"{cls.__name__} must be a subclass of BasePlugin")
        _REGISTRY[name] = cls
        return cls
    return decorator


def create_plugin(name: str, config: Optional[Dict[str, Any]] = None) -> BasePlugin:
    """Instantiate the plugin registered as *name* and apply *config* to it."""
    try:
        cls = _REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY)) or "none"
        raise KeyError(f"No plugin registered as '{name}' (known: {known})") from None
    plugin = cls()
    if config:
        plugin.configure(config)
    return plugin


def get_plugin_registry() -> Dict[str, Type[BasePlugin]]:
    """Return a copy of the current plugin registry."""
    return dict(_REGISTRY)


def clear_plugin_registry() -> None:
    """Clear the registry. Primarily for testing."""
    _REGISTRY.clear()
