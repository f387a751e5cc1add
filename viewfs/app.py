"""Minimal application and collection hosts for views.

Only what view plugins need: creating views, grouping them into named
collections, and carrying application-level plugins down to each view.
"""

import os
from typing import Any, Dict, Optional, Union

from .host import PluginHost
from .view import View


class Collection(PluginHost):
    """A named group of views."""

    def __init__(self, name: str, options: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.name = name
        self.options: Dict[str, Any] = dict(options or {})
        self.views: Dict[str, View] = {}

    def __repr__(self) -> str:
        return f"<Collection {self.name!r} views={len(self.views)}>"

    def __len__(self) -> int:
        return len(self.views)

    def add_view(self, path: Union[str, os.PathLike], **kwargs: Any) -> View:
        """Create a view, run this collection's plugins on it, and store it by path."""
        options = {**self.options, **(kwargs.pop("options", None) or {})}
        view = View(path, options=options, **kwargs)
        self.run(view)
        self.views[str(path)] = view
        return view

    def get_view(self, path: Union[str, os.PathLike]) -> Optional[View]:
        return self.views.get(str(path))


class App(PluginHost):
    """Owns collections and creates standalone views."""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.options: Dict[str, Any] = dict(options or {})
        self.collections: Dict[str, Collection] = {}

    def create(self, name: str, options: Optional[Dict[str, Any]] = None) -> Collection:
        """Create a named collection that inherits this app's plugins."""
        collection = Collection(name, options={**self.options, **(options or {})})
        self.run(collection)
        self.collections[name] = collection
        return collection

    def collection(self, name: str) -> Collection:
        try:
            return self.collections[name]
        except KeyError:
            raise KeyError(f"Unknown collection '{name}'") from None

    def view(self, path: Union[str, os.PathLike], **kwargs: Any) -> View:
        """Create a standalone view with this app's plugins applied."""
        options = {**self.options, **(kwargs.pop("options", None) or {})}
        view = View(path, options=options, **kwargs)
        self.run(view)
        return view
