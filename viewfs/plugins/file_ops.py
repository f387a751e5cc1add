"""File operations plugin: read, write, delete and move for views.

Each operation is a coroutine attached to the view as a bound method.
File-system errors propagate to the caller unchanged, and events fire only
after the step they describe has succeeded.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .. import fs
from ..events import FsEvent
from ..options import OptionsArg, as_mapping, encoding_of, merge_options
from ..view import View
from .base import BasePlugin
from .registry import register_plugin

_log = logging.getLogger(__name__)

DestArg = Optional[Union[str, os.PathLike]]


async def read(view: View, options: OptionsArg = None) -> View:
    """Read ``view.path`` and store the result on ``view.contents``.

    Nothing is read when the view has no path, or when it already has
    contents and the ``read`` (force-read) option is off. Directories are
    left without contents.

    Args:
        view: The view to load.
        options: Mapping or ``FsOptions`` merged over ``view.options``, or
            an encoding string, which skips the merge and is handed
            straight to the loader.

    Returns:
        The same view.
    """
    _log.debug("reading %s", view.path)

    if isinstance(options, str):
        opts = merge_options(view.options)
    else:
        opts = merge_options(view.options, options)

    if view.path is None or (view.contents is not None and not opts.force_read):
        return view

    source = view.absolute
    info = await fs.stat(source)
    if stat.S_ISDIR(info.st_mode):
        return view

    # the encoding comes from what the caller passed, not the merged options
    view.contents = await fs.read_file(source, encoding_of(options))
    return view


async def write(view: View, dest: DestArg = None, options: OptionsArg = None) -> View:
    """Write ``view.contents`` into the *dest* directory.

    The file lands at ``dest/<view.relative>``, or ``dest/<view.basename>``
    with the ``flatten`` option. Contents are read first if they are not
    loaded yet. Afterwards ``view.path`` and ``view.dest`` point at the new
    location. With the ``move`` option the original source file is deleted
    once the write has succeeded.

    Loaded bytes are written back unchanged; text is encoded with the
    ``encoding`` option, UTF-8 by default.

    Raises:
        ValueError: The view has no path, no destination directory was
            given, set on the view, or set in the options, or the view has
            nothing to write.
        OSError: Reading, writing or deleting failed.
    """
    _log.debug("writing %s", view.path)

    opts = merge_options(view.options, options)
    source = _require_source(view, "write")

    await read(view, opts)

    dest_dir = dest if dest is not None else (view.dest or opts.dest)
    if dest_dir is None:
        raise ValueError(f"No destination directory for {view!r}")
    if view.contents is None:
        raise ValueError(f"{view!r} has no contents to write")

    segment = view.basename if opts.flatten else view.relative
    dest_path = Path(os.path.abspath(os.path.join(view.cwd, dest_dir, segment)))
    view.dest = str(dest_dir)
    view.path = dest_path

    await fs.write_file(dest_path, view.contents, opts.encoding)

    view.emit(FsEvent.WRITE, view, source, dest_path)

    if opts.move:
        if source == dest_path:
            _log.warning("moving %s onto itself, the written file will be deleted", source)
        await _delete_path(view, source)
    return view


async def delete(view: View, options: OptionsArg = None) -> None:
    """Delete ``view.path`` from the file system.

    A path that does not exist counts as deleted. A view without a path is
    left alone.
    """
    opts = merge_options(view.options, options)
    if view.path is None:
        _log.debug("nothing to delete, view has no path (%s)", opts)
        return
    await _delete_path(view, view.absolute)


async def move(view: View, dest: DestArg, options: OptionsArg = None) -> View:
    """Write the view into *dest* and delete the original source file.

    ``flatten`` defaults to on unless the view or call options turn it off.
    Emits ``write``, ``del`` and ``move``, in that order.
    """
    opts = merge_options({"flatten": True}, view.options, options, {"move": True})
    original = _require_source(view, "move")

    await write(view, dest, opts)

    view.emit(FsEvent.MOVE, view, original, view.path)
    return view


def _require_source(view: View, action: str) -> Path:
    if view.path is None:
        raise ValueError(f"Cannot {action} {view!r}: it has no path to derive a destination from")
    return view.absolute


async def _delete_path(view: View, path: Path) -> None:
    _log.debug("deleting %s", path)
    await fs.delete_file(path)
    view.emit(FsEvent.DEL, view, path)


@register_plugin("view_fs")
class ViewFsPlugin(BasePlugin):
    """Attach ``read``, ``write``, ``delete`` and ``move`` to views."""

    def __init__(self, config: Optional[dict[str, Any]] = None):
        self.defaults: dict[str, Any] = {}
        if config:
            self.configure(config)

    @property
    def name(self) -> str:
        return "view_fs"

    @property
    def description(self) -> str:
        return "Read, write, delete and move view files"

    def configure(self, config: dict) -> None:
        """Set default options applied beneath each view's own options.

        Accepts ``{"options": {...}, "dest": "..."}`` or a flat options mapping.
        """
        options = as_mapping(config.get("options", config))
        if config.get("dest") is not None:
            options["dest"] = config["dest"]
        self.defaults = options

    def get_operations(self) -> dict[str, Callable]:
        return {
            "read": read,
            "write": write,
            "delete": delete,
            "move": move,
        }

    def decorate(self, view: View) -> None:
        if self.defaults:
            view.options = {**self.defaults, **view.options}
        super().decorate(view)


def view_fs(config: Optional[dict[str, Any]] = None) -> ViewFsPlugin:
    """Return a plugin ready for ``app.use``."""
    return ViewFsPlugin(config)
