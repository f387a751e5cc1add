"""The view entity that file operations are attached to."""

import os
from pathlib import Path
from typing import Any, Optional, Union

from .events import EventEmitter, FsEvent, Listener
from .host import PluginHost

Contents = Union[bytes, str]


class View(PluginHost):
    """A content-bearing entity with an optional file-system path.

    Path segments (``basename``, ``dirname``, ``extname``, ``stem``,
    ``relative``) are derived from ``path`` each time they are read, and
    assigning to one of them rewrites ``path``.
    """

    def __init__(
        self,
        path: Optional[Union[str, os.PathLike]] = None,
        contents: Optional[Contents] = None,
        *,
        content: Optional[str] = None,
        dest: Optional[Union[str, os.PathLike]] = None,
        options: Optional[dict[str, Any]] = None,
        base: Optional[Union[str, os.PathLike]] = None,
        cwd: Optional[Union[str, os.PathLike]] = None,
    ):
        super().__init__()
        self.path: Optional[Path] = Path(path) if path is not None else None
        self.contents: Optional[Contents] = contents if contents is not None else content
        self.dest: Optional[str] = str(dest) if dest is not None else None
        self.options: dict[str, Any] = dict(options or {})
        self._base = str(base) if base is not None else None
        self._cwd = str(cwd) if cwd is not None else None
        self.events = EventEmitter()

    def __repr__(self) -> str:
        return f"<View {str(self.path)!r}>" if self.path is not None else "<View>"

    # -- content ---------------------------------------------------------

    @property
    def content(self) -> Optional[str]:
        """``contents`` as text."""
        if self.contents is None:
            return None
        if isinstance(self.contents, bytes):
            return self.contents.decode("utf-8")
        return self.contents

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self.contents = value

    # -- path segments ---------------------------------------------------

    @property
    def cwd(self) -> str:
        return self._cwd or os.getcwd()

    @property
    def base(self) -> str:
        return self._base or self.cwd

    @base.setter
    def base(self, value: Optional[str]) -> None:
        self._base = str(value) if value is not None else None

    def _require_path(self) -> Path:
        if self.path is None:
            raise ValueError("View has no path")
        return self.path

    @property
    def absolute(self) -> Path:
        """``path`` resolved against ``cwd``."""
        path = self._require_path()
        return Path(os.path.abspath(os.path.join(self.cwd, path)))

    @property
    def basename(self) -> str:
        return self._require_path().name

    @basename.setter
    def basename(self, value: str) -> None:
        self.path = self._require_path().with_name(value)

    @property
    def stem(self) -> str:
        return self._require_path().stem

    @stem.setter
    def stem(self, value: str) -> None:
        self.path = self._require_path().with_stem(value)

    @property
    def extname(self) -> str:
        return self._require_path().suffix

    @extname.setter
    def extname(self, value: str) -> None:
        if value and not value.startswith("."):
            value = "." + value
        self.path = self._require_path().with_suffix(value)

    @property
    def dirname(self) -> str:
        return str(self._require_path().parent)

    @dirname.setter
    def dirname(self, value: Union[str, os.PathLike]) -> None:
        self.path = Path(value) / self.basename

    @property
    def relative(self) -> str:
        """``path`` relative to ``base``."""
        base = os.path.abspath(os.path.join(self.cwd, self.base))
        return os.path.relpath(self.absolute, base)

    # -- events ----------------------------------------------------------

    def on(self, event: Union[FsEvent, str], listener: Listener) -> Listener:
        return self.events.on(event, listener)

    def off(self, event: Union[FsEvent, str], listener: Listener) -> None:
        self.events.off(event, listener)

    def emit(self, event: Union[FsEvent, str], *args: Any) -> int:
        return self.events.emit(event, *args)
