"""Option handling for view file operations.

View-level options live in a plain mapping on the view. Every operation
merges them with whatever the caller passed, call-time values winning, and
works from the resulting ``FsOptions``.
"""

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Union

# Accepted spellings for the force-read flag
_FORCE_READ_KEYS = ("read", "force_read", "forceRead")


@dataclass(frozen=True)
class FsOptions:
    """Resolved options for a single operation."""

    force_read: bool = False
    move: bool = False
    flatten: bool = False
    dest: Optional[str] = None
    encoding: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FsOptions":
        """Build options from a mapping, ignoring keys that are not recognized."""
        force_read = False
        for key in _FORCE_READ_KEYS:
            if key in data:
                force_read = data[key] is True
        dest = data.get("dest")
        return cls(
            force_read=force_read,
            move=bool(data.get("move", False)),
            flatten=bool(data.get("flatten", False)),
            dest=str(dest) if dest is not None else None,
            encoding=data.get("encoding"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


OptionsArg = Union[None, str, Mapping[str, Any], FsOptions]


def as_mapping(options: OptionsArg) -> dict[str, Any]:
    """Normalize a call-time options argument to a plain dict.

    A string is an encoding shorthand and becomes ``{"encoding": value}``.
    An ``FsOptions`` is already resolved, so every one of its fields is
    returned and it replaces whatever it is merged over.
    """
    if options is None:
        return {}
    if isinstance(options, FsOptions):
        return options.to_dict()
    if isinstance(options, str):
        return {"encoding": options}
    if isinstance(options, Mapping):
        return dict(options)
    raise TypeError(
        f"options must be a mapping, FsOptions or encoding string, not {type(options).__name__}"
    )


def merge_options(*layers: OptionsArg) -> FsOptions:
    """Merge option layers left to right; later layers override earlier ones."""
    merged: dict[str, Any] = {}
    for layer in layers:
        data = as_mapping(layer)
        # a later spelling of force-read replaces any earlier spelling
        if any(key in data for key in _FORCE_READ_KEYS):
            for key in _FORCE_READ_KEYS:
                merged.pop(key, None)
        merged.update(data)
    return FsOptions.from_mapping(merged)


def encoding_of(options: OptionsArg) -> Optional[str]:
    """Return the encoding carried by a raw call-time options argument."""
    if isinstance(options, str):
        return options
    if isinstance(options, FsOptions):
        return options.encoding
    if isinstance(options, Mapping):
        return options.get("encoding")
    return None
