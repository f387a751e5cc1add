"""Async file-system primitives used by the view operations.

Thin wrappers over ``aiofiles`` so every disk access is an await point.
Errors are raised unchanged; the only translation is that deleting a
missing path counts as success.
"""

import asyncio
import os
import shutil
import stat as stat_mode
from pathlib import Path
from typing import Optional, Union

import aiofiles
import aiofiles.os

PathLike = Union[str, os.PathLike]


async def stat(path: PathLike) -> os.stat_result:
    """Return ``os.stat`` for *path*."""
    return await aiofiles.os.stat(path)


async def read_file(path: PathLike, encoding: Optional[str] = None) -> Union[str, bytes]:
    """Read a file, returning text when an encoding is given, bytes otherwise."""
    if encoding:
        async with aiofiles.open(path, mode="r", encoding=encoding) as f:
            return await f.read()
    async with aiofiles.open(path, mode="rb") as f:
        return await f.read()


async def write_file(
    path: PathLike,
    content: Union[str, bytes],
    encoding: Optional[str] = None,
) -> None:
    """Write *content* to *path*, creating parent directories and replacing any existing file.

    Bytes are written unchanged; text is encoded with *encoding* (UTF-8 by default).
    """
    file_path = Path(path)
    await aiofiles.os.makedirs(file_path.parent, exist_ok=True)
    if isinstance(content, bytes):
        async with aiofiles.open(file_path, mode="wb") as f:
            await f.write(content)
        return
    async with aiofiles.open(file_path, mode="w", encoding=encoding or "utf-8") as f:
        await f.write(content)


async def delete_file(path: PathLike) -> None:
    """Delete a file or directory tree. A missing path is not an error.

    Symlinks are removed, never followed.
    """
    try:
        info = await aiofiles.os.stat(path, follow_symlinks=False)
    except FileNotFoundError:
        return

    if stat_mode.S_ISDIR(info.st_mode):
        await asyncio.to_thread(shutil.rmtree, path)
    else:
        await aiofiles.os.remove(path)
