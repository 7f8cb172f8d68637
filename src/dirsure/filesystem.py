"""Blocking and non-blocking filesystem primitives used by the reconciler."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from collections.abc import Iterator
from contextlib import contextmanager

import anyio
import anyio.to_thread

from dirsure.errors import FilesystemError
from dirsure.path_state import PathState


logger = logging.getLogger(__name__)

# Owner rwx during creation so a restrictive final mode never blocks creating children.
CREATE_MODE_FLOOR = stat.S_IRWXU
DEFAULT_CREATE_MODE = 0o777


@contextmanager
def translate_os_errors() -> Iterator[None]:
    try:
        yield
    except FilesystemError:
        raise
    except OSError as error:
        raise FilesystemError.wrap(error) from error


def _create_mode(mode: int | None) -> int:
    if mode is None:
        return DEFAULT_CREATE_MODE
    return mode | CREATE_MODE_FLOOR


class SyncFilesystem:
    def stat(self, path: str, follow_symlinks: bool = True) -> PathState:
        with translate_os_errors():
            try:
                result = os.stat(path, follow_symlinks=follow_symlinks)
            except (FileNotFoundError, NotADirectoryError):
                return PathState.absent()
        return PathState.from_stat_result(result)

    def mkdir(self, path: str, mode: int | None = None) -> bool:
        """Create a single directory level. Returns False if a directory was already there."""
        with translate_os_errors():
            try:
                os.mkdir(path, _create_mode(mode))
            except FileExistsError:
                if not os.path.isdir(path):
                    raise
                logger.debug("Directory %s appeared before mkdir; keeping it", path)
                return False
        logger.debug("Created directory %s", path)
        return True

    def chmod(self, path: str, mode: int) -> None:
        with translate_os_errors():
            os.chmod(path, mode)
        logger.debug("Changed mode of %s to %o", path, mode)

    def unlink(self, path: str) -> None:
        with translate_os_errors():
            try:
                os.unlink(path)
            except FileNotFoundError:
                logger.debug("File %s already gone", path)
                return
        logger.debug("Removed file %s", path)

    def remove_tree(self, path: str) -> None:
        with translate_os_errors():
            try:
                shutil.rmtree(path)
            except FileNotFoundError:
                if os.path.lexists(path):
                    raise
                logger.debug("Directory %s already gone", path)
                return
        logger.debug("Removed directory tree %s", path)

    def list_children(self, path: str) -> list[str]:
        with translate_os_errors():
            return sorted(os.listdir(path))


class AsyncFilesystem:
    """Same surface as SyncFilesystem; every primitive is awaited on anyio."""

    async def stat(self, path: str, follow_symlinks: bool = True) -> PathState:
        with translate_os_errors():
            try:
                result = await anyio.Path(path).stat(follow_symlinks=follow_symlinks)
            except (FileNotFoundError, NotADirectoryError):
                return PathState.absent()
        return PathState.from_stat_result(result)

    async def mkdir(self, path: str, mode: int | None = None) -> bool:
        target = anyio.Path(path)
        with translate_os_errors():
            try:
                await target.mkdir(mode=_create_mode(mode))
            except FileExistsError:
                if not await target.is_dir():
                    raise
                logger.debug("Directory %s appeared before mkdir; keeping it", path)
                return False
        logger.debug("Created directory %s", path)
        return True

    async def chmod(self, path: str, mode: int) -> None:
        with translate_os_errors():
            await anyio.Path(path).chmod(mode)
        logger.debug("Changed mode of %s to %o", path, mode)

    async def unlink(self, path: str) -> None:
        with translate_os_errors():
            try:
                await anyio.Path(path).unlink()
            except FileNotFoundError:
                logger.debug("File %s already gone", path)
                return
        logger.debug("Removed file %s", path)

    async def remove_tree(self, path: str) -> None:
        with translate_os_errors():
            try:
                await anyio.to_thread.run_sync(shutil.rmtree, path)
            except FileNotFoundError:
                if await anyio.Path(path).exists() or await anyio.Path(path).is_symlink():
                    raise
                logger.debug("Directory %s already gone", path)
                return
        logger.debug("Removed directory tree %s", path)

    async def list_children(self, path: str) -> list[str]:
        with translate_os_errors():
            return sorted([entry.name async for entry in anyio.Path(path).iterdir()])
