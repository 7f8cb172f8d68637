"""Immutable working-directory contexts."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TypeAlias, overload

from dirsure.models.dir_options import DirOptions
from dirsure.reconciler import run_async, run_sync

StrPath: TypeAlias = str | os.PathLike[str]


@dataclass(frozen=True)
class CwdContext:
    """
    A directory that relative paths are resolved against.
    With no base it follows the process working directory at call time.
    """

    base: str | None = None

    def __post_init__(self) -> None:
        if self.base is not None:
            object.__setattr__(self, "base", os.path.abspath(os.fspath(self.base)))

    @overload
    def cwd(self) -> str: ...

    @overload
    def cwd(self, part: StrPath, *parts: StrPath) -> CwdContext: ...

    def cwd(self, *parts: StrPath) -> str | CwdContext:
        if parts:
            return CwdContext(self.path(*parts))
        if self.base is None:
            return os.getcwd()
        return self.base

    def path(self, *parts: StrPath) -> str:
        return os.path.abspath(os.path.join(self.cwd(), *(os.fspath(part) for part in parts)))

    def dir(
        self,
        path: StrPath,
        *,
        exists: bool = True,
        empty: bool = False,
        mode: str | int | None = None,
    ) -> CwdContext:
        """Drive `path` into the requested state and return a context for it.

        With exists=False the path is removed and this context is returned unchanged.
        """
        options = DirOptions.build(exists=exists, empty=empty, mode=mode)
        target = self.path(path)
        run_sync(target, options)
        return self._after(target, options)

    async def dir_async(
        self,
        path: StrPath,
        *,
        exists: bool = True,
        empty: bool = False,
        mode: str | int | None = None,
    ) -> CwdContext:
        options = DirOptions.build(exists=exists, empty=empty, mode=mode)
        target = self.path(path)
        await run_async(target, options)
        return self._after(target, options)

    def _after(self, target: str, options: DirOptions) -> CwdContext:
        if options.exists:
            return CwdContext(target)
        return self
