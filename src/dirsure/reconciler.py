"""Directory reconciliation.

The algorithm is a generator that yields filesystem ``Step`` requests and
receives each step's result back. ``run_sync`` and ``run_async`` drive the
same generator against a blocking or an awaitable filesystem, so both entry
points share one sequence of probes and mutations.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Generator
from dataclasses import dataclass
from typing import Any, TypeAlias

from dirsure.filesystem import AsyncFilesystem, SyncFilesystem
from dirsure.mode import mode_matches
from dirsure.models.dir_options import DirOptions
from dirsure.path_state import PathState


logger = logging.getLogger(__name__)

OWNER_WRITE_SEARCH = stat.S_IWUSR | stat.S_IXUSR


@dataclass(frozen=True)
class Step:
    op: str  # method name on the filesystem: stat, mkdir, chmod, unlink, remove_tree, list_children
    path: str
    args: tuple[Any, ...] = ()


Plan: TypeAlias = Generator[Step, Any, None]


def reconcile(path: str, options: DirOptions) -> Plan:
    # Removal looks at the link itself; assurance follows it to the directory it names.
    follow_symlinks = options.exists
    state: PathState = yield Step("stat", path, (follow_symlinks,))
    if not options.exists:
        yield from _remove(path, state)
        return
    if state.is_absent:
        # A dangling symlink reads as absent when followed.
        state = yield Step("stat", path, (False,))
    if state.is_file:
        yield Step("unlink", path)
        state = PathState.absent()
    if state.is_absent:
        yield from _create(path, options.mode)
    else:
        yield from _conform(path, state, options)


def _remove(path: str, state: PathState) -> Plan:
    if state.is_file:
        yield Step("unlink", path)
    elif state.is_directory:
        yield Step("remove_tree", path)


def _create(path: str, mode: int | None) -> Plan:
    missing = [path]
    current = path
    parent = os.path.dirname(current)
    while parent != current:
        parent_state: PathState = yield Step("stat", parent)
        if not parent_state.is_absent:
            break
        missing.append(parent)
        current, parent = parent, os.path.dirname(parent)

    # Modes that keep owner write and search are applied right away so a failed
    # call leaves finished segments; others wait until every child exists.
    deferred: list[str] = []
    for segment in reversed(missing):
        if not (yield Step("mkdir", segment, (mode,))) or mode is None:
            continue
        if mode & OWNER_WRITE_SEARCH == OWNER_WRITE_SEARCH:
            yield Step("chmod", segment, (mode,))
        else:
            deferred.append(segment)

    for segment in reversed(deferred):
        yield Step("chmod", segment, (mode,))


def _conform(path: str, state: PathState, options: DirOptions) -> Plan:
    if options.empty:
        children: list[str] = yield Step("list_children", path)
        for name in children:
            child = os.path.join(path, name)
            child_state: PathState = yield Step("stat", child, (False,))
            yield from _remove(child, child_state)
    if options.mode is not None and state.mode is not None and not mode_matches(state.mode, options.mode):
        yield Step("chmod", path, (options.mode,))


def run_sync(path: str, options: DirOptions, fs: SyncFilesystem | None = None) -> None:
    fs = fs or SyncFilesystem()
    logger.debug("Reconciling %s with %s", path, options)
    plan = reconcile(path, options)
    result: Any = None
    while True:
        try:
            step = plan.send(result)
        except StopIteration:
            return
        result = getattr(fs, step.op)(step.path, *step.args)


async def run_async(path: str, options: DirOptions, fs: AsyncFilesystem | None = None) -> None:
    fs = fs or AsyncFilesystem()
    logger.debug("Reconciling %s with %s", path, options)
    plan = reconcile(path, options)
    result: Any = None
    while True:
        try:
            step = plan.send(result)
        except StopIteration:
            return
        result = await getattr(fs, step.op)(step.path, *step.args)
