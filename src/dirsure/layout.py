"""Layout file loading and application."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from dirsure.context import CwdContext
from dirsure.errors import LayoutError
from dirsure.models.layout_spec import LayoutSpec


logger = logging.getLogger(__name__)


def load_layout(path: Path) -> LayoutSpec:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as error:
        raise LayoutError(f"Cannot read layout file {path}: {error}") from error
    except yaml.YAMLError as error:
        raise LayoutError(f"Layout file {path} is not valid YAML: {error}") from error
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise LayoutError(f"Layout file {path} must contain a mapping, got {type(raw).__name__}.")
    try:
        layout = LayoutSpec.model_validate(raw)
    except ValidationError as error:
        raise LayoutError(f"Invalid layout file {path}: {error}") from error
    logger.debug("Loaded layout %s with %d entries", path, len(layout.directories))
    return layout


def apply_layout(layout: LayoutSpec, context: CwdContext | None = None) -> list[CwdContext]:
    """
    Reconciles every entry in order, relative to the layout root.
    Returns the context each entry produced.
    """
    root = (context or CwdContext()).cwd(layout.root)
    results: list[CwdContext] = []
    for entry in layout.directories:
        results.append(root.dir(entry.path, exists=entry.exists, empty=entry.empty, mode=entry.mode))
    return results


async def apply_layout_async(layout: LayoutSpec, context: CwdContext | None = None) -> list[CwdContext]:
    # Sequential: entries may nest inside one another.
    root = (context or CwdContext()).cwd(layout.root)
    results: list[CwdContext] = []
    for entry in layout.directories:
        results.append(await root.dir_async(entry.path, exists=entry.exists, empty=entry.empty, mode=entry.mode))
    return results
