"""Pydantic model for the desired state of a directory."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dirsure.mode import PERMISSION_MASK, normalize_mode


class DirOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    exists: bool = True
    empty: bool = False  # ignored when exists is False
    mode: int | None = Field(default=None, ge=0, le=PERMISSION_MASK)

    @classmethod
    def build(
        cls,
        *,
        exists: bool | None = True,
        empty: bool | None = False,
        mode: str | int | None = None,
    ) -> "DirOptions":
        """Validate raw call arguments; a malformed mode raises InvalidModeError before any I/O.

        exists=None keeps the default; any falsy empty leaves contents alone.
        """
        normalized = normalize_mode(mode) if mode is not None else None
        return cls(exists=True if exists is None else bool(exists), empty=bool(empty), mode=normalized)
