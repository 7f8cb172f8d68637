"""Pydantic models for directory layout files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from dirsure.mode import normalize_mode


class LayoutEntry(BaseModel):
    path: str
    exists: bool = True
    empty: bool = False
    mode: int | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Any:
        # YAML reads 755 as decimal and 0755 as octal, so only quoted strings are unambiguous.
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("mode must be a quoted octal string such as '755'")
        return normalize_mode(value)


class LayoutSpec(BaseModel):
    root: str = "."
    directories: list[LayoutEntry] = Field(default_factory=list)
