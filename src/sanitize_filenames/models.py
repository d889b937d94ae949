"""sanitize_filenames data models

Uses Pydantic for the run configuration and dataclasses for rename events.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_REPLACEMENT = "_"

# Characters that may never be used as the replacement
ILLEGAL_REPLACEMENTS = {"/"}


class SanitizeMode(str, Enum):
    """Sanitization mode"""

    LEGACY = "legacy"  # punctuation blocklist
    FULL = "full"  # ASCII alphanumeric allowlist


class Config(BaseModel):
    """Resolved configuration for one invocation"""

    model_config = ConfigDict(frozen=True)

    recursive: bool = False
    dry_run: bool = False
    replacement: str = DEFAULT_REPLACEMENT
    full_sanitize: bool = False
    targets: list[str] = Field(default_factory=list)

    @field_validator("replacement")
    @classmethod
    def check_replacement(cls, value: str) -> str:
        if value == "":
            raise ValueError("Replacement character cannot be empty")
        if len(value) != 1:
            raise ValueError("Replacement character must be a single character")
        if value in ILLEGAL_REPLACEMENTS:
            raise ValueError(f"Replacement character '{value}' is not allowed")
        return value

    @field_validator("targets")
    @classmethod
    def drop_dot_targets(cls, value: list[str]) -> list[str]:
        return [target for target in value if target not in (".", "..")]

    @property
    def mode(self) -> SanitizeMode:
        return SanitizeMode.FULL if self.full_sanitize else SanitizeMode.LEGACY


# ============ Rename events ============


class RenameEventKind(str, Enum):
    """What happened to a single path"""

    UNCHANGED = "unchanged"  # sanitized name equals the current name
    MISSING = "missing"  # source path does not exist
    COLLISION = "collision"  # target path already exists
    RENAMED = "renamed"
    WOULD_RENAME = "would_rename"  # dry run
    FAILED = "failed"  # follows the RENAMED event of a rename that raised


@dataclass(frozen=True)
class RenameEvent:
    """One rename decision"""

    kind: RenameEventKind
    old: str
    new: str

    @property
    def message(self) -> str:
        """Human readable report line"""
        if self.kind is RenameEventKind.UNCHANGED:
            return f"Old name and new name are the same for '{self.old}'.  Not changing"
        if self.kind is RenameEventKind.MISSING:
            return f"Old file name '{self.old}' does not exist.  Skipping"
        if self.kind is RenameEventKind.COLLISION:
            return f"New file name '{self.new}' already exists!  Skipping"
        if self.kind is RenameEventKind.WOULD_RENAME:
            return f"Would change '{self.old}' to '{self.new}'"
        if self.kind is RenameEventKind.FAILED:
            return f"Failed to change '{self.old}' to '{self.new}'"
        return f"Changing '{self.old}' to '{self.new}'"


@dataclass
class RunSummary:
    """Totals for a finished run"""

    renamed: int = 0
    would_rename: int = 0
    unchanged: int = 0
    missing: int = 0
    collisions: int = 0
    failed: int = 0

    @classmethod
    def from_events(cls, events: Iterable[RenameEvent]) -> RunSummary:
        counts = Counter(event.kind for event in events)
        return cls(
            renamed=counts[RenameEventKind.RENAMED] - counts[RenameEventKind.FAILED],
            would_rename=counts[RenameEventKind.WOULD_RENAME],
            unchanged=counts[RenameEventKind.UNCHANGED],
            missing=counts[RenameEventKind.MISSING],
            collisions=counts[RenameEventKind.COLLISION],
            failed=counts[RenameEventKind.FAILED],
        )
