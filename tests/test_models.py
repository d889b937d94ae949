"""Tests for Config validation and run summaries"""

import pytest
from pydantic import ValidationError

from sanitize_filenames.models import (
    Config,
    RenameEvent,
    RenameEventKind,
    RunSummary,
    SanitizeMode,
)


def test_defaults():
    config = Config()

    assert config.replacement == "_"
    assert not config.recursive
    assert not config.dry_run
    assert config.mode is SanitizeMode.LEGACY
    assert config.targets == []


def test_full_sanitize_mode():
    assert Config(full_sanitize=True).mode is SanitizeMode.FULL


@pytest.mark.parametrize(
    "replacement,message",
    [
        ("", "cannot be empty"),
        ("ab", "must be a single character"),
        ("/", "Replacement character '/' is not allowed"),
    ],
)
def test_invalid_replacement(replacement, message):
    with pytest.raises(ValidationError, match=message):
        Config(replacement=replacement)


def test_dot_targets_are_dropped():
    config = Config(targets=[".", "a b", "..", "./c d"])

    assert config.targets == ["a b", "./c d"]


def test_config_is_frozen():
    config = Config()

    with pytest.raises(ValidationError):
        config.dry_run = True


def test_summary_from_events():
    events = [
        RenameEvent(RenameEventKind.RENAMED, "a", "b"),
        RenameEvent(RenameEventKind.RENAMED, "c", "d"),
        RenameEvent(RenameEventKind.COLLISION, "e", "f"),
        RenameEvent(RenameEventKind.MISSING, "g", "g"),
        RenameEvent(RenameEventKind.UNCHANGED, "h", "h"),
    ]

    summary = RunSummary.from_events(events)

    assert summary.renamed == 2
    assert summary.collisions == 1
    assert summary.missing == 1
    assert summary.unchanged == 1
    assert summary.would_rename == 0
    assert summary.failed == 0


def test_failed_rename_is_not_counted_as_renamed():
    events = [
        RenameEvent(RenameEventKind.RENAMED, "a", "b"),
        RenameEvent(RenameEventKind.RENAMED, "c", "d"),
        RenameEvent(RenameEventKind.FAILED, "c", "d"),
    ]

    summary = RunSummary.from_events(events)

    assert summary.renamed == 1
    assert summary.failed == 1
    assert events[2].message == "Failed to change 'c' to 'd'"
