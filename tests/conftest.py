"""Shared fixtures for sanitize_filenames tests"""

import os
from pathlib import Path

import pytest

from sanitize_filenames.reporter import EventCollector


@pytest.fixture
def collector() -> EventCollector:
    return EventCollector()


@pytest.fixture
def make_tree(tmp_path: Path):
    """Create directories (trailing '/') and files under tmp_path"""

    def make(*entries: str) -> Path:
        for entry in entries:
            path = tmp_path / entry
            if entry.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text("test", encoding="utf-8")
        return tmp_path

    return make


def snapshot(root: Path) -> set[str]:
    """All paths below root, relative to it"""
    found = set()
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            found.add(os.path.relpath(os.path.join(dirpath, name), root))
    return found
