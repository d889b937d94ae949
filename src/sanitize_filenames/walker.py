"""Directory tree walker

Sanitizes a whole tree post-order: every child is handled under its parent's
original name, and the parent is renamed last.
"""

import logging
import os
from pathlib import Path

from sanitize_filenames.models import (
    DEFAULT_REPLACEMENT,
    Config,
    RenameEvent,
    RenameEventKind,
    SanitizeMode,
)
from sanitize_filenames.renamer import path_present, rename_path
from sanitize_filenames.reporter import ConsoleReporter, Reporter
from sanitize_filenames.sanitizer import sanitized_filename

logger = logging.getLogger(__name__)


def _is_real_directory(path: Path) -> bool:
    """Directory check that does not follow symlinks"""
    return path.is_dir() and not path.is_symlink()


def sanitize_single(
    path: str,
    dry_run: bool = False,
    replacement: str = DEFAULT_REPLACEMENT,
    mode: SanitizeMode = SanitizeMode.LEGACY,
    reporter: Reporter | None = None,
) -> str:
    """Sanitize the name of one path without descending into it"""
    new_path = sanitized_filename(path, replacement, mode)
    return rename_path(path, new_path, dry_run, reporter)


def sanitize_tree(
    path: str,
    dry_run: bool = False,
    replacement: str = DEFAULT_REPLACEMENT,
    mode: SanitizeMode = SanitizeMode.LEGACY,
    reporter: Reporter | None = None,
) -> str:
    """Recursively sanitize ``path`` and everything below it

    Symlinks are renamed like files and never followed.

    Args:
        path: file or directory to sanitize
        dry_run: only report what would happen
        replacement: character substituted for disallowed characters
        mode: sanitization mode
        reporter: event sink, a console reporter by default

    Returns:
        the path of ``path`` after sanitizing

    Raises:
        OSError: a directory could not be read or a rename failed
    """
    reporter = reporter or ConsoleReporter()
    node = Path(path)
    path = os.fspath(path)

    if not path_present(node):
        reporter.report(RenameEvent(RenameEventKind.MISSING, path, path))
        return path

    if not _is_real_directory(node):
        return sanitize_single(path, dry_run, replacement, mode, reporter)

    children = sorted(node.iterdir(), key=lambda child: child.name)

    logger.debug(f"walking {path}: {len(children)} entries")
    for child in children:
        if _is_real_directory(child):
            sanitize_tree(str(child), dry_run, replacement, mode, reporter)
        else:
            sanitize_single(str(child), dry_run, replacement, mode, reporter)

    # The directory itself goes last, after its children
    return sanitize_single(path, dry_run, replacement, mode, reporter)


def run(config: Config, reporter: Reporter | None = None) -> None:
    """Sanitize every target of ``config`` in order

    Stops at the first I/O error; targets after it are not attempted.

    Args:
        config: resolved configuration
        reporter: event sink, a console reporter by default

    Raises:
        OSError: reading a directory or renaming a path failed
    """
    reporter = reporter or ConsoleReporter()

    for target in config.targets:
        logger.debug(f"target: {target}")
        if config.recursive:
            sanitize_tree(
                target, config.dry_run, config.replacement, config.mode, reporter
            )
        else:
            sanitize_single(
                target, config.dry_run, config.replacement, config.mode, reporter
            )
