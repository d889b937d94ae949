"""Single path renamer

Renames one path after checking it is safe to do so. Skips are reported,
never raised.
"""

import logging
import os
from pathlib import Path

from sanitize_filenames.models import RenameEvent, RenameEventKind
from sanitize_filenames.reporter import ConsoleReporter, Reporter

logger = logging.getLogger(__name__)


def path_present(path: Path) -> bool:
    """Existence check that also sees dangling symlinks"""
    return path.is_symlink() or path.exists()


def rename_path(
    old: str,
    new: str,
    dry_run: bool = False,
    reporter: Reporter | None = None,
) -> str:
    """Rename ``old`` to ``new`` unless that would be a no-op or overwrite

    Args:
        old: current path
        new: desired path
        dry_run: only report what would happen
        reporter: event sink, a console reporter by default

    Returns:
        the path after the attempt: ``new`` when renamed (or when it would
        be in a dry run), ``old`` when skipped

    Raises:
        OSError: the underlying rename failed
    """
    reporter = reporter or ConsoleReporter()
    old = os.fspath(old)
    new = os.fspath(new)

    if old == new:
        reporter.report(RenameEvent(RenameEventKind.UNCHANGED, old, new))
        return new

    if not path_present(Path(old)):
        logger.warning(f"source does not exist: {old}")
        reporter.report(RenameEvent(RenameEventKind.MISSING, old, new))
        return old

    if path_present(Path(new)):
        logger.warning(f"target already exists: {new}")
        reporter.report(RenameEvent(RenameEventKind.COLLISION, old, new))
        return old

    if dry_run:
        reporter.report(RenameEvent(RenameEventKind.WOULD_RENAME, old, new))
        return new

    reporter.report(RenameEvent(RenameEventKind.RENAMED, old, new))
    try:
        os.rename(old, new)
    except OSError as e:
        logger.error(f"rename failed {old} -> {new}: {e}")
        reporter.report(RenameEvent(RenameEventKind.FAILED, old, new))
        raise
    logger.info(f"renamed: {old} -> {new}")
    return new
