"""Name classifier

Decides whether a path has a real extension. Directories and dotfiles never
do, so ``archive.v2/`` and ``.bashrc`` keep their dots.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def has_dot(name: str) -> bool:
    return "." in name


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_directory(path: str) -> bool:
    """Whether ``path`` currently resolves to a directory"""
    return Path(path).is_dir()


def _basename(path: str) -> str:
    return Path(path).name


def has_extension(path: str) -> bool:
    """Check whether the final component of ``path`` has an extension

    Stats the file system, so the answer reflects the tree as it is now.

    Args:
        path: file or directory path

    Returns:
        True for dotted, non-hidden names that are not directories
    """
    name = _basename(path)
    return has_dot(name) and not is_hidden(name) and not is_directory(path)


def extract_extension(path: str) -> str:
    """Return the text after the last dot, or an empty string

    Args:
        path: file or directory path

    Returns:
        the extension without its dot
    """
    if not has_extension(path):
        return ""
    extension = _basename(path).rsplit(".", 1)[1]
    logger.debug(f"extension of {path!r}: {extension!r}")
    return extension
