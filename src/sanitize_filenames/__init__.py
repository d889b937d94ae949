"""sanitize_filenames - make file and directory names shell friendly

Replaces whitespace and special characters in names, optionally walking whole
directory trees, with dry-run support.
"""

__version__ = "0.1.0"

from sanitize_filenames.models import Config, RenameEvent, RenameEventKind, SanitizeMode
from sanitize_filenames.renamer import rename_path
from sanitize_filenames.sanitizer import sanitize_component, sanitized_filename
from sanitize_filenames.walker import run, sanitize_tree

__all__ = [
    "Config",
    "RenameEvent",
    "RenameEventKind",
    "SanitizeMode",
    "rename_path",
    "run",
    "sanitize_component",
    "sanitize_tree",
    "sanitized_filename",
]
