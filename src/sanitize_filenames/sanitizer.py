"""Filename sanitizer

Pure string rules that turn one path component into a safe name, plus the
composer that puts the parent directory and extension back on.
"""

import os
import re
import string

from sanitize_filenames.classifier import extract_extension
from sanitize_filenames.models import DEFAULT_REPLACEMENT, SanitizeMode

# Characters legacy mode replaces (whitespace is matched separately)
LEGACY_CHARS = frozenset(".,\":?'#;&*\\()[]")

# Characters legacy mode maps to a fixed substitute instead of the replacement
CHAR_REPLACEMENT_MAP = {
    "×": "x",
}

# Characters full mode keeps as they are
FULL_ALLOWED_CHARS = frozenset(string.ascii_letters + string.digits + "_-")


def _map_legacy(char: str, replacement: str) -> str:
    if char in CHAR_REPLACEMENT_MAP:
        return CHAR_REPLACEMENT_MAP[char]
    if char.isspace() or char in LEGACY_CHARS:
        return replacement
    return char


def _map_full(char: str, replacement: str) -> str:
    return char if char in FULL_ALLOWED_CHARS else replacement


def map_characters(
    name: str,
    replacement: str = DEFAULT_REPLACEMENT,
    mode: SanitizeMode = SanitizeMode.LEGACY,
) -> str:
    """Map every character of ``name`` to exactly one output character"""
    mapper = _map_full if mode is SanitizeMode.FULL else _map_legacy
    return "".join(mapper(char, replacement) for char in name)


def collapse_replacements(text: str, replacement: str = DEFAULT_REPLACEMENT) -> str:
    """Squeeze every run of two or more replacement characters into one"""
    return re.sub(f"{re.escape(replacement)}{{2,}}", replacement, text)


def trim_replacements(text: str, replacement: str = DEFAULT_REPLACEMENT) -> str:
    """Strip replacement characters from both ends

    A string made only of replacement characters becomes exactly one of them.
    """
    trimmed = text.strip(replacement)
    if not trimmed and text:
        return replacement
    return trimmed


def sanitize_component(
    name: str,
    replacement: str = DEFAULT_REPLACEMENT,
    extension: str = "",
    mode: SanitizeMode = SanitizeMode.LEGACY,
) -> str:
    """Sanitize a single file or directory name

    The extension's dot is mapped like any other character, so a trailing
    ``<replacement><extension>`` is removed here and the extension is put
    back later with a real dot.

    Args:
        name: the component to sanitize, without any directory part
        replacement: character substituted for disallowed characters
        extension: extension of the component, empty if it has none
        mode: which characters count as disallowed

    Returns:
        the sanitized base name, without the extension
    """
    result = collapse_replacements(map_characters(name, replacement, mode), replacement)

    if extension:
        suffix = f"{replacement}{extension}"
        if result.endswith(suffix):
            result = result[: -len(suffix)]

    return trim_replacements(result, replacement)


def sanitized_filename(
    path: str,
    replacement: str = DEFAULT_REPLACEMENT,
    mode: SanitizeMode = SanitizeMode.LEGACY,
) -> str:
    """Compute the sanitized path for ``path``

    Only the final component changes; the parent part is kept verbatim.

    Args:
        path: file or directory path as given
        replacement: character substituted for disallowed characters
        mode: sanitization mode

    Returns:
        the candidate new path
    """
    # Must be read before anything under this path is renamed
    extension = extract_extension(path)

    parent, name = os.path.split(path.rstrip(os.sep) or path)
    result = sanitize_component(name, replacement, extension, mode)

    if extension:
        result = f"{result}.{extension}" if result else extension

    if parent and parent != ".":
        result = os.path.join(parent, result)

    return result
