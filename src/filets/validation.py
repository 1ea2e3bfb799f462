"""Filename sanitizing.

Turns arbitrary text (titles, user input) into a name that is safe to
use as a single path component on common filesystems.
"""

from __future__ import annotations

import re

MAX_FILENAME_LENGTH = 255

# Characters reserved by Windows and POSIX path syntax
_RESERVED_CHARS = re.compile(r'[<>:"/\\|?*]')
_QUOTE_CHARS = re.compile("['‘’\"“”`´]")
_PUNCTUATION_CHARS = re.compile(r"[.,;:!@#$%^&*()_+={}\[\]|\\/]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def sanitize_filename(filename: str) -> str:
    """Sanitize a filename for safe file system usage.

    Reserved characters become hyphens, quotes and punctuation are
    dropped, whitespace runs become a single hyphen, and the result is
    trimmed of hyphens and limited to 255 characters.

    Args:
        filename: Raw name, which may include an extension.

    Returns:
        Sanitized name. The extension dot is removed too, so
        "report.txt" becomes "reporttxt".

    Example:
        >>> sanitize_filename("Invalid/File:Name? *.txt")
        'Invalid-File-Name-txt'
    """
    sanitized = _RESERVED_CHARS.sub("-", filename)
    sanitized = _QUOTE_CHARS.sub("", sanitized)
    sanitized = _PUNCTUATION_CHARS.sub("", sanitized)
    sanitized = _WHITESPACE_RUN.sub("-", sanitized)
    sanitized = _HYPHEN_RUN.sub("-", sanitized)
    return sanitized.strip("-")[:MAX_FILENAME_LENGTH].rstrip("-")
