"""Error types shared by the table, dictionary and stroke-order services.

Both concrete errors are raised where the problem is detected and are left
for the caller to handle. Missing or malformed optional fields in kanji
dictionaries are not errors and never raise.
"""
from __future__ import annotations
from typing import Optional


class KanjiWebError(Exception):
    """Base class for errors raised by this package."""


class InvalidInputError(KanjiWebError, ValueError):
    """Input string had no usable leading code point (or an unknown option)."""


class NotFoundError(KanjiWebError, LookupError):
    """A lookup or asset read did not succeed.

    `filename` is the derived asset name that was attempted (stroke-order
    reads); `target` is the full URL or path that was read, when known.
    """

    def __init__(self, message: str, filename: Optional[str] = None, target: Optional[str] = None):
        super().__init__(message)
        self.filename = filename
        self.target = target
