"""Custom exception hierarchy for the code_patcher package.

All public functions raise :class:`CodePatcherError` (or a subclass) so
that callers can catch a single exception type.  This also allows the
CLI to catch all exceptions and print a user-friendly message.

Not finding a matching bracket is *not* an error – the matcher returns
``-1`` for that.
"""


class CodePatcherError(RuntimeError):
    """Base exception for all code‑patcher related errors."""


class RangeError(CodePatcherError, IndexError):
    """Raised when a replacement range is negative, inverted or out of bounds."""


class PatchError(CodePatcherError):
    """Raised when the anchor or block to patch cannot be located."""


class FileCreationError(CodePatcherError):
    """Raised when a file cannot be created or written to."""
