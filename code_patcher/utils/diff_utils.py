"""Utility functions for diffing and backing up patched files."""

from __future__ import annotations

import difflib
import shutil
from pathlib import Path


def generate_diff(
        old_content: str, new_content: str, from_file: str = "original", to_file: str = "patched", ) -> str:
    """Generate a unified diff between two strings.

    Args:
        old_content: The content before patching
        new_content: The patched content
        from_file: Label for the original content
        to_file: Label for the patched content

    Returns:
        A string containing the unified diff, empty when nothing changed
    """
    diff = difflib.unified_diff(
            old_content.splitlines(keepends = True), new_content.splitlines(keepends = True), fromfile = from_file,
            tofile = to_file, )
    return "".join(diff)


def backup_file(file_path: str | Path) -> Path | None:
    """Copy *file_path* next to itself with a ``.bak`` suffix.

    Returns the backup path, or ``None`` when there was nothing to back up.
    """
    path = Path(file_path)
    if not path.is_file():
        return None
    backup_path = path.with_suffix(path.suffix + ".bak")
    shutil.copy(path, backup_path)
    return backup_path

