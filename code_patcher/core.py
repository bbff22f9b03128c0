"""Block level patch helpers for the *code_patcher* package.

This module is the calling layer around the two primitives in
:mod:`code_patcher.utils.match_brackets`.  A caller names an *anchor*
(any substring that precedes a bracketed block, e.g. ``"dependencies"`` in
a Gradle file or ``"didFinishLaunchingWithOptions"`` in an app delegate),
the helpers locate the block with the bracket matcher and splice new text
in with the range splicer.

The string helpers are pure.  :func:`patch_file` wraps any of them in a
read – transform – write cycle with optional backup and diff preview.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .exceptions import PatchError
from .file_generator import read_file, write_file
from .utils.diff_utils import backup_file, generate_diff
from .utils.match_brackets import (NOT_FOUND, OPENING_BRACKETS, find_matching_bracket_position,
                                   replace_contents_with_offset, )

__all__ = ["BlockRange", "PatchResult", "find_anchor", "find_block", "insert_into_block", "replace_block_body",
           "patch_file", ]

log = logging.getLogger(__name__)


@dataclass(frozen = True)
class BlockRange:
    """Offsets of an opening bracket and its matching closing bracket."""

    open: int
    close: int

    @property
    def body_start(self) -> int:
        return self.open + 1

    @property
    def body_end(self) -> int:
        """Inclusive end of the body; smaller than ``body_start`` for an empty body."""
        return self.close - 1

    def body(self, content: str) -> str:
        return content[self.body_start:self.close]


@dataclass(frozen = True)
class PatchResult:
    """Outcome of :func:`patch_file`."""

    path: Path
    old_content: str
    new_content: str
    diff: str
    written: bool
    backup_path: Path | None = None

    @property
    def changed(self) -> bool:
        return self.old_content != self.new_content


def find_anchor(content: str, anchor: str, *, start: int = 0) -> int:
    """Return the offset of *anchor* at or after *start*, or ``-1``."""
    if not anchor:
        return NOT_FOUND
    return content.find(anchor, start)


def find_block(content: str, anchor: str, *, bracket: str = "{") -> BlockRange | None:
    """Locate the bracketed block that follows *anchor*.

    The first *bracket* at or after the anchor opens the block; its partner
    is found with :func:`find_matching_bracket_position` on the text that
    starts at that bracket, so earlier brackets in the file never act as the
    seed.

    Returns ``None`` when the anchor, the opening bracket or its partner is
    missing.
    """

    if bracket not in OPENING_BRACKETS:
        raise ValueError(f"Expected an opening bracket, got {bracket!r}")

    anchor_pos = find_anchor(content, anchor)
    if anchor_pos == NOT_FOUND:
        log.debug("Anchor %r not found", anchor)
        return None

    open_pos = content.find(bracket, anchor_pos)
    if open_pos == NOT_FOUND:
        log.debug("No %r after anchor %r", bracket, anchor)
        return None

    match = find_matching_bracket_position(content[open_pos:], bracket)
    if match == NOT_FOUND:
        log.debug("Unbalanced %r block after anchor %r", bracket, anchor)
        return None
    return BlockRange(open = open_pos, close = open_pos + match)


def _require_block(content: str, anchor: str, bracket: str) -> BlockRange:
    block = find_block(content, anchor, bracket = bracket)
    if block is None:
        raise PatchError(f"Could not find a {bracket!r} block after anchor {anchor!r}")
    return block


def insert_into_block(
        content: str, anchor: str, snippet: str, *, bracket: str = "{",
        position: Literal["start", "end"] = "end", ) -> str:
    """Insert *snippet* at the start or end of the block following *anchor*.

    Parameters
    ----------
    content:
        Text to patch.
    anchor:
        Substring that precedes the block.
    snippet:
        Text to insert, used verbatim (include any newlines/indentation).
    bracket:
        Opening bracket of the block – ``{`` by default.
    position:
        ``"start"`` inserts right after the opening bracket, ``"end"`` right
        before the closing one.

    Returns
    -------
    str
        The patched text.
    """

    if position not in ("start", "end"):
        raise ValueError(f"Unknown position {position!r}; expected 'start' or 'end'")
    block = _require_block(content, anchor, bracket)
    if position == "start":
        return replace_contents_with_offset(content, bracket + snippet, block.open, block.open)
    closer = OPENING_BRACKETS[bracket]
    return replace_contents_with_offset(content, snippet + closer, block.close, block.close)


def replace_block_body(content: str, anchor: str, body: str, *, bracket: str = "{") -> str:
    """Replace everything between the brackets of the block after *anchor*."""
    block = _require_block(content, anchor, bracket)
    closer = OPENING_BRACKETS[bracket]
    return replace_contents_with_offset(content, bracket + body + closer, block.open, block.close)


def patch_file(
        path: Path | str, transform: Callable[[str], str], *, backup: bool = False, dry_run: bool = False,
        encoding: str = "utf-8", ) -> PatchResult:
    """Read *path*, apply *transform* and write the result back.

    Parameters
    ----------
    path:
        File to patch.  Must exist.
    transform:
        Pure function from old to new content, typically a
        :func:`functools.partial` of :func:`insert_into_block` or
        :func:`replace_block_body`.
    backup:
        Copy the original to ``<name>.bak`` before writing.
    dry_run:
        Compute the diff only; the file is left untouched.
    encoding:
        Text encoding of the file.

    Returns
    -------
    PatchResult
        Old/new content and a unified diff.  Unchanged files are never
        rewritten.
    """

    path = Path(path).expanduser().resolve()
    if not path.is_file():
        raise PatchError(f"File {path!s} does not exist – cannot patch")

    try:
        old_content = read_file(path, encoding = encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise PatchError(f"Cannot read {path!s} as {encoding}: {exc}") from exc
    new_content = transform(old_content)
    diff = generate_diff(old_content, new_content, str(path), f"(patched) {path}")

    if dry_run or new_content == old_content:
        log.info("%s: %s", path, "dry run" if dry_run else "already up to date")
        return PatchResult(path, old_content, new_content, diff, written = False)

    backup_path = backup_file(path) if backup else None
    if backup_path:
        log.info("Backup created: %s", backup_path)
    write_file(path, new_content, encoding = encoding)
    log.info("Patched %s", path)
    return PatchResult(path, old_content, new_content, diff, written = True, backup_path = backup_path)

