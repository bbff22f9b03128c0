"""Bracket matching and offset based splicing for source‑like text.

Both helpers are pure functions over a plain ``str``.  They know nothing
about string literals, comments or escapes – every ``(``, ``{`` or ``[``
in the text counts, wherever it appears.

* :func:`find_matching_bracket_position` returns the offset of the partner
  of a bracket, or :data:`NOT_FOUND`.
* :func:`replace_contents_with_offset` replaces an inclusive
  ``[start, end]`` range and raises :class:`~code_patcher.exceptions.RangeError`
  on invalid bounds.
"""

from __future__ import annotations

from ..exceptions import RangeError

__all__ = ["NOT_FOUND", "BRACKET_PAIRS", "OPENING_BRACKETS", "find_matching_bracket_position",
           "replace_contents_with_offset", ]

NOT_FOUND = -1

# opening -> closing
OPENING_BRACKETS: dict[str, str] = {"(": ")", "{": "}", "[": "]", }

BRACKET_PAIRS: dict[str, str] = {**OPENING_BRACKETS, **{close: open_ for open_, close in OPENING_BRACKETS.items()}, }


def find_matching_bracket_position(content: str, bracket: str) -> int:
    """Return the offset of the bracket matching the first *bracket* in *content*.

    The seed is always the first occurrence of *bracket* found scanning
    forward from offset 0.  An opening seed is matched by scanning forward,
    a closing seed by scanning backward, skipping nested pairs of the same
    kind.

    Parameters
    ----------
    content:
        Text to search.
    bracket:
        One of ``( ) { } [ ]``.

    Returns
    -------
    int
        Offset of the matching bracket, or :data:`NOT_FOUND` when *bracket*
        is not a bracket, does not occur, or is never closed.
    """

    partner = BRACKET_PAIRS.get(bracket)
    if partner is None or not content:
        return NOT_FOUND

    seed = content.find(bracket)
    if seed == NOT_FOUND:
        return NOT_FOUND

    if bracket in OPENING_BRACKETS:
        positions = range(seed + 1, len(content))
    else:
        positions = range(seed - 1, -1, -1)

    depth = 1
    for pos in positions:
        char = content[pos]
        if char == bracket:
            depth += 1
        elif char == partner:
            depth -= 1
            if depth == 0:
                return pos
    return NOT_FOUND


def replace_contents_with_offset(content: str, replacement: str, start: int, end: int) -> str:
    """Replace the inclusive range ``content[start..end]`` with *replacement*.

    Raises
    ------
    RangeError
        If either bound is negative, *end* points past the last character
        or *start* is greater than *end*.
    """

    length = len(content)
    if start < 0 or end < 0:
        raise RangeError(f"Invalid range [{start}, {end}]: offsets must not be negative")
    if end > length - 1:
        raise RangeError(f"Invalid range [{start}, {end}]: end is past the last offset ({length - 1})")
    if start > end:
        raise RangeError(f"Invalid range [{start}, {end}]: start is greater than end")
    return content[:start] + replacement + content[end + 1:]
