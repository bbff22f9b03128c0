"""Low‑level file‑system helpers used by the *code_patcher* package.

The goal of this module is to provide **pure, synchronous** helpers that
write text files and render templated files (for example a generated
storyboard or config snippet) into a project tree.  All functions return
a :class:`pathlib.Path` instance pointing to the written file and raise a
``CodePatcherError`` (defined in :mod:`code_patcher.exceptions`) on
failure.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .exceptions import CodePatcherError, FileCreationError

__all__ = ["read_file", "write_file", "create_from_template", ]

log = logging.getLogger(__name__)


def read_file(source: Path | str, *, encoding: str = "utf-8") -> str:
    r"""Return the text of *source* with line endings left exactly as stored.

    Offsets into the returned string match the characters of the file, so
    ``\r\n`` stays two characters.
    """
    with Path(source).open("r", encoding = encoding, newline = "") as fp:
        return fp.read()


def write_file(
        target: Path | str, content: str, *, encoding: str = "utf-8", ) -> Path:
    """Write *content* to *target* atomically.

    The function creates any missing parent directories, writes the
    content to a temporary file first, and then atomically moves the
    temporary file to ``target``.  This prevents half‑patched files if the
    process is interrupted.

    Parameters
    ----------
    target:
        Destination file path.
    content:
        Text to write.
    encoding:
        Text encoding – defaults to ``"utf-8"``.
    Returns
    -------
    Path
        The absolute path of the written file.
    """

    target = Path(target).expanduser().resolve()
    if target.is_dir():
        raise FileCreationError(f"Cannot write to a directory: {target!s}")
    tmp = target.with_name(target.name + ".tmp")
    try:
        target.parent.mkdir(parents = True, exist_ok = True)
        with tmp.open("w", encoding = encoding, newline = "") as fp:
            fp.write(content)
        if target.exists():
            shutil.copymode(target, tmp)
        tmp.replace(target)
        log.debug("Wrote %d characters to %s", len(content), target)
        return target
    except OSError as exc:
        tmp.unlink(missing_ok = True)
        raise FileCreationError(f"Failed to write file {target!s}: {exc}") from exc


def create_from_template(
        template_path: Path | str, dest_path: Path | str, *, replace_vars: dict | None = None,
        overwrite: bool = False, ) -> Path:
    """Create *dest_path* by rendering *template_path*.

    ``replace_vars`` may contain placeholder keys that will be replaced
    in the template text using :meth:`str.format`.  An existing
    *dest_path* raises a :class:`CodePatcherError` unless ``overwrite`` is
    set.  The function returns the absolute :class:`Path` to the created
    file.
    """

    template_path = Path(template_path).expanduser().resolve()
    dest_path = Path(dest_path).expanduser().resolve()
    if not template_path.is_file():
        raise CodePatcherError(f"Template file {template_path!s} does not exist")
    if dest_path.exists() and not overwrite:
        raise CodePatcherError(
                f"File {dest_path!s} already exists – use overwrite=True to replace it"
                )
    try:
        text = template_path.read_text(encoding = "utf-8")
        if replace_vars:
            text = text.format(**replace_vars)
    except (OSError, KeyError, IndexError, ValueError) as exc:
        raise CodePatcherError(
                f"Failed to render template {template_path!s} into {dest_path!s}: {exc}"
                ) from exc
    return write_file(dest_path, text)
