# tools/patch_block_tool.py
from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Literal

from langchain_core.tools import BaseTool
from pydantic import BaseModel, ConfigDict, Field

from ..core import insert_into_block, patch_file, replace_block_body
from ..exceptions import CodePatcherError

log = logging.getLogger(__name__)


class FileObject(BaseModel):
    """Artifact representing a file."""

    path: Path
    contents: str
    status: str = "success"

    model_config = ConfigDict(arbitrary_types_allowed = True)


class PatchBlockArgs(BaseModel):
    """Arguments for patching a bracketed block inside a file."""

    file_path: str = Field(..., description = "Path to the file to patch, relative to the root directory")
    anchor: str = Field(..., description = "Text that precedes the block, e.g. 'dependencies'")
    snippet: str = Field(..., description = "Text to insert, or the new block body in replace mode")
    mode: str = Field("end", description = "Mode: start|end|replace")
    bracket: str = Field("{", description = "Opening bracket of the block: ( { or [")


class PatchBlockTool(BaseTool):
    """Tool for inserting into, or replacing, a bracketed block of an existing file."""

    name: str = "patch-block"
    description: str = ("Find the first bracketed block after 'anchor' in a file and insert 'snippet' at its "
                        "start or end, or replace its body. Returns confirmation message and FileObject artifact.")
    response_format: Literal["content_and_artifact"] = "content_and_artifact"
    args_schema: type[BaseModel] = PatchBlockArgs

    root: Path
    backup: bool = True
    encoding: str = "utf-8"

    model_config = ConfigDict(arbitrary_types_allowed = True)

    def __init__(self, root_dir: str | Path, **kwargs):
        super().__init__(root = Path(root_dir).expanduser().resolve(), **kwargs)

    def _transform(self, anchor: str, snippet: str, mode: str, bracket: str):
        if mode == "replace":
            return partial(replace_block_body, anchor = anchor, body = snippet, bracket = bracket)
        return partial(insert_into_block, anchor = anchor, snippet = snippet, bracket = bracket, position = mode)

    def _run(
            self, file_path: str, anchor: str, snippet: str, mode: str = "end", bracket: str = "{"
            ) -> tuple[str, FileObject]:
        full_path = self.root / file_path

        if not full_path.is_file():
            return (f"❌ File not found: {full_path}", FileObject(path = full_path, contents = "", status = "error"),)

        if mode not in ("start", "end", "replace"):
            return (f"❌ Unknown mode: {mode}", FileObject(path = full_path, contents = "", status = "error"),)

        try:
            result = patch_file(
                    full_path, self._transform(anchor, snippet, mode, bracket), backup = self.backup,
                    encoding = self.encoding, )
        except (CodePatcherError, ValueError) as e:
            log.error(
                    f"Error during block patch for {full_path}: {e}", exc_info = True, )
            return (f"❌ Error patching file: {e}", FileObject(path = full_path, contents = "", status = "error"),)

        if not result.changed:
            return (f"✅ Nothing to change in {full_path}",
                    FileObject(path = full_path, contents = result.new_content, status = "unchanged"),)

        status = f"patched_{mode}"
        message = f"✅ Successfully {status} {full_path}"
        if result.backup_path:
            message += " (Original backed up)"
        return (message, FileObject(path = full_path, contents = result.new_content, status = status),)

    async def _arun(
            self, file_path: str, anchor: str, snippet: str, mode: str = "end", bracket: str = "{"
            ) -> tuple[str, FileObject]:
        """Async version."""
        return self._run(file_path, anchor, snippet, mode, bracket)
