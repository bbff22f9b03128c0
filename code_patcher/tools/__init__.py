# tools/__init__.py
from __future__ import annotations

from pathlib import Path
from typing import Any

from langchain_core.tools import BaseTool

from .match_bracket_tool import MatchBracketTool
from .patch_block_tool import FileObject, PatchBlockTool
from .splice_range_tool import SpliceRangeTool

__all__ = ["MatchBracketTool", "SpliceRangeTool", "PatchBlockTool", "FileObject", "create_default_tools", ]


def create_default_tools(root_dir: str | Path | None = None, cfg: dict[str, Any] | None = None) -> list[BaseTool]:
    """Return the default tool set, rooted at *root_dir* (or the configured ``root_dir``)."""
    cfg = cfg or {}
    root_path = Path(root_dir or cfg.get("root_dir") or Path.cwd())
    return [MatchBracketTool(), SpliceRangeTool(),
            PatchBlockTool(root_dir = root_path, backup = cfg.get("backup", True),
                           encoding = cfg.get("encoding", "utf-8")), ]
