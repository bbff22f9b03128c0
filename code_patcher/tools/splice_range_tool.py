# tools/splice_range_tool.py
from __future__ import annotations

import logging
from typing import Any

from langchain_core.tools import BaseTool
from pydantic import BaseModel, Field

from ..exceptions import RangeError
from ..utils.match_brackets import replace_contents_with_offset

log = logging.getLogger(__name__)


class SpliceRangeArgs(BaseModel):
    """Arguments for replacing an inclusive character range."""

    content: str = Field(..., description = "Original text.")
    replacement: str = Field("", description = "Text to put in place of the range.")
    start: int = Field(..., description = "First offset to replace (inclusive).")
    end: int = Field(..., description = "Last offset to replace (inclusive).")


class SpliceRangeTool(BaseTool):
    """Tool for replacing content[start..end] with new text."""

    name: str = "splice-range"
    description: str = ("Replace the inclusive character range [start, end] of 'content' with 'replacement' "
                        "and return the new text. Offsets must be valid indexes with start <= end.")
    args_schema: type[BaseModel] = SpliceRangeArgs

    def _run(self, content: str, start: int, end: int, replacement: str = "") -> str:
        try:
            return replace_contents_with_offset(content, replacement, start, end)
        except RangeError as e:
            log.error(f"Rejected splice range: {e}")
            return f"❌ Error: {e}"

    async def _arun(self, **kwargs: Any) -> str:
        """Async version."""
        return self._run(**kwargs)
