# tools/match_bracket_tool.py
from __future__ import annotations

from typing import Any

from langchain_core.tools import BaseTool
from pydantic import BaseModel, Field

from ..utils.match_brackets import NOT_FOUND, find_matching_bracket_position


class MatchBracketArgs(BaseModel):
    """Arguments for locating a matching bracket."""

    content: str = Field(..., description = "Text to search.")
    bracket: str = Field(..., description = "Bracket to match, one of ( ) { } [ ].")


class MatchBracketTool(BaseTool):
    """Tool that returns the offset of the bracket matching the first given bracket."""

    name: str = "match-bracket"
    description: str = ("Find the offset of the bracket matching the FIRST occurrence of 'bracket' in 'content'. "
                        "Opening brackets are matched forward, closing brackets backward. "
                        "Returns the 0-based offset, or -1 when there is no match.")
    args_schema: type[BaseModel] = MatchBracketArgs

    def _run(self, content: str, bracket: str) -> str:
        position = find_matching_bracket_position(content, bracket)
        if position == NOT_FOUND:
            return f"❌ No matching bracket for {bracket!r} (-1)"
        return f"✅ Matching bracket for {bracket!r} at offset {position}"

    async def _arun(self, **kwargs: Any) -> str:
        """Async version."""
        return self._run(**kwargs)
