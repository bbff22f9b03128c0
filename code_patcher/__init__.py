"""Top‑level package for *code_patcher*."""

from __future__ import annotations

# First import non-dependent modules
from .exceptions import CodePatcherError, FileCreationError, PatchError, RangeError
from .utils.match_brackets import NOT_FOUND, find_matching_bracket_position, replace_contents_with_offset

from .core import (BlockRange, PatchResult, find_anchor, find_block, insert_into_block, patch_file,
                   replace_block_body, )
from .file_generator import create_from_template, read_file, write_file
from .main import load_config, setup_logging

# Explicitly expose the public API members
__all__ = ["NOT_FOUND", "find_matching_bracket_position", "replace_contents_with_offset", "BlockRange",
           "PatchResult", "find_anchor", "find_block", "insert_into_block", "replace_block_body", "patch_file",
           "read_file", "write_file", "create_from_template", "load_config", "setup_logging",
           "CodePatcherError", "RangeError", "PatchError", "FileCreationError", ]
