"""Utility functions for the code_patcher package."""

from .diff_utils import backup_file, generate_diff
from .match_brackets import NOT_FOUND, find_matching_bracket_position, replace_contents_with_offset

__all__ = ["generate_diff", "backup_file", "NOT_FOUND", "find_matching_bracket_position",
           "replace_contents_with_offset", ]
