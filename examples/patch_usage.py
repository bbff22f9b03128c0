#!/usr/bin/env python3
"""
Example: Patching a project file with code_patcher

Shows the two primitives on their own, then the block helpers and the
file patcher working on a throw‑away Gradle file.
"""

import tempfile
from functools import partial
from pathlib import Path

from code_patcher import (find_block, find_matching_bracket_position, insert_into_block, patch_file,
                          replace_contents_with_offset, setup_logging, )


def example_primitives():
    """Example 1: matching brackets and splicing by offset."""
    print("\n" + "=" * 60)
    print("Example 1: Primitives")
    print("=" * 60)

    call = "foo(boo(), 0)"
    close = find_matching_bracket_position(call, "(")
    print(f"{call!r}: '(' at 3 closes at {close}")
    print(replace_contents_with_offset(call, "(1)", 3, close))


def example_patch_gradle():
    """Example 2: insert a dependency into a Gradle block."""
    print("\n" + "=" * 60)
    print("Example 2: Patch a file")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        gradle = Path(tmpdir) / "build.gradle"
        gradle.write_text("dependencies {\n    implementation 'a:b:1.0'\n}\n", encoding = "utf-8")

        block = find_block(gradle.read_text(encoding = "utf-8"), "dependencies")
        print(f"Block spans offsets {block.open}..{block.close}")

        result = patch_file(
                gradle, partial(insert_into_block, anchor = "dependencies", snippet = "    implementation 'c:d:2.0'\n"),
                backup = True, )
        print(result.diff)
        print(f"Backup: {result.backup_path}")


if __name__ == "__main__":
    setup_logging(debug = False)
    example_primitives()
    example_patch_gradle()
