"""
Unit tests for the block helpers and file helpers in `code_patcher.core`.
"""

import os
import stat
import textwrap
from functools import partial
from pathlib import Path

import pytest

from code_patcher.core import BlockRange, find_anchor, find_block, insert_into_block, patch_file, replace_block_body
from code_patcher.exceptions import CodePatcherError, PatchError, RangeError

GRADLE = textwrap.dedent(
        """\
        buildscript {
            repositories { google() }
        }
        dependencies {
            implementation("a:b:1.0")
        }
        """
        )


@pytest.fixture
def gradle_file(tmp_path: Path) -> Path:
    path = tmp_path / "build.gradle"
    path.write_text(GRADLE, encoding = "utf-8")
    return path


# ---------------------------------------------------------------------------
# Locating blocks
# ---------------------------------------------------------------------------


def test_find_anchor() -> None:
    assert find_anchor(GRADLE, "dependencies") == GRADLE.index("dependencies")
    assert find_anchor(GRADLE, "missing") == -1
    assert find_anchor(GRADLE, "") == -1
    assert find_anchor("abab", "ab", start = 1) == 2


def test_find_block_after_anchor() -> None:
    block = find_block(GRADLE, "dependencies")
    assert isinstance(block, BlockRange)
    assert GRADLE[block.open] == "{"
    assert GRADLE[block.close] == "}"
    assert block.body(GRADLE) == '\n    implementation("a:b:1.0")\n'


def test_find_block_skips_nested_blocks() -> None:
    block = find_block(GRADLE, "buildscript")
    assert block is not None
    assert block.open == GRADLE.index("{")
    assert "repositories { google() }" in block.body(GRADLE)
    assert GRADLE[block.close + 1:].startswith("\ndependencies")


def test_find_block_with_round_brackets() -> None:
    block = find_block("setup(name='x', deps=f(1))", "setup", bracket = "(")
    assert block == BlockRange(open = 5, close = 25)


def test_find_block_empty_body() -> None:
    block = find_block("x = {}", "x")
    assert block is not None
    assert block.body("x = {}") == ""
    assert block.body_end < block.body_start


@pytest.mark.parametrize(
        ("content", "anchor"), [(GRADLE, "plugins"), ("dependencies", "dependencies"), ("deps { a {", "deps"), ],
        ids = ["no-anchor", "no-bracket", "unbalanced"], )
def test_find_block_missing(content: str, anchor: str) -> None:
    assert find_block(content, anchor) is None


def test_find_block_rejects_closing_bracket() -> None:
    with pytest.raises(ValueError, match = "opening bracket"):
        find_block(GRADLE, "dependencies", bracket = "}")


# ---------------------------------------------------------------------------
# Patching strings
# ---------------------------------------------------------------------------


def test_insert_at_end() -> None:
    patched = insert_into_block(GRADLE, "dependencies", '    implementation("c:d:2.0")\n')
    assert patched.endswith('implementation("a:b:1.0")\n    implementation("c:d:2.0")\n}\n')


def test_insert_at_start() -> None:
    patched = insert_into_block(GRADLE, "dependencies", "\n    first()", position = "start")
    assert "dependencies {\n    first()\n    implementation" in patched


def test_insert_unknown_position() -> None:
    with pytest.raises(ValueError, match = "Unknown position"):
        insert_into_block(GRADLE, "dependencies", "x", position = "middle")


def test_insert_missing_block() -> None:
    with pytest.raises(PatchError, match = "plugins"):
        insert_into_block(GRADLE, "plugins", "x")


def test_replace_block_body() -> None:
    patched = replace_block_body(GRADLE, "dependencies", "\n")
    assert patched.endswith("dependencies {\n}\n")
    assert patched.startswith("buildscript {\n    repositories { google() }\n}")


def test_replace_block_body_round_brackets() -> None:
    assert replace_block_body("foo(a, b) + bar(c)", "bar", "x", bracket = "(") == "foo(a, b) + bar(x)"


def test_patch_errors_share_base_class() -> None:
    assert issubclass(PatchError, CodePatcherError)
    assert issubclass(RangeError, CodePatcherError)


# ---------------------------------------------------------------------------
# Patching files
# ---------------------------------------------------------------------------


def test_patch_file_writes(gradle_file: Path) -> None:
    result = patch_file(gradle_file, partial(insert_into_block, anchor = "dependencies", snippet = "    x()\n"))
    assert result.written
    assert result.changed
    assert result.backup_path is None
    assert "+    x()" in result.diff
    assert gradle_file.read_text(encoding = "utf-8") == result.new_content


def test_patch_file_dry_run(gradle_file: Path) -> None:
    result = patch_file(
            gradle_file, partial(insert_into_block, anchor = "dependencies", snippet = "    x()\n"), dry_run = True)
    assert not result.written
    assert result.diff
    assert gradle_file.read_text(encoding = "utf-8") == GRADLE


def test_patch_file_backup(gradle_file: Path) -> None:
    result = patch_file(gradle_file, partial(replace_block_body, anchor = "dependencies", body = ""), backup = True)
    assert result.backup_path == gradle_file.resolve().with_suffix(".gradle.bak")
    assert result.backup_path.read_text(encoding = "utf-8") == GRADLE
    assert gradle_file.read_text(encoding = "utf-8").endswith("dependencies {}\n")


def test_patch_file_unchanged_is_not_written(gradle_file: Path) -> None:
    result = patch_file(gradle_file, lambda text: text, backup = True)
    assert not result.written
    assert not result.changed
    assert result.diff == ""
    assert not gradle_file.with_suffix(".gradle.bak").exists()


def test_patch_file_missing(tmp_path: Path) -> None:
    with pytest.raises(PatchError, match = "does not exist"):
        patch_file(tmp_path / "nope.txt", str.upper)


def test_patch_file_propagates_transform_errors(gradle_file: Path) -> None:
    with pytest.raises(PatchError):
        patch_file(gradle_file, partial(insert_into_block, anchor = "plugins", snippet = "x"))
    assert gradle_file.read_text(encoding = "utf-8") == GRADLE



def test_patch_file_keeps_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "Podfile"
    path.write_bytes(b"target {\r\n  a\r\n}\r\n")
    result = patch_file(path, partial(insert_into_block, anchor = "target", snippet = "  b\r\n"))
    assert result.old_content == "target {\r\n  a\r\n}\r\n"
    assert path.read_bytes() == b"target {\r\n  a\r\n  b\r\n}\r\n"


def test_patch_file_offsets_count_carriage_returns(tmp_path: Path) -> None:
    path = tmp_path / "a.txt"
    path.write_bytes(b"ab\r\ncd")
    patch_file(path, lambda text: text[:text.index("c")] + "X" + text[text.index("c") + 1:])
    assert path.read_bytes() == b"ab\r\nXd"


@pytest.mark.skipif(os.name == "nt", reason = "POSIX permission bits")
def test_patch_file_keeps_file_mode(tmp_path: Path) -> None:
    gradlew = tmp_path / "gradlew"
    gradlew.write_text("run() {\n  java\n}\n")
    gradlew.chmod(0o755)
    patch_file(gradlew, partial(insert_into_block, anchor = "run", snippet = "  exit 0\n"))
    assert stat.S_IMODE(gradlew.stat().st_mode) == 0o755
    assert gradlew.read_text() == "run() {\n  java\n  exit 0\n}\n"


def test_patch_file_undecodable_content(tmp_path: Path) -> None:
    path = tmp_path / "binary.gradle"
    path.write_bytes(b"deps {\xff\xfe}")
    with pytest.raises(PatchError, match = "Cannot read"):
        patch_file(path, str.upper)
    assert path.read_bytes() == b"deps {\xff\xfe}"
