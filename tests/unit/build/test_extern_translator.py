"""Unit tests for gccgo extern annotation translation."""

import os
import stat
import sys

import pytest

from llstage.build import translate_gccgo_externs, translate_gccgo_externs_text
from llstage.errors import ErrorKind, StageIOError

SOURCE = b"""package libc

//extern strlen
func c_strlen(*byte) uintptr

  //extern indented
// //extern nested
//externfoo
//extern write
func c_write(int32, *byte, uintptr) int32
"""


class TestTranslateText:
    """Test the pure buffer transform."""

    def test_single_line(self):
        """Test the canonical example."""
        assert translate_gccgo_externs_text(b"//extern foo") == b"// #llgo name: foo"

    def test_only_line_leading_annotations_rewritten(self):
        """Test that only lines beginning exactly with //extern change."""
        result = translate_gccgo_externs_text(SOURCE)
        lines = result.split(b"\n")

        assert lines[2] == b"// #llgo name: strlen"
        assert lines[5] == b"  //extern indented"
        assert lines[6] == b"// //extern nested"
        assert lines[7] == b"//externfoo"
        assert lines[8] == b"// #llgo name: write"

    def test_other_lines_preserved(self):
        """Test that non-matching lines keep their bytes and order."""
        result = translate_gccgo_externs_text(SOURCE)
        before = SOURCE.split(b"\n")
        after = result.split(b"\n")
        assert len(before) == len(after)
        for old, new in zip(before, after):
            if not old.startswith(b"//extern "):
                assert old == new

    def test_crlf_line_endings(self):
        """Test that CRLF files are handled line by line."""
        data = b"package p\r\n//extern foo\r\nfunc foo()\r\n"
        assert (
            translate_gccgo_externs_text(data)
            == b"package p\r\n// #llgo name: foo\r\nfunc foo()\r\n"
        )

    def test_replacement_is_literal(self):
        """Test that names containing backslashes are not treated as escapes."""
        data = b"//extern \\1weird\n"
        assert translate_gccgo_externs_text(data) == b"// #llgo name: \\1weird\n"


class TestTranslateFile:
    """Test rewriting files in place."""

    def test_rewrites_file(self, tmp_path):
        """Test rewriting a file and counting substitutions."""
        path = tmp_path / "libc.go"
        path.write_bytes(SOURCE)

        count = translate_gccgo_externs(path)

        assert count == 2
        content = path.read_bytes()
        assert b"// #llgo name: strlen\n" in content
        assert b"// #llgo name: write\n" in content

    def test_idempotent(self, tmp_path):
        """Test that applying the rewrite twice equals applying it once."""
        path = tmp_path / "libc.go"
        path.write_bytes(SOURCE)

        translate_gccgo_externs(path)
        once = path.read_bytes()
        assert translate_gccgo_externs(str(path)) == 0
        assert path.read_bytes() == once

    def test_no_annotations(self, tmp_path):
        """Test a file without annotations is left byte-identical."""
        path = tmp_path / "main.go"
        path.write_bytes(b"package main\n\nfunc main() {}\n")

        assert translate_gccgo_externs(path) == 0
        assert path.read_bytes() == b"package main\n\nfunc main() {}\n"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_writes_fixed_mode(self, tmp_path):
        """Test that the rewritten file always ends up with mode 0644."""
        path = tmp_path / "libc.go"
        path.write_bytes(SOURCE)
        os.chmod(path, 0o600)

        translate_gccgo_externs(path)

        assert stat.S_IMODE(os.stat(path).st_mode) == 0o644

    def test_missing_file(self, tmp_path):
        """Test that a read failure raises StageIOError."""
        path = tmp_path / "missing.go"

        with pytest.raises(StageIOError) as exc_info:
            translate_gccgo_externs(path)

        assert exc_info.value.kind is ErrorKind.IO
        assert exc_info.value.path == str(path)
        assert not path.exists()
