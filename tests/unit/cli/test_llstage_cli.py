"""Unit tests for the llstage command-line driver."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from llstage.cli import main
from llstage.errors import ExecutionError


class TestCli:
    """Test the llstage CLI commands."""

    @pytest.fixture
    def pkg_dir(self, tmp_path):
        pkg = tmp_path / "pkg"
        pkg.mkdir()
        (pkg / "main.go").write_text("package main\n")
        (pkg / "util.go").write_text("package main\n")
        return pkg

    def test_no_command_prints_help(self, capsys):
        """Test that running without a command shows help."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 0
        assert "usage: llstage" in capsys.readouterr().out

    def test_package(self, pkg_dir, capsys):
        """Test printing a synthesized package as JSON."""
        main(["package", str(pkg_dir / "main.go")])

        result = json.loads(capsys.readouterr().out)
        assert result["dir"] == str(pkg_dir)
        assert result["go_files"] == ["main.go"]
        assert result["all_files"] is True

    def test_package_invalid_input(self, pkg_dir, tmp_path, capsys):
        """Test that invalid input exits with status 2."""
        other = tmp_path / "other"
        other.mkdir()
        (other / "x.go").write_text("package x\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["package", str(pkg_dir / "main.go"), str(other / "x.go")])

        assert exc_info.value.code == 2
        assert "one directory" in capsys.readouterr().err

    def test_mv(self, tmp_path):
        """Test moving an artifact."""
        src = tmp_path / "a.out"
        src.write_bytes(b"\x7fELF")
        dst = tmp_path / "hello"

        main(["mv", str(src), str(dst)])

        assert not src.exists()
        assert dst.read_bytes() == b"\x7fELF"

    def test_mv_missing_source(self, tmp_path, capsys):
        """Test that an I/O failure exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["mv", str(tmp_path / "missing"), str(tmp_path / "hello")])

        assert exc_info.value.code == 1
        assert "I/O failure" in capsys.readouterr().err

    def test_translate_externs(self, tmp_path):
        """Test rewriting externs from the command line."""
        path = tmp_path / "libc.go"
        path.write_bytes(b"//extern strlen\nfunc strlen(*byte) uintptr\n")

        main(["translate-externs", str(path)])

        assert path.read_bytes() == b"// #llgo name: strlen\nfunc strlen(*byte) uintptr\n"

    def test_gcclib(self, capsys):
        """Test printing the gcc library directory."""
        libdir = Path("/usr/lib/gcc/x86_64-linux-gnu/9")
        with patch("llstage.cli.find_gcclib", return_value=libdir) as mock_find:
            main(["gcclib", "--cc", "gcc-9"])

        assert capsys.readouterr().out.strip() == str(libdir)
        assert mock_find.call_args[0][0] == "gcc-9"

    def test_gcclib_failure(self, capsys):
        """Test that an execution failure exits with status 1."""
        error = ExecutionError("gcc exited with status 1", command=["gcc"], returncode=1)
        with patch("llstage.cli.find_gcclib", side_effect=error):
            with pytest.raises(SystemExit) as exc_info:
                main(["gcclib"])

        assert exc_info.value.code == 1
        assert "Command failed" in capsys.readouterr().err

    def test_package_relative(self, pkg_dir, capsys, monkeypatch):
        """Test that relative file names produce an absolute directory."""
        monkeypatch.chdir(pkg_dir)

        main(["package", "main.go", "util.go"])

        result = json.loads(capsys.readouterr().out)
        assert result["dir"] == os.getcwd()
        assert result["go_files"] == ["main.go", "util.go"]
