"""Tests for temporary repository checkouts."""

import subprocess
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from distlab.exceptions import CloneError, FileAccessError, ToolNotFoundError
from distlab.repo import cloned_repository, find_source_files, log_sample_files, read_source


class TestClonedRepository:
    def test_yields_existing_dir_and_removes_it(self, completed):
        with patch("distlab.repo.subprocess.run") as run:
            run.side_effect = lambda cmd, **kw: completed(cmd)
            with cloned_repository("https://example.com/r.git", prefix="t-") as repo_dir:
                assert repo_dir.is_dir()
                assert repo_dir.name.startswith("t-")
                cmd = run.call_args.args[0]
                assert cmd == ["git", "clone", "https://example.com/r.git", str(repo_dir)]
        assert not repo_dir.exists()

    def test_removed_when_body_raises(self, completed):
        with patch("distlab.repo.subprocess.run") as run:
            run.side_effect = lambda cmd, **kw: completed(cmd)
            with pytest.raises(RuntimeError):
                with cloned_repository("u") as repo_dir:
                    raise RuntimeError("boom")
        assert not repo_dir.exists()

    def test_keep(self, completed):
        with patch("distlab.repo.subprocess.run") as run:
            run.side_effect = lambda cmd, **kw: completed(cmd)
            with cloned_repository("u", keep=True) as repo_dir:
                pass
        try:
            assert repo_dir.exists()
        finally:
            repo_dir.rmdir()

    def test_clone_failure_cleans_up(self, completed):
        created = []
        real_mkdtemp = tempfile.mkdtemp

        def tracking_mkdtemp(**kwargs):
            path = real_mkdtemp(**kwargs)
            created.append(Path(path))
            return path

        with patch("distlab.repo.tempfile.mkdtemp", side_effect=tracking_mkdtemp), patch(
            "distlab.repo.subprocess.run"
        ) as run:
            run.side_effect = lambda cmd, **kw: completed(cmd, 128, stderr="fatal: nope")
            with pytest.raises(CloneError) as exc:
                with cloned_repository("https://example.com/r.git"):
                    pass
        assert exc.value.reason == "fatal: nope"
        assert not created[0].exists()

    def test_git_missing(self):
        with patch("distlab.repo.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(ToolNotFoundError, match="git"):
                with cloned_repository("u"):
                    pass

    def test_timeout(self):
        with patch(
            "distlab.repo.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=1),
        ):
            with pytest.raises(CloneError, match="timed out"):
                with cloned_repository("u", timeout=1):
                    pass


class TestFindSourceFiles:
    def test_filters_by_suffix_and_sorts(self, tmp_path):
        (tmp_path / "z.c").write_text("")
        (tmp_path / "lib").mkdir()
        (tmp_path / "lib" / "a.cpp").write_text("")
        (tmp_path / "lib" / "a.cpp.orig").write_text("")
        (tmp_path / "README.md").write_text("")
        assert find_source_files(tmp_path, (".c", ".cpp")) == [Path("lib/a.cpp"), Path("z.c")]

    def test_case_sensitive(self, tmp_path):
        (tmp_path / "UPPER.C").write_text("")
        assert find_source_files(tmp_path, (".c",)) == []

    def test_skips_git_dir(self, tmp_path):
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "x.c").write_text("")
        assert find_source_files(tmp_path, (".c",)) == []


def test_log_sample_files_limits():
    files = [Path(f"{i}.c") for i in range(15)]
    assert log_sample_files(files, limit=10) == files[:10]
    assert log_sample_files([], limit=10) == []


class TestReadSource:
    def test_reads_bytes(self, tmp_path):
        (tmp_path / "a.c").write_bytes(b"int x;\xff")
        assert read_source(tmp_path / "a.c") == b"int x;\xff"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileAccessError) as exc:
            read_source(tmp_path / "gone.c")
        assert exc.value.filepath == tmp_path / "gone.c"
