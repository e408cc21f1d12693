"""Unit tests for sigscan.api.scan.walk_files."""

import os

import pytest

from sigscan.api.scan.TraversalError import TraversalError
from sigscan.api.scan.walk_files import walk_files

pytestmark = pytest.mark.scan

needs_symlinks = pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks required")
not_root = pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permissions")


def test_walks_nested_directories(scan_root):
    """All regular files at any depth are yielded."""
    (scan_root / "a").mkdir()
    (scan_root / "a" / "b").mkdir()
    (scan_root / "top.txt").write_text("1")
    (scan_root / "a" / "mid.txt").write_text("2")
    (scan_root / "a" / "b" / "deep.txt").write_text("3")

    found = {p.relative_to(scan_root).as_posix() for p in walk_files(scan_root)}

    assert found == {"top.txt", "a/mid.txt", "a/b/deep.txt"}


def test_empty_directory_yields_nothing(scan_root):
    (scan_root / "empty_sub").mkdir()
    assert list(walk_files(scan_root)) == []


def test_root_file_is_yielded(tmp_path):
    """A regular file given as root is the only entry."""
    single = tmp_path / "single.bin"
    single.write_bytes(b"x")

    assert list(walk_files(single)) == [single]


def test_missing_root_raises(tmp_path):
    """A root that cannot be listed aborts the walk."""
    with pytest.raises(TraversalError) as exc_info:
        list(walk_files(tmp_path / "nope"))
    assert "nope" in str(exc_info.value)


@needs_symlinks
def test_symlinked_file_included_and_dangling_excluded(scan_root, tmp_path):
    target = tmp_path / "outside.txt"
    target.write_text("outside")
    (scan_root / "link.txt").symlink_to(target)
    (scan_root / "dangling.txt").symlink_to(tmp_path / "gone.txt")

    found = {p.name for p in walk_files(scan_root)}

    assert found == {"link.txt"}


@needs_symlinks
def test_follows_symlinked_directories(scan_root, tmp_path):
    outside = tmp_path / "outside_dir"
    outside.mkdir()
    (outside / "inner.txt").write_text("inner")
    (scan_root / "linked").symlink_to(outside, target_is_directory=True)

    found = {p.relative_to(scan_root).as_posix() for p in walk_files(scan_root)}
    assert found == {"linked/inner.txt"}

    not_followed = list(walk_files(scan_root, follow_symlinks=False))
    assert not_followed == []


@needs_symlinks
@pytest.mark.timeout(10)
def test_symlink_cycle_is_walked_once(scan_root):
    """A loop back to an ancestor does not recurse forever."""
    sub = scan_root / "sub"
    sub.mkdir()
    (sub / "file.txt").write_text("data")
    (sub / "loop").symlink_to(scan_root, target_is_directory=True)

    found = [p.relative_to(scan_root).as_posix() for p in walk_files(scan_root)]

    assert found == ["sub/file.txt"]


@not_root
def test_unlistable_subdirectory_raises(scan_root):
    locked = scan_root / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("s")
    locked.chmod(0)
    try:
        with pytest.raises(TraversalError) as exc_info:
            list(walk_files(scan_root))
        assert exc_info.value.path == locked
    finally:
        locked.chmod(0o755)
