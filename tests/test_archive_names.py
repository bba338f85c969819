from pathlib import Path

import pytest

from llvmweave.utils.archive import looks_like_archive, parse_archive_name


def test_parse_core_archive():
    """Verify parse core archive behavior."""
    parsed = parse_archive_name("llvm-6.0.0.src.tar.xz")
    assert parsed is not None
    assert parsed.stem == "llvm"
    assert parsed.version == "6.0.0"
    assert (parsed.major, parsed.minor, parsed.patch) == (6, 0, 0)


def test_parse_dashed_component():
    """Verify parse dashed component behavior."""
    parsed = parse_archive_name("clang-tools-extra-7.1.12.src.tar.xz")
    assert parsed is not None
    assert parsed.stem == "clang-tools-extra"
    assert (parsed.major, parsed.minor, parsed.patch) == (7, 1, 12)


def test_parse_keeps_literal_version():
    """Leading zeros survive so the in-archive prefix can be rebuilt."""
    parsed = parse_archive_name("lld-06.0.0.src.tar.xz")
    assert parsed.version == "06.0.0"
    assert parsed.major == 6


@pytest.mark.parametrize(
    "name",
    [
        "llvm-6.0.src.tar.xz",
        "llvm-6.0.0.tar.xz",
        "llvm-6.0.0.src.tar.gz",
        "llvm-6.0.0-rc1.src.tar.xz",
        "-6.0.0.src.tar.xz",
        "llvm6.0.0.src.tar.xz",
        "llvm-6.0.0.src.tar.xz.sig",
        "README.md",
    ],
)
def test_parse_rejects_other_names(name):
    """Verify parse rejects other names behavior."""
    assert parse_archive_name(name) is None


def test_looks_like_archive_requires_file(tmp_path: Path):
    """Verify looks like archive requires file behavior."""
    archive = tmp_path / "cfe-6.0.0.src.tar.xz"
    archive.write_bytes(b"")
    folder = tmp_path / "lld-6.0.0.src.tar.xz"
    folder.mkdir()

    assert looks_like_archive(archive)
    assert not looks_like_archive(folder)
    assert not looks_like_archive(tmp_path / "polly-6.0.0.src.tar.xz")
