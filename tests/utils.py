"""Test helpers for fabricating LLVM-style release archives."""

from __future__ import annotations

import io
import tarfile
from pathlib import Path, PurePosixPath
from typing import Mapping


def _add_dir(tf: tarfile.TarFile, name: str, mode: int = 0o755) -> None:
    info = tarfile.TarInfo(name)
    info.type = tarfile.DIRTYPE
    info.mode = mode
    tf.addfile(info)


def _add_file(
    tf: tarfile.TarFile,
    name: str,
    data: bytes,
    mode: int = 0o644,
    kind: bytes = tarfile.REGTYPE,
) -> None:
    info = tarfile.TarInfo(name)
    info.type = kind
    info.size = len(data)
    info.mode = mode
    tf.addfile(info, io.BytesIO(data))


def make_archive(
    directory: Path,
    name: str,
    version: str,
    files: Mapping[str, bytes] | None = None,
    *,
    with_dirs: bool = True,
) -> Path:
    """Write ``<name>-<version>.src.tar.xz`` into *directory*.

    Args:
        directory: Folder receiving the archive.
        name: Component name used in the filename and the top-level folder.
        version: Version string used in the filename and the top-level folder.
        files: Mapping of component-relative paths to contents.  Defaults to a
            single ``README.txt`` naming the component.
        with_dirs: Emit explicit directory entries (the usual tar layout).

    Returns:
        Path to the created archive.
    """
    files = files if files is not None else {"README.txt": f"{name} {version}".encode()}
    prefix = f"{name}-{version}.src"
    path = directory / f"{prefix}.tar.xz"

    with tarfile.open(path, "w:xz") as tf:
        seen: set[str] = set()
        if with_dirs:
            _add_dir(tf, prefix)
        for rel, data in files.items():
            full = PurePosixPath(prefix, rel)
            if with_dirs:
                for parent in reversed(full.parents[:-2]):
                    if str(parent) not in seen:
                        seen.add(str(parent))
                        _add_dir(tf, str(parent))
            _add_file(tf, str(full), data)
    return path


def make_raw_archive(path: Path, members: list[tuple[str, str, bytes]]) -> Path:
    """Write an arbitrary ``.tar.xz`` from ``(kind, name, data)`` triples.

    *kind* is one of ``"dir"``, ``"file"``, ``"oldfile"`` (legacy AREGTYPE),
    ``"symlink"``; *data* is the file payload or the link target.
    """
    with tarfile.open(path, "w:xz") as tf:
        for kind, name, data in members:
            if kind == "dir":
                _add_dir(tf, name)
            elif kind == "file":
                _add_file(tf, name, data)
            elif kind == "oldfile":
                _add_file(tf, name, data, kind=tarfile.AREGTYPE)
            elif kind == "symlink":
                info = tarfile.TarInfo(name)
                info.type = tarfile.SYMTYPE
                info.linkname = data.decode()
                tf.addfile(info)
            else:  # pragma: no cover – helper misuse
                raise ValueError(kind)
    return path


def tree(root: Path) -> dict[str, bytes | None]:
    """Snapshot *root* as ``{relative path: bytes or None for dirs}``."""
    snap: dict[str, bytes | None] = {}
    for p in sorted(root.rglob("*")):
        rel = p.relative_to(root).as_posix()
        snap[rel] = None if p.is_dir() else p.read_bytes()
    return snap
