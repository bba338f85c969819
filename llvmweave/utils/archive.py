"""
Helpers for recognising LLVM release archives by filename.

Release tarballs follow a single naming convention::

    <component>-<major>.<minor>.<patch>.src.tar.xz

:func:`parse_archive_name` turns a basename into a structured
:class:`ArchiveName` (or ``None`` when the name does not follow the
convention). The check is a pure string operation; nothing is opened or
inspected, which keeps directory scans cheap.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel

#: Suffix shared by every release archive.
ARCHIVE_SUFFIX = ".src.tar.xz"

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


class ArchiveName(BaseModel, frozen=True):
    """Components of a parsed archive basename.

    Attributes
    ----------
    stem
        Component name exactly as written in the filename (``cfe``,
        ``compiler-rt`` …).  It is *not* checked against the known
        component vocabulary here.
    major, minor, patch
        Numeric version parts.
    version
        Literal version string as it appears in the filename.  Archives are
        compared on this string and it is reused to build the in-archive
        prefix, so it is kept verbatim instead of being re-rendered from the
        integers.
    """

    stem: str
    major: int
    minor: int
    patch: int
    version: str


def parse_archive_name(filename: str) -> ArchiveName | None:
    """Parse *filename* according to the release naming convention.

    Examples::

        >>> parse_archive_name("llvm-6.0.0.src.tar.xz").stem
        'llvm'
        >>> parse_archive_name("clang-tools-extra-6.0.1.src.tar.xz").version
        '6.0.1'
        >>> parse_archive_name("llvm-6.0.src.tar.xz") is None
        True

    Args:
        filename: Basename to test.  Directory components are not expected.

    Returns:
        The parsed :class:`ArchiveName`, or ``None`` when *filename* does not
        follow the convention.
    """
    if not filename.endswith(ARCHIVE_SUFFIX):
        return None
    base = filename[: -len(ARCHIVE_SUFFIX)]

    # The stem may itself contain dashes, the version never does.
    stem, sep, version = base.rpartition("-")
    if not sep or not stem:
        return None

    m = _VERSION_RE.fullmatch(version)
    if m is None:
        return None

    major, minor, patch = (int(g) for g in m.groups())
    return ArchiveName(
        stem=stem, major=major, minor=minor, patch=patch, version=version
    )


def looks_like_archive(path: Path) -> bool:
    """Return *True* when *path* is a file named like a release archive.

    Args:
        path: Filesystem path to test.

    Returns:
        ``True`` if *path* is a regular file and its basename parses with
        :func:`parse_archive_name`.
    """
    if not path.is_file():
        # Directories or missing paths never count as archives.
        return False
    return parse_archive_name(path.name) is not None
