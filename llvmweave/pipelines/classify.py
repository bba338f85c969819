"""
Discovery and classification of release archives.

:func:`collect_archives` scans a source directory, keeps every file whose
name follows the ``<component>-<x.y.z>.src.tar.xz`` convention and returns
the archives that should be extracted: the LLVM core first, followed by the
auxiliary archives that share its version, in directory-listing order.

Version-mismatched auxiliaries are dropped with a diagnostic instead of
failing the run, so a stale ``cfe`` tarball never blocks extraction of the
core and of the archives that do match.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from llvmweave.models import ArchiveRecord
from llvmweave.utils.archive import looks_like_archive
from llvmweave.utils.errors import (
    DiscoveryError,
    MissingCoreArchiveError,
    NoArchivesFoundError,
)
from .types import ArchiveSelection

log = logging.getLogger(__name__)


def scan_source_dir(src_dir: Path, logger: logging.Logger | None = None) -> list[ArchiveRecord]:
    """Return a record for every archive-named file directly under *src_dir*.

    The listing is non-recursive and sorted by name; that order is the
    "discovery order" preserved by later stages.

    Raises:
        DiscoveryError: When *src_dir* cannot be listed.
    """
    logger = logger or log
    try:
        entries = sorted(src_dir.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise DiscoveryError(
            f"failed to scan \"{src_dir}\" as a source directory: {exc.strerror or exc}"
        ) from exc

    records: list[ArchiveRecord] = []
    for entry in entries:
        record = ArchiveRecord.from_path(entry)
        if record is None:
            logger.info("Mismatch %s", entry.name)
            continue
        if not looks_like_archive(entry):
            logger.info("Skipping %s (not a regular file)", entry.name)
            continue
        logger.info(
            "Match %s (stem: %s, version: %s)", entry.name, record.name, record.version
        )
        records.append(record)
    return records


def select_archives(
    records: Iterable[ArchiveRecord],
    src_dir: Path,
    logger: logging.Logger | None = None,
) -> ArchiveSelection:
    """Split *records* into the core, matching auxiliaries and rejects.

    Raises:
        NoArchivesFoundError: When *records* is empty.
        MissingCoreArchiveError: When no record is the LLVM core.
        DiscoveryError: When more than one core archive is present.
    """
    logger = logger or log
    records = list(records)
    if not records:
        raise NoArchivesFoundError(f"no matching archives found in \"{src_dir}\"")

    cores = [r for r in records if r.is_core]
    if not cores:
        raise MissingCoreArchiveError(f"missing LLVM core archive in \"{src_dir}\"")
    if len(cores) > 1:
        found = ", ".join(r.path.name for r in cores)
        raise DiscoveryError(f"multiple LLVM core archives in \"{src_dir}\": {found}")
    core = cores[0]

    accepted: list[ArchiveRecord] = []
    rejected: list[ArchiveRecord] = []
    for rec in records:
        if rec is core:
            continue
        if rec.version != core.version:
            logger.info(
                "\"%s\" rejected (version mismatch: %s, core is %s)",
                rec.path, rec.version, core.version,
            )
            rejected.append(rec)
            continue
        accepted.append(rec)

    return ArchiveSelection(core=core, accepted=accepted, rejected=rejected)


def collect_archives(src_dir: Path, logger: logging.Logger | None = None) -> list[ArchiveRecord]:
    """Return the archives to extract from *src_dir*, core first."""
    records = scan_source_dir(src_dir, logger)
    return select_archives(records, src_dir, logger).ordered


__all__ = ["scan_source_dir", "select_archives", "collect_archives"]
