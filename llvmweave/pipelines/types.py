"""
Typed, immutable value objects that circulate between pipeline stages.

Every class inherits from :class:`pydantic.BaseModel` with ``frozen=True``
to prevent accidental mutation once the objects have been created.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from llvmweave.models import ArchiveRecord, Component


class ArchiveSelection(BaseModel, frozen=True):
    """Outcome of classifying one source directory.

    Attributes
    ----------
    core
        The LLVM core archive.
    accepted
        Auxiliary archives sharing the core version, in discovery order.
    rejected
        Auxiliary archives dropped because of a version mismatch.
    """

    core: ArchiveRecord
    accepted: list[ArchiveRecord] = []
    rejected: list[ArchiveRecord] = []

    @property
    def version(self) -> str:
        return self.core.version

    @property
    def ordered(self) -> list[ArchiveRecord]:
        """Archives to extract: core first, then the accepted auxiliaries."""
        return [self.core, *self.accepted]


class ExtractionStats(BaseModel, frozen=True):
    """Entry counts reported by :pyfunc:`llvmweave.pipelines.extract.extract_tar_xz`."""

    files: int = 0
    directories: int = 0
    skipped: int = 0


class WeaveStep(BaseModel, frozen=True):
    """One planned extraction.

    Attributes
    ----------
    record
        Archive being extracted.
    component
        Component the archive was mapped to.
    destination
        Directory whose contents the archive replaces.
    prefix
        Top-level directory inside the archive that is stripped from every
        entry (``<name>-<version>.src``).
    """

    record: ArchiveRecord
    component: Component
    destination: Path
    prefix: str


class WeaveResult(BaseModel, frozen=True):
    """Summary returned by :pyfunc:`llvmweave.pipelines.weave.weave`."""

    src_dir: Path
    dst_dir: Path
    version: str
    steps: list[WeaveStep]
    rejected: list[ArchiveRecord] = []
    dry_run: bool = False
