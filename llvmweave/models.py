"""
Domain-level data models shared across the pipeline and CLI layers.

The module provides:

* **`Component`** – the closed vocabulary of LLVM sub-projects that can be
  woven into a source tree.  ``CORE`` marks the mandatory LLVM
  core archive.
* **`ArchiveRecord`** – one discovered release archive, paired with the
  component name and version taken from its filename.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from llvmweave.utils.archive import ArchiveName, parse_archive_name


class Component(str, Enum):
    """LLVM sub-projects shipped as separate release archives."""

    LLVM = "llvm"
    CFE = "cfe"
    CLANG_TOOLS_EXTRA = "clang-tools-extra"
    LLD = "lld"
    LLDB = "lldb"
    POLLY = "polly"
    COMPILER_RT = "compiler-rt"
    OPENMP = "openmp"
    LIBCXX = "libcxx"
    LIBCXXABI = "libcxxabi"
    TEST_SUITE = "test-suite"
    LIBUNWIND = "libunwind"

    @classmethod
    def lookup(cls, name: str) -> "Component | None":
        """Return the member whose value is *name*, or ``None``."""
        try:
            return cls(name)
        except ValueError:
            return None


#: The mandatory component; its archive is always extracted first.
CORE = Component.LLVM


class ArchiveRecord(BaseModel, frozen=True):
    """A file believed to be a component release archive.

    Attributes
    ----------
    path
        Location of the archive file.
    name
        Component name as captured from the filename.  It may fall outside
        :class:`Component`; such records survive classification and are
        rejected when their destination is looked up.
    version
        Three-part version string taken verbatim from the filename.
    """

    path: Path
    name: str
    version: str

    @classmethod
    def from_name(cls, directory: Path, parsed: ArchiveName, filename: str) -> "ArchiveRecord":
        return cls(path=directory / filename, name=parsed.stem, version=parsed.version)

    @classmethod
    def from_path(cls, path: Path) -> "ArchiveRecord | None":
        """Build a record from *path* or return ``None`` when the name does not parse."""
        parsed = parse_archive_name(path.name)
        if parsed is None:
            return None
        return cls.from_name(path.parent, parsed, path.name)

    @property
    def component(self) -> Component | None:
        return Component.lookup(self.name)

    @property
    def is_core(self) -> bool:
        return self.name == CORE.value

    @property
    def prefix(self) -> str:
        """Self-named top-level directory stored inside the archive."""
        return f"{self.name}-{self.version}.src"
