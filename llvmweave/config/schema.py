"""
Pydantic model for the run-time configuration of a weave run.

A single :class:`WeaveConfig` is built at start-up (CLI flags merged over an
optional YAML file) and handed to every pipeline stage that needs it, so no
stage reads program name, verbosity or layout from module-level state.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Dict

from pydantic import BaseModel, Field, field_validator, model_validator

from llvmweave.models import Component

# --------------------------------------------------------------------------- #
# Component → destination table                                               #
# --------------------------------------------------------------------------- #
#: Where each component lands, relative to the destination root.
DEFAULT_LAYOUT: Dict[Component, PurePosixPath] = {
    Component.LLVM: PurePosixPath("llvm"),
    Component.CFE: PurePosixPath("llvm/tools/clang"),
    Component.CLANG_TOOLS_EXTRA: PurePosixPath("llvm/tools/clang/tools/extra"),
    Component.LLD: PurePosixPath("llvm/tools/lld"),
    Component.LLDB: PurePosixPath("llvm/tools/lldb"),
    Component.POLLY: PurePosixPath("llvm/tools/polly"),
    Component.COMPILER_RT: PurePosixPath("llvm/projects/compiler-rt"),
    Component.OPENMP: PurePosixPath("llvm/projects/openmp"),
    Component.LIBCXX: PurePosixPath("llvm/projects/libcxx"),
    Component.LIBCXXABI: PurePosixPath("llvm/projects/libcxxabi"),
    Component.TEST_SUITE: PurePosixPath("llvm/projects/test-suite"),
    Component.LIBUNWIND: PurePosixPath("llvm/projects/libunwind"),
}

PROGRAM_NAME = "weave-llvm-src"


class WeaveConfig(BaseModel, frozen=True):
    """Fully validated settings for one invocation.

    Attributes:
        program:     Name used as prefix of diagnostics.
        src_dir:     Directory scanned for release archives.
        dst_dir:     Root of the tree to populate.
        verbose:     INFO-level diagnostics on stderr.
        debug:       DEBUG-level diagnostics (one line per extracted file).
        dry_run:     Classify and plan only; nothing is extracted.
        layout:      Component → relative destination.  Entries given in YAML
                     are merged over :data:`DEFAULT_LAYOUT`.
        temp_prefix: Name prefix of the sibling temporary directories.
    """

    program: str = PROGRAM_NAME
    src_dir: Path = Path(".")
    dst_dir: Path = Path(".")
    verbose: bool = False
    debug: bool = False
    dry_run: bool = False
    layout: Dict[Component, PurePosixPath] = Field(
        default_factory=lambda: dict(DEFAULT_LAYOUT)
    )
    temp_prefix: str = "txz-"

    # --------------------------- validators ------------------------------ #
    @field_validator("layout", mode="before")
    @classmethod
    def _merge_defaults(cls, value):
        """Fill components missing from a partial YAML mapping."""
        if value is None:
            return dict(DEFAULT_LAYOUT)
        if not isinstance(value, dict):
            raise ValueError("layout must be a mapping of component to path")
        merged: dict = {c.value: p for c, p in DEFAULT_LAYOUT.items()}
        merged.update({getattr(k, "value", k): v for k, v in value.items()})
        return merged

    @field_validator("layout")
    @classmethod
    def _paths_are_relative(cls, value: Dict[Component, PurePosixPath]):
        for component, rel in value.items():
            if rel.is_absolute() or ".." in rel.parts:
                raise ValueError(
                    f"destination of {component.value!r} must be a relative path "
                    f"inside the destination root, got {str(rel)!r}"
                )
        return value

    @field_validator("temp_prefix")
    @classmethod
    def _prefix_is_a_name(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError("temp_prefix must be a plain, non-empty name")
        return value

    @model_validator(mode="after")
    def _layout_is_exhaustive(self):
        missing = set(Component) - set(self.layout)
        if missing:
            names = ", ".join(sorted(c.value for c in missing))
            raise ValueError(f"layout has no destination for: {names}")
        return self
