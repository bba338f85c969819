"""
Assemble an LLVM source tree from classified release archives.

:func:`plan_weave` maps every archive onto its destination directory using
the component layout; :func:`weave_archives` extracts the planned archives
one after another and :func:`weave` wires discovery, planning and extraction
together for a :class:`~llvmweave.config.WeaveConfig`.

All destinations are resolved before the first extraction starts, so an
archive naming an unknown component aborts the run without touching the
destination tree.  Extraction failures abort immediately as well; archives
already extracted by then stay in place.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable, Mapping

from llvmweave.config.schema import DEFAULT_LAYOUT, WeaveConfig
from llvmweave.models import ArchiveRecord, Component
from llvmweave.utils.errors import UnknownComponentError
from .classify import scan_source_dir, select_archives
from .extract import extract_tar_xz
from .types import WeaveResult, WeaveStep

log = logging.getLogger(__name__)

Layout = Mapping[Component, PurePosixPath]


def destination_for(dst_root: Path, record: ArchiveRecord, layout: Layout = DEFAULT_LAYOUT) -> Path:
    """Return the directory *record* is extracted into.

    Raises:
        UnknownComponentError: When the archive's component has no entry in
            *layout*.
    """
    component = record.component
    if component is None or component not in layout:
        raise UnknownComponentError(f"unknown component \"{record.name}\" found")
    return dst_root.joinpath(*layout[component].parts)


def plan_weave(
    dst_root: Path,
    archives: Iterable[ArchiveRecord],
    layout: Layout = DEFAULT_LAYOUT,
) -> list[WeaveStep]:
    """Resolve the destination and strip prefix of every archive, in order."""
    steps: list[WeaveStep] = []
    for rec in archives:
        steps.append(
            WeaveStep(
                record=rec,
                component=rec.component,
                destination=destination_for(dst_root, rec, layout),
                prefix=rec.prefix,
            )
        )
    return steps


def weave_archives(
    dst_root: Path,
    archives: Iterable[ArchiveRecord],
    layout: Layout = DEFAULT_LAYOUT,
    *,
    dry_run: bool = False,
    temp_prefix: str = "txz-",
    logger: logging.Logger | None = None,
) -> list[WeaveStep]:
    """Extract every archive into its destination under *dst_root*.

    Parameters
    ----------
    dst_root
        Root of the tree to populate.
    archives
        Archives in extraction order; the core must come first so that the
        auxiliaries nested below it are not wiped by its replacement.
    layout
        Component → relative destination table.
    dry_run
        Plan only; no filesystem changes.

    Returns
    -------
    list[WeaveStep]
        The executed (or, for *dry_run*, planned) steps.

    Raises
    ------
    UnknownComponentError
        Before any extraction, when an archive has no destination.
    ExtractionError
        On the first failing extraction.
    """
    logger = logger or log
    # Every destination is looked up before the first extraction rather than
    # per archive, so an unknown component aborts with the tree untouched.
    steps = plan_weave(dst_root, archives, layout)

    for step in steps:
        if dry_run:
            logger.info("[dry-run] would extract %s → %s", step.record.path, step.destination)
            continue
        logger.info("Extracting %s → %s", step.record.path, step.destination)
        extract_tar_xz(
            step.destination,
            step.record.path,
            step.prefix,
            temp_prefix=temp_prefix,
        )
    return steps


def weave(config: WeaveConfig, logger: logging.Logger | None = None) -> WeaveResult:
    """Run discovery, planning and extraction for *config*."""
    logger = logger or log

    records = scan_source_dir(config.src_dir, logger)
    selection = select_archives(records, config.src_dir, logger)

    logger.info("Archives found:")
    for rec in selection.ordered:
        logger.info("# %s\tversion: %s\tpath: %s", rec.name, rec.version, rec.path)

    steps = weave_archives(
        config.dst_dir,
        selection.ordered,
        config.layout,
        dry_run=config.dry_run,
        temp_prefix=config.temp_prefix,
        logger=logger,
    )
    return WeaveResult(
        src_dir=config.src_dir,
        dst_dir=config.dst_dir,
        version=selection.version,
        steps=steps,
        rejected=selection.rejected,
        dry_run=config.dry_run,
    )


__all__ = ["destination_for", "plan_weave", "weave_archives", "weave"]
