"""Discovery, planning and extraction stages of a weave run."""

from .classify import collect_archives, scan_source_dir, select_archives
from .extract import extract_tar_xz
from .types import ArchiveSelection, ExtractionStats, WeaveResult, WeaveStep
from .weave import destination_for, plan_weave, weave, weave_archives

__all__: list[str] = [
    "collect_archives",
    "scan_source_dir",
    "select_archives",
    "extract_tar_xz",
    "destination_for",
    "plan_weave",
    "weave_archives",
    "weave",
    "ArchiveSelection",
    "ExtractionStats",
    "WeaveResult",
    "WeaveStep",
]
