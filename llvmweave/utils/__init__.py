"""
Public façade for the *utils* package.

Anything imported here becomes part of the *stable* public API.
Internal helpers live in their own modules and are **not** re-exported.
"""

from __future__ import annotations

# ─── archive names ───────────────────────────────────────────────────────
from .archive import ARCHIVE_SUFFIX, ArchiveName, looks_like_archive, parse_archive_name

# ─── cleanup ─────────────────────────────────────────────────────────────
from .cleanup import discard_tree, remove_tree

# ─── errors ──────────────────────────────────────────────────────────────
from .errors import (
    ConfigError,
    DiscoveryError,
    ExtractionError,
    MissingCoreArchiveError,
    NoArchivesFoundError,
    UnknownComponentError,
    WeaveError,
)

# ─── console output ──────────────────────────────────────────────────────
from .display import echo_banner, echo_error, echo_step, echo_success, echo_warning

# ------------------------------------------------------------------------
__all__: list[str] = [
    "ARCHIVE_SUFFIX",
    "ArchiveName",
    "looks_like_archive",
    "parse_archive_name",
    "discard_tree",
    "remove_tree",
    "ConfigError",
    "DiscoveryError",
    "ExtractionError",
    "MissingCoreArchiveError",
    "NoArchivesFoundError",
    "UnknownComponentError",
    "WeaveError",
    "echo_banner",
    "echo_error",
    "echo_step",
    "echo_success",
    "echo_warning",
]
