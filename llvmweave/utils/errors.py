"""Exceptions raised while discovering, planning and extracting archives.

Every message already carries its context (operation and path) so the CLI
can print it verbatim on a single line.
"""

from __future__ import annotations


class WeaveError(RuntimeError):
    """Base class for every unrecoverable failure of a weave run."""

    pass


class DiscoveryError(WeaveError):
    """Raised when the source directory cannot be scanned or classified."""

    pass


class NoArchivesFoundError(DiscoveryError):
    """Raised when no filename in the source directory matches the convention."""

    pass


class MissingCoreArchiveError(DiscoveryError):
    """Raised when the mandatory LLVM core archive is absent."""

    pass


class UnknownComponentError(WeaveError):
    """Raised when a matched archive names a component without a destination."""

    pass


class ExtractionError(WeaveError):
    """Raised when an archive cannot be unpacked or swapped into place."""

    pass


class ConfigError(WeaveError):
    """Raised when the YAML configuration fails validation."""

    pass
