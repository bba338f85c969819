"""Utility helpers for removing directory trees.

Two flavours exist because callers need different failure semantics:

* :func:`remove_tree` – used before swapping a freshly extracted component
  into place.  Failure must abort the run, so errors propagate as
  :class:`~llvmweave.utils.errors.ExtractionError`.
* :func:`discard_tree` – best-effort removal of scratch directories.  It
  never raises; leftovers are logged and otherwise ignored.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .errors import ExtractionError

log = logging.getLogger(__name__)


def remove_tree(path: Path) -> bool:
    """Recursively remove *path* when it exists.

    Args:
        path: Directory (or stray file) to remove.

    Returns:
        ``True`` when something was removed, ``False`` when *path* did not
        exist.

    Raises:
        ExtractionError: If the removal fails.
    """
    if not path.exists() and not path.is_symlink():
        return False
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise ExtractionError(
            f"failed to remove directory \"{path}\": {exc.strerror or exc}"
        ) from exc
    log.debug("Removed %s", path)
    return True


def discard_tree(path: Path) -> None:
    """Remove *path* if present, logging instead of raising on failure."""
    if not path.exists():
        return
    try:
        shutil.rmtree(path)
    except OSError as exc:  # pragma: no cover – leftovers are acceptable
        log.warning("Could not remove temporary directory %s: %s", path, exc)
