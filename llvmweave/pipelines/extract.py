"""
Crash-safe extraction of ``*.tar.xz`` release archives.

:func:`extract_tar_xz` replaces the *entire* contents of a destination
directory with the contents of one archive:

1. the archive is streamed (xz → tar) into a fresh ``txz-*`` directory that
   sits next to the destination, so the final rename never crosses a
   filesystem boundary;
2. the self-named top-level directory (``<name>-<version>.src``) is stripped
   from every entry on the way;
3. only when every entry has been written and the xz stream has reached its
   end-of-stream marker is the old destination removed and the temporary
   directory renamed into its place.  A truncated download therefore fails
   instead of replacing the destination with a partial tree.

The temporary directory is discarded on every exit path, so a failed
extraction leaves the previous destination untouched and no scratch
directories behind.

Only directories and regular files are materialised.  Symlinks, hard links
and device nodes are skipped: the input is a trusted, self-produced release
archive.
"""

from __future__ import annotations

import contextlib
import logging
import lzma
import os
import shutil
import tarfile
import tempfile
from pathlib import Path, PurePosixPath

from llvmweave.utils.cleanup import discard_tree, remove_tree
from llvmweave.utils.errors import ExtractionError
from .types import ExtractionStats

log = logging.getLogger(__name__)

#: Permission bits used for parent directories the archive does not describe.
_DIR_MODE = 0o755

# Errors raised by the decompressing tar reader.
_READ_ERRORS = (tarfile.TarError, lzma.LZMAError, EOFError, OSError)


# ---------------------------------------------------------------------------
# 0 – entry path mapping
# ---------------------------------------------------------------------------


def _member_relpath(name: str, prefix: str) -> PurePosixPath:
    """Return the path of entry *name* relative to the component root.

    Entries that do not live under *prefix* keep their recorded path.  This
    fallback keeps malformed archives extractable instead of dropping the
    entry, but it is a leniency, not the expected layout.
    """
    raw = PurePosixPath(name)
    try:
        return raw.relative_to(prefix)
    except ValueError:
        log.debug("Entry %s is outside %s; using its raw path", name, prefix)
        return raw


def _output_path(root: Path, rel: PurePosixPath, name: str) -> Path:
    """Join *rel* under *root*, refusing paths that would escape it."""
    if rel.is_absolute() or ".." in rel.parts:
        raise ExtractionError(f"refusing to extract unsafe entry \"{name}\"")
    return root.joinpath(*rel.parts)


# ---------------------------------------------------------------------------
# 1 – per-entry writers
# ---------------------------------------------------------------------------


def _make_dir(path: Path, mode: int) -> None:
    try:
        path.mkdir(mode=mode, parents=True, exist_ok=True)
    except OSError as exc:
        raise ExtractionError(
            f"failed to create directory \"{path}\": {exc.strerror or exc}"
        ) from exc


def _set_mode(path: Path, mode: int) -> None:
    try:
        os.chmod(path, mode)
    except OSError as exc:
        raise ExtractionError(
            f"failed to set mode of \"{path}\": {exc.strerror or exc}"
        ) from exc


def _write_file(path: Path, reader, mode: int) -> None:
    """Stream *reader* into a new file at *path* created with *mode*."""
    _make_dir(path.parent, _DIR_MODE)
    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, mode)
    except OSError as exc:
        raise ExtractionError(
            f"failed to create file \"{path}\": {exc.strerror or exc}"
        ) from exc

    writer = os.fdopen(fd, "wb")
    try:
        shutil.copyfileobj(reader, writer)
    except _READ_ERRORS as exc:
        with contextlib.suppress(OSError):
            writer.close()
        raise ExtractionError(f"failed to copy contents to \"{path}\": {exc}") from exc
    try:
        writer.close()
    except OSError as exc:
        raise ExtractionError(
            f"failed to close file \"{path}\": {exc.strerror or exc}"
        ) from exc


# ---------------------------------------------------------------------------
# 2 – archive walk
# ---------------------------------------------------------------------------


def _unpack(tf: tarfile.TarFile, root: Path, prefix: str, archive: Path) -> ExtractionStats:
    """Materialise every directory and regular file of *tf* under *root*."""
    files = dirs = skipped = 0
    members = iter(tf)
    while True:
        try:
            member = next(members)
        except StopIteration:
            break
        except _READ_ERRORS as exc:
            raise ExtractionError(
                f"failed to obtain tar header from \"{archive}\": {exc}"
            ) from exc

        rel = _member_relpath(member.name, prefix)
        out = _output_path(root, rel, member.name)
        mode = member.mode & 0o7777

        if member.isdir():
            _make_dir(out, mode)
            # mkdir keeps the mode of a directory an earlier file entry created.
            _set_mode(out, mode)
            dirs += 1
        elif member.isreg():  # REGTYPE, legacy AREGTYPE and CONTTYPE
            log.debug("# %s", out)
            reader = tf.extractfile(member)
            if reader is None:  # pragma: no cover – isreg() always has data
                raise ExtractionError(f"no data for \"{member.name}\" in \"{archive}\"")
            _write_file(out, reader, mode)
            files += 1
        else:
            log.debug("Skipping %s (unsupported entry type)", member.name)
            skipped += 1

    return ExtractionStats(files=files, directories=dirs, skipped=skipped)


# ---------------------------------------------------------------------------
# 3 – public entry point
# ---------------------------------------------------------------------------


def extract_tar_xz(
    dst_dir: Path,
    archive: Path,
    prefix: str,
    *,
    temp_prefix: str = "txz-",
) -> ExtractionStats:
    """Replace the contents of *dst_dir* with the contents of *archive*.

    Parameters
    ----------
    dst_dir
        Directory to (re)populate.  Any existing content is removed, but only
        after the whole archive was unpacked successfully.
    archive
        ``*.tar.xz`` file to read.
    prefix
        Top-level directory inside the archive stripped from every entry.
    temp_prefix
        Name prefix of the sibling temporary directory.

    Returns
    -------
    ExtractionStats
        Counts of written files, created directories and skipped entries.

    Raises
    ------
    ExtractionError
        On any I/O, decompression or rename failure.  *dst_dir* is left
        untouched in that case.
    """
    parent = dst_dir.parent
    _make_dir(parent, _DIR_MODE)

    try:
        tmp_dir = Path(tempfile.mkdtemp(prefix=temp_prefix, dir=parent))
    except OSError as exc:
        raise ExtractionError(
            f"failed to create temporary output directory in \"{parent}\": "
            f"{exc.strerror or exc}"
        ) from exc

    try:
        os.chmod(tmp_dir, _DIR_MODE)
        stats = _extract_into(tmp_dir, archive, prefix)

        remove_tree(dst_dir)
        try:
            tmp_dir.rename(dst_dir)
        except OSError as exc:
            raise ExtractionError(
                f"failed to rename \"{tmp_dir}\" to \"{dst_dir}\": {exc.strerror or exc}"
            ) from exc
    finally:
        discard_tree(tmp_dir)

    log.info(
        "Extracted %s → %s (%d files, %d directories)",
        archive.name, dst_dir, stats.files, stats.directories,
    )
    return stats


def _extract_into(root: Path, archive: Path, prefix: str) -> ExtractionStats:
    """Open *archive* and unpack it under *root*; close it explicitly."""
    try:
        fh = open(archive, "rb")
    except OSError as exc:
        raise ExtractionError(
            f"failed to open \"{archive}\": {exc.strerror or exc}"
        ) from exc

    with fh, lzma.LZMAFile(fh, format=lzma.FORMAT_XZ) as xz:
        try:
            tf = tarfile.open(fileobj=xz, mode="r|")
        except _READ_ERRORS as exc:
            raise ExtractionError(
                f"failed to create XZ format reader for \"{archive}\": {exc}"
            ) from exc
        with tf:
            stats = _unpack(tf, root, prefix, archive)
        _read_to_end(xz, archive)
        try:
            fh.close()
        except OSError as exc:
            raise ExtractionError(
                f"failed to close \"{archive}\": {exc.strerror or exc}"
            ) from exc
    return stats


def _read_to_end(xz: lzma.LZMAFile, archive: Path) -> None:
    """Consume the rest of the xz stream up to its end-of-stream marker.

    The tar reader stops at the first zero block, so a download cut short
    after a block boundary would otherwise pass as a complete archive.
    """
    try:
        while xz.read(1 << 16):
            pass
    except _READ_ERRORS as exc:
        raise ExtractionError(f"unexpected end of \"{archive}\": {exc}") from exc


__all__ = ["extract_tar_xz"]
