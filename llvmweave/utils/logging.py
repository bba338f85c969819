"""
Package-level logging configuration.

* Rich console output on **stderr** (colourised, nicely formatted).
* Rotating **JSON** log file when ``$WEAVE_LLVM_LOG_DIR`` is set.
* Optional plain-text mirror controlled via ``--save-logfile`` on the CLI.

The public helper :func:`setup_logging` wires everything and should be the
sole entry-point used by the CLI.
"""

from __future__ import annotations

import atexit
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler
from structlog.dev import ConsoleRenderer as StructlogConsoleRenderer
from structlog.stdlib import LoggerFactory

__all__ = ["setup_logging", "console_level"]

ENV_LOG_DIR = "WEAVE_LLVM_LOG_DIR"


# --------------------------------------------------------------------------- #
# Internal helpers – file-based handlers                                      #
# --------------------------------------------------------------------------- #
def _json_file_handler(level: int) -> logging.Handler | None:
    """Return a rotating JSON file handler, or *None* without a log dir.

    Args:
        level: Log-level for the handler.

    Returns:
        Handler writing ``weave-llvm-src.log`` into ``$WEAVE_LLVM_LOG_DIR``,
        or ``None`` when the variable is unset.
    """
    env_dir = os.environ.get(ENV_LOG_DIR)
    if not env_dir:
        return None

    logdir = Path(env_dir).expanduser()
    logdir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=logdir / "weave-llvm-src.log",
        maxBytes=5_000_000,  # ~5 MB before rollover
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
            ],
        )
    )
    return handler


def _plain_text_file_handler(
    path: Optional[Path], level: int
) -> logging.Handler | None:
    """Return a plain-text file handler or *None* when *path* is *None*."""
    if path is None:
        return None

    path = path.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, encoding="utf-8", mode="a")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    # Ensure the buffer is flushed on interpreter exit.
    atexit.register(handler.close)
    return handler


def console_level(*, verbose: bool = False, debug: bool = False) -> int:
    """Map the CLI verbosity flags onto a logging level."""
    if debug:
        return logging.DEBUG
    return logging.INFO if verbose else logging.WARNING


# --------------------------------------------------------------------------- #
# Public API – main entry-point                                               #
# --------------------------------------------------------------------------- #
def setup_logging(
    *,
    verbose: bool = False,
    debug: bool = False,
    extra_text_log: Optional[Path] = None,
) -> None:
    """Configure rich console logging and optional file mirrors.

    Args:
        verbose: Emit INFO-level diagnostics to stderr.
        debug: Emit DEBUG-level diagnostics (one line per extracted file).
        extra_text_log: Optional path for a plain-text mirror of the console.
    """
    console_lvl = console_level(verbose=verbose, debug=debug)
    file_lvl = logging.DEBUG if debug else logging.INFO

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            level=console_lvl,
            rich_tracebacks=debug,
            show_path=debug,
            markup=False,
        )
    ]

    json_handler = _json_file_handler(file_lvl)
    if json_handler:
        handlers.append(json_handler)

    txt_handler = _plain_text_file_handler(extra_text_log, console_lvl)
    if txt_handler:
        handlers.append(txt_handler)

    # --- Configure root logger --------------------------------------------------
    logging.basicConfig(
        level=logging.DEBUG,  # handlers filter on their own level
        handlers=handlers,
        format="%(message)s",
        force=True,  # repeated CLI invocations in one process rebind handlers
    )

    # --- structlog binds --------------------------------------------------------
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            StructlogConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(console_lvl),
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=False,
    )
