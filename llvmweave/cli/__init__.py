"""Expose the ``weave-llvm-src`` command.

The module:

* declares a single Click command called :pyfunc:`main`;
* maps the zero, one or two positional arguments onto the source and
  destination directories (both default to the current directory);
* sets up logging via :pyfunc:`llvmweave.utils.logging.setup_logging`;
* builds the one :class:`~llvmweave.config.WeaveConfig` of the run and hands
  it to :pyfunc:`llvmweave.pipelines.weave.weave`;
* turns every failure into a single ``<program>:error: <message>`` line on
  stderr and exit status 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import click
import structlog

from llvmweave import __version__
from llvmweave.config import PROGRAM_NAME, load_config
from llvmweave.pipelines.weave import weave
from llvmweave.utils.display import (
    echo_banner,
    echo_error,
    echo_step,
    echo_success,
    echo_warning,
)
from llvmweave.utils.errors import WeaveError
from llvmweave.utils.logging import setup_logging

log = structlog.get_logger()

_CTX: Dict[str, Any] = dict(
    help_option_names=["-h", "--help"],
    max_content_width=120,
    # Positional arguments past DST_DIR are ignored, not a usage error.
    allow_extra_args=True,
)


@click.command(
    name=PROGRAM_NAME,
    context_settings=_CTX,
    help="""\b
Constructs LLVM source tree from downloaded archives.

SRC_DIR holds the *.src.tar.xz release archives and DST_DIR receives the
tree; both default to the current directory.
""",
)
@click.version_option(__version__)
@click.argument("src_dir", required=False, type=click.Path(path_type=Path))
@click.argument("dst_dir", required=False, type=click.Path(path_type=Path))
@click.option("-v", "--verbose", is_flag=True, help="Be verbose.")
@click.option("--debug", is_flag=True, help="DEBUG console output (one line per file).")
@click.option("--dry-run", is_flag=True, help="Show what would be extracted; change nothing.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML configuration file (overrides $WEAVE_LLVM_CONFIG).",
)
@click.option(
    "--save-logfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Mirror console output into this plain-text file.",
)
@click.pass_context
def main(  # noqa: D401 – Click requires the callback to be named “main”.
    ctx: click.Context,
    src_dir: Path | None,
    dst_dir: Path | None,
    verbose: bool,
    debug: bool,
    dry_run: bool,
    config_path: Path | None,
    save_logfile: Path | None,
) -> None:
    """Root command executed by *weave-llvm-src*.

    Args:
        ctx: Click runtime context.
        src_dir: Directory containing the release archives.
        dst_dir: Root of the tree to populate.
        verbose: Emit INFO-level diagnostics on stderr.
        debug: Emit DEBUG-level diagnostics on stderr.
        dry_run: Classify and plan without extracting.
        config_path: Optional YAML configuration file.
        save_logfile: Optional plain-text log mirror.
    """
    program = ctx.find_root().info_name or PROGRAM_NAME

    try:
        # Logging must be configured before any output is produced
        setup_logging(verbose=verbose, debug=debug, extra_text_log=save_logfile)
        cfg = load_config(
            config_path=config_path,
            program=program,
            src_dir=src_dir or Path("."),
            dst_dir=dst_dir or Path("."),
            verbose=verbose,
            debug=debug,
            dry_run=dry_run,
        )
        if ctx.args:
            log.info("extra_arguments_ignored", args=list(ctx.args))
        log.debug("config_loaded", src=str(cfg.src_dir), dst=str(cfg.dst_dir))
        result = weave(cfg)
    except (WeaveError, OSError) as exc:
        echo_error(program, str(exc))
        ctx.exit(1)

    title = "Planned extraction" if result.dry_run else "Extracted"
    echo_banner(f"{title} (LLVM {result.version})")
    for step in result.steps:
        echo_step(step.record.name, step.record.version, str(step.destination))
    if cfg.verbose or cfg.debug:
        for rec in result.rejected:
            echo_warning(f"{rec.path.name} skipped (version mismatch)")

    if result.dry_run:
        echo_success(f"{len(result.steps)} archive(s) would be extracted into {result.dst_dir}")
    else:
        echo_success(f"{len(result.steps)} archive(s) extracted into {result.dst_dir}")


__all__: list[str] = ["main"]
