"""
YAML configuration loader.

This helper locates and reads an optional YAML file, merges explicit
overrides (normally the CLI flags) on top of it and validates the result
into a :class:`llvmweave.config.schema.WeaveConfig` instance.

Search precedence for the YAML (first match wins)
1. An explicit path argument (``--config`` on the CLI).
2. The file named by ``$WEAVE_LLVM_CONFIG``.
3. None – built-in defaults only.

A minimal file looks like::

    temp_prefix: ".weave-"
    layout:
      cfe: llvm/tools/clang
      compiler-rt: llvm/runtimes/compiler-rt
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from llvmweave.utils.errors import ConfigError
from .schema import WeaveConfig

ENV_CONFIG = "WEAVE_LLVM_CONFIG"

# --------------------------------------------------------------------------- #
# Helper functions                                                            #
# --------------------------------------------------------------------------- #


def _first_existing(*candidates: Optional[Path]) -> Optional[Path]:
    """Return the first path in *candidates* that exists on disk."""
    for p in candidates:
        if p is not None and p.exists():
            return p
    return None


def _load_yaml(path: Path) -> dict:
    """Read a YAML mapping; an empty document yields an empty dict.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML or does
            not hold a mapping at the top level.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to read configuration \"{path}\": {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"configuration \"{path}\" must contain a mapping")
    return data


def resolve_config_path(explicit: Optional[str | Path] = None) -> Optional[Path]:
    """Return the YAML file to load according to the documented precedence.

    An explicit path that does not exist is an error rather than a silent
    fall-through, because the caller asked for that file specifically.
    """
    if explicit is not None:
        path = Path(explicit).expanduser()
        if not path.exists():
            raise ConfigError(f"configuration file \"{path}\" does not exist")
        return path
    env = os.environ.get(ENV_CONFIG)
    return _first_existing(Path(env).expanduser() if env else None)


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #
def load_config(
    *,
    config_path: Optional[str | Path] = None,
    **overrides: Any,
) -> WeaveConfig:
    """Return a fully validated :class:`WeaveConfig`.

    Args:
        config_path: Explicit YAML path. ``None`` triggers the search
            sequence described in the module doc-string.
        **overrides: Field values that take precedence over the YAML.
            ``None`` values are ignored so CLI callers can pass every flag
            unconditionally.

    Returns:
        A :class:`WeaveConfig` ready for downstream use.

    Raises:
        ConfigError: When the YAML cannot be read or the merged settings
            fail validation.
    """
    resolved = resolve_config_path(config_path)
    merged: dict = _load_yaml(resolved) if resolved is not None else {}

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return WeaveConfig(**merged)
    except ValidationError as exc:
        where = f" in \"{resolved}\"" if resolved is not None else ""
        # One line per run: the CLI prints the message verbatim.
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigError(f"invalid configuration{where} – {details}") from exc
