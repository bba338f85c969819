"""
Configuration package façade.

Exports the small, stable surface that external callers rely on:

* :func:`load_config` – Read an optional YAML file, merge overrides and
  validate everything into a single :class:`WeaveConfig` instance.
* :class:`WeaveConfig` – Pydantic model representing the validated settings.
* :data:`DEFAULT_LAYOUT` – the component → destination table.
"""

from .loader import load_config  # noqa: F401
from .schema import DEFAULT_LAYOUT, PROGRAM_NAME, WeaveConfig  # noqa: F401

__all__: list[str] = ["load_config", "WeaveConfig", "DEFAULT_LAYOUT", "PROGRAM_NAME"]
