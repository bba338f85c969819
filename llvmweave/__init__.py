"""
llvmweave package initialisation.

The module performs two small tasks:

1. **Expose the version string**
   ``llvmweave.__version__`` is resolved at import-time from the installed
   distribution metadata.

2. **Re-export the public entry points**
   :func:`load_config` and :func:`weave` are available at the top level so
   call-sites can simply do::

       from llvmweave import load_config, weave

       weave(load_config(src_dir="downloads", dst_dir="src"))
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("llvmweave")
except PackageNotFoundError:
    # Source tree without installed metadata.
    __version__ = "0.0.0"

from .config import load_config  # noqa: E402
from .pipelines.weave import weave  # noqa: E402

__all__: list[str] = ["load_config", "weave", "__version__"]
