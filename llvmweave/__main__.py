"""
Module entry-point that makes the package runnable with

    python -m llvmweave
    python -m llvmweave.cli

The behaviour is identical to the *weave-llvm-src* console script because
the Click command imported below performs all argument handling.
"""

from llvmweave.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
