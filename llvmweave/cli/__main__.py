"""Module wrapper so running ``python -m llvmweave.cli`` matches the console script."""

from llvmweave.cli import main  # Re-exported Click command


if __name__ == "__main__":  # pragma: no cover
    main()
