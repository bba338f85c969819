"""Utility functions to print formatted CLI messages for progress updates."""

from __future__ import annotations

import click

__all__ = ["echo_banner", "echo_step", "echo_warning", "echo_success", "echo_error"]


def echo_banner(text: str) -> None:
    """Print a coloured banner announcing a processing step.

    Args:
        text: Banner text.
    """
    click.secho(f"=== {text} ===", fg="cyan")


def echo_step(name: str, version: str, destination: str) -> None:
    """Echo a bullet describing one component and where it goes."""
    click.echo(f"  • {name} {version} → {destination}")


def echo_warning(text: str) -> None:
    """Echo a yellow note about a skipped archive."""
    click.secho(f"  ! {text}", fg="yellow")


def echo_success(text: str) -> None:
    """Echo a green success message prefixed with a tick.

    Args:
        text: Message to display.
    """
    click.secho(f"✓ {text}", fg="green")


def echo_error(program: str, message: str) -> None:
    """Write the single-line ``<program>:error: <message>`` diagnostic to stderr."""
    click.echo(f"{program}:error: {message}", err=True)
