"""CLI output styling utilities.

- Cyan bold for labels
- Green for success messages (with checkmark)
- Red for error messages (with cross)
- Dim for neutral/empty state messages
"""

from __future__ import annotations

__all__ = [
    "style_dim",
    "style_error",
    "style_label",
    "style_success",
]

import click


def style_label(label: str) -> str:
    """Style a label with cyan bold and colon suffix.

    Example:
        >>> click.echo(style_label("Reasons") + " 2")
        Reasons: 2
    """
    return click.style(f"{label}:", fg="cyan", bold=True)


def style_success(message: str) -> str:
    """Style a success message with checkmark."""
    return click.style(f"✓ {message}", fg="green")


def style_error(message: str) -> str:
    """Style an error message with cross mark."""
    return click.style(f"✗ {message}", fg="red")


def style_dim(message: str) -> str:
    """Style a neutral/empty state message as dim."""
    return click.style(message, dim=True)
