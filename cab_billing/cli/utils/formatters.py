"""Output formatting utilities for CLI."""

from typing import List, Sequence

import click


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_currency(amount: int, symbol: str = "₹") -> str:
    """Format a whole currency amount with thousands separators.

    Example:
        >>> format_currency(12500)
        '₹12,500'
    """
    return f"{symbol}{amount:,}"


def format_table(
    headers: Sequence[str], rows: List[Sequence[object]], max_width: int = 40
) -> str:
    """Format data as a plain-text table.

    Args:
        headers: Column headers
        rows: Data rows, one value per column
        max_width: Maximum width of a column; longer cells are truncated

    Returns:
        Table with a separator line above and below the header and rows
    """
    if not headers:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [min(w, max_width) for w in widths]

    def render(cells: Sequence[object]) -> str:
        padded = [
            f" {str(cell)[: widths[i]]:<{widths[i]}} "
            for i, cell in enumerate(cells[: len(widths)])
        ]
        return "|" + "|".join(padded) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)

    return "\n".join(lines)
