"""Formatters turning a flattened error tree into display text.

A formatter receives the flattened form of a tree (full path -> leaf error)
and must not assume any ordering of the mapping.
"""

from collections.abc import Callable, Mapping

from errortree.colors import COUNT, PATH, RESET

Formatter = Callable[[Mapping[str, BaseException]], str]


def summary_line(count: int) -> str:
    """Return the "<N> error(s) occurred:" headline."""
    plural_suffix = "" if count == 1 else "s"
    return f"{count} error{plural_suffix} occurred:"


def simple_formatter(errors: Mapping[str, BaseException]) -> str:
    """Report how many errors occurred followed by one line per error.

    Lines are sorted alphabetically by path.

    Args:
        errors: Flattened errors keyed by their full path

    Returns:
        Human-readable summary
    """
    lines = [f"* {path}: {errors[path]}" for path in sorted(errors)]
    return summary_line(len(errors)) + "\n\n" + "\n".join(lines)


def colored_formatter(errors: Mapping[str, BaseException]) -> str:
    """Same layout as simple_formatter, highlighted for a terminal."""
    lines = [f"* {PATH}{path}{RESET}: {errors[path]}" for path in sorted(errors)]
    return f"{COUNT}{summary_line(len(errors))}{RESET}\n\n" + "\n".join(lines)
