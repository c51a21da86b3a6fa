"""ANSI color codes for terminal output.

The 256-color palette is used for consistency across terminals.

Usage:
    from errortree.colors import CYAN, RESET

    print(f"{CYAN}network:listenAddress{RESET}")
"""

RESET = "\033[0m"

RED = "\033[38;5;196m"  # Error count
CYAN = "\033[38;5;51m"  # Error paths

# Color aliases for semantic meaning
COUNT = RED
PATH = CYAN

__all__ = [
    "RESET",
    "RED",
    "CYAN",
    "COUNT",
    "PATH",
]
