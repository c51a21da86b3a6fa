"""errortree - errors in a tree structure.

Intended for places where errors are produced while walking an arbitrary tree
structure, like the validation of a configuration file. Errors are collected
under descriptive keys instead of failing on the first one, and nested trees
can be flattened, queried and rendered uniformly.

Import from here rather than submodules:
    from errortree import ErrorTree, add_error, flatten
"""

from .errors import ContractCode, ContractViolation
from .formatter import Formatter, colored_formatter, simple_formatter, summary_line
from .operations import (
    add_error,
    error_message,
    error_or_none,
    flatten,
    get_any_error,
    get_error,
    keys,
    set_error,
)
from .tree import DEFAULT_DELIMITER, ErrorTree, get_tree, new

__version__ = "1.0.0"
__all__ = [
    "__version__",
    # Tree
    "ErrorTree",
    "DEFAULT_DELIMITER",
    "new",
    "get_tree",
    # Mutation
    "set_error",
    "add_error",
    # Traversal
    "flatten",
    "keys",
    "get_error",
    "get_any_error",
    # Error value helpers
    "error_or_none",
    "error_message",
    # Formatters
    "Formatter",
    "simple_formatter",
    "colored_formatter",
    "summary_line",
    # Contract violations
    "ContractCode",
    "ContractViolation",
]
