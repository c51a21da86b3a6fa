"""ErrorTree - an error holding named child errors in a tree structure."""

import logging
from dataclasses import dataclass, field

from errortree.formatter import Formatter, simple_formatter, summary_line

logger = logging.getLogger(__name__)

# Delimiter used by default for joining the keys of nested errors
DEFAULT_DELIMITER = ":"


@dataclass(eq=False, repr=False)
class ErrorTree(Exception):
    """Container storing multiple errors in a tree structure.

    Children are either leaf errors or nested ErrorTree instances. A child may
    point back to one of its ancestors; traversal never re-enters a tree that
    is already on the current path.

    Trees compare and hash by identity.
    """

    errors: dict[str, BaseException] = field(default_factory=dict)
    delimiter: str = DEFAULT_DELIMITER
    formatter: Formatter = simple_formatter

    def __post_init__(self) -> None:
        """Initialize the Exception base."""
        super().__init__()

    def _get_errors(self) -> dict[str, BaseException]:
        if self.errors is None:
            self.errors = {}
        return self.errors

    def _get_delimiter(self) -> str:
        if not self.delimiter:
            self.delimiter = DEFAULT_DELIMITER
        return self.delimiter

    def _get_formatter(self) -> Formatter:
        if self.formatter is None:
            self.formatter = simple_formatter
        return self.formatter

    @property
    def is_empty(self) -> bool:
        """True if the tree holds no errors."""
        return len(self._get_errors()) == 0

    def flatten(self) -> dict[str, BaseException]:
        """Return every leaf error in the tree keyed by its full path.

        The delimiter of this tree is used for every level, regardless of
        the delimiters configured on nested trees.
        """
        return _flatten(self, self._get_delimiter(), frozenset())

    def error_or_none(self) -> "ErrorTree | None":
        """Return None if the tree is empty or the tree itself otherwise."""
        if self.is_empty:
            return None
        return self

    def wrapped_errors(self) -> list[BaseException]:
        """Return the immediate children ordered by their keys.

        Nested trees are returned as-is, not flattened.
        """
        errors = self._get_errors()
        return [errors[key] for key in sorted(errors)]

    def exception_group(self) -> BaseExceptionGroup | None:
        """Wrap the immediate children into an exception group.

        This allows handling the children with ``except*``. Returns None if the
        tree is empty.
        """
        wrapped = self.wrapped_errors()
        if not wrapped:
            return None
        # BaseExceptionGroup yields an ExceptionGroup if all children are Exceptions
        return BaseExceptionGroup(summary_line(len(wrapped)), wrapped)

    def __str__(self) -> str:
        return self._get_formatter()(self.flatten())

    def __repr__(self) -> str:
        return f"ErrorTree(keys={sorted(self._get_errors())!r}, delimiter={self.delimiter!r})"


def _flatten(
    tree: ErrorTree, delimiter: str, visited: frozenset[int]
) -> dict[str, BaseException]:
    if id(tree) in visited:
        logger.debug("Skipping %r: already visited on this path", tree)
        return {}
    visited = visited | {id(tree)}

    flattened: dict[str, BaseException] = {}
    for key, err in tree._get_errors().items():
        if isinstance(err, ErrorTree):
            for child_key, child_err in _flatten(err, delimiter, visited).items():
                flattened[key + delimiter + child_key] = child_err
        else:
            flattened[key] = err
    return flattened


def new(delimiter: str = DEFAULT_DELIMITER, formatter: Formatter = simple_formatter) -> ErrorTree:
    """Return a new, empty error tree.

    Args:
        delimiter: Delimiter for building nested paths
        formatter: Formatter used when the tree is rendered

    Returns:
        ErrorTree instance
    """
    return ErrorTree(errors={}, delimiter=delimiter, formatter=formatter)


def get_tree(err: BaseException | None) -> tuple[ErrorTree | None, bool]:
    """Return the tree for a given error.

    An error exposes a tree either by being one or by having been raised
    ``from`` one. Only the explicit ``__cause__`` chain is followed.

    Args:
        err: Error to inspect

    Returns:
        Tuple of the tree (or None) and whether a tree was found
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, ErrorTree):
            return err, True
        seen.add(id(err))
        err = err.__cause__
    return None, False
