"""Module-level operations for building and inspecting error trees.

The functions accept arbitrary errors (or None) so they can be chained at the
end of validation routines:

    err = None
    err = add_error(err, "listenAddress", ValueError("must be in host:port format"))
    err = add_error(err, "storage", storage.validate())
    return error_or_none(err)
"""

import logging

from errortree.errors import ContractCode, ContractViolation
from errortree.tree import ErrorTree

logger = logging.getLogger(__name__)


def _require_tree(parent: BaseException | None, operation: str) -> ErrorTree | None:
    if parent is None:
        return None
    if not isinstance(parent, ErrorTree):
        raise ContractViolation(
            code=ContractCode.NOT_A_TREE,
            message=f"Cannot {operation} error: not an ErrorTree.",
        )
    return parent


def _set(tree: ErrorTree | None, key: str, err: BaseException | None) -> ErrorTree | None:
    if err is None:
        return tree

    if tree is None:
        tree = ErrorTree()

    errors = tree._get_errors()
    if key in errors:
        logger.debug("Replacing error under key %r", key)
    errors[key] = err

    return tree


def set_error(
    parent: BaseException | None, key: str, err: BaseException | None
) -> ErrorTree | None:
    """Create or replace an error under a given key in a tree.

    Args:
        parent: Tree to modify, or None to create a new tree
        key: Key to store the error under
        err: Error to store; None leaves the tree untouched

    Returns:
        The modified tree, a new tree if parent was None, or parent if err was None

    Raises:
        ContractViolation: If parent is neither None nor an ErrorTree
    """
    tree = _require_tree(parent, "set")
    return _set(tree, key, err)


def add_error(
    parent: BaseException | None, key: str, err: BaseException | None
) -> ErrorTree | None:
    """Add an error under a given key to a tree.

    Behaves like set_error, but refuses to replace an existing key. Only the
    immediate children of parent are checked.

    Raises:
        ContractViolation: If parent is neither None nor an ErrorTree, or if
            key is already present in parent
    """
    tree = _require_tree(parent, "add")
    if tree is not None and key in tree._get_errors():
        raise ContractViolation(
            code=ContractCode.DUPLICATE_KEY,
            message=f"Cannot add error: key {key} exists.",
            key=key,
        )
    return _set(tree, key, err)


def flatten(err: BaseException | None) -> dict[str, BaseException] | None:
    """Return the error tree in flattened form.

    Each leaf error is stored under its full key, built from its path inside
    the tree and joined with the delimiter of the given tree.

    Returns None if err is not an ErrorTree.
    """
    if not isinstance(err, ErrorTree):
        return None
    return err.flatten()


def keys(err: BaseException | None) -> list[str] | None:
    """Return the alphabetically sorted, flattened keys of a tree.

    Returns None if err is not an ErrorTree.
    """
    flattened = flatten(err)
    if flattened is None:
        return None
    return sorted(flattened)


def _get(
    tree: ErrorTree, return_any_child: bool, key: str, path: tuple[str, ...]
) -> BaseException | None:
    errors = tree._get_errors()
    if key not in errors:
        return None
    child = errors[key]
    if not path:
        return child

    if not isinstance(child, ErrorTree):
        return child if return_any_child else None

    nested = _get(child, return_any_child, path[0], path[1:])
    if nested is None and return_any_child:
        return child
    return nested


def get_error(err: BaseException | None, key: str, *path: str) -> BaseException | None:
    """Retrieve the error stored under key, following path into nested trees.

    Returns None if err is not an ErrorTree or if the path cannot be followed
    exactly.
    """
    if not isinstance(err, ErrorTree):
        return None
    return _get(err, False, key, path)


def get_any_error(err: BaseException | None, key: str, *path: str) -> BaseException | None:
    """Retrieve the most specific error along key and path.

    If err is not an ErrorTree, err itself is returned. If at any step the path
    cannot be followed, the last error found on the path is returned. Returns
    None only if key itself is missing from the tree.
    """
    if not isinstance(err, ErrorTree):
        return err
    return _get(err, True, key, path)


def error_or_none(tree: ErrorTree | None) -> ErrorTree | None:
    """Return None if tree is None or empty, otherwise the tree itself."""
    if tree is None:
        return None
    return tree.error_or_none()


def error_message(err: BaseException | None) -> str:
    """Return the message of an error, or an empty string for None."""
    if err is None:
        return ""
    return str(err)
