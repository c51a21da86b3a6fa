"""Contract violations raised on misuse of the errortree API."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ContractCode(str, Enum):
    """Kinds of caller misuse."""

    NOT_A_TREE = "NOT_A_TREE"
    DUPLICATE_KEY = "DUPLICATE_KEY"


@dataclass
class ContractViolation(RuntimeError):
    """Raised when the mutation API is used incorrectly.

    A contract violation signals a programming error in the caller. It is never
    stored inside an ErrorTree and is not meant to be caught and reported like
    the errors a tree aggregates.
    """

    code: ContractCode
    message: str
    key: str | None = None  # Offending key, for DUPLICATE_KEY

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for structured reporting.

        Returns:
            Dictionary representation of the violation
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "key": self.key,
        }
