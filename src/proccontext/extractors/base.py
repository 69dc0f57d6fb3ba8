"""Base extractor interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Type

from proccontext.errors import ExtractionNotFoundError
from proccontext.ir import RuntimeType

FLAG_PREFIX = "-"
ASSIGNMENT = "="


def is_flag(token: str) -> bool:
    """Return True if the token is a command-line flag."""
    return token.startswith(FLAG_PREFIX)


def is_assignment(token: str) -> bool:
    """Return True if the token is a self-contained ``key=value`` option."""
    return ASSIGNMENT in token


def find_positional(args: Sequence[str]) -> Optional[int]:
    """Index of the first token that is neither a flag, an assignment nor a flag's value.

    Every flag is assumed to consume exactly one following token as its value.
    """
    prev_arg_is_flag = False

    for index, arg in enumerate(args):
        has_flag_prefix = is_flag(arg)
        should_skip_arg = prev_arg_is_flag or has_flag_prefix or is_assignment(arg)

        if not should_skip_arg:
            return index

        prev_arg_is_flag = has_flag_prefix

    return None


class BaseExtractor(ABC):
    """Abstract base class for all runtime extractors."""

    runtime: RuntimeType
    not_found_error: Type[ExtractionNotFoundError] = ExtractionNotFoundError

    @abstractmethod
    def extract(self, args: Sequence[str]) -> Any:
        """Extract the runtime payload from the arguments following the executable.

        Args:
            args: Tokens after the executable, in order

        Returns:
            The runtime-specific payload

        Raises:
            ExtractionNotFoundError: If no token identifies the unit of work
        """
        pass

    def not_found(self, args: Sequence[str]) -> ExtractionNotFoundError:
        """Build the not-found error for this runtime."""
        return self.not_found_error(self.runtime, args)

    @staticmethod
    def remaining(args: Sequence[str], index: int) -> List[str]:
        """Copy of the tokens strictly after ``index``."""
        return list(args[index + 1:])
