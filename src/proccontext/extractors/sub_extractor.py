"""Extractor for wrapper commands that delegate to another program (sudo)."""

from typing import Sequence

from .base import BaseExtractor, find_positional
from proccontext.errors import CommandNotFoundError
from proccontext.ir import RuntimeType, SubCommand


class SubExtractor(BaseExtractor):
    """Finds the delegated command: the first token that is not an option."""

    runtime = RuntimeType.SUB
    not_found_error = CommandNotFoundError

    def extract(self, args: Sequence[str]) -> SubCommand:
        index = find_positional(args)
        if index is None:
            raise self.not_found(args)

        return SubCommand(command=args[index], args=self.remaining(args, index))
