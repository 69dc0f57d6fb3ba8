"""Exceptions raised while parsing command lines."""

from typing import List, Optional, Sequence

from proccontext.ir import RuntimeType


class CommandLineError(ValueError):
    """Base class for every command-line parsing failure."""


class TokenizationError(CommandLineError):
    """The shell tokenizer could not lex the input."""


class InvalidCommandError(CommandLineError):
    """Tokenization succeeded but produced no executable."""

    def __init__(self, command_line: str) -> None:
        super().__init__(f"invalid command - `{command_line}`")
        self.command_line = command_line


class ExtractionNotFoundError(CommandLineError):
    """The dispatched extractor found no positional token to identify the process."""

    what = "context"

    def __init__(self, runtime: Optional[RuntimeType] = None, tokens: Optional[Sequence[str]] = None) -> None:
        self.runtime = runtime
        self.tokens: List[str] = list(tokens or [])
        super().__init__(f"{self.what} not found")


class CommandNotFoundError(ExtractionNotFoundError):
    what = "command"


class ScriptNotFoundError(ExtractionNotFoundError):
    what = "script"


class ScriptOrModuleNotFoundError(ExtractionNotFoundError):
    what = "script or module"


class ClassNameNotFoundError(ExtractionNotFoundError):
    what = "class name"
