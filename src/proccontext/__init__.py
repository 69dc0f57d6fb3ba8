"""Process command-line context extraction.

Recovers the script, Python module, Ruby file, Java main class or delegated
sub-command that a process runs from its raw command line.
"""

from proccontext.ir import CommandLine, RuntimeType, SubCommand, RubyArgs, PythonArgs, JavaArgs
from proccontext.errors import (
    CommandLineError,
    TokenizationError,
    InvalidCommandError,
    ExtractionNotFoundError,
    CommandNotFoundError,
    ScriptNotFoundError,
    ScriptOrModuleNotFoundError,
    ClassNameNotFoundError,
)
from proccontext.detection import normalize_executable, split_version
from proccontext.parser import parse_command_line, parse
from proccontext.naming import service_name, service_tag, fallback_service_name
from proccontext.batch import ParseOutcome, parse_many

__version__ = "0.1.0"

__all__ = [
    "CommandLine",
    "RuntimeType",
    "SubCommand",
    "RubyArgs",
    "PythonArgs",
    "JavaArgs",
    "CommandLineError",
    "TokenizationError",
    "InvalidCommandError",
    "ExtractionNotFoundError",
    "CommandNotFoundError",
    "ScriptNotFoundError",
    "ScriptOrModuleNotFoundError",
    "ClassNameNotFoundError",
    "normalize_executable",
    "split_version",
    "parse_command_line",
    "parse",
    "service_name",
    "service_tag",
    "fallback_service_name",
    "ParseOutcome",
    "parse_many",
]
