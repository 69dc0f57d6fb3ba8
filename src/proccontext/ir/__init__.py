"""IR module initialization."""

from .command_line import CommandLine, RuntimeType, SubCommand, RubyArgs, PythonArgs, JavaArgs

__all__ = [
    "CommandLine",
    "RuntimeType",
    "SubCommand",
    "RubyArgs",
    "PythonArgs",
    "JavaArgs"
]
