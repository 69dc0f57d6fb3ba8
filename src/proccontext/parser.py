"""Command-line parsing entry points."""

from typing import Dict, List, Sequence, Tuple
import logging
import re
import shlex

from proccontext.detection import RuntimeDetector
from proccontext.errors import TokenizationError, InvalidCommandError
from proccontext.ir import CommandLine

logger = logging.getLogger(__name__)

# Leading NAME=value tokens set the environment of the command that follows
ENV_ASSIGNMENT = re.compile(r'^([A-Za-z_][A-Za-z0-9_]*)=(.*)$', re.DOTALL)

_detector = RuntimeDetector()


def tokenize(command_line: str) -> Tuple[Dict[str, str], List[str]]:
    """Split a command line into leading environment assignments and tokens.

    Raises:
        TokenizationError: If the string cannot be lexed (unbalanced quotes, ...)
    """
    try:
        tokens = shlex.split(command_line, posix=True)
    except ValueError as e:
        raise TokenizationError(str(e)) from e

    env: Dict[str, str] = {}
    while tokens:
        match = ENV_ASSIGNMENT.match(tokens[0])
        if not match:
            break
        env[match.group(1)] = match.group(2)
        tokens.pop(0)

    return env, tokens


def parse_command_line(command_line: str) -> CommandLine:
    """Parse a raw command-line string.

    Args:
        command_line: Executable followed by its arguments, shell quoted

    Returns:
        The parsed command line; an empty record for an empty string

    Raises:
        TokenizationError: If the string cannot be tokenized
        InvalidCommandError: If the string holds no executable
        ExtractionNotFoundError: If the runtime's extractor finds no identity
    """
    if not command_line:
        return CommandLine()

    env, tokens = tokenize(command_line)
    if not any(tokens):
        raise InvalidCommandError(command_line)

    # trim any quotes left around the executable
    executable = tokens[0].strip('"')
    cmd = parse(executable, tokens[1:])
    cmd.env = env
    return cmd


def parse(execute_path: str, args: Sequence[str]) -> CommandLine:
    """Parse an executable and its already split arguments.

    Raises:
        ExtractionNotFoundError: If the runtime's extractor finds no identity
    """
    cmd = CommandLine(execute_path=execute_path, args=list(args))

    runtime = _detector.detect(execute_path)
    if runtime is None:
        logger.debug("No runtime context for %r", execute_path)
        return cmd

    payload = _detector.extractor_for(runtime).extract(cmd.args)
    cmd.set_payload(payload)
    return cmd
