"""Parse many command lines, keeping per-line failures."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Dict, Any
import logging

from proccontext.errors import CommandLineError
from proccontext.ir import CommandLine
from proccontext.naming import DEFAULT_TAG_PREFIX, service_name, fallback_service_name
from proccontext.parser import parse_command_line

logger = logging.getLogger(__name__)


@dataclass
class ParseOutcome:
    """Result of parsing one command line."""

    line: str
    command: Optional[CommandLine] = None
    error: Optional[CommandLineError] = None
    service: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def tag(self, prefix: str = DEFAULT_TAG_PREFIX) -> Optional[str]:
        if self.service is None:
            return None
        return f"{prefix}:{self.service}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert outcome to dictionary."""
        return {
            "line": self.line,
            "command": self.command.to_dict() if self.command else None,
            "runtime": self.command.runtime.value if self.command and self.command.runtime else None,
            "identity": self.command.identity if self.command else None,
            "service": self.service,
            "error": str(self.error) if self.error else None
        }


def parse_one(line: str, fallback_to_executable: bool = True) -> ParseOutcome:
    """Parse a single command line without raising."""
    try:
        cmd = parse_command_line(line)
    except CommandLineError as e:
        logger.warning("Failed to parse %r: %s", line, e)
        service = fallback_service_name(line) if fallback_to_executable else None
        return ParseOutcome(line=line, error=e, service=service)

    return ParseOutcome(line=line, command=cmd, service=service_name(cmd))


def parse_many(lines: Iterable[str], fallback_to_executable: bool = True) -> List[ParseOutcome]:
    """Parse every non-blank line.

    Args:
        lines: Command lines, one per item
        fallback_to_executable: Name the service after the bare executable
            when extraction fails

    Returns:
        One outcome per non-blank line, in input order
    """
    outcomes = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        outcomes.append(parse_one(line, fallback_to_executable))
    return outcomes
