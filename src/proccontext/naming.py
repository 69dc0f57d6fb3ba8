"""Service naming policy.

Turns the raw identity of a parsed command line (script path, module, class
name, jar, delegated command) into a short service label, and that label into
a ``process_context:<label>`` tag.
"""

from typing import Optional

from proccontext.detection import remove_file_path
from proccontext.errors import CommandLineError
from proccontext.ir import CommandLine
from proccontext.parser import tokenize

DEFAULT_TAG_PREFIX = "process_context"

JAVA_JAR_EXTENSION = ".jar"
JAVA_APACHE_PREFIX = "org.apache."


def trim_colon_right(name: str) -> str:
    """Drop everything from the first colon on (``gunicorn:app`` -> ``gunicorn``)."""
    return name.split(":", 1)[0]


def starts_with_letter(name: str) -> bool:
    return bool(name) and name[0].isalpha()


def executable_service_name(execute_path: str) -> Optional[str]:
    """Service name of a bare executable: its basename without extension."""
    name = remove_file_path(execute_path) if execute_path else ""
    index = name.rfind(".")
    if index > 0:
        name = name[:index]
    return name or None


def java_service_name(class_name: str) -> Optional[str]:
    """Service name of a JVM main class or jar.

    ``/opt/bin/myservice.jar`` -> ``myservice``,
    ``org.apache.cassandra.service.CassandraDaemon`` -> ``cassandra``,
    ``com.example.HelloWorld`` -> ``HelloWorld``.
    """
    name = trim_colon_right(remove_file_path(class_name))
    if not starts_with_letter(name):
        return None

    if name.endswith(JAVA_JAR_EXTENSION):
        return name[:-len(JAVA_JAR_EXTENSION)]

    if name.startswith(JAVA_APACHE_PREFIX):
        # take the project name after 'org.apache.' and drop the rest of the package
        project = name[len(JAVA_APACHE_PREFIX):]
        index = project.find(".")
        if index != -1:
            return project[:index]

    index = name.rfind(".")
    if index != -1 and index + 1 < len(name):
        return name[index + 1:]

    return name


def script_service_name(path: str) -> Optional[str]:
    """Service name of a script, module or delegated command."""
    name = trim_colon_right(remove_file_path(path))
    return name if starts_with_letter(name) else None


def service_name(cmd: CommandLine) -> Optional[str]:
    """Short service label for a parsed command line, or None if none applies."""
    if cmd.java is not None:
        return java_service_name(cmd.java.class_name)

    identity = cmd.identity
    if identity is not None:
        return script_service_name(identity)

    return executable_service_name(cmd.execute_path)


def service_tag(cmd: CommandLine, prefix: str = DEFAULT_TAG_PREFIX) -> Optional[str]:
    """``<prefix>:<service name>`` for a parsed command line."""
    name = service_name(cmd)
    if name is None:
        return None
    return f"{prefix}:{name}"


def fallback_service_name(command_line: str) -> Optional[str]:
    """Service name from the bare executable of a command line.

    Used when the runtime extractor could not identify the process.
    """
    try:
        _, tokens = tokenize(command_line)
    except CommandLineError:
        return None
    if not tokens:
        return None
    return executable_service_name(tokens[0].strip('"'))
