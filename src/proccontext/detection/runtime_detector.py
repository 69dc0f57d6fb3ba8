"""Executable normalization and runtime dispatch."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple
import logging

from proccontext.extractors import (
    BaseExtractor, SubExtractor, PythonExtractor, RubyExtractor, JavaExtractor
)
from proccontext.ir import RuntimeType

logger = logging.getLogger(__name__)

EXECUTABLE_SUFFIX = ".exe"
PATH_SEPARATORS = ("/", "\\")
VERSION_CHARS = "."


def remove_file_path(path: str) -> str:
    """Return the final path segment of ``path``."""
    stripped = path.rstrip("".join(PATH_SEPARATORS))
    if not stripped:
        return path
    for separator in PATH_SEPARATORS:
        stripped = stripped.rsplit(separator, 1)[-1]
    return stripped


def split_version(name: str) -> Tuple[str, str]:
    """Split a trailing version (digits and dots) off an executable name.

    ``python2.7`` -> ``("python", "2.7")``, ``ruby`` -> ``("ruby", "")``,
    ``2.7`` -> ``("", "2.7")``.
    """
    index = len(name)
    while index > 0 and (name[index - 1].isdecimal() or name[index - 1] in VERSION_CHARS):
        index -= 1
    return name[:index], name[index:]


def normalize_executable(executable: str) -> Tuple[str, str]:
    """Return the basename of ``executable`` and its version-stripped form."""
    basename = remove_file_path(executable)
    if basename.lower().endswith(EXECUTABLE_SUFFIX):
        basename = basename[:-len(EXECUTABLE_SUFFIX)]
    base, _ = split_version(basename)
    return basename, base


class RuntimeDetector:
    """Maps executables to the runtime whose arguments carry process context."""

    # Binaries that usually have additional context of what is running
    BINARY_MAP: Mapping[str, RuntimeType] = MappingProxyType({
        "python": RuntimeType.PYTHON,
        "python2": RuntimeType.PYTHON,
        "python2.7": RuntimeType.PYTHON,
        "python3": RuntimeType.PYTHON,
        "python3.7": RuntimeType.PYTHON,
        "ruby": RuntimeType.RUBY,
        "ruby2.3": RuntimeType.RUBY,
        "java": RuntimeType.JAVA,
        "java.exe": RuntimeType.JAVA,
        "sudo": RuntimeType.SUB,
    })

    EXTRACTORS: Mapping[RuntimeType, BaseExtractor] = MappingProxyType({
        RuntimeType.SUB: SubExtractor(),
        RuntimeType.PYTHON: PythonExtractor(),
        RuntimeType.RUBY: RubyExtractor(),
        RuntimeType.JAVA: JavaExtractor(),
    })

    def detect(self, executable: str) -> Optional[RuntimeType]:
        """Detect the runtime of an executable path, if it is a known one.

        The exact basename is looked up first, then the version-stripped one.
        """
        basename, base = normalize_executable(executable)

        runtime = self.BINARY_MAP.get(basename)
        if runtime is None:
            runtime = self.BINARY_MAP.get(base)

        logger.debug("Executable %r (basename %r) dispatched to %s", executable, basename, runtime)
        return runtime

    def extractor_for(self, runtime: RuntimeType) -> BaseExtractor:
        """Get the extractor for a runtime."""
        return self.EXTRACTORS[runtime]
