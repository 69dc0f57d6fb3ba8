"""Intermediate Representation (IR) models for parsed command lines."""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from enum import Enum


class RuntimeType(Enum):
    """Runtime families that carry extra process context."""

    SUB = "sub"
    PYTHON = "python"
    RUBY = "ruby"
    JAVA = "java"


@dataclass
class SubCommand:
    """Command delegated to by a wrapper such as sudo."""

    command: str = ""
    args: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"command": self.command, "args": list(self.args)}


@dataclass
class RubyArgs:
    """Script run by the Ruby interpreter."""

    file_path: str = ""
    args: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"file_path": self.file_path, "args": list(self.args)}


@dataclass
class PythonArgs:
    """Script path or module name run by the Python interpreter."""

    file_path: str = ""
    args: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"file_path": self.file_path, "args": list(self.args)}


@dataclass
class JavaArgs:
    """Main class (or jar) run by the JVM plus its JMX remote settings."""

    class_name: str = ""
    args: List[str] = field(default_factory=list)
    jmx_enable: bool = False
    jmx_port: str = ""
    jmx_ssl: bool = False
    jmx_authenticate: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_name": self.class_name,
            "args": list(self.args),
            "jmx_enable": self.jmx_enable,
            "jmx_port": self.jmx_port,
            "jmx_ssl": self.jmx_ssl,
            "jmx_authenticate": self.jmx_authenticate
        }


# Payload attribute name -> (runtime, payload class)
PAYLOAD_FIELDS = {
    "sub": (RuntimeType.SUB, SubCommand),
    "ruby": (RuntimeType.RUBY, RubyArgs),
    "python": (RuntimeType.PYTHON, PythonArgs),
    "java": (RuntimeType.JAVA, JavaArgs),
}


@dataclass
class CommandLine:
    """Structured description of what a process command line runs.

    ``execute_path`` and ``args`` always hold the tokens as given. At most one
    of the runtime payloads is set, matching the runtime the executable was
    dispatched to.
    """

    execute_path: str = ""
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)

    sub: Optional[SubCommand] = None
    ruby: Optional[RubyArgs] = None
    python: Optional[PythonArgs] = None
    java: Optional[JavaArgs] = None

    @property
    def runtime(self) -> Optional[RuntimeType]:
        """Runtime of the populated payload, if any."""
        for name, (runtime, _) in PAYLOAD_FIELDS.items():
            if getattr(self, name) is not None:
                return runtime
        return None

    @property
    def payload(self):
        """The populated runtime payload, or None."""
        for name in PAYLOAD_FIELDS:
            value = getattr(self, name)
            if value is not None:
                return value
        return None

    @property
    def identity(self) -> Optional[str]:
        """Raw token naming the unit of work (command, script, module or class)."""
        if self.sub is not None:
            return self.sub.command
        if self.ruby is not None:
            return self.ruby.file_path
        if self.python is not None:
            return self.python.file_path
        if self.java is not None:
            return self.java.class_name
        return None

    def set_payload(self, payload: Any) -> None:
        """Attach a runtime payload, clearing any other one."""
        for name, (_, payload_cls) in PAYLOAD_FIELDS.items():
            setattr(self, name, payload if isinstance(payload, payload_cls) else None)
        if self.payload is None:
            raise TypeError(f"Unsupported payload type: {type(payload).__name__}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert command line to dictionary."""
        data: Dict[str, Any] = {
            "execute_path": self.execute_path,
            "args": list(self.args),
            "env": dict(self.env),
        }
        for name in PAYLOAD_FIELDS:
            value = getattr(self, name)
            data[name] = value.to_dict() if value is not None else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CommandLine":
        """Create command line from dictionary."""
        data = data.copy()
        for name, (_, payload_cls) in PAYLOAD_FIELDS.items():
            if data.get(name) is not None:
                data[name] = payload_cls(**data[name])
        return cls(**data)
