"""JVM command-line extractor.

Finds the main class (or the jar given to ``-jar``) of a ``java`` invocation and
captures the JMX remote management settings passed as system properties.

JVM options come in three shapes, each listed explicitly below:
- self-contained single tokens (``-Xmx4000m``, ``-Da=b``, ``-javaagent:x.jar``)
- flags consuming the following token as their value (``-cp <classpath>``)
- ``-jar``, whose following token is the jar to run and therefore the identity
"""

from typing import Optional, Sequence, Tuple

from .base import BaseExtractor, is_flag, is_assignment
from proccontext.errors import ClassNameNotFoundError
from proccontext.ir import RuntimeType, JavaArgs

JAR_FLAG = "-jar"

# Options that never consume the next token
SELF_CONTAINED_PREFIXES = (
    "-X",
    "-javaagent:",
    "-verbose:",
)

JMX_ENABLE_PROPERTY = "-Dcom.sun.management.jmxremote"
JMX_PORT_PROPERTY = "-Dcom.sun.management.jmxremote.port"
JMX_SSL_PROPERTY = "-Dcom.sun.management.jmxremote.ssl"
JMX_AUTHENTICATE_PROPERTY = "-Dcom.sun.management.jmxremote.authenticate"


def is_self_contained(token: str) -> bool:
    """Return True if the token is a single-token JVM option."""
    return is_assignment(token) or token.startswith(SELF_CONTAINED_PREFIXES)


def consumes_value(token: str) -> bool:
    """Return True if the flag takes the following token as its value."""
    return is_flag(token) and not is_self_contained(token) and token != JAR_FLAG


def split_property(token: str, name: str) -> Tuple[bool, Optional[str]]:
    """Split a ``-Dname[=value]`` token for system property ``name``.

    Returns whether the token sets the property and its value, None for a
    bare ``-Dname``.
    """
    if token == name:
        return True, None
    if token.startswith(name + "="):
        return True, token[len(name) + 1:]
    return False, None


def property_enabled(value: Optional[str]) -> bool:
    """Boolean reading of a property value; a bare ``-Dname`` counts as true."""
    return value is None or value.lower() == "true"


class JavaExtractor(BaseExtractor):
    """Extractor for ``java <jvm options> (class | -jar file.jar) [args]``."""

    runtime = RuntimeType.JAVA
    not_found_error = ClassNameNotFoundError

    def extract(self, args: Sequence[str]) -> JavaArgs:
        java = JavaArgs()
        prev_arg_is_flag = False

        for index, arg in enumerate(args):
            should_skip_arg = prev_arg_is_flag or is_flag(arg) or is_self_contained(arg)

            if not should_skip_arg:
                java.class_name = arg
                java.args = self.remaining(args, index)
                return java

            self._capture_jmx_property(arg, java)
            prev_arg_is_flag = consumes_value(arg)

        raise self.not_found(args)

    def _capture_jmx_property(self, arg: str, java: JavaArgs) -> None:
        """Record the JMX remote settings carried by a ``-D`` token."""
        matched, value = split_property(arg, JMX_ENABLE_PROPERTY)
        if matched:
            java.jmx_enable = property_enabled(value)
            return

        matched, value = split_property(arg, JMX_PORT_PROPERTY)
        if matched:
            java.jmx_port = value or ""
            return

        matched, value = split_property(arg, JMX_SSL_PROPERTY)
        if matched:
            java.jmx_ssl = property_enabled(value)
            return

        matched, value = split_property(arg, JMX_AUTHENTICATE_PROPERTY)
        if matched:
            java.jmx_authenticate = property_enabled(value)
