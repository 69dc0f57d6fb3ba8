"""Python interpreter extractor."""

from typing import Sequence

from .base import BaseExtractor, is_flag, is_assignment
from proccontext.errors import ScriptOrModuleNotFoundError
from proccontext.ir import RuntimeType, PythonArgs

MODULE_FLAG = "-m"


class PythonExtractor(BaseExtractor):
    """Extractor for ``python <options> (script | -m module) [args]``."""

    runtime = RuntimeType.PYTHON
    not_found_error = ScriptOrModuleNotFoundError

    def extract(self, args: Sequence[str]) -> PythonArgs:
        """Find the script path or the module named by ``-m``.

        The token right after ``-m`` is taken as the module even when it looks
        like a flag or an assignment.
        """
        prev_arg_is_flag = False
        module_flag = False

        for index, arg in enumerate(args):
            has_flag_prefix = is_flag(arg)
            should_skip_arg = prev_arg_is_flag or has_flag_prefix or is_assignment(arg)

            if not should_skip_arg or module_flag:
                return PythonArgs(file_path=arg, args=self.remaining(args, index))

            if arg == MODULE_FLAG:
                module_flag = True

            prev_arg_is_flag = has_flag_prefix

        raise self.not_found(args)
