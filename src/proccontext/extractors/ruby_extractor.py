"""Ruby interpreter extractor."""

from typing import Sequence

from .base import BaseExtractor, find_positional
from proccontext.errors import ScriptNotFoundError
from proccontext.ir import RuntimeType, RubyArgs


class RubyExtractor(BaseExtractor):
    """Extractor for ``ruby <options> script [args]``."""

    runtime = RuntimeType.RUBY
    not_found_error = ScriptNotFoundError

    def extract(self, args: Sequence[str]) -> RubyArgs:
        index = find_positional(args)
        if index is None:
            raise self.not_found(args)

        return RubyArgs(file_path=args[index], args=self.remaining(args, index))
