"""Exceptions raised while translating and compiling glob patterns"""


class GlobreError(Exception):
    """Base class for all exceptions in globre"""

    def __init__(self, message: str):
        super().__init__(message)


class GlobSyntaxError(GlobreError, ValueError):
    """Exception raised when a glob pattern is structurally invalid

    Only the errors the translator can see by itself are reported this way. Anything else
    (e.g. an unterminated brace group) is left to :mod:`re` and surfaces as :class:`re.error`.

    Args:
        msg: description of the problem
        pattern: the glob pattern being translated
        pos: index in the pattern where the problem was detected
    """

    def __init__(self, msg: str, pattern: str, pos: int):
        self.msg = msg
        self.pattern = pattern
        self.pos = pos
        super().__init__(f'{msg} at position {pos}: {pattern!r}')


class MustCompileError(GlobreError, RuntimeError):
    """Exception raised by the ``must_compile`` family when a pattern cannot be compiled.

    The original :class:`GlobSyntaxError` or :class:`re.error` is available as ``__cause__``.
    """

    def __init__(self, pattern: str):
        super().__init__(f'Cannot compile glob pattern: {pattern!r}')
