"""Translate shell-style glob patterns, with brace alternation and path separators, into
regular expressions."""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0.dev0"

# Translation
from .convert import convert, convert_separators

# Compilation
from ._api import compile, compile_separators, must_compile, must_compile_separators

# Exceptions
from .exceptions import GlobreError, GlobSyntaxError, MustCompileError

__all__ = [
    # Version
    "__version__",
    # Translation
    "convert",
    "convert_separators",
    # Compilation
    "compile",
    "compile_separators",
    "must_compile",
    "must_compile_separators",
    # Exceptions
    "GlobreError",
    "GlobSyntaxError",
    "MustCompileError",
]
