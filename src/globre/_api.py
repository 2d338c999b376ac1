"""Compile glob patterns with :mod:`re`."""

import functools
import logging
import re

from .convert import convert_separators
from .exceptions import GlobSyntaxError, MustCompileError

logger = logging.getLogger(__name__)


def compile(glob, flags=0, *, strict=True):
    """Translate a glob pattern and compile it.

    Args:
        glob: The glob pattern.
        flags: Flags passed on to :func:`re.compile`.
        strict: Use strict bracket handling, see :func:`globre.convert_separators`.

    Returns:
        re.Pattern: The compiled, anchored pattern.

    Raises:
        GlobSyntaxError: If the translator rejects the pattern.
        re.error: If the translated pattern is not a valid regex. The error is not wrapped.
    """
    return compile_separators(glob, '', flags, strict=strict)


def compile_separators(glob, separators, flags=0, *, strict=True):
    """Like :func:`compile`, but ``*`` and ``?`` do not match any of the ``separators``."""
    regex = convert_separators(glob, separators, strict=strict)
    logger.debug('Translated glob %r (separators=%r) to %r', glob, separators, regex)
    try:
        return re.compile(regex, flags)
    except re.error as e:
        logger.debug('Cannot compile %r: %s', regex, e)
        raise


def must_compile(glob, flags=0, *, strict=True):
    """Like :func:`compile`, but any failure raises :class:`MustCompileError`.

    Meant for patterns that are constants in the calling code, where a failure is a bug.
    Results are cached.
    """
    return must_compile_separators(glob, '', flags, strict=strict)


def must_compile_separators(glob, separators, flags=0, *, strict=True):
    """Like :func:`compile_separators`, but any failure raises :class:`MustCompileError`."""
    # separators may be any iterable of characters, the cache needs a str
    return _must_compile_cached(glob, ''.join(separators or ''), flags, strict)


@functools.lru_cache(maxsize=256)
def _must_compile_cached(glob, separators, flags, strict):
    try:
        return compile_separators(glob, separators, flags, strict=strict)
    except (GlobSyntaxError, re.error) as e:
        raise MustCompileError(glob) from e
