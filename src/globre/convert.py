import functools
import re

from .exceptions import GlobSyntaxError

_re_escape = functools.lru_cache(maxsize=512)(re.escape)

# Characters with a meaning inside a regex character set. '&', '~' and '|' are reserved by
# re for set operations when doubled, as is '-', which is escaped only after another '-'
# so that ranges keep working.
_SET_SPECIAL = frozenset('\\[]^&~|')


def convert(glob, *, strict=True):
    """Translate a glob pattern to an anchored regular expression.

    Single and double stars are equivalent here, both match any run of characters.
    See :func:`convert_separators` for the full syntax.
    """
    return convert_separators(glob, '', strict=strict)


def convert_separators(glob, separators, *, strict=True):
    r"""Translate a glob pattern to an anchored regular expression.

    Supported syntax:

    - ``*`` matches any run of characters except the separators,
    - ``**`` matches any run of characters including the separators,
    - ``?`` matches a single character other than a separator,
    - ``[abc]``, ``[a-z]`` and ``[!abc]`` match one character of a set,
    - ``{a,b,c}`` matches one of the alternatives, groups may be nested,
    - ``\`` passes the next character through to the regex unchanged, so ``\.`` stays the
      regex escape ``\.`` and ``\d`` matches a digit.

    Everything else matches literally.

    Args:
        glob: The glob pattern.
        separators: Characters that ``*`` and ``?`` do not match. If empty or None, there is
            no restriction.
        strict: If true, a ``[`` inside a set, a ``]`` outside a set and an unclosed set are
            syntax errors, and a backslash inside a set is an ordinary character. If false,
            the legacy behavior is used: these are passed on for :mod:`re` to judge, and
            backslash escapes also work inside sets.

    Returns:
        The regex as a string, anchored with ``^`` and ``\Z``.

    Raises:
        GlobSyntaxError: If the pattern has an unmatched ``}`` or a dangling backslash, or
            in strict mode, misplaced brackets.
    """
    if separators:
        not_sep = '[^' + ''.join(map(_re_escape, separators)) + ']'
        any_run = f'{not_sep}*'
        any_char = not_sep
    else:
        any_run = '.*'
        any_char = '.'

    res = ['^']
    add = res.append
    depth = 0
    in_set = False
    last = None
    star_pending = False
    backslash = False

    for i, c in enumerate(glob):
        if backslash:
            add(c)
            backslash = False
            # escaped chars don't count as lookback
            last = None
            continue
        if star_pending and c != '*':
            add(any_run)
            star_pending = False

        if in_set:
            if c == ']':
                in_set = False
                add(c)
            elif c == '!' and (last == '[' or not strict):
                add('^')
            elif c == '[' and strict:
                raise GlobSyntaxError('unexpected open bracket', glob, i)
            elif c == '\\' and not strict:
                backslash = True
                add(c)
            elif c in _SET_SPECIAL or (c == '-' and last == '-'):
                add('\\' + c)
            else:
                add(c)
            last = c
            continue

        if c == '*':
            if star_pending:
                add('.*')
                star_pending = False
            elif separators:
                star_pending = True
            else:
                add('.*')
        elif c == '?':
            add(any_char)
        elif c == '{':
            depth += 1
            add('(')
        elif c == '}':
            depth -= 1
            if depth < 0:
                raise GlobSyntaxError('unexpected closing brace', glob, i)
            add(')')
        elif c == '[':
            in_set = True
            add(c)
        elif c == ']':
            if strict:
                raise GlobSyntaxError('unexpected close bracket', glob, i)
            add(c)
        elif c == ',':
            add('|' if depth > 0 else c)
        elif c == '\\':
            backslash = True
            add(c)
        else:
            add(_re_escape(c))
        last = c

    if star_pending:
        add(any_run)
    if backslash:
        raise GlobSyntaxError('dangling backslash', glob, len(glob))
    if in_set and strict:
        raise GlobSyntaxError('missing close bracket', glob, len(glob))

    # Unclosed brace groups are left open here, re reports them when compiling.
    add(r'\Z')
    return ''.join(res)
