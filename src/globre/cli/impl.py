import sys


def iterate_zero_terminated(fileobj):
    partial = b''
    while chunk := fileobj.read(4096):
        parts = chunk.split(b'\x00')
        parts[0] = partial + parts[0]
        partial = parts.pop()

        for item in parts:
            if item:
                yield item.decode()
    if partial:
        yield partial.decode()


def iterate_lines(fileobj):
    for line in fileobj:
        line = line.rstrip('\n')
        if line:
            yield line


def read_candidates(files_from=None, null=False):
    """Yield the candidate strings from a file, or from stdin if ``files_from`` is None or '-'.

    Args:
        files_from: Path of the input file.
        null: Items are NUL-terminated instead of newline-terminated.
    """
    if files_from is None or files_from == '-':
        if null:
            yield from iterate_zero_terminated(sys.stdin.buffer)
        else:
            yield from iterate_lines(sys.stdin)
    elif null:
        with open(files_from, 'rb') as f:
            yield from iterate_zero_terminated(f)
    else:
        with open(files_from) as f:
            yield from iterate_lines(f)


def filter_matching(pattern, candidates, invert=False):
    """Yield the candidates that ``pattern`` matches as a whole (or does not, if ``invert``)."""
    for candidate in candidates:
        if (pattern.match(candidate) is None) == invert:
            yield candidate
