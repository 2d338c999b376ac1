"""Command line interface for globre."""

import argparse
import logging
import re
import sys

import globre
from ..cli import impl


def _add_translation_args(p):
    p.add_argument('pattern', type=str, help='Glob pattern')
    p.add_argument(
        '-s',
        '--separators',
        type=str,
        default='',
        metavar='CHARS',
        help='Characters that * and ? do not match (e.g. "/")',
    )
    p.add_argument(
        '--lenient',
        action='store_true',
        help='Legacy bracket handling: leave bracket errors to the regex engine',
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='globre',
        description='Translate shell-style glob patterns into regular expressions.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {globre.__version__}')
    subparsers = parser.add_subparsers(dest='command', title='commands')

    # convert - print the regex
    p = subparsers.add_parser('convert', aliases=['c'], help='Print the regex for a glob pattern')
    _add_translation_args(p)

    # filter - print matching inputs
    p = subparsers.add_parser(
        'filter', aliases=['f'], help='Print the input lines that match a glob pattern'
    )
    _add_translation_args(p)
    p.add_argument(
        '-T',
        '--files-from',
        type=str,
        metavar='FILE',
        help='Read candidates from FILE (default, or -: stdin)',
    )
    p.add_argument(
        '-0', '--null', action='store_true', help='Input and output items are NUL-terminated'
    )
    p.add_argument('-i', '--ignore-case', action='store_true', help='Match case-insensitively')
    p.add_argument('--invert', action='store_true', help='Print the candidates that do not match')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        if args.command in ('convert', 'c'):
            _handle_convert(args)
        elif args.command in ('filter', 'f'):
            _handle_filter(args)
    except (globre.GlobSyntaxError, re.error, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


def _handle_convert(args):
    print(globre.convert_separators(args.pattern, args.separators, strict=not args.lenient))


def _handle_filter(args):
    flags = re.IGNORECASE if args.ignore_case else 0
    pattern = globre.compile_separators(
        args.pattern, args.separators, flags, strict=not args.lenient
    )
    end = '\0' if args.null else '\n'
    candidates = impl.read_candidates(args.files_from, null=args.null)
    for candidate in impl.filter_matching(pattern, candidates, invert=args.invert):
        sys.stdout.write(candidate + end)


if __name__ == '__main__':
    main()
