import argparse
import logging
import sys

from commit_header.errors import CommitHeaderError, StructuralError
from commit_header.header import ParsedHeader, parse_header
from commit_header.message import read_message
from commit_header.report import render_report
from commit_header.rules import DEFAULT_RULES, parse_commit_types, validate

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='commit-header',
        description='Validate the TYPE([SCOPE]): MESSAGE header of a commit '
        'message.',
    )
    parser.add_argument(
        'message',
        nargs='?',
        default='-',
        type=argparse.FileType('r', encoding='utf-8'),
        help='File containing the commit message, stdin by default',
    )
    parser.add_argument(
        '-t',
        '--types',
        type=parse_commit_types,
        default=DEFAULT_RULES,
        metavar='TYPES',
        help="Allowed commit types, e.g. 'feat=scope,description;docs='",
    )
    parser.add_argument(
        '-e',
        '--dont-exit-on-errors',
        action='store_true',
        help='Report errors in the table instead of failing',
    )
    parser.add_argument(
        '-c',
        '--allow-caps-types',
        action='store_true',
        help='Match commit types regardless of their case',
    )
    parser.add_argument(
        '-s',
        '--strip-comments',
        action='store_true',
        help="Drop comment lines and stop at git's scissors line",
    )
    parser.add_argument(
        '--comment-char',
        default='#',
        metavar='CHAR',
        help="Comment character used by --strip-comments, '#' by default",
    )
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def fail(error):
    print('Error!: {0}'.format(error), file=sys.stderr)
    return 1


def read_input(stream, comment_char=None):
    try:
        return read_message(stream, comment_char)
    except UnicodeDecodeError as error:
        log.debug('Failed to decode the commit message: %s', error)
        raise StructuralError('Failed to read first line') from error
    finally:
        if stream is not sys.stdin:
            stream.close()


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    parsed = ParsedHeader('', '', '')
    body = ''

    comment_char = args.comment_char if args.strip_comments else None

    try:
        line, body = read_input(args.message, comment_char)
        parsed = parse_header(line)
    except CommitHeaderError as error:
        if not args.dont_exit_on_errors:
            return fail(error)

        body = ''
        log.debug('Ignoring the malformed header: %s', error)

    try:
        valid = validate(
            args.types,
            parsed.type,
            parsed.scope,
            parsed.description,
            case_sensitive=not args.allow_caps_types,
        )
    except CommitHeaderError as error:
        if not args.dont_exit_on_errors:
            return fail(error)

        log.debug('Ignoring the failed validation: %s', error)
        valid = False

    print(render_report(parsed, body, valid))
    return 0


if __name__ == '__main__':
    sys.exit(main())
