import io

from commit_header.errors import StructuralError

SCISSORS = ' ------------------------ >8 ------------------------'


def message_lines(lines, comment_char=None):
    for line in lines:
        line = line.rstrip('\r\n')

        if comment_char is None:
            yield line
            continue

        if line.startswith(comment_char + SCISSORS):
            break

        # Comments are removed by git itself when the message is committed.
        if line.startswith(comment_char):
            continue

        yield line


def split_lines(lines, comment_char=None):
    lines = list(message_lines(lines, comment_char))

    if not lines:
        raise StructuralError('Failed to read first line')

    return lines[0], '\n'.join(lines[1:]).strip()


def split_message(text, comment_char=None):
    """Returns the header line and the trimmed body of a commit message.

    Lines are separated by `\\n` only. When `comment_char` is given, lines
    starting with it are dropped and git's scissors line ends the message.
    """
    return split_lines(io.StringIO(text), comment_char)


def read_message(stream, comment_char=None):
    return split_lines(stream, comment_char)
