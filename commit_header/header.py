from collections import namedtuple
from enum import Enum

from commit_header.errors import StructuralError

SCOPE_PUNCTUATION = '_,$./-'


class ParserState(Enum):
    TYPE = 'Type'
    SCOPE = 'Scope'
    DESCRIPTION = 'Description'
    BODY = 'Body'


ParsedHeader = namedtuple('ParsedHeader', ['type', 'scope', 'description'])


class HeaderParser:
    """Reads a `TYPE[(SCOPE)]: DESCRIPTION` header one character at a time.

    A parser instance is used for a single line; use `parse_header` instead of
    creating one directly.
    """

    def __init__(self):
        self.state = ParserState.TYPE
        self.type = []
        self.scope = []
        self.description = []
        self.scope_closed = False

    def parse(self, line):
        for char in line:
            self.step(char)

            if self.state == ParserState.BODY:
                break

        if self.state in (ParserState.TYPE, ParserState.SCOPE):
            raise StructuralError(
                'Failed to read the body, ended up with the state {0} '
                'instead'.format(self.state.value)
            )

        return ParsedHeader(
            ''.join(self.type).strip(),
            ''.join(self.scope).strip(),
            ''.join(self.description).strip(),
        )

    def step(self, char):
        if self.state == ParserState.TYPE:
            self.read_type(char)
        elif self.state == ParserState.SCOPE:
            self.read_scope(char)
        elif self.state == ParserState.DESCRIPTION:
            self.read_description(char)

    def read_type(self, char):
        if char.isalnum() or char == '_':
            self.type.append(char)
        elif char == '(':
            self.state = ParserState.SCOPE
        elif char == ':':
            self.state = ParserState.DESCRIPTION
        else:
            raise StructuralError('Failed to read the type from the header')

    def read_scope(self, char):
        if char == ':':
            if not self.scope_closed:
                raise StructuralError(
                    'Failed to retrieve the scope from the header'
                )

            self.state = ParserState.DESCRIPTION
        elif self.scope_closed:
            # Only a single group is supported, and it must be followed by
            # the colon straight away.
            raise StructuralError('Failed to retrieve the scope from the header')
        elif char == ')':
            self.scope_closed = True
        elif char.isalnum() or char in SCOPE_PUNCTUATION:
            self.scope.append(char)
        else:
            raise StructuralError('Failed to retrieve the scope from the header')

    def read_description(self, char):
        if char == '\n':
            self.state = ParserState.BODY
        else:
            self.description.append(char)


def parse_header(line):
    """Returns the ParsedHeader of `line`, or raises StructuralError."""
    return HeaderParser().parse(line)
