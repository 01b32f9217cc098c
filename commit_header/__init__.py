from commit_header.errors import CommitHeaderError, RuleError, StructuralError
from commit_header.header import HeaderParser, ParsedHeader, ParserState, parse_header
from commit_header.message import read_message, split_message
from commit_header.rules import (
    DEFAULT_RULES,
    CommitTypeRule,
    format_commit_types,
    parse_commit_types,
    validate,
)

__version__ = '1.0.0'
