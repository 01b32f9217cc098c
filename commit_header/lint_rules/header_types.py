from gitlint.options import BoolOption, StrOption
from gitlint.rules import LineRule, RuleViolation, CommitMessageTitle

from commit_header.errors import RuleError, StructuralError
from commit_header.header import parse_header
from commit_header.rules import (
    DEFAULT_RULES,
    format_commit_types,
    parse_commit_types,
    validate,
)


class HeaderTypes(LineRule):
    name = 'commit-header-types'
    id = 'CH2'
    target = CommitMessageTitle
    violation_message = "{0} ('{1}')"
    options_spec = [
        StrOption(
            'types',
            format_commit_types(DEFAULT_RULES),
            'Allowed commit types and the fields they require',
        ),
        BoolOption(
            'allow-caps-types',
            False,
            'Match commit types regardless of their case',
        ),
    ]

    def validate(self, title, _commit):
        try:
            header = parse_header(title)
        except StructuralError:
            # Malformed titles are reported by the commit-header-grammar rule.
            self.log.debug('Title is not a valid header, skipping type rules')
            return

        rules = parse_commit_types(self.options['types'].value)
        case_sensitive = not self.options['allow-caps-types'].value

        try:
            validate(
                rules,
                header.type,
                header.scope,
                header.description,
                case_sensitive=case_sensitive,
            )
        except RuleError as error:
            return [
                RuleViolation(
                    self.id,
                    self.violation_message.format(error, header.type),
                    title
                )
            ]
