from gitlint.rules import LineRule, RuleViolation, CommitMessageTitle

from commit_header.errors import StructuralError
from commit_header.header import parse_header


class HeaderGrammar(LineRule):
    name = 'commit-header-grammar'
    id = 'CH1'
    target = CommitMessageTitle
    violation_message = 'Commit header is malformed: {0}'

    def validate(self, title, _commit):
        try:
            parse_header(title)
        except StructuralError as error:
            return [
                RuleViolation(
                    self.id,
                    self.violation_message.format(error.reason),
                    title
                )
            ]
