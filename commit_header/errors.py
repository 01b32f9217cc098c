EXPECTED_FORMAT = "Incorrect commit message, expected format 'TYPE([SCOPE]): MESSAGE'"


class CommitHeaderError(ValueError):
    pass


class StructuralError(CommitHeaderError):
    """The header line doesn't follow the header grammar."""

    def __init__(self, reason):
        super().__init__('{0}! {1}'.format(EXPECTED_FORMAT, reason))
        self.reason = reason


class RuleError(CommitHeaderError):
    """The header parsed, but doesn't satisfy the rule of its type.

    `field` names the missing field, or is None when no rule matched the type.
    """

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field
