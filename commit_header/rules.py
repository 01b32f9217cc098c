import logging
from collections import namedtuple

from commit_header.errors import RuleError

log = logging.getLogger(__name__)

SCOPE = 'scope'
DESCRIPTION = 'description'
KNOWN_FIELDS = (SCOPE, DESCRIPTION)

CommitTypeRule = namedtuple('CommitTypeRule', ['commit_type', 'required'])


def rule(commit_type, *required):
    return CommitTypeRule(commit_type, frozenset(required))


DEFAULT_RULES = (
    rule('feat', SCOPE, DESCRIPTION),
    rule('fix', SCOPE, DESCRIPTION),
    rule('build', DESCRIPTION),
    rule('chore', DESCRIPTION),
    rule('ci', DESCRIPTION),
    rule('docs', DESCRIPTION),
    rule('perf', DESCRIPTION),
    rule('refactor', DESCRIPTION),
    rule('revert', DESCRIPTION),
    rule('style', DESCRIPTION),
    rule('test', DESCRIPTION),
)


def find_rule(rules, commit_type, case_sensitive=True):
    if not case_sensitive:
        commit_type = commit_type.casefold()

    for candidate in rules:
        name = candidate.commit_type

        if not case_sensitive:
            name = name.casefold()

        if name == commit_type:
            return candidate

    return None


def validate(rules, commit_type, scope, description, case_sensitive=True):
    """Checks the parsed header fields against the first rule for their type.

    Returns True when the matching rule is satisfied, and raises RuleError
    when no rule matches or a required field is empty.
    """
    matched = find_rule(rules, commit_type, case_sensitive)

    if matched is None:
        raise RuleError('Commit type not allowed')

    if SCOPE in matched.required and not scope:
        raise RuleError('Commit type requires a scope, but none given', SCOPE)

    if DESCRIPTION in matched.required and not description:
        raise RuleError(
            'Commit type requires a description, but none given', DESCRIPTION
        )

    return True


def parse_commit_types(text):
    """Parses rules in the form `type1=req1,req2;type2=req3`."""
    rules = []

    if not text:
        return tuple(rules)

    for segment in text.split(';'):
        commit_type, _, required = segment.partition('=')
        commit_type = commit_type.strip()

        if not commit_type:
            continue

        fields = [name.strip() for name in required.split(',')]
        fields = [name for name in fields if name]

        for name in fields:
            if name not in KNOWN_FIELDS:
                log.warning(
                    "Commit type '%s' requires the unknown field '%s', which "
                    "is ignored",
                    commit_type,
                    name,
                )

        rules.append(rule(commit_type, *fields))

    return tuple(rules)


def format_commit_types(rules):
    segments = []

    for item in rules:
        # Known fields first so the output is stable for the defaults.
        fields = [name for name in KNOWN_FIELDS if name in item.required]
        fields += sorted(item.required.difference(KNOWN_FIELDS))
        segments.append('{0}={1}'.format(item.commit_type, ','.join(fields)))

    return ';'.join(segments)
