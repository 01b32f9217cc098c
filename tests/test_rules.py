import unittest

from commit_header.errors import RuleError
from commit_header.rules import (
    DEFAULT_RULES,
    CommitTypeRule,
    format_commit_types,
    parse_commit_types,
    validate,
)


class TestValidate(unittest.TestCase):

    def testDefaultRulesAccept(self):
        cases = [
            ('feat', 'scope', 'description'),
            ('fix', 'scope', 'description'),
            ('build', '', 'description'),
            ('build', 'scope', 'description'),
            ('chore', '', 'description'),
            ('ci', '', 'description'),
            ('docs', '', 'description'),
            ('perf', '', 'description'),
            ('refactor', '', 'description'),
            ('revert', '', 'description'),
            ('style', '', 'description'),
            ('test', '', 'description'),
        ]

        for commit_type, scope, description in cases:
            with self.subTest(commit_type=commit_type, scope=scope):
                self.assertIs(
                    validate(DEFAULT_RULES, commit_type, scope, description), True
                )

    def testUnknownType(self):
        with self.assertRaises(RuleError) as context:
            validate(DEFAULT_RULES, 'unknown_type', 'scope', 'description')

        self.assertEqual(str(context.exception), 'Commit type not allowed')
        self.assertIsNone(context.exception.field)

    def testMissingScope(self):
        for commit_type in ('feat', 'fix'):
            with self.subTest(commit_type=commit_type):
                with self.assertRaises(RuleError) as context:
                    validate(DEFAULT_RULES, commit_type, '', 'description')

                self.assertEqual(context.exception.field, 'scope')
                self.assertIn('requires a scope', str(context.exception))

    def testMissingDescription(self):
        with self.assertRaises(RuleError) as context:
            validate(DEFAULT_RULES, 'build', 'scope', '')

        self.assertEqual(context.exception.field, 'description')
        self.assertIn('requires a description', str(context.exception))

    def testScopeIsCheckedFirst(self):
        with self.assertRaises(RuleError) as context:
            validate(DEFAULT_RULES, 'feat', '', '')

        self.assertEqual(context.exception.field, 'scope')

    def testEmptyRuleSet(self):
        with self.assertRaises(RuleError):
            validate((), 'feat', 'scope', 'description')

    def testFirstMatchWins(self):
        rules = parse_commit_types('feat=;feat=scope')
        self.assertTrue(validate(rules, 'feat', '', ''))

    def testCaseSensitiveByDefault(self):
        with self.assertRaises(RuleError):
            validate(DEFAULT_RULES, 'FEAT', 'scope', 'description')

    def testCaseInsensitive(self):
        self.assertTrue(
            validate(DEFAULT_RULES, 'FEAT', 'scope', 'description', case_sensitive=False)
        )

        rules = parse_commit_types('Docs=')
        self.assertTrue(validate(rules, 'docs', '', '', case_sensitive=False))

        with self.assertRaises(RuleError) as context:
            validate(DEFAULT_RULES, 'Fix', '', 'description', case_sensitive=False)

        self.assertEqual(context.exception.field, 'scope')

    def testUnknownFieldsAreIgnored(self):
        rules = parse_commit_types('feat=ticket')
        self.assertTrue(validate(rules, 'feat', '', ''))


class TestParseCommitTypes(unittest.TestCase):

    def testNoRequiredFields(self):
        self.assertEqual(
            parse_commit_types('fix='), (CommitTypeRule('fix', frozenset()),)
        )
        self.assertEqual(
            parse_commit_types('fix'), (CommitTypeRule('fix', frozenset()),)
        )

    def testRequiredFields(self):
        self.assertEqual(
            parse_commit_types('fix=field1,field2'),
            (CommitTypeRule('fix', frozenset(['field1', 'field2'])),),
        )

    def testMultipleTypes(self):
        rules = parse_commit_types('fix=field1,field2;feature=field3,field4')

        self.assertEqual([item.commit_type for item in rules], ['fix', 'feature'])
        self.assertEqual(rules[1].required, frozenset(['field3', 'field4']))

    def testEmptyInput(self):
        self.assertEqual(parse_commit_types(''), ())

    def testWhitespaceAndEmptySegments(self):
        rules = parse_commit_types(' feat = scope , description ;; docs=,;')

        self.assertEqual(
            rules,
            (
                CommitTypeRule('feat', frozenset(['scope', 'description'])),
                CommitTypeRule('docs', frozenset()),
            ),
        )

    def testUnknownFieldIsLogged(self):
        with self.assertLogs('commit_header.rules', level='WARNING') as logs:
            parse_commit_types('feat=ticket')

        self.assertIn('ticket', logs.output[0])

    def testFormatDefaults(self):
        text = format_commit_types(DEFAULT_RULES)

        self.assertTrue(text.startswith('feat=scope,description;fix=scope,description;'))
        self.assertTrue(text.endswith(';test=description'))
        self.assertEqual(parse_commit_types(text), DEFAULT_RULES)

    def testFormatNoFields(self):
        self.assertEqual(format_commit_types(parse_commit_types('docs=')), 'docs=')


if __name__ == '__main__':
    unittest.main()
