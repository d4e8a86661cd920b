"""
# JTS: test_employables.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `employables.py`.
"""

import unittest

from jts.employables import (
    MaskingReplacement,
    OrdinaryDictionaryReplacement,
    PlaceholderEscapeReplacement,
    ReplacementSequence,
    UnmaskingReplacement,
    build_masking_replacement,
    build_substitution_replacement,
)
from jts.exceptions import (
    CommittedMutateException,
    ShadowedRuleException,
    UncommittedApplyException,
    UnterminatedLiteralException,
)
from jts.placeholders import MaskTable


class TestEmployables(unittest.TestCase):
    def test_replacement_lifecycle(self):
        mask_table = MaskTable()
        replacement = MaskingReplacement('mask', mask_table, MaskTable.COMMENT, verbose_mode_enabled=False)
        self.assertRaises(UncommittedApplyException, replacement.apply, '// a')

        replacement.lexeme_group_name = 'line_comment'
        replacement.commit()
        with self.assertRaises(CommittedMutateException):
            replacement.lexeme_group_name = 'block_comment'

        dictionary_replacement = build_substitution_replacement('rules', (('a', 'b'),), verbose_mode_enabled=False)
        self.assertRaises(CommittedMutateException, dictionary_replacement.add_substitution, 'c', 'd')

    def test_masking_replacement_unrecognised_lexeme(self):
        replacement = MaskingReplacement('mask', MaskTable(), MaskTable.COMMENT, verbose_mode_enabled=False)
        replacement.lexeme_group_name = 'regex_literal'
        self.assertRaises(ValueError, replacement.commit)

    def test_masking_replacement_block_comments(self):
        mask_table = MaskTable()
        replacement = build_masking_replacement('mask', mask_table, MaskTable.COMMENT, 'block_comment', False)
        self.assertEqual(
            replacement.apply('a /* x // y */ b // z /* w */\n"/* s */"'),
            'a __COMMENT_0__ b // z /* w */\n"/* s */"',
        )
        self.assertEqual(mask_table.entries(MaskTable.COMMENT), [('__COMMENT_0__', '/* x // y */')])

    def test_masking_replacement_line_comments(self):
        mask_table = MaskTable()
        replacement = build_masking_replacement('mask', mask_table, MaskTable.COMMENT, 'line_comment', False)
        self.assertEqual(
            replacement.apply('a /* x // y */ b // z /* w\n"http://s"'),
            'a /* x // y */ b __COMMENT_0__\n"http://s"',
        )

    def test_masking_replacement_string_literals(self):
        mask_table = MaskTable()
        replacement = build_masking_replacement('mask', mask_table, MaskTable.STRING, 'string_literal', False)
        self.assertEqual(
            replacement.apply('f("a", \'b\', `"c"`) // "d"'),
            'f(__STRING_0__, __STRING_1__, `"c"`) // "d"',
        )

    def test_masking_replacement_unterminated(self):
        replacement = build_masking_replacement('mask', MaskTable(), MaskTable.COMMENT, 'block_comment', False)

        with self.assertRaises(UnterminatedLiteralException) as context:
            replacement.apply('x = 1;\ny = "abc;\nz = 2;')
        self.assertEqual(context.exception.construct, 'string literal')
        self.assertEqual(context.exception.line_number, 2)

        with self.assertRaises(UnterminatedLiteralException) as context:
            replacement.apply('/* a */\n\n`b')
        self.assertEqual(context.exception.construct, 'template literal')
        self.assertEqual(context.exception.line_number, 3)
        self.assertEqual(str(context.exception), 'unterminated template literal starting on line 3')

    def test_unmasking_replacement(self):
        mask_table = MaskTable()
        mask_table.protect(MaskTable.STRING, '"s"')
        mask_table.protect(MaskTable.COMMENT, '// c')

        replacement = UnmaskingReplacement('unmask', mask_table, MaskTable.COMMENT, verbose_mode_enabled=False)
        replacement.commit()
        self.assertEqual(replacement.apply('__STRING_0__ __COMMENT_0__'), '__STRING_0__ // c')

    def test_placeholder_escape_replacement(self):
        mask_table = MaskTable()
        replacement = PlaceholderEscapeReplacement('escape', mask_table, verbose_mode_enabled=False)
        replacement.commit()
        self.assertEqual(replacement.apply('x__COMMENT_0__'), 'x__ESCAPE_0__')
        self.assertEqual(mask_table.entries(MaskTable.ESCAPE), [('__ESCAPE_0__', '__COMMENT_0__')])

    def test_ordinary_dictionary_replacement_sequential(self):
        replacement = build_substitution_replacement('rules', (('ab', 'X'), ('a', 'Y')), verbose_mode_enabled=False)
        self.assertEqual(replacement.apply('aab ab a'), 'YX X Y')
        self.assertEqual(replacement.patterns, ('ab', 'a'))

    def test_ordinary_dictionary_replacement_shadowed(self):
        self.assertRaises(
            ShadowedRuleException,
            build_substitution_replacement, 'rules', (('a', 'Y'), ('ab', 'X')), False,
        )

        preceding_replacement = build_substitution_replacement('keywords', (('真', 'true'),), False)
        replacement = OrdinaryDictionaryReplacement('types', verbose_mode_enabled=False)
        replacement.add_substitution('真偽値', 'boolean')
        replacement.preceding_replacements = [preceding_replacement]
        with self.assertRaises(ShadowedRuleException) as context:
            replacement.commit()
        self.assertIn('真偽値', str(context.exception))

    def test_replacement_sequence(self):
        first_replacement = build_substitution_replacement('first', (('a', 'b'),), False)
        second_replacement = build_substitution_replacement('second', (('b', 'c'),), False)

        replacement_sequence = ReplacementSequence('sequence', verbose_mode_enabled=False)
        replacement_sequence.replacements = [first_replacement, second_replacement]
        replacement_sequence.commit()
        self.assertEqual(replacement_sequence.apply('ab'), 'cc')


if __name__ == '__main__':
    unittest.main()
