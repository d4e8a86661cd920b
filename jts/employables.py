"""
# JTS: employables.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Classes for the replacement rules that make up a transform.
"""

import copy
import re
from typing import Callable, Optional

from jts.bases import (
    Replacement,
    ReplacementWithMaskTable,
    ReplacementWithPrecedingReplacements,
    ReplacementWithSubstitutions,
)
from jts.exceptions import ShadowedRuleException, UnterminatedLiteralException
from jts.idioms import CONSTRUCT_FROM_OPENER, LEXEME_GROUP_NAMES, LEXEME_PATTERN_COMPILED, compute_line_number
from jts.placeholders import MaskTable


class ReplacementSequence(Replacement):
    """
    A replacement rule that applies a sequence of replacement rules.
    """
    _replacements: list['Replacement']

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._replacements = []

    @property
    def replacements(self) -> list['Replacement']:
        return self._replacements

    @replacements.setter
    def replacements(self, value: list['Replacement']):
        self._ensure_uncommitted('replacements')
        self._replacements = copy.copy(value)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str) -> str:
        for replacement in self._replacements:
            string = replacement.apply(string)

        return string


class PlaceholderEscapeReplacement(ReplacementWithMaskTable):
    """
    A replacement rule for escaping occurrences of the placeholder syntax.

    Ensures that such occurrences will not be confounding.
    To be used before any MaskingReplacement;
    undone by an UnmaskingReplacement of kind ESCAPE after all other restoration.
    See class MaskTable, especially `escape_lookalikes`.
    """
    def __init__(self, id_: str, mask_table: MaskTable, verbose_mode_enabled: bool):
        super().__init__(id_, mask_table, MaskTable.ESCAPE, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str) -> str:
        return self._mask_table.escape_lookalikes(string)


class MaskingReplacement(ReplacementWithMaskTable):
    """
    A replacement rule for protecting one kind of lexeme with a placeholder.

    The whole string is scanned for comments and literals of every kind,
    so that whichever starts first wins,
    but only lexemes matching `lexeme_group_name` are protected;
    the rest are left as they are for the passes to follow.
    An opener without a terminator raises UnterminatedLiteralException.
    """
    _lexeme_group_name: Optional[str]

    def __init__(self, id_: str, mask_table: MaskTable, mask_kind: str, verbose_mode_enabled: bool):
        super().__init__(id_, mask_table, mask_kind, verbose_mode_enabled)
        self._lexeme_group_name = None

    @property
    def lexeme_group_name(self) -> Optional[str]:
        return self._lexeme_group_name

    @lexeme_group_name.setter
    def lexeme_group_name(self, value: str):
        self._ensure_uncommitted('lexeme_group_name')
        self._lexeme_group_name = value

    def _validate_mandatory_attributes(self):
        if self._lexeme_group_name not in LEXEME_GROUP_NAMES:
            raise ValueError(f'error: unrecognised `lexeme_group_name` {self._lexeme_group_name!r}')

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str) -> str:
        def substitute_function(match: re.Match) -> str:
            unterminated_opener = match.group('unterminated_opener')
            if unterminated_opener is not None:
                construct = CONSTRUCT_FROM_OPENER[unterminated_opener]
                line_number = compute_line_number(string, match.start())
                raise UnterminatedLiteralException(construct, line_number)

            lexeme = match.group(self._lexeme_group_name)
            if lexeme is None:
                return match.group()

            return self._mask_table.protect(self._mask_kind, lexeme)

        return re.sub(pattern=LEXEME_PATTERN_COMPILED, repl=substitute_function, string=string)


class UnmaskingReplacement(ReplacementWithMaskTable):
    """
    A replacement rule for restoring placeholders of one kind to their originals.
    """
    def __init__(self, id_: str, mask_table: MaskTable, mask_kind: str, verbose_mode_enabled: bool):
        super().__init__(id_, mask_table, mask_kind, verbose_mode_enabled)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        pass

    def _apply(self, string: str) -> str:
        return self._mask_table.unprotect(self._mask_kind, string)


class OrdinaryDictionaryReplacement(
    ReplacementWithSubstitutions,
    ReplacementWithPrecedingReplacements,
    Replacement,
):
    """
    A replacement rule for a dictionary of ordinary substitutions.

    Substitutions are applied sequentially, in order of declaration,
    each replacing every occurrence of its pattern (no word boundaries).
    A pattern containing an earlier pattern (of this rule or a preceding rule) as a substring
    would never match in full, so committing such a rule raises ShadowedRuleException.
    """
    _substitution_pairs: list[tuple[str, str]]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._substitution_pairs = []

    def _validate_mandatory_attributes(self):
        earlier_patterns = [
            pattern
            for replacement in self._preceding_replacements
            for pattern in replacement.patterns
        ]
        for pattern in self._substitute_from_pattern:
            shadowing_patterns = [
                earlier_pattern
                for earlier_pattern in earlier_patterns
                if earlier_pattern in pattern
            ]
            if len(shadowing_patterns) > 0:
                raise ShadowedRuleException(
                    f'error: replacement `#{self._id}`: pattern `{pattern}` '
                    f'is shadowed by earlier pattern `{shadowing_patterns[0]}`'
                )

            earlier_patterns.append(pattern)

    def _set_apply_method_variables(self):
        self._substitution_pairs = list(self._substitute_from_pattern.items())

    def _apply(self, string: str) -> str:
        for pattern, substitute in self._substitution_pairs:
            string = string.replace(pattern, substitute)

        return string


def build_substitution_replacement(id_: str, rules: tuple[tuple[str, str], ...], verbose_mode_enabled: bool,
                                   preceding_replacements: Optional[list['OrdinaryDictionaryReplacement']] = None,
                                   ) -> 'OrdinaryDictionaryReplacement':
    replacement = OrdinaryDictionaryReplacement(id_, verbose_mode_enabled)
    for pattern, substitute in rules:
        replacement.add_substitution(pattern, substitute)
    if preceding_replacements is not None:
        replacement.preceding_replacements = preceding_replacements
    replacement.commit()

    return replacement


def build_masking_replacement(id_: str, mask_table: MaskTable, mask_kind: str, lexeme_group_name: str,
                              verbose_mode_enabled: bool) -> 'MaskingReplacement':
    replacement = MaskingReplacement(id_, mask_table, mask_kind, verbose_mode_enabled)
    replacement.lexeme_group_name = lexeme_group_name
    replacement.commit()

    return replacement


def build_committed(replacement_class: Callable[..., 'Replacement'], *args) -> 'Replacement':
    replacement = replacement_class(*args)
    replacement.commit()

    return replacement
