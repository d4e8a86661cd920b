"""
# JTS: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

JTS source is converted to TypeScript by the following replacements, in order:
````
#escape-placeholder-lookalikes
#mask-block-comments
#mask-line-comments
#mask-template-literals
#mask-string-literals
#keywords
#types
#unmask-strings
#unmask-comments
#unescape-placeholder-lookalikes
````
Comments and literals are thus restored exactly as written,
and keywords are replaced everywhere else.
"""

from typing import Optional

from jts.employables import (
    OrdinaryDictionaryReplacement,
    PlaceholderEscapeReplacement,
    ReplacementSequence,
    UnmaskingReplacement,
    build_committed,
    build_masking_replacement,
    build_substitution_replacement,
)
from jts.keywords import KEYWORD_RULES, TYPE_RULES
from jts.placeholders import MaskTable


def build_keyword_replacements(verbose_mode_enabled: bool = False) -> list['OrdinaryDictionaryReplacement']:
    keyword_replacement = build_substitution_replacement('keywords', KEYWORD_RULES, verbose_mode_enabled)
    type_replacement = build_substitution_replacement(
        'types',
        TYPE_RULES,
        verbose_mode_enabled,
        preceding_replacements=[keyword_replacement],
    )

    return [keyword_replacement, type_replacement]


def build_masking_replacements(mask_table: MaskTable, verbose_mode_enabled: bool = False) -> list:
    return [
        build_committed(PlaceholderEscapeReplacement, 'escape-placeholder-lookalikes', mask_table,
                        verbose_mode_enabled),
        build_masking_replacement('mask-block-comments', mask_table, MaskTable.COMMENT, 'block_comment',
                                  verbose_mode_enabled),
        build_masking_replacement('mask-line-comments', mask_table, MaskTable.COMMENT, 'line_comment',
                                  verbose_mode_enabled),
        build_masking_replacement('mask-template-literals', mask_table, MaskTable.STRING, 'template_literal',
                                  verbose_mode_enabled),
        build_masking_replacement('mask-string-literals', mask_table, MaskTable.STRING, 'string_literal',
                                  verbose_mode_enabled),
    ]


def build_unmasking_replacements(mask_table: MaskTable, verbose_mode_enabled: bool = False) -> list:
    return [
        build_committed(UnmaskingReplacement, 'unmask-strings', mask_table, MaskTable.STRING, verbose_mode_enabled),
        build_committed(UnmaskingReplacement, 'unmask-comments', mask_table, MaskTable.COMMENT, verbose_mode_enabled),
        build_committed(UnmaskingReplacement, 'unescape-placeholder-lookalikes', mask_table, MaskTable.ESCAPE,
                        verbose_mode_enabled),
    ]


def mask(source: str, verbose_mode_enabled: bool = False) -> tuple[str, MaskTable]:
    """
    Protect comments and literals with placeholders.

    Returns the masked text and the MaskTable needed to restore it.
    """
    mask_table = MaskTable()
    for replacement in build_masking_replacements(mask_table, verbose_mode_enabled):
        source = replacement.apply(source)

    return source, mask_table


def substitute_keywords(masked: str, verbose_mode_enabled: bool = False) -> str:
    for replacement in build_keyword_replacements(verbose_mode_enabled):
        masked = replacement.apply(masked)

    return masked


def restore(masked: str, mask_table: MaskTable, verbose_mode_enabled: bool = False) -> str:
    """
    Restore placeholders to the comments and literals they protect.
    """
    for replacement in build_unmasking_replacements(mask_table, verbose_mode_enabled):
        masked = replacement.apply(masked)

    return masked


def transform(source: str, verbose_mode_enabled: bool = False, mask_table: Optional[MaskTable] = None) -> str:
    """
    Convert JTS to TypeScript.
    """
    if mask_table is None:
        mask_table = MaskTable()

    replacement_sequence = ReplacementSequence('jts-to-typescript', verbose_mode_enabled=False)
    replacement_sequence.replacements = [
        *build_masking_replacements(mask_table, verbose_mode_enabled),
        *build_keyword_replacements(verbose_mode_enabled),
        *build_unmasking_replacements(mask_table, verbose_mode_enabled),
    ]
    replacement_sequence.commit()

    return replacement_sequence.apply(source)
