"""
# JTS: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms.
"""

import re


LEXEME_GROUP_NAMES = (
    'block_comment',
    'line_comment',
    'template_literal',
    'string_literal',
)
CONSTRUCT_FROM_OPENER = {
    '/*': 'block comment',
    '`': 'template literal',
    '"': 'string literal',
    "'": 'string literal',
}


def build_block_comment_regex() -> str:
    return r'(?P<block_comment> /[*] [\s\S]*? [*]/ )'


def build_line_comment_regex() -> str:
    return r'(?P<line_comment> // [^\n]* )'


def build_template_literal_regex() -> str:
    """
    Build regex for a template literal.

    Embedded expressions `${...}` are matched as ordinary body content.
    """
    return r'(?P<template_literal> ` (?: [^`\\] | \\[\s\S] )* ` )'


def build_string_literal_regex() -> str:
    """
    Build regex for a single- or double-quoted string literal.

    A backslash escapes the following character (including the delimiter and itself);
    an unescaped newline cannot occur inside.
    """
    return r'''
        (?P<string_literal>
            (?P<quote> ["'] )
            (?: (?! (?P=quote) ) [^\\\n] | \\[\s\S] )*
            (?P=quote)
        )
    '''


def build_unterminated_opener_regex() -> str:
    """
    Build regex for an opener that failed to match any complete lexeme.

    Must come last in the alternation, so that complete lexemes take precedence.
    """
    return r'''(?P<unterminated_opener> /[*] | [`"'] )'''


def build_lexeme_regex() -> str:
    """
    Build regex matching whichever comment or literal starts first.

    Scanning with this regex left to right guarantees that, for instance,
    `//` inside a string or a block comment is not taken to start a line comment,
    and that `/*` inside a line comment is not taken to start a block comment.
    """
    return '|'.join(
        (
            build_block_comment_regex(),
            build_line_comment_regex(),
            build_template_literal_regex(),
            build_string_literal_regex(),
            build_unterminated_opener_regex(),
        )
    )


def compute_line_number(string: str, position: int) -> int:
    return string.count('\n', 0, position) + 1


LEXEME_PATTERN_COMPILED = re.compile(pattern=build_lexeme_regex(), flags=re.VERBOSE)
