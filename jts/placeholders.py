"""
# JTS: placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder protection.
"""

import re


class MaskTable:
    """
    Per-transform record of strings that have been protected with a placeholder.

    Comments and literals must not be altered by keyword substitution.
    To protect a string from alteration,
    it is temporarily replaced by a placeholder of the form `__«KIND»_«index»__`,
    where «KIND» is one of COMMENT, STRING, or ESCAPE,
    and «index» is the zero-based position of the string in that kind's table.
    Each kind keeps its own counter.

    The very first replacement of a transform should protect pre-existing occurrences
    of the placeholder syntax (as kind ESCAPE), lest those occurrences be confounding.
    This includes a bare prefix `__«KIND»_«index»` without the closing `__`,
    which would otherwise join with a placeholder that immediately follows it.
    The very last replacement should restore them.

    Restoration consumes entries, so restoring the same text twice leaves it unchanged.
    A MaskTable belongs to exactly one transform and is never shared.
    """
    COMMENT = 'COMMENT'
    STRING = 'STRING'
    ESCAPE = 'ESCAPE'
    KINDS = (COMMENT, STRING, ESCAPE)

    _PLACEHOLDER_LOOKALIKE_PATTERN_COMPILED = re.compile(
        pattern=r'__ (?: COMMENT | STRING | ESCAPE ) _ [0-9]+ (?: __ )?',
        flags=re.ASCII | re.VERBOSE,
    )

    _original_from_placeholder_from_kind: dict[str, dict[str, str]]
    _next_index_from_kind: dict[str, int]

    def __init__(self):
        self._original_from_placeholder_from_kind = {kind: {} for kind in MaskTable.KINDS}
        self._next_index_from_kind = {kind: 0 for kind in MaskTable.KINDS}

    @staticmethod
    def build_placeholder(kind: str, index: int) -> str:
        return f'__{kind}_{index}__'

    @staticmethod
    def build_placeholder_regex(kind: str) -> str:
        return fr'__{kind}_[0-9]+__'

    def entries(self, kind: str) -> list[tuple[str, str]]:
        """
        Return the (placeholder, original) pairs of a kind, in order of protection.
        """
        return list(self._original_from_placeholder_from_kind[kind].items())

    def protect(self, kind: str, original: str) -> str:
        """
        Protect a string by recording it and returning its placeholder.
        """
        index = self._next_index_from_kind[kind]
        self._next_index_from_kind[kind] = index + 1

        placeholder = MaskTable.build_placeholder(kind, index)
        self._original_from_placeholder_from_kind[kind][placeholder] = original

        return placeholder

    def unprotect(self, kind: str, string: str) -> str:
        """
        Unprotect a string by restoring placeholders of a kind to their originals.

        Placeholders not (or no longer) recorded are left as they are.
        """
        original_from_placeholder = self._original_from_placeholder_from_kind[kind]

        def substitute_function(placeholder_match: re.Match) -> str:
            placeholder = placeholder_match.group()
            return original_from_placeholder.pop(placeholder, placeholder)

        return re.sub(
            pattern=MaskTable.build_placeholder_regex(kind),
            repl=substitute_function,
            string=string,
            flags=re.ASCII,
        )

    def escape_lookalikes(self, string: str) -> str:
        """
        Protect occurrences of the placeholder syntax already present in a string.

        It just so happens that the act of escaping such occurrences
        is equivalent to protecting them with a placeholder of kind ESCAPE.
        """
        return re.sub(
            pattern=MaskTable._PLACEHOLDER_LOOKALIKE_PATTERN_COMPILED,
            repl=lambda match: self.protect(MaskTable.ESCAPE, match.group()),
            string=string,
        )
