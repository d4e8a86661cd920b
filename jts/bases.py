"""
# JTS: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for JTS replacement rules.
"""

import abc
import copy

from jts.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from jts.exceptions import CommittedMutateException, UncommittedApplyException
from jts.placeholders import MaskTable


class Replacement(abc.ABC):
    """
    Base class for a replacement rule.

    A replacement is constructed, has its attributes set, is committed,
    and only then may be applied.
    """
    _is_committed: bool
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        self._is_committed = False
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    def commit(self):
        self._validate_mandatory_attributes()
        self._set_apply_method_variables()
        self._is_committed = True

    def apply(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `apply(string)` before `commit()`')

        string_before = string
        string = self._apply(string)
        string_after = string

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            try:
                print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
                print(string_before)
                print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
                print(string_after)
                print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
                print('\n\n\n\n')
            except UnicodeEncodeError as unicode_encode_error:
                # caused by Japanese keywords on a non-Unicode terminal
                error_message = (
                    'bad print due to non-Unicode terminal encoding, likely `cp1252` or `cp932` on Windows. '
                    'Try setting the `PYTHONIOENCODING` environment variable to `utf-8`.'
                )
                raise UnicodeError(error_message) from unicode_encode_error

        return string_after

    def _ensure_uncommitted(self, attribute_name: str):
        if self._is_committed:
            raise CommittedMutateException(f'error: cannot set `{attribute_name}` after `commit()`')

    @abc.abstractmethod
    def _validate_mandatory_attributes(self):
        """
        Ensure all mandatory attributes have been set.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _set_apply_method_variables(self):
        """
        Set variables used in `self._apply(string)`.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _apply(self, string: str) -> str:
        """
        Apply the defined replacement to a string.
        """
        raise NotImplementedError


class ReplacementWithSubstitutions(Replacement, abc.ABC):
    """
    Base class for a replacement rule with ordered plain-string substitutions.
    """
    _substitute_from_pattern: dict[str, str]

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._substitute_from_pattern = {}

    @property
    def patterns(self) -> tuple[str, ...]:
        return tuple(self._substitute_from_pattern)

    def add_substitution(self, pattern: str, substitute: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `add_substitution(...)` after `commit()`')
        self._substitute_from_pattern[pattern] = substitute


class ReplacementWithPrecedingReplacements(Replacement, abc.ABC):
    """
    Base class for a replacement rule with `preceding_replacements`.

    These are the substitution replacements applied before this one,
    whose patterns must not shadow this one's.
    """
    _preceding_replacements: list['ReplacementWithSubstitutions']

    def __init__(self, id_: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._preceding_replacements = []

    @property
    def preceding_replacements(self) -> list['ReplacementWithSubstitutions']:
        return self._preceding_replacements

    @preceding_replacements.setter
    def preceding_replacements(self, value: list['ReplacementWithSubstitutions']):
        self._ensure_uncommitted('preceding_replacements')
        self._preceding_replacements = copy.copy(value)


class ReplacementWithMaskTable(Replacement, abc.ABC):
    """
    Base class for a replacement rule that records into (or restores from) a MaskTable.
    """
    _mask_table: MaskTable
    _mask_kind: str

    def __init__(self, id_: str, mask_table: MaskTable, mask_kind: str, verbose_mode_enabled: bool):
        super().__init__(id_, verbose_mode_enabled)
        self._mask_table = mask_table
        self._mask_kind = mask_kind
