"""
# JTS: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CommittedMutateException(Exception):
    pass


class UncommittedApplyException(Exception):
    pass


class ShadowedRuleException(Exception):
    pass


class UnterminatedLiteralException(Exception):
    _construct: str
    _line_number: int

    def __init__(self, construct: str, line_number: int):
        super().__init__(f'unterminated {construct} starting on line {line_number}')
        self._construct = construct
        self._line_number = line_number

    @property
    def construct(self) -> str:
        return self._construct

    @property
    def line_number(self) -> int:
        return self._line_number


class RunnerNotFoundException(Exception):
    pass


class RunnerLaunchException(Exception):
    pass
