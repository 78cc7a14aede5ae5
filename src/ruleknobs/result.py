"""Outcome of checking a single rule against a single value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .reasons import InvalidValueReason


@dataclass(frozen=True)
class Passed:
    """The value satisfied the rule."""

    @property
    def passed(self) -> bool:
        return True

    @property
    def failed(self) -> bool:
        return False


@dataclass(frozen=True)
class Failed:
    """The value violated the rule.

    Attributes:
        reason: The specific reason the value was rejected
    """

    reason: InvalidValueReason

    @property
    def passed(self) -> bool:
        return False

    @property
    def failed(self) -> bool:
        return True


PASSED = Passed()

CheckResult = Union[Passed, Failed]


def check_result(ok: bool, reason: InvalidValueReason) -> CheckResult:
    """Return ``PASSED`` when ``ok`` holds, otherwise ``Failed(reason)``."""
    return PASSED if ok else Failed(reason)
