"""Reason tags identifying why a value failed a rule."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidValueReason:
    """Marker for values that label a specific failed constraint.

    A reason carries no behavior beyond equality and display. Each rule
    domain declares its own closed set of reasons, usually as an ``Enum``
    that mixes in this marker:

        ```python
        class PasswordInvalidValueReason(InvalidValueReason, Enum):
            TOO_SHORT = "too_short"
            MISSING_SYMBOL = "missing_symbol"
        ```

    One-off reasons can use :class:`NamedReason` instead.
    """


@dataclass(frozen=True)
class NamedReason(InvalidValueReason):
    """Ad-hoc reason identified by its name."""

    name: str

    def __str__(self) -> str:
        return self.name
