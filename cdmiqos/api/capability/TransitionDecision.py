"""Outcome of a transition policy check."""

from enum import Enum


class TransitionDecision(str, Enum):
    """Tri-state policy result.

    INDETERMINATE covers lookups that could not be completed; it is treated
    exactly like DENIED by every caller.
    """

    ALLOWED = "allowed"
    DENIED = "denied"
    INDETERMINATE = "indeterminate"

    @property
    def allowed(self) -> bool:
        return self is TransitionDecision.ALLOWED
