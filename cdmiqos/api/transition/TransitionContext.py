"""Immutable snapshot handed to a scheduled transition completion."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TransitionContext:
    path: str
    source_capability_uri: str
    target_capability_uri: str
