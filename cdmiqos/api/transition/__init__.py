"""Transition API module."""

from .._output_schemas.transition import TransitionRequestOutput

__all__ = ["TransitionRequestOutput"]
