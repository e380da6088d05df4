"""Core numerical primitives for SANN."""

from . import activations, errors, learners, types

__all__ = ["activations", "errors", "learners", "types"]
