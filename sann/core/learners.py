"""Weight update rules applied to a single compiled layer."""

from __future__ import annotations

from typing import Optional

from .errors import DimensionMismatchError
from .types import Array


def perceptron_learner(
    weights: Array,
    inputs: Array,
    error: Array,
    info: Optional[object] = None,
) -> Optional[object]:
    """Add ``inputs * error[0]`` to every row of ``weights`` in place.

    Only the first component of ``error`` is used, so this is a
    single-sample, single-output-unit rule. ``info`` is accepted for
    compatibility with the :data:`~sann.core.types.Learner` signature and
    ignored; the rule carries no auxiliary state and returns ``None``.
    """

    if inputs.shape[0] != weights.shape[1]:
        raise DimensionMismatchError("learner inputs", weights.shape[1], inputs.shape[0])
    if error.shape[0] == 0:
        raise ValueError("error vector must not be empty")
    weights += inputs * error[0]
    return None


__all__ = ["perceptron_learner"]
