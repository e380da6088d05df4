"""Core typing contracts for SANN."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

Array = np.ndarray

VectorFn = Callable[[Array], Array]

Learner = Callable[[Array, Array, Array, Optional[object]], Optional[object]]


@dataclass(frozen=True)
class Activator:
    """Vectorised activating function paired with its derivative."""

    evaluate: VectorFn
    derivate: VectorFn
    name: str = "custom"

    def __call__(self, x: Array) -> Array:
        return self.evaluate(x)
