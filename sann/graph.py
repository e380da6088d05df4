"""Declarative neurons graph: neuron groups joined by synapse groups."""

from __future__ import annotations

import itertools
import numbers
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .core.activations import linear
from .core.types import Activator

_handles = itertools.count()


def _next_handle() -> int:
    return next(_handles)


@dataclass(frozen=True, eq=False)
class Neurons:
    """A group of isomorphic neurons.

    ``inputs`` lists the synapse groups feeding every neuron of the group;
    their order fixes the column layout of the compiled weight matrix.
    Nodes compare and hash by identity: every instance owns a unique
    ``handle`` even when its fields equal another node's.
    """

    cardinality: int
    activator: Activator = linear
    inputs: Tuple["Synapses", ...] = ()
    name: Optional[str] = None
    handle: int = field(default_factory=_next_handle, init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.cardinality, bool) or not isinstance(self.cardinality, numbers.Integral):
            raise TypeError(f"cardinality must be an int, got {type(self.cardinality).__name__}")
        object.__setattr__(self, "cardinality", int(self.cardinality))
        if self.cardinality < 0:
            raise ValueError(f"cardinality must be non-negative, got {self.cardinality}")
        object.__setattr__(self, "inputs", tuple(self.inputs))

    @property
    def is_source(self) -> bool:
        return not self.inputs

    @property
    def input_size(self) -> int:
        """Total cardinality of the groups feeding this one."""

        return sum(synapses.source.cardinality for synapses in self.inputs)

    def __rshift__(self, target: "Neurons") -> "Neurons":
        return connect(self, target)

    def __repr__(self) -> str:
        label = self.name if self.name is not None else f"#{self.handle}"
        return (
            f"Neurons({label}, cardinality={self.cardinality}, "
            f"activator={self.activator.name}, inputs={len(self.inputs)})"
        )


@dataclass(frozen=True, eq=False)
class Synapses:
    """A group of synapses reading from ``source``."""

    source: Neurons


def inputs(cardinality: int, name: Optional[str] = None) -> Neurons:
    """Return fresh input (external) neurons with the linear activator."""

    return Neurons(cardinality, linear, (), name)


def connect(source: Neurons, target: Neurons) -> Neurons:
    """Return a copy of ``target`` with ``source`` prepended to its inputs.

    ``target`` itself is not modified and the copy is a distinct node.
    """

    return replace(target, inputs=(Synapses(source),) + target.inputs)


__all__ = ["Neurons", "Synapses", "connect", "inputs"]
