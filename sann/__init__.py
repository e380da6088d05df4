"""SANN public API."""

from .compiler import CompiledSann, compile
from .core import activations, errors, learners, types  # noqa: F401
from .core.activations import linear
from .core.errors import CyclicGraphError, DimensionMismatchError
from .core.learners import perceptron_learner
from .core.types import Activator
from .graph import Neurons, Synapses, connect, inputs
from .topology import reaching_neurons_num, reverse_topology_sort, topology_sort

__all__ = [
    "Activator",
    "CompiledSann",
    "CyclicGraphError",
    "DimensionMismatchError",
    "Neurons",
    "Synapses",
    "activations",
    "compile",
    "connect",
    "errors",
    "inputs",
    "learners",
    "linear",
    "perceptron_learner",
    "reaching_neurons_num",
    "reverse_topology_sort",
    "topology_sort",
    "types",
]
