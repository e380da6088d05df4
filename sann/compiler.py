"""Compile a neurons graph into compact per-layer numpy buffers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, MutableSequence, Optional, Sequence, Union

import numpy as np

from .core.errors import DimensionMismatchError
from .core.types import Array, Learner
from .graph import Neurons
from .topology import topology_sort

logger = logging.getLogger(__name__)

NetworkInputs = Union[Sequence[Array], Mapping[Neurons, Array]]


@dataclass(eq=False)
class CompiledSann:
    """Compiled network with a compact internal representation.

    All four sequences are indexed by topological position: the groups a
    layer reads from always sit at lower indices. ``weights[i]`` is ``None``
    for network inputs, which have no incoming synapses.
    """

    nodes: List[Neurons]
    weights: MutableSequence[Optional[Array]]
    impulses: MutableSequence[Array]
    errors: MutableSequence[Array]
    _positions: Dict[int, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        sizes = {len(self.nodes), len(self.weights), len(self.impulses), len(self.errors)}
        if len(sizes) != 1:
            raise ValueError("nodes, weights, impulses and errors must have the same length")
        self._positions = {neurons.handle: idx for idx, neurons in enumerate(self.nodes)}

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def output(self) -> Neurons:
        return self.nodes[-1]

    @property
    def sources(self) -> List[int]:
        return [idx for idx, neurons in enumerate(self.nodes) if neurons.is_source]

    def index(self, neurons: Neurons) -> int:
        try:
            return self._positions[neurons.handle]
        except KeyError as exc:
            raise KeyError(f"{neurons!r} is not part of this compiled network") from exc

    def input_indices(self, idx: int) -> List[int]:
        return [self._positions[synapses.source.handle] for synapses in self.nodes[idx].inputs]

    def gather_inputs(self, idx: int) -> Array:
        """Concatenate the impulses feeding layer ``idx`` in edge order."""

        parts = [self.impulses[src] for src in self.input_indices(idx)]
        if not parts:
            return np.zeros(0, dtype=self.impulses[idx].dtype)
        return np.concatenate(parts)

    def forward(self, inputs: NetworkInputs) -> Array:
        """Propagate ``inputs`` through the network and return the output impulse.

        ``inputs`` is either a sequence aligned with :attr:`sources` or a
        mapping from source neurons to vectors. Every impulse buffer is
        overwritten in place.
        """

        sources = self.sources
        if isinstance(inputs, Mapping):
            by_index = {self.index(neurons): value for neurons, value in inputs.items()}
            extra = [self.nodes[idx] for idx in by_index if not self.nodes[idx].is_source]
            if extra:
                raise ValueError(f"inputs given for non-source neurons {extra!r}")
            missing = [self.nodes[idx] for idx in sources if idx not in by_index]
            if missing:
                raise KeyError(f"missing inputs for {missing!r}")
        else:
            if len(inputs) != len(sources):
                raise DimensionMismatchError("network inputs", len(sources), len(inputs))
            by_index = dict(zip(sources, inputs))

        for idx, neurons in enumerate(self.nodes):
            if neurons.is_source:
                value = np.asarray(by_index[idx], dtype=self.impulses[idx].dtype)
                self._store(idx, neurons.activator.evaluate(value))
                continue
            weight = self.weights[idx]
            x = self.gather_inputs(idx)
            if weight.shape[1] != x.shape[0]:
                raise DimensionMismatchError(f"inputs of layer {idx}", weight.shape[1], x.shape[0])
            self._store(idx, neurons.activator.evaluate(weight @ x))
        return self.impulses[-1].copy()

    def update(self, idx: int, learner: Learner, info: Optional[object] = None) -> Optional[object]:
        """Apply ``learner`` to layer ``idx`` using its current input impulses and errors."""

        weight = self.weights[idx]
        if weight is None:
            raise ValueError(f"layer {idx} is a network input and has no weights")
        return learner(weight, self.gather_inputs(idx), self.errors[idx], info)

    def parameter_count(self) -> int:
        return int(sum(int(w.size) for w in self.weights if w is not None))

    def summary(self) -> Dict[str, object]:
        layers = []
        for idx, neurons in enumerate(self.nodes):
            weight = self.weights[idx]
            layers.append(
                {
                    "index": idx,
                    "name": neurons.name,
                    "cardinality": neurons.cardinality,
                    "activator": neurons.activator.name,
                    "inputs": self.input_indices(idx),
                    "weight_shape": list(weight.shape) if weight is not None else None,
                }
            )
        return {
            "layers": layers,
            "num_layers": len(self.nodes),
            "parameters": self.parameter_count(),
        }

    def _store(self, idx: int, value: Array) -> None:
        buffer = self.impulses[idx]
        if value.shape != buffer.shape:
            raise DimensionMismatchError(f"impulse of layer {idx}", buffer.shape[0], value.size)
        buffer[...] = value


def compile(
    output: Neurons,
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    dtype: np.dtype = np.float64,
) -> CompiledSann:
    """Compile the graph reaching ``output`` into a :class:`CompiledSann`.

    Weights are drawn uniformly from ``[-1, 1]``; impulses and errors start
    at zero. Pass ``rng`` (or ``seed``) for reproducible weights.
    """

    if rng is None:
        rng = np.random.default_rng(seed)
    nodes = topology_sort(output)
    if nodes[-1] is not output:  # pragma: no cover - guardrail
        raise AssertionError("topology sort did not end at the output neurons")

    weights: List[Optional[Array]] = []
    for neurons in nodes:
        if neurons.is_source:
            weights.append(None)
            continue
        weight = rng.random((neurons.cardinality, neurons.input_size)).astype(dtype)
        weight *= 2.0
        weight += -1.0
        weights.append(weight)

    impulses = [np.zeros(neurons.cardinality, dtype=dtype) for neurons in nodes]
    errors = [np.zeros(neurons.cardinality, dtype=dtype) for neurons in nodes]

    compiled = CompiledSann(nodes=nodes, weights=weights, impulses=impulses, errors=errors)
    logger.debug(
        "Compiled %d neurons groups with %d parameters",
        len(compiled),
        compiled.parameter_count(),
    )
    return compiled


__all__ = ["CompiledSann", "NetworkInputs", "compile"]
