"""Depth-first ordering utilities over the neurons graph."""

from __future__ import annotations

from typing import Dict, Iterator, List, Set, Tuple

from .core.errors import CyclicGraphError
from .graph import Neurons, Synapses

_IN_PROGRESS = 1
_DONE = 2


def topology_sort(output: Neurons) -> List[Neurons]:
    """Return every neurons group reaching ``output``, dependencies first.

    Inputs are explored last edge first, so on trees the result is the
    reversed pre-order of the graph (``output`` first, inputs in edge
    order). A group shared by several consumers is placed at its first
    discovery. ``output`` is always the last element. Raises
    :class:`CyclicGraphError` if an input edge leads back to a group whose
    own inputs are still being explored.
    """

    order: List[Neurons] = []
    marks: Dict[int, int] = {output.handle: _IN_PROGRESS}
    stack: List[Tuple[Neurons, Iterator[Synapses]]] = [(output, reversed(output.inputs))]
    while stack:
        neurons, pending = stack[-1]
        for synapses in pending:
            source = synapses.source
            mark = marks.get(source.handle)
            if mark is None:
                marks[source.handle] = _IN_PROGRESS
                stack.append((source, reversed(source.inputs)))
                break
            if mark == _IN_PROGRESS:
                raise CyclicGraphError(
                    f"graph is not acyclic: {source!r} is reachable from itself"
                )
        else:
            stack.pop()
            marks[neurons.handle] = _DONE
            order.append(neurons)
    return order


def reverse_topology_sort(output: Neurons) -> List[Neurons]:
    """Return :func:`topology_sort` reversed, ``output`` first."""

    return topology_sort(output)[::-1]


def reaching_neurons_num(output: Neurons) -> int:
    """Number of distinct neurons groups that can reach ``output`` (including)."""

    seen: Set[int] = {output.handle}
    frontier = [output]
    while frontier:
        neurons = frontier.pop()
        for synapses in neurons.inputs:
            if synapses.source.handle not in seen:
                seen.add(synapses.source.handle)
                frontier.append(synapses.source)
    return len(seen)


__all__ = ["reaching_neurons_num", "reverse_topology_sort", "topology_sort"]
