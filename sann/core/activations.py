"""Built-in activators and the activator registry."""

from __future__ import annotations

from typing import Dict, Iterable

import numpy as np

from .types import Activator, Array


def _identity(x: Array) -> Array:
    return x


def _ones(x: Array) -> Array:
    return np.ones_like(x)


def _relu(x: Array) -> Array:
    return np.maximum(x, 0.0)


def _relu_deriv(x: Array) -> Array:
    return (x > 0).astype(np.float64)


def _tanh_deriv(x: Array) -> Array:
    return 1.0 - np.tanh(x) ** 2


def _sigmoid(x: Array) -> Array:
    return 1.0 / (1.0 + np.exp(-x))


def _sigmoid_deriv(x: Array) -> Array:
    s = _sigmoid(x)
    return s * (1.0 - s)


linear = Activator(evaluate=_identity, derivate=_ones, name="linear")
relu = Activator(evaluate=_relu, derivate=_relu_deriv, name="relu")
tanh = Activator(evaluate=np.tanh, derivate=_tanh_deriv, name="tanh")
sigmoid = Activator(evaluate=_sigmoid, derivate=_sigmoid_deriv, name="sigmoid")


class ActivatorRegistry:
    """Name lookup for activators referenced from configuration files."""

    def __init__(self) -> None:
        self._registry: Dict[str, Activator] = {}

    def register(self, activator: Activator) -> None:
        self._registry[activator.name] = activator

    def get(self, name: str) -> Activator:
        if name not in self._registry:
            available = ", ".join(sorted(self._registry))
            raise KeyError(f"Unknown activator {name!r}. Available activators: {available}")
        return self._registry[name]

    def names(self) -> Iterable[str]:
        return sorted(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry


REGISTRY = ActivatorRegistry()
for _activator in (linear, relu, tanh, sigmoid):
    REGISTRY.register(_activator)


__all__ = ["ActivatorRegistry", "REGISTRY", "linear", "relu", "sigmoid", "tanh"]
