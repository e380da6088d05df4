"""Network descriptions: presets, file loading and graph assembly."""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Dict, Mapping, MutableMapping

from .core.activations import REGISTRY as ACTIVATORS
from .graph import Neurons, connect

logger = logging.getLogger(__name__)

_PRESETS: Dict[str, Mapping[str, object]] = {
    "linear-3-2-1": {
        "seed": 0,
        "output": "out",
        "layers": [
            {"name": "in", "cardinality": 3},
            {"name": "hidden", "cardinality": 2, "activation": "linear", "inputs": ["in"]},
            {"name": "out", "cardinality": 1, "activation": "linear", "inputs": ["hidden"]},
        ],
    },
    "diamond": {
        "seed": 0,
        "output": "merge",
        "layers": [
            {"name": "in", "cardinality": 4},
            {"name": "left", "cardinality": 3, "activation": "relu", "inputs": ["in"]},
            {"name": "right", "cardinality": 2, "activation": "tanh", "inputs": ["in"]},
            {
                "name": "merge",
                "cardinality": 1,
                "activation": "sigmoid",
                "inputs": ["left", "right"],
            },
        ],
    },
    "two-inputs": {
        "seed": 7,
        "output": "out",
        "layers": [
            {"name": "image", "cardinality": 8},
            {"name": "context", "cardinality": 2},
            {"name": "features", "cardinality": 4, "activation": "relu", "inputs": ["image"]},
            {
                "name": "out",
                "cardinality": 2,
                "activation": "linear",
                "inputs": ["features", "context"],
            },
        ],
    },
}

_REQUIRED_KEYS = {"layers", "output"}


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Dict[str, object]:
    try:
        return deepcopy(dict(_PRESETS[name]))
    except KeyError as exc:
        available = ", ".join(sorted(_PRESETS))
        raise KeyError(f"Unknown preset {name!r}. Available presets: {available}") from exc


def load_config(path: str | Path) -> Dict[str, object]:
    """Read a JSON or YAML network description from ``path``."""

    path = Path(path)
    text = path.read_text()
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to load configs in YAML format") from exc
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text or "{}")
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix}")

    if not isinstance(data, Mapping):
        raise TypeError(f"Config {path.name} must decode to a mapping")
    return dict(data)


def merge(base: MutableMapping[str, object], override: Mapping[str, object]) -> MutableMapping[str, object]:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), Mapping):
            base[key] = merge(dict(base[key]), value)  # type: ignore[arg-type]
        else:
            base[key] = value
    return base


def build_network(config: Mapping[str, object]) -> Neurons:
    """Assemble the neurons graph described by ``config`` and return its output.

    Layers are declared in order; each layer may only read from layers
    declared before it. ``inputs`` lists source layer names in edge order.
    """

    missing = _REQUIRED_KEYS - set(config)
    if missing:
        raise KeyError(f"Network config is missing required keys: {', '.join(sorted(missing))}")

    layers = config["layers"]
    if not isinstance(layers, (list, tuple)) or not layers:
        raise ValueError("Network config 'layers' must be a non-empty list")

    built: Dict[str, Neurons] = {}
    for position, layer in enumerate(layers):
        if not isinstance(layer, Mapping):
            raise TypeError(f"Layer {position} must be a mapping")
        name = str(layer.get("name", f"layer{position}"))
        if name in built:
            raise ValueError(f"Duplicate layer name: {name!r}")
        if "cardinality" not in layer:
            raise KeyError(f"Layer {name!r} missing field 'cardinality'")
        activator = ACTIVATORS.get(str(layer.get("activation", "linear")))
        neurons = Neurons(layer["cardinality"], activator, (), name)
        sources = list(layer.get("inputs", []))
        # connect() prepends, so walk the edge list backwards
        for source_name in reversed(sources):
            if source_name not in built:
                raise KeyError(f"Layer {name!r} reads from unknown layer {source_name!r}")
            neurons = connect(built[source_name], neurons)
        built[name] = neurons

    output = str(config["output"])
    if output not in built:
        raise KeyError(f"Output layer {output!r} is not declared")
    logger.debug("Built network with %d declared layers, output %r", len(built), output)
    return built[output]


__all__ = ["build_network", "load_config", "load_preset", "merge", "presets"]
