import json

import pytest

from sann import compile, topology_sort
from sann.config import build_network, load_config, load_preset, merge, presets


def test_presets_build_and_compile():
    for name, cfg in presets().items():
        output = build_network(cfg)
        compiled = compile(output, seed=cfg.get("seed"))
        assert compiled.nodes[-1].name == cfg["output"]


def test_build_network_keeps_edge_order_and_sharing():
    output = build_network(load_preset("diamond"))
    assert [s.source.name for s in output.inputs] == ["left", "right"]
    assert output.activator.name == "sigmoid"
    order = topology_sort(output)
    assert [node.name for node in order] == ["in", "right", "left", "merge"]


def test_build_network_errors():
    with pytest.raises(KeyError, match="output"):
        build_network({"layers": [{"name": "a", "cardinality": 1}]})
    with pytest.raises(KeyError, match="unknown layer"):
        build_network(
            {
                "output": "b",
                "layers": [{"name": "b", "cardinality": 1, "inputs": ["a"]}],
            }
        )
    with pytest.raises(ValueError, match="Duplicate"):
        build_network(
            {
                "output": "a",
                "layers": [{"name": "a", "cardinality": 1}, {"name": "a", "cardinality": 2}],
            }
        )
    with pytest.raises(KeyError, match="Available activators"):
        build_network(
            {"output": "a", "layers": [{"name": "a", "cardinality": 1, "activation": "gelu"}]}
        )
    with pytest.raises(KeyError, match="Available presets"):
        load_preset("missing")
    for bad, error in ((2.7, TypeError), (True, TypeError), ("3", TypeError), (-1, ValueError)):
        with pytest.raises(error):
            build_network({"output": "a", "layers": [{"name": "a", "cardinality": bad}]})


def test_load_config_json_and_yaml(tmp_path):
    cfg = load_preset("linear-3-2-1")
    json_path = tmp_path / "net.json"
    json_path.write_text(json.dumps(cfg))
    assert load_config(json_path) == cfg

    yaml_path = tmp_path / "net.yaml"
    yaml_path.write_text(
        "output: out\n"
        "layers:\n"
        "  - {name: x, cardinality: 2}\n"
        "  - {name: out, cardinality: 1, activation: tanh, inputs: [x]}\n"
    )
    loaded = load_config(yaml_path)
    assert build_network(loaded).cardinality == 1

    bad = tmp_path / "net.txt"
    bad.write_text("{}")
    with pytest.raises(ValueError):
        load_config(bad)


def test_merge_is_deep():
    base = {"seed": 0, "meta": {"a": 1, "b": 2}}
    merged = merge(base, {"meta": {"b": 3}, "seed": 5})
    assert merged == {"seed": 5, "meta": {"a": 1, "b": 3}}
