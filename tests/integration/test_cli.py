import json

import pytest

from cli.main import main


def test_cli_default_preset(capsys):
    main([])
    summary = json.loads(capsys.readouterr().out)
    assert summary["num_layers"] == 3
    assert [layer["weight_shape"] for layer in summary["layers"]] == [None, [2, 3], [1, 2]]


def test_cli_dump_layout(tmp_path, capsys):
    layout_path = tmp_path / "layout" / "diamond.json"
    main(["--preset", "diamond", "--seed", "3", "--dump-layout", str(layout_path)])
    summary = json.loads(capsys.readouterr().out)
    assert summary["layout_path"] == str(layout_path)
    layout = json.loads(layout_path.read_text())
    assert layout["config"]["seed"] == 3
    assert layout["layout"]["layers"][-1]["name"] == "merge"


def test_cli_config_file(tmp_path, capsys):
    config_path = tmp_path / "net.json"
    config_path.write_text(
        json.dumps(
            {
                "output": "y",
                "layers": [
                    {"name": "x", "cardinality": 5},
                    {"name": "y", "cardinality": 2, "inputs": ["x"]},
                ],
            }
        )
    )
    main(["--config", str(config_path)])
    summary = json.loads(capsys.readouterr().out)
    assert summary["parameters"] == 10


def test_cli_list_presets(capsys):
    with pytest.raises(SystemExit):
        main(["--list-presets"])
    names = capsys.readouterr().out.split()
    assert "linear-3-2-1" in names
