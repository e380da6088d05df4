"""Compiled layout artifact helpers."""

from __future__ import annotations

import json
import subprocess
import time
from pathlib import Path
from typing import Mapping

from ..compiler import CompiledSann


def _git_sha() -> str:
    try:
        out = subprocess.check_output(["git", "rev-parse", "HEAD"], stderr=subprocess.DEVNULL)
        return out.decode().strip()
    except Exception:  # pragma: no cover - git may be unavailable in tests
        return "unknown"


def write_layout(
    path: str | Path,
    compiled: CompiledSann,
    *,
    config: Mapping[str, object],
) -> str:
    """Write a JSON file describing the compiled layout of a network."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    layout = {
        "git_sha": _git_sha(),
        "generated_at": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "config": dict(config),
        "layout": compiled.summary(),
    }
    path.write_text(json.dumps(layout, indent=2, sort_keys=True))
    return str(path)
