from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def _write(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def write_json_file():
    return _write


@pytest.fixture
def site(tmp_path: Path) -> dict[str, Any]:
    """A build config rooted in tmp_path with static assets in place."""

    static_dir = tmp_path / "src"
    _write(static_dir / "styles.css", "body { color: #111; }\n")
    _write(static_dir / "main.js", "function checkAnswers() {}\n")
    return {
        "data_dir": str(tmp_path / "data"),
        "index_file": "index.json",
        "dist_dir": str(tmp_path / "dist"),
        "static_dir": str(static_dir),
        "assets": {"styles.css": "styles.css", "main.js": "script.js"},
        "max_workers": 4,
        "lang": "is",
    }
