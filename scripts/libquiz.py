from __future__ import annotations

import json
import shutil
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any


DEFAULT_CONFIG_PATH = Path("config/build.json")

DEFAULT_CONFIG: dict[str, Any] = {
    "data_dir": "data",
    "index_file": "index.json",
    "dist_dir": "dist",
    "static_dir": "src",
    "assets": {"styles.css": "styles.css", "main.js": "script.js"},
    "max_workers": 8,
    "lang": "is",
}


class BuildLog:
    """Collects build diagnostics; echoes them to the console when asked."""

    def __init__(self, echo: bool = False) -> None:
        self.echo = echo
        self.entries: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def _add(self, level: str, message: str) -> None:
        with self._lock:
            self.entries.append((level, message))
        if self.echo:
            stream = sys.stderr if level == "error" else sys.stdout
            print(message, file=stream, flush=True)

    def info(self, message: str) -> None:
        self._add("info", message)

    def warning(self, message: str) -> None:
        self._add("warning", message)

    def error(self, message: str) -> None:
        self._add("error", message)

    def messages(self, level: str | None = None) -> list[str]:
        return [m for lv, m in self.entries if level is None or lv == level]


@dataclass(frozen=True)
class LoadFailure:
    kind: str  # "io" | "parse"
    path: str
    message: str


def is_failure(value: Any) -> bool:
    return isinstance(value, LoadFailure)


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def read_json(path: Path, log: BuildLog | None = None) -> Any:
    if log:
        log.info(f"starting to read {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        if log:
            log.error(f"Error reading file {path}: {e}")
        return LoadFailure(kind="io", path=str(path), message=str(e))

    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        if log:
            log.error(f"error parsing {path} as json: {e}")
        return LoadFailure(kind="parse", path=str(path), message=str(e))


def write_html(dist_dir: Path, file_name: str, content: str, log: BuildLog | None = None) -> bool:
    path = dist_dir / file_name
    if not path.resolve().is_relative_to(dist_dir.resolve()):
        if log:
            log.error(f"Refusing to write {file_name}: outside {dist_dir}")
        return False
    try:
        ensure_parent_dir(path)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        if log:
            log.error(f"Error writing {file_name}: {e}")
        return False
    if log:
        log.info(f"{file_name} created successfully!")
    return True


def copy_assets(
    static_dir: Path,
    dist_dir: Path,
    assets: dict[str, str],
    log: BuildLog | None = None,
) -> list[str]:
    copied: list[str] = []
    for source, target in assets.items():
        dst = dist_dir / target
        try:
            ensure_parent_dir(dst)
            shutil.copy2(static_dir / source, dst)
        except OSError as e:
            if log:
                log.error(f"Failed to copy {source}: {e}")
            continue
        copied.append(target)
        if log:
            log.info(f"{source} copied to {dist_dir}/{target}")
    return copied


def load_build_config(path: Path | None) -> dict[str, Any]:
    cfg_path = path or DEFAULT_CONFIG_PATH
    config = dict(DEFAULT_CONFIG)
    config["assets"] = dict(DEFAULT_CONFIG["assets"])
    if not cfg_path.exists():
        return config

    raw = load_json(cfg_path)
    if not isinstance(raw, dict):
        raise ValueError(f"build config must be a JSON object: {cfg_path}")
    for key in DEFAULT_CONFIG:
        if key in raw:
            config[key] = raw[key]
    if not isinstance(config["assets"], dict):
        raise ValueError("build config 'assets' must map source file to target file")
    config["max_workers"] = max(1, int(config["max_workers"]))
    return config
