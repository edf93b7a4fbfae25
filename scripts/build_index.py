from __future__ import annotations

import argparse
import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from libquiz import BuildLog, is_failure, read_json
from validate_quiz import validate_quiz_file


def check_category(entry: Any, data_dir: Path, log: BuildLog | None = None) -> dict[str, Any] | None:
    if not isinstance(entry, dict) or not entry.get("file") or not entry.get("title"):
        if log:
            log.info(f"Skipping category {json.dumps(entry, ensure_ascii=False)} - Missing file or title.")
        return None

    path = data_dir / str(entry["file"])
    if not path.resolve().is_relative_to(data_dir.resolve()):
        if log:
            log.error(f"Skipping category {entry['title']!r} - {entry['file']} is outside {data_dir}.")
        return None

    validation = validate_quiz_file(path, log)
    if not validation["valid"]:
        if log:
            log.error(validation["error"])
        return None
    return {"category": entry, "quiz": validation["data"]}


def collect_categories(
    index_path: Path,
    data_dir: Path,
    log: BuildLog | None = None,
    max_workers: int = 8,
) -> list[dict[str, Any]] | None:
    index_data = read_json(index_path, log)
    if is_failure(index_data) or not isinstance(index_data, list):
        if log:
            log.error(f"Error: {index_path.name} is missing or invalid.")
        return None
    if log:
        log.info(f"Loaded {index_path.name}: {len(index_data)} entries")

    if not index_data:
        return []
    # Executor.map yields in submission order regardless of completion order.
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(index_data)))) as executor:
        results = list(executor.map(lambda e: check_category(e, data_dir, log), index_data))
    return [r for r in results if r is not None]


def main() -> None:
    parser = argparse.ArgumentParser(description="List the renderable quiz categories")
    parser.add_argument("--index", default="data/index.json")
    parser.add_argument("--data-dir", default="data")
    parser.add_argument("--max-workers", type=int, default=8)
    args = parser.parse_args()

    log = BuildLog(echo=True)
    categories = collect_categories(Path(args.index), Path(args.data_dir), log, args.max_workers)
    if categories is None:
        return
    for item in categories:
        quiz = item["quiz"]
        print(f"{item['category']['file']}: {quiz['title']} (questions={len(quiz['questions'])})")


if __name__ == "__main__":
    main()
