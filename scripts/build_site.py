from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from build_index import collect_categories
from libquiz import BuildLog, copy_assets, load_build_config, write_html
from render_html import page_name, render_index, render_quiz


def render_pages(categories: list[dict[str, Any]], lang: str) -> list[tuple[str, str]]:
    pages = [("index.html", render_index(categories, lang))]
    for item in categories:
        pages.append((page_name(str(item["category"]["file"])), render_quiz(item["quiz"], lang)))
    return pages


def build_site(config: dict[str, Any], log: BuildLog | None = None) -> dict[str, Any] | None:
    data_dir = Path(config["data_dir"])
    dist_dir = Path(config["dist_dir"])
    max_workers = int(config["max_workers"])

    categories = collect_categories(data_dir / config["index_file"], data_dir, log, max_workers)
    if categories is None:
        if log:
            log.error(f"Error: {config['index_file']} is missing or invalid. Nothing was written.")
        return None

    pages = render_pages(categories, config["lang"])
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(pages)))) as executor:
        ok = list(executor.map(lambda p: write_html(dist_dir, p[0], p[1], log), pages))

    assets = copy_assets(Path(config["static_dir"]), dist_dir, config["assets"], log)
    return {
        "categories": len(categories),
        "written": [name for (name, _), done in zip(pages, ok) if done],
        "failed": [name for (name, _), done in zip(pages, ok) if not done],
        "assets": assets,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Build static quiz pages into dist/")
    parser.add_argument("--config", default=None, help="Build config JSON (default: config/build.json)")
    parser.add_argument("--data-dir", default=None)
    parser.add_argument("--dist-dir", default=None)
    parser.add_argument("--static-dir", default=None)
    parser.add_argument("--max-workers", type=int, default=None)
    args = parser.parse_args()

    config = load_build_config(Path(args.config) if args.config else None)
    for key in ["data_dir", "dist_dir", "static_dir", "max_workers"]:
        value = getattr(args, key)
        if value is not None:
            config[key] = value

    log = BuildLog(echo=True)
    log.info("Generating HTML files...")
    summary = build_site(config, log)
    if summary is not None:
        log.info(
            f"Pages written={len(summary['written'])} failed={len(summary['failed'])} "
            f"categories={summary['categories']}"
        )
    log.info("Build complete!")


if __name__ == "__main__":
    main()
