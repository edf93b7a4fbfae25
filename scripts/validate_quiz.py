from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from libquiz import BuildLog, LoadFailure, read_json


def _file_missing(label: str, data: Any) -> str:
    if isinstance(data, LoadFailure) and data.kind == "parse":
        return f"Error: File {label} is not valid JSON."
    return f"Error: File {label} does not exist."


def _is_valid_question(q: Any) -> bool:
    if not isinstance(q, dict) or not isinstance(q.get("answers"), list):
        return False
    return isinstance(q.get("question"), str) and bool(q["question"])


def _is_valid_answer(a: Any) -> bool:
    return isinstance(a, dict) and "answer" in a and isinstance(a.get("correct"), bool)


def validate_quiz(data: Any, label: str, log: BuildLog | None = None) -> dict[str, Any]:
    """Check a parsed quiz document and return a sanitized copy.

    A document without a title or without questions is rejected as a whole.
    Malformed questions and answers are dropped one by one; a question whose
    answers were all dropped is kept with an empty list.
    """
    if data is None or isinstance(data, LoadFailure):
        if log:
            log.info(f"File {label} does not exist or could not be parsed.")
        return {"valid": False, "data": None, "error": _file_missing(label, data)}

    questions = data.get("questions") if isinstance(data, dict) else None
    if not isinstance(data, dict) or not data.get("title") or not isinstance(questions, list) or not questions:
        if log:
            log.info(f"File {label} is missing a title or has no valid questions.")
        return {
            "valid": False,
            "data": None,
            "error": f"Error: {label} is missing 'title' or has an invalid 'questions' array.",
        }

    kept: list[dict[str, Any]] = []
    removed_answers = 0
    for q in questions:
        if not _is_valid_question(q):
            text = q.get("question") if isinstance(q, dict) else None
            if log:
                log.error(f'Skipping question "{text or "UNKNOWN"}" in {label} - Invalid answers format.')
            continue

        answers: list[dict[str, Any]] = []
        for a in q["answers"]:
            if not _is_valid_answer(a):
                removed_answers += 1
                if log:
                    log.error(f'Removing invalid answer in question: "{q["question"]}" in {label}.')
                continue
            answers.append(dict(a))
        kept.append({**q, "answers": answers})

    if removed_answers and log:
        log.warning(f"File {label} had {removed_answers} invalid answers that were removed.")

    return {"valid": True, "data": {**data, "questions": kept}}


def validate_quiz_file(path: Path, log: BuildLog | None = None) -> dict[str, Any]:
    return validate_quiz(read_json(path, log), str(path), log)


def main() -> None:
    parser = argparse.ArgumentParser(description="Validate quiz JSON files")
    parser.add_argument("paths", nargs="+", help="Path to quiz JSON")
    args = parser.parse_args()

    failed = 0
    for raw in args.paths:
        result = validate_quiz_file(Path(raw))
        if result["valid"]:
            print(f"OK: {raw} (questions={len(result['data']['questions'])})")
        else:
            failed += 1
            print(result["error"], file=sys.stderr)
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
