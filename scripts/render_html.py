from __future__ import annotations

import html
from pathlib import PurePosixPath
from typing import Any


def escape_html(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return html.escape(value, quote=True)


def page_name(file_name: str) -> str:
    p = PurePosixPath(file_name)
    if p.suffix.lower() == ".json":
        return str(p.with_suffix(".html"))
    return f"{file_name}.html"


def _page(*, title: str, lang: str, head_extra: list[str], body: list[str]) -> str:
    # Deterministic: no timestamps, fixed structure.
    lines = [
        "<!DOCTYPE html>",
        f'<html lang="{escape_html(lang)}">',
        "<head>",
        '    <meta charset="UTF-8">',
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"    <title>{escape_html(title)}</title>",
        '    <link rel="stylesheet" href="./styles.css">',
        *head_extra,
        "</head>",
        "<body>",
        *body,
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"


def render_index(categories: list[dict[str, Any]], lang: str = "is") -> str:
    items: list[str] = []
    for c in categories:
        entry = c.get("category", c)
        href = escape_html(page_name(str(entry["file"])))
        items.append(f'        <li><a href="{href}">{escape_html(entry["title"])}</a></li>')
    body = [
        "    <h1>Quiz Categories</h1>",
        "    <ul>",
        *items,
        "    </ul>",
    ]
    return _page(title="Quiz Categories", lang=lang, head_extra=[], body=body)


def render_question(q: dict[str, Any], q_index: int) -> list[str]:
    lines = [
        '        <div class="question">',
        f"            <p>{escape_html(q.get('question'))}</p>",
        "            <ul>",
    ]
    for a_index, a in enumerate(q.get("answers", [])):
        input_id = f"q{q_index}-{a_index}"
        correct = "true" if a.get("correct") is True else "false"
        lines.extend(
            [
                "                <li>",
                f'                    <input type="radio" name="q{q_index}" id="{input_id}" data-correct="{correct}">',
                f'                    <label for="{input_id}">{escape_html(a.get("answer"))}</label>',
                "                </li>",
            ]
        )
    lines.extend(["            </ul>", "        </div>"])
    return lines


def render_quiz(quiz: dict[str, Any], lang: str = "is") -> str:
    title = quiz.get("title")
    body = [f"    <h1>{escape_html(title)}</h1>", '    <div id="quiz-container">']
    for i, q in enumerate(quiz.get("questions", [])):
        body.extend(render_question(q, i))
    body.extend(
        [
            '        <button class="checkAnsButton" type="button">Check Answers</button>',
            "    </div>",
        ]
    )
    return _page(
        title=title if isinstance(title, str) else "",
        lang=lang,
        head_extra=['    <script defer src="script.js"></script>'],
        body=body,
    )
