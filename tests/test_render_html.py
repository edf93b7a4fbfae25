from __future__ import annotations

import html
import re

from render_html import escape_html, page_name, render_index, render_quiz


def _quiz() -> dict:
    return {
        "title": "Tags & <Things>",
        "questions": [
            {
                "question": 'What does "<br>" do?',
                "answers": [
                    {"answer": "Line break", "correct": True},
                    {"answer": "Bold & 'loud'", "correct": False},
                ],
            },
            {"question": "Nothing left?", "answers": []},
            {"question": "Last", "answers": [{"answer": "&lt;literal&gt;", "correct": False}]},
        ],
    }


def test_escape_html_escapes_significant_characters() -> None:
    assert escape_html("<a href=\"x\">'&'</a>") == "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"


def test_escape_html_non_string_is_empty() -> None:
    assert escape_html(None) == ""
    assert escape_html(42) == ""
    assert escape_html(["x"]) == ""


def test_page_name_replaces_json_suffix() -> None:
    assert page_name("a.json") == "a.html"
    assert page_name("sub/b.JSON") == "sub/b.html"
    assert page_name("a.json.json") == "a.json.html"
    assert page_name("plain") == "plain.html"


def test_render_index_links_each_category_in_order() -> None:
    categories = [
        {"category": {"file": "b.json", "title": "B <b>"}, "quiz": {}},
        {"category": {"file": "a.json", "title": "A"}, "quiz": {}},
    ]

    page = render_index(categories)

    links = re.findall(r'<li><a href="([^"]+)">(.*?)</a></li>', page)
    assert links == [("b.html", "B &lt;b&gt;"), ("a.html", "A")]
    assert "<title>Quiz Categories</title>" in page
    assert page.startswith("<!DOCTYPE html>")


def test_render_quiz_round_trip_recovers_text_in_order() -> None:
    quiz = _quiz()

    page = render_quiz(quiz)

    questions = [html.unescape(t) for t in re.findall(r"<p>(.*?)</p>", page)]
    labels = [html.unescape(t) for t in re.findall(r'<label for="[^"]+">(.*?)</label>', page)]
    assert questions == [q["question"] for q in quiz["questions"]]
    assert labels == [a["answer"] for q in quiz["questions"] for a in q["answers"]]
    assert f"<h1>{escape_html(quiz['title'])}</h1>" in page


def test_render_quiz_marks_correctness_per_answer() -> None:
    page = render_quiz(_quiz())

    inputs = re.findall(r'<input type="radio" name="(q\d+)" id="(q\d+-\d+)" data-correct="(true|false)">', page)
    assert inputs == [
        ("q0", "q0-0", "true"),
        ("q0", "q0-1", "false"),
        ("q2", "q2-0", "false"),
    ]
    assert page.count('<div class="question">') == 3
    assert 'class="checkAnsButton"' in page
    assert '<script defer src="script.js"></script>' in page


def test_render_quiz_tolerates_non_string_fields() -> None:
    quiz = {"title": 7, "questions": [{"question": ["x"], "answers": [{"answer": None, "correct": True}]}]}

    page = render_quiz(quiz)

    assert "<title></title>" in page
    assert "<p></p>" in page
    assert '<label for="q0-0"></label>' in page


def test_render_is_deterministic() -> None:
    assert render_quiz(_quiz()) == render_quiz(_quiz())
    assert render_index([{"category": {"file": "a.json", "title": "A"}}]) == render_index(
        [{"category": {"file": "a.json", "title": "A"}}]
    )
