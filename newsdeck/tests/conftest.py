from __future__ import annotations

import json

import pytest

from newsdeck.query.facets import compute_facets
from newsdeck.query.normalize import normalize_articles


def _article(title, description, category, language, publisher, tags, published_at):
    return {
        "title": title,
        "description": description,
        "url": f"https://news.example/{title.lower().replace(' ', '-')}",
        "category": category,
        "language": language,
        "publisher": {"name": publisher, "url": "https://news.example"},
        "tags": tags,
        "publishedAt": published_at,
    }


@pytest.fixture()
def sample_records() -> list[dict]:
    return [
        _article(
            "Quantum chips hit new milestone",
            "Researchers report a stable qubit array.",
            "technology",
            "en",
            "Tech Daily",
            ["ai", "hardware"],
            "2024-03-01T10:00:00Z",
        ),
        _article(
            "Election results announced",
            "Turnout reached a record high.",
            "politics",
            "en",
            "World Wire",
            ["elections"],
            "2024-03-03T08:00:00Z",
        ),
        _article(
            "Les marchés en hausse",
            "Les indices progressent.",
            "business",
            "fr",
            "Le Journal",
            ["markets", "ai"],
            "2024-02-20T12:00:00Z",
        ),
        _article(
            "AI regulation debate",
            "Lawmakers weigh new rules.",
            "politics",
            "en",
            "Tech Daily",
            ["ai", "policy", "ai"],
            "2024-03-02T09:30:00Z",
        ),
        _article(
            "Football final recap",
            "A late goal decided the match.",
            "sports",
            "es",
            "Deportes Hoy",
            [],
            "not a date",
        ),
        {"title": "Untitled feed item"},
    ]


@pytest.fixture()
def articles(sample_records):
    return normalize_articles(sample_records)


@pytest.fixture()
def facet_index(articles):
    return compute_facets(articles)


@pytest.fixture()
def dataset_file(tmp_path, sample_records):
    path = tmp_path / "articles.json"
    path.write_text(json.dumps({"articles": sample_records}), encoding="utf-8")
    return path
