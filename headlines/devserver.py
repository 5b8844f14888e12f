"""Local article endpoint for running the reader without a real backend.

Serves the same JSON shape the reader expects at ``/articles``::

    python -m headlines.devserver
"""

from __future__ import annotations

import json
import os
from typing import List, Optional

from flask import Flask, jsonify, request

from .fetchers.mock_fetcher import SAMPLE_ARTICLES


def _sample_payload() -> List[dict]:
    return [
        {"title": article.title, "content": article.body, "source": article.source, "url": article.url}
        for article in SAMPLE_ARTICLES
    ]


def create_app(fixture_path: Optional[str] = None) -> Flask:
    app = Flask(__name__)
    fixture_path = fixture_path or os.getenv("HEADLINES_DEV_FIXTURE")

    def load_articles() -> object:
        if not fixture_path:
            return _sample_payload()
        with open(fixture_path, "r", encoding="utf-8") as f:
            return json.load(f)

    @app.get("/health")
    def healthcheck():
        return {"status": "ok"}

    @app.get("/articles")
    def articles():
        country = request.args.get("country", "us")
        try:
            payload = load_articles()
        except (OSError, ValueError) as exc:
            app.logger.exception("Could not load fixture %s", fixture_path)
            return jsonify({"error": "Fixture unavailable", "detail": str(exc)}), 500
        app.logger.info("Serving articles for country=%s", country)
        return jsonify(payload)

    return app


if __name__ == "__main__":
    create_app().run(debug=True, host="127.0.0.1", port=8080)
