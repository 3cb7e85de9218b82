"""
AI content generation: ask the chat completion API for one short history
article as JSON and store it as a HistoricalContent row.
"""
import json
from typing import Optional

import openai
from sqlalchemy.orm import Session

from historybits.ai.openai_client import get_client, set_last_error
from historybits.content.models import HistoricalContent
from historybits.core.config import OPENAI_MODEL
from historybits.core.errors import GenerationError

REQUIRED_FIELDS = ("title", "period", "category", "hook", "content", "takeaway")

SYSTEM_PROMPT = (
    "You write bite-sized history articles for a mobile feed. "
    "Every article is accurate, vivid and readable in under two minutes. "
    "Respond with a single JSON object and nothing else."
)


def build_prompt(
    topic: Optional[str] = None,
    period: Optional[str] = None,
    category: Optional[str] = None,
) -> str:
    parts = ["Write one fascinating, lesser-known story from history."]
    if topic:
        parts.append(f"Topic: {topic}.")
    if period:
        parts.append(f"Time period: {period}.")
    if category:
        parts.append(f"Category: {category}.")
    parts.append(
        'Return JSON with keys "title", "period", "category", "hook" '
        '(one attention-grabbing sentence), "content" (2-4 short paragraphs) '
        'and "takeaway" (one sentence lesson).'
    )
    return " ".join(parts)


def parse_article(raw: str) -> dict:
    """Validate the model output; raise GenerationError when unusable."""
    text = (raw or "").strip()

    # Tolerate ```json fenced replies
    if text.startswith("```"):
        text = text.strip("`")
        if text.lower().startswith("json"):
            text = text[4:]
        text = text.strip()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GenerationError(f"Generated content is not valid JSON: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise GenerationError("Generated content is not a JSON object")

    missing = [f for f in REQUIRED_FIELDS if not str(data.get(f) or "").strip()]
    if missing:
        raise GenerationError(f"Generated content is missing fields: {', '.join(missing)}")

    return {f: str(data[f]).strip() for f in REQUIRED_FIELDS}


def generate_article(prompt: str) -> dict:
    client = get_client()
    if client is None:
        raise GenerationError("Content generation is not configured (OPENAI_API_KEY not set)")

    try:
        response = client.chat.completions.create(
            model=OPENAI_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
            temperature=0.8,
        )
    except openai.OpenAIError as exc:
        set_last_error(f"{type(exc).__name__}: {exc}")
        raise GenerationError(f"Content generation failed: {type(exc).__name__}") from exc

    return parse_article(response.choices[0].message.content)


def generate_and_store_many(
    db: Session,
    count: int,
    topic: Optional[str] = None,
    period: Optional[str] = None,
    category: Optional[str] = None,
) -> list[HistoricalContent]:
    """Generate `count` articles, then store them in one commit (all or nothing)."""
    prompt = build_prompt(topic, period, category)
    articles = [generate_article(prompt) for _ in range(count)]

    rows = [HistoricalContent(**article) for article in articles]
    db.add_all(rows)
    db.commit()
    for content in rows:
        db.refresh(content)
        print(f"[AI] stored generated content id={content.id} title={content.title!r}", flush=True)
    return rows


def generate_and_store(
    db: Session,
    topic: Optional[str] = None,
    period: Optional[str] = None,
    category: Optional[str] = None,
) -> HistoricalContent:
    return generate_and_store_many(db, 1, topic=topic, period=period, category=category)[0]
