# bloggen/generator.py
"""
Blog generation: prompt template, chat backends and the per-item adapter
that turns a title/details pair into a stored BlogPost.

Backends:
  - hf     : Hugging Face Inference API (huggingface_hub.InferenceClient)
  - openai : OpenAI Chat Completions
"""

from __future__ import annotations
from typing import Any, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from loguru import logger

from . import db
from .models import BlogPost, FAILED_CONTENT, EMPTY_CONTENT, utcnow

SYSTEM_PROMPT = (
    "You are a beginner-friendly technical writer. "
    "Keep explanations simple, clear, and engaging for new developers."
)

USER_TMPL = """
Write a beginner-friendly programming blog on the topic: "{title}".
Include:
- Simple introduction
- Key concepts explained clearly
- Example code snippets (if relevant)
- Real-world applications
- A small conclusion

Details: {details}
"""

EXTENSION_KEY = "bloggen.chat"


def build_prompt(title: Any, details: Any) -> str:
    return USER_TMPL.format(title=title, details=details)


def first_message_text(resp: Any) -> Optional[str]:
    """Text of choices[0].message.content, or None when the response has none."""
    try:
        content = resp.choices[0].message.content
    except (AttributeError, IndexError, KeyError, TypeError):
        return None
    if not isinstance(content, str):
        return None
    return content.strip() or None


class HFChat:
    def __init__(self, token: Optional[str], model: str, max_tokens: int = 800,
                 temperature: float = 0.6, client: Any = None):
        self.token = token
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client

    @property
    def client(self):
        if self._client is None:
            from huggingface_hub import InferenceClient
            self._client = InferenceClient(token=self.token)
        return self._client

    def complete(self, system: str, user: str) -> Optional[str]:
        resp = self.client.chat_completion(
            model=self.model,
            messages=[{"role": "system", "content": system}, {"role": "user", "content": user}],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        return first_message_text(resp)


class OpenAIChat:
    def __init__(self, api_key: Optional[str], model: str, max_tokens: int = 800,
                 temperature: float = 0.6, client: Any = None):
        self.api_key = (api_key or "").strip()
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise RuntimeError("OPENAI_API_KEY not set")
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def complete(self, system: str, user: str) -> Optional[str]:
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "system", "content": system}, {"role": "user", "content": user}],
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        return first_message_text(resp)


def make_chat(config: dict):
    backend = config.get("LLM_BACKEND", "hf")
    opts = dict(
        model=config["MODEL_NAME"],
        max_tokens=config["MAX_TOKENS"],
        temperature=config["TEMPERATURE"],
    )
    if backend == "openai":
        if not config.get("OPENAI_API_KEY"):
            logger.error("Missing OPENAI_API_KEY in .env")
        return OpenAIChat(config.get("OPENAI_API_KEY"), **opts)
    if backend != "hf":
        logger.warning("unknown LLM_BACKEND={!r}, using hf", backend)
    if not config.get("HF_TOKEN"):
        logger.error("Missing HF_TOKEN in .env")
    return HFChat(config.get("HF_TOKEN"), **opts)


def get_chat():
    return current_app.extensions[EXTENSION_KEY]


def _s(x: Any) -> Optional[str]:
    if x is None:
        return None
    return x if isinstance(x, str) else str(x)


def generate_blog(title: Any, details: Any, chat=None) -> BlogPost:
    """
    Generate one post and store it. Inference errors are logged and stored as
    FAILED_CONTENT. When the write itself fails the session is rolled back and
    an unsaved FAILED_CONTENT post (id None) is returned instead.
    """
    chat = chat or get_chat()
    title, details = _s(title), _s(details)
    try:
        content = chat.complete(SYSTEM_PROMPT, build_prompt(title, details)) or EMPTY_CONTENT
    except Exception:
        logger.exception("Error generating blog: {}", title)
        content = FAILED_CONTENT

    post = BlogPost(title=title, details=details, content=content)
    try:
        db.session.add(post)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Error saving blog: {}", title)
        return BlogPost(title=title, details=details, content=FAILED_CONTENT, created_at=utcnow())
    if content != FAILED_CONTENT:
        logger.info("Blog generated successfully: {}", title)
    return post
