from __future__ import annotations

import pytest

from bloggen import create_app, db


class FakeChat:
    """Scripted chat backend: pops one reply per call, raising it if it is an exception."""

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.calls = []

    def complete(self, system, user):
        self.calls.append((system, user))
        reply = self.replies.pop(0) if self.replies else "Generated post."
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def chat():
    return FakeChat()


@pytest.fixture
def app(chat):
    app = create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://", "DIAGNOSE_TOKEN": ""},
        chat=chat,
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
