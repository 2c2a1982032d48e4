import threading
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from main import app
from mathquest.ai import MathQuestAI
from mathquest.config import Settings
from mathquest.database import SupabaseClient
from mathquest.dependencies import get_ai, get_db

SESSIONS = "math_problem_sessions"
SUBMISSIONS = "math_problem_submissions"


class FakeQuery:
    """Just enough of the supabase query builder for the calls the app makes"""

    def __init__(self, store, name):
        self.store = store
        self.name = name
        self.rows = store.tables.setdefault(name, [])
        self._insert = None
        self._filters = []
        self._limit = None

    def insert(self, data):
        self._insert = data
        return self

    def select(self, *columns):
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def limit(self, count):
        self._limit = count
        return self

    def execute(self):
        self.store.executed.append(self.name)
        self.store.threads.append(threading.get_ident())
        if self.name in self.store.failures:
            raise self.store.failures[self.name]

        if self._insert is not None:
            new_rows = self._insert if isinstance(self._insert, list) else [self._insert]
            stored = []
            for row in new_rows:
                row = dict(row)
                row.setdefault("id", f"{self.name}-{len(self.rows) + 1}")
                self.rows.append(row)
                stored.append(row)
            return SimpleNamespace(data=stored)

        matches = [
            row for row in self.rows
            if all(row.get(column) == value for column, value in self._filters)
        ]
        if self._limit is not None:
            matches = matches[:self._limit]
        return SimpleNamespace(data=matches)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.failures = {}
        self.executed = []
        self.threads = []

    def table(self, name):
        return FakeQuery(self, name)

    def seed(self, name, row):
        self.tables.setdefault(name, []).append(dict(row))

    def rows(self, name):
        return self.tables.get(name, [])


class FakeCompletions:
    def __init__(self):
        self.replies = []
        self.calls = []
        self.gate = None

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.gate is not None:
            await self.gate.wait()
        reply = self.replies.pop(0) if self.replies else "Well done, keep going!"
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)

    def queue(self, *replies):
        self.completions.replies.extend(replies)

    @property
    def calls(self):
        return self.completions.calls


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_key="test-key",
        openai_api_key="sk-test",
    )


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def openai_client():
    return FakeOpenAI()


@pytest.fixture
def db(settings, supabase):
    return SupabaseClient(settings, client=supabase)


@pytest.fixture
def ai(settings, openai_client):
    return MathQuestAI(settings, client=openai_client)


@pytest.fixture
def client(db, ai):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_ai] = lambda: ai
    yield TestClient(app)
    app.dependency_overrides.clear()
