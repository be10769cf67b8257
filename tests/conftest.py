from datetime import datetime, timedelta, timezone
import uuid

import pytest
from fastapi.testclient import TestClient

from app.dependencies.posts import author_post_context, public_post_repository
from app.main import app
from app.repositories.posts import PostRepository

AUTHOR_ID = "user-author"
OTHER_USER_ID = "user-other"


class InMemoryPostRepository(PostRepository):
    """Post store stand-in that applies the same filters as the Supabase queries."""

    def __init__(self, profiles=None):
        self.rows = []
        self.profiles = profiles or {}
        self.writes = 0
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _tick(self):
        self._clock += timedelta(minutes=1)
        return self._clock.isoformat()

    def _with_profile(self, row, columns=None):
        out = dict(row) if columns is None else {k: row[k] for k in columns}
        profile = self.profiles.get(row["author_id"])
        out["profiles"] = {"full_name": profile} if profile is not None else None
        return out

    def _newest_first(self, rows):
        return sorted(rows, key=lambda r: r["created_at"], reverse=True)

    def insert(self, row):
        self.writes += 1
        now = self._tick()
        stored = {
            "id": str(uuid.uuid4()),
            "excerpt": None,
            "published": False,
            "created_at": now,
            "updated_at": now,
            **row,
        }
        self.rows.append(stored)
        return dict(stored)

    def find_published(self, slug):
        for row in self.rows:
            if row["slug"] == slug and row["published"]:
                return self._with_profile(row)
        return None

    def find_owned(self, slug, author_id):
        for row in self.rows:
            if row["slug"] == slug and row["author_id"] == author_id:
                return dict(row)
        return None

    def list_by_author(self, author_id):
        return [dict(r) for r in self._newest_first(r for r in self.rows if r["author_id"] == author_id)]

    def list_published(self, limit=None):
        rows = self._newest_first(r for r in self.rows if r["published"])
        if limit is not None:
            rows = rows[:limit]
        columns = ("id", "title", "excerpt", "slug", "created_at")
        return [self._with_profile(r, columns) for r in rows]

    def update_owned(self, slug, author_id, fields):
        for row in self.rows:
            if row["slug"] == slug and row["author_id"] == author_id:
                self.writes += 1
                row.update(fields)
                return dict(row)
        return None

    def delete_owned(self, slug, author_id):
        before = len(self.rows)
        self.rows = [r for r in self.rows if not (r["slug"] == slug and r["author_id"] == author_id)]
        self.writes += before - len(self.rows)


@pytest.fixture
def repo():
    return InMemoryPostRepository(profiles={AUTHOR_ID: "Ada Lovelace", OTHER_USER_ID: None})


@pytest.fixture
def sign_in_as():
    def _sign_in(user_id, repo):
        app.dependency_overrides[author_post_context] = lambda: {"posts": repo, "user_id": user_id}
    return _sign_in


@pytest.fixture
def client(repo, sign_in_as):
    """Client signed in as AUTHOR_ID; public routes read the same store."""
    app.dependency_overrides[public_post_repository] = lambda: repo
    sign_in_as(AUTHOR_ID, repo)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(repo):
    app.dependency_overrides[public_post_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
