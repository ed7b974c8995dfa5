from __future__ import annotations

import itertools
from types import SimpleNamespace

import pytest

from fabric_dashboard.api.dependencies import reset_menu_state


class _FakeQuery:
    def __init__(self, client: "FakeSupabaseClient", table: str):
        self._client = client
        self._table = table
        self._op = "select"
        self._payload = None
        self._filters: list[tuple[str, object]] = []
        self._single = False

    def select(self, _columns: str):
        self._op = "select"
        return self

    def insert(self, payload: dict):
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload: dict):
        self._op = "update"
        self._payload = payload
        return self

    def eq(self, column: str, value):
        self._filters.append((column, value))
        return self

    def maybe_single(self):
        self._single = True
        return self

    def _matches(self, row: dict) -> bool:
        return all(row.get(column) == value for column, value in self._filters)

    def execute(self):
        self._client.calls.append((self._table, self._op))
        if (self._table, self._op) in self._client.failures:
            raise RuntimeError(f"{self._table}.{self._op} rejected")

        rows = self._client.tables.setdefault(self._table, [])
        if self._op == "insert":
            row = {"id": next(self._client.ids), **self._payload}
            rows.append(row)
            return SimpleNamespace(data=[row])
        if self._op == "update":
            updated = [row for row in rows if self._matches(row)]
            for row in updated:
                row.update(self._payload)
            return SimpleNamespace(data=updated)

        found = [dict(row) for row in rows if self._matches(row)]
        if self._single:
            return SimpleNamespace(data=found[0] if found else None)
        return SimpleNamespace(data=found)


class _FakeAdmin:
    def __init__(self, client: "FakeSupabaseClient"):
        self._client = client

    def create_user(self, attributes: dict):
        email = attributes["email"]
        if email in self._client.auth_failures:
            raise RuntimeError(f"cannot create {email}")
        user = SimpleNamespace(id=f"auth-{next(self._client.ids)}", email=email)
        self._client.auth_users[user.id] = dict(attributes)
        return SimpleNamespace(user=user)

    def update_user_by_id(self, uid: str, attributes: dict):
        if uid in self._client.auth_failures:
            raise RuntimeError(f"cannot update {uid}")
        self._client.auth_users.setdefault(uid, {}).update(attributes)
        return SimpleNamespace(user=SimpleNamespace(id=uid))


class FakeSupabaseClient:
    """Just enough of the supabase-py client surface for the tools modules."""

    def __init__(self, tables: dict[str, list[dict]] | None = None):
        self.tables = tables or {}
        self.calls: list[tuple[str, str]] = []
        self.failures: set[tuple[str, str]] = set()
        self.auth_failures: set[str] = set()
        self.auth_users: dict[str, dict] = {}
        self.ids = itertools.count(1)
        self.auth = SimpleNamespace(admin=_FakeAdmin(self))

    def table(self, name: str) -> _FakeQuery:
        return _FakeQuery(self, name)


@pytest.fixture
def fake_supabase() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture(autouse=True)
def _fresh_menu_state():
    reset_menu_state()
    yield
    reset_menu_state()
