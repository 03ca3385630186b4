from typing import Dict, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from user_crud_api.app.core.db import init_db
from user_crud_api.app.core.exceptions import (
    DuplicateEmailError,
    StoreError,
    UserNotFoundError,
)
from user_crud_api.app.main import create_app
from user_crud_api.app.schemas.user import UserPayload, UserRead
from user_crud_api.app.services.user_service import SQLiteUserStore


class FakeUserStore:
    """In-memory ``UserStore`` that records every call it receives."""

    def __init__(self) -> None:
        self.rows: Dict[int, UserRead] = {}
        self.next_id = 1
        self.calls: List[Tuple[str, tuple]] = []
        self.fail_with: Optional[StoreError] = None

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if self.fail_with is not None:
            raise self.fail_with

    def _check_email(self, email: str, exclude_id: Optional[int] = None) -> None:
        for row in self.rows.values():
            if row.email == email and row.id != exclude_id:
                raise DuplicateEmailError(email)

    def create(self, payload: UserPayload) -> None:
        self._record("create", payload)
        self._check_email(payload.email)
        self.rows[self.next_id] = UserRead(
            id=self.next_id, name=payload.name, email=payload.email, age=payload.age
        )
        self.next_id += 1

    def read_one(self, user_id: int) -> UserRead:
        self._record("read_one", user_id)
        if user_id not in self.rows:
            raise UserNotFoundError(user_id)
        return self.rows[user_id]

    def update(self, user_id: int, payload: UserPayload) -> None:
        self._record("update", user_id, payload)
        if user_id not in self.rows:
            return
        self._check_email(payload.email, exclude_id=user_id)
        self.rows[user_id] = UserRead(
            id=user_id, name=payload.name, email=payload.email, age=payload.age
        )

    def delete(self, user_id: int) -> None:
        self._record("delete", user_id)
        self.rows.pop(user_id, None)

    def list_all(self) -> List[UserRead]:
        self._record("list_all")
        return [self.rows[key] for key in sorted(self.rows)]


@pytest.fixture
def fake_store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def client(fake_store: FakeUserStore) -> TestClient:
    return TestClient(create_app(store=fake_store))


@pytest.fixture
def db_path(tmp_path) -> str:
    path = str(tmp_path / "users.db")
    init_db(path)
    return path


@pytest.fixture
def sqlite_store(db_path: str) -> SQLiteUserStore:
    return SQLiteUserStore(db_path)


@pytest.fixture
def sqlite_client(sqlite_store: SQLiteUserStore) -> TestClient:
    return TestClient(create_app(store=sqlite_store))
