import copy
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from config import settings
from main import create_app
from services.auth_service import create_access_token, hash_password


class InMemoryCollection:
    """Stands in for FirestoreCollection; records which methods were called."""

    def __init__(self):
        self.docs = {}
        self.calls = []

    def _out(self, doc_id, data):
        out = copy.deepcopy(data)
        out["id"] = doc_id
        return out

    def get(self, doc_id):
        self.calls.append("get")
        data = self.docs.get(doc_id)
        return self._out(doc_id, data) if data is not None else None

    def find(self, **equals):
        self.calls.append("find")
        return [
            self._out(doc_id, data)
            for doc_id, data in self.docs.items()
            if all(data.get(k) == v for k, v in equals.items())
        ]

    def find_one(self, **equals):
        self.calls.append("find_one")
        for doc_id, data in self.docs.items():
            if all(data.get(k) == v for k, v in equals.items()):
                return self._out(doc_id, data)
        return None

    def all(self):
        self.calls.append("all")
        return [self._out(doc_id, data) for doc_id, data in self.docs.items()]

    def insert(self, data):
        self.calls.append("insert")
        doc_id = uuid.uuid4().hex
        self.docs[doc_id] = copy.deepcopy({k: v for k, v in data.items() if k != "id"})
        return doc_id

    def update(self, doc_id, fields):
        self.calls.append("update")
        if doc_id not in self.docs:
            return False
        self.docs[doc_id].update(copy.deepcopy(fields))
        return True


class InMemoryStore:
    def __init__(self):
        self.users = InMemoryCollection()
        self.vehicles = InMemoryCollection()
        self.bookings = InMemoryCollection()
        self.closed = False

    def close(self):
        self.closed = True


BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as client:
        yield client


@pytest.fixture
def make_user(store):
    counter = {"n": 0}

    def _make_user(role="customer", name=None, phone=None, password="secret123", **extra):
        counter["n"] += 1
        n = counter["n"]
        data = {
            "name": name or f"{role.title()} {n}",
            "phoneNumber": phone or f"90000{n:05d}",
            "password": hash_password(password),
            "role": role,
            "isActive": True,
            "createdAt": BASE_TIME + timedelta(minutes=n),
        }
        data.update(extra)
        data["id"] = store.users.insert(data)
        return data

    return _make_user


def bearer(user):
    return {"Authorization": f"Bearer {create_access_token(user['id'], user['role'])}"}


@pytest.fixture
def headers_for(make_user):
    """Authorization headers for a freshly created user of the given role."""

    def _headers_for(role):
        return bearer(make_user(role))

    return _headers_for


@pytest.fixture
def auth_headers():
    return bearer
