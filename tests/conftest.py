"""
tests/conftest.py

- 앱 import 전에 인메모리 SQLite 로 DB 설정을 바꿔둠
- 테스트마다 events 테이블을 새로 생성
"""

import os

os.environ["DB_URL"] = "sqlite://"
os.environ["REQUEST_LOG"] = "false"

import pytest
from fastapi.testclient import TestClient

from client.api_client import EventsAPIClient
from database.db import Base, SessionLocal, engine
from main import app
from models import events  # noqa: F401  테이블 등록용 import


@pytest.fixture(autouse=True)
def reset_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api(client):
    return EventsAPIClient(base_url="http://testserver/api", http_client=client)


@pytest.fixture
def make_payload():
    def _make(**overrides):
        payload = {
            "title": "Team Meeting",
            "description": "Weekly sync",
            "start_date": "2025-01-01",
            "end_date": "2025-01-01",
            "start_time": "09:00",
            "end_time": "10:00",
            "creator_name": "John Doe",
            "creator_email": "john.doe@example.com",
            "location": "Room A",
        }
        payload.update(overrides)
        return payload

    return _make
