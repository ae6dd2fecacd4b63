from datetime import datetime, timedelta

import pytest
import pytz
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lexigrow.main import app
from lexigrow.models.base import Base
from lexigrow.models.user import User, UserRole
from lexigrow.models.word import Word
from lexigrow.utils.database import get_db, init_db, configure_sqlite_transactions

# 测试数据库（内存，单连接）
SQLALCHEMY_DATABASE_URL = "sqlite://"


class FrozenClock:
    """可手动推进的时钟"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)
        return self.now


def naive(dt: datetime) -> datetime:
    """SQLite 读回的时间不带时区，比较前统一去掉时区"""
    return dt.replace(tzinfo=None) if dt else dt


@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite_transactions(engine)
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """创建测试数据库会话"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 5, 1, 8, 0, 0, tzinfo=pytz.utc))


@pytest.fixture
def make_student(db_session):
    def _make(name="小明"):
        student = User(name=name, role=UserRole.STUDENT.value)
        db_session.add(student)
        db_session.commit()
        return student
    return _make


@pytest.fixture
def make_word(db_session):
    def _make(text="resilient", **fields):
        word = Word(text=text, **fields)
        db_session.add(word)
        db_session.commit()
        return word
    return _make


@pytest.fixture
def student(make_student):
    return make_student()


@pytest.fixture
def word(make_word):
    return make_word("resilient", phonetic="/rɪˈzɪliənt/", pos="adj.", syllables="re-sil-ient")


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def teacher_client(client, monkeypatch):
    """已登录老师的测试客户端"""
    from lexigrow.config.settings import settings
    monkeypatch.setattr(settings, "TEACHER_PASSWORD", "let-me-in")
    response = client.post("/api/v1/teacher/login", json={"password": "let-me-in"})
    assert response.status_code == 200
    return client
