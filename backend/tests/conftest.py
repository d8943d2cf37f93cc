# tests/conftest.py
import json

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.models import Project, File, ChatMessage, MessageRole
from app.services.ai import AIService, get_ai_service

# Create test database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

@pytest.fixture(scope="session")
def engine():
    """Create test database engine"""
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool  # Needed for SQLite in-memory database
    )

    # pysqlite needs explicit BEGIN for SAVEPOINTs to nest inside the test transaction
    @event.listens_for(engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine

@pytest.fixture(scope="session")
def tables(engine):
    """Create all tables in the test database"""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)

@pytest.fixture
def db_session(engine, tables):
    """Creates a new database session for a test, rolled back afterwards"""
    connection = engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection, join_transaction_mode="create_savepoint")()

    yield session

    session.close()
    transaction.rollback()
    connection.close()

class FakeCompletionAPI:
    """Stands in for the chat-completion endpoint and records what it was sent"""

    def __init__(self):
        self.reply = "Sure."
        self.status_code = 200
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "upstream failure"}})
        return httpx.Response(200, json={
            "choices": [{"message": {"role": "assistant", "content": self.reply}}]
        })

    @property
    def last_messages(self):
        return self.requests[-1]["messages"]

@pytest.fixture
def fake_completion_api():
    return FakeCompletionAPI()

@pytest.fixture
def ai_service(fake_completion_api):
    """AI service wired to the fake completion endpoint"""
    return AIService(
        api_key="test-key",
        base_url="https://llm.test/v1",
        model="test-model",
        transport=httpx.MockTransport(fake_completion_api.handler)
    )

@pytest.fixture
def client(db_session, ai_service):
    """Test client using the test database and the fake AI service"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_ai_service] = lambda: ai_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

@pytest.fixture
def sample_project(db_session):
    """Create a sample project"""
    project = Project(
        name="Test Project",
        description="Test Description"
    )
    db_session.add(project)
    db_session.commit()
    db_session.refresh(project)
    return project

@pytest.fixture
def sample_file(db_session, sample_project):
    """Create a sample file"""
    file = File(
        project_id=sample_project.id,
        path="src/main.py",
        content="print('hello')\n",
        language="python"
    )
    db_session.add(file)
    db_session.commit()
    db_session.refresh(file)
    return file

@pytest.fixture
def sample_message(db_session, sample_project):
    """Create a sample chat message"""
    message = ChatMessage(
        project_id=sample_project.id,
        role=MessageRole.USER,
        content="How do I print in Python?"
    )
    db_session.add(message)
    db_session.commit()
    db_session.refresh(message)
    return message
