import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.db.session import get_db, init_db
from marketplace.main import create_app


@pytest.fixture
def engine():
	engine = create_engine(
		"sqlite://",
		connect_args={"check_same_thread": False},
		poolclass=StaticPool,
	)
	init_db(bind=engine)
	yield engine
	engine.dispose()


@pytest.fixture
def session_factory(engine):
	return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
	db = session_factory()
	try:
		yield db
	finally:
		db.close()


@pytest.fixture
def app(session_factory):
	app = create_app()

	def override_get_db():
		db = session_factory()
		try:
			yield db
		finally:
			db.close()

	app.dependency_overrides[get_db] = override_get_db
	return app


@pytest.fixture
def client(app):
	return TestClient(app)


@pytest.fixture
def make_client(app):
	"""Independent clients, each with its own cookie jar."""
	def _make():
		return TestClient(app)
	return _make


def register_and_login(client, username: str, password: str = "secret1"):
	client.post("/register", json={"username": username, "password": password})
	response = client.post("/login", json={"username": username, "password": password})
	assert response.status_code == 200
	return response


@pytest.fixture
def login():
	return register_and_login
