import pytest
from fastapi.testclient import TestClient

from config import settings
from crud import users as users_crud
from database import Store, init_db
from main import app
from utils.tokenJWT import create_session_token

OWNER_OPEN_ID = "owner-open-id"


@pytest.fixture(autouse=True)
def store(tmp_path, monkeypatch):
    # Fresh SQLite file per test
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setattr(settings, "OWNER_OPEN_ID", OWNER_OPEN_ID)
    Store.reset()
    init_db()
    yield
    Store.reset()


@pytest.fixture
def db():
    session = Store.get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def make_user(open_id, role="user", name=None):
    """Insert a user the way a login would and return a bearer header for it."""
    with Store.get_session_factory()() as session:
        users_crud.upsert_user(session, open_id, name=name, email=f"{open_id}@ayombe.com",
                               login_method="manus", role=role)
        user = users_crud.get_user_by_open_id(session, open_id)
        token = create_session_token(open_id, name=name, user_id=user.id, role=user.role)
        return user.id, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(store):
    return make_user("admin-user", role="admin", name="Admin User")


@pytest.fixture
def musician(store):
    return make_user("musician-user", role="user", name="Musician User")


@pytest.fixture
def admin_headers(admin):
    return admin[1]


@pytest.fixture
def musician_headers(musician):
    return musician[1]
