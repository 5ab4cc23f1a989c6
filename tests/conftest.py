import pytest

from bookflow import create_app
from bookflow.config import BookFlowConfig


@pytest.fixture()
def config(tmp_path):
    return BookFlowConfig(
        secret_key="test-secret-key",
        database_url=f"sqlite:///{tmp_path / 'bookflow-test.db'}",
        log_level="ERROR",
        bcrypt_rounds=4,
    )


@pytest.fixture()
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    yield app
    app.extensions["bookflow_components"]["engine"].dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def components(app):
    return app.extensions["bookflow_components"]


@pytest.fixture()
def session_factory(components):
    from bookflow.common.db.session import make_session_factory

    return make_session_factory(components["engine"])


@pytest.fixture()
def seeded_catalog(components):
    components["catalog_service"].seed_items(
        [
            {"id": 42, "title": "The Hitchhiker's Guide", "price": "12.50"},
            {"id": 7, "title": "Clean Code", "price": "32.99"},
        ]
    )


@pytest.fixture()
def count_rows(session_factory):
    def _count(model):
        with session_factory() as session:
            return session.query(model).count()

    return _count


@pytest.fixture()
def register_and_login(client):
    def _register_and_login(email="user@example.com", password="secret123"):
        client.post("/register", data={"email": email, "password": password})
        return client.post("/login", data={"email": email, "password": password})

    return _register_and_login
