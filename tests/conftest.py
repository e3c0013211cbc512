import pytest
from fastapi.testclient import TestClient

from contact_manager_api.app.actions.contact_actions import ContactActions
from contact_manager_api.app.core.db import Database, init_db
from contact_manager_api.app.core.views import ViewInvalidator
from contact_manager_api.app.main import create_app
from contact_manager_api.app.services.contact_service import ContactService


@pytest.fixture
def database(tmp_path):
    db = Database(str(tmp_path / "contacts.db"))
    init_db(db)
    return db


@pytest.fixture
def service(database):
    return ContactService(database)


@pytest.fixture
def views():
    return ViewInvalidator()


@pytest.fixture
def actions(service, views):
    return ContactActions(service, views)


@pytest.fixture
def client(tmp_path):
    app = create_app(Database(str(tmp_path / "api.db")))
    with TestClient(app) as test_client:
        yield test_client
