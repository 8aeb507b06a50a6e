import pytest
from typing import Generator
from fastapi.testclient import TestClient

from paylinks.app_setup.factory import create_app
from fakes import FakeProvider

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def live_provider() -> FakeProvider:
    return FakeProvider(mode="live", api_key="sk_live_fake")


@pytest.fixture
def test_provider() -> FakeProvider:
    return FakeProvider(mode="test", api_key="sk_test_fake")


@pytest.fixture
def app(live_provider, test_provider):
    return create_app(providers={"live": live_provider, "test": test_provider})


@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
