import json
import httpx
import pytest
from fastapi.testclient import TestClient
from app.common.config import Settings
from app.passport.main import create_app


class Upstream:
    """Records outbound calls and answers them with a canned handler."""

    def __init__(self):
        self.requests = []
        self.respond = lambda request: httpx.Response(200, json={"success": False, "valid": False})

    def __call__(self, request):
        self.requests.append(request)
        return self.respond(request)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def upstream():
    return Upstream()


@pytest.fixture
def mock_client(upstream):
    app = create_app(Settings(app_key=None), transport=httpx.MockTransport(upstream))
    return TestClient(app)


@pytest.fixture
def live_client(upstream):
    app = create_app(Settings(app_key="test-app-key"), transport=httpx.MockTransport(upstream))
    return TestClient(app)
