"""Pytest configuration and fixtures."""

from typing import Any

import httpx
import pytest
import respx
from httpx import ASGITransport, AsyncClient

from vercel_deployer.core.transport import VercelTransport
from vercel_deployer.main import app
from vercel_deployer.models.credentials import VercelCredentials

VERCEL_API = "https://api.vercel.com"
TOKEN = "test-token-abc123"


class FakeClock:
    """Monotonic clock that only moves when the poller sleeps."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def deployment_payload(
    deployment_id: str = "dpl_123",
    ready_state: str | None = "QUEUED",
    url: str | None = "my-site-abc123.vercel.app",
    **extra: Any,
) -> dict[str, Any]:
    """A trimmed-down Vercel deployment response."""
    payload: dict[str, Any] = {"id": deployment_id, "name": "my-site", **extra}
    if ready_state is not None:
        payload["readyState"] = ready_state
    if url is not None:
        payload["url"] = url
    return payload


@pytest.fixture
def credentials() -> VercelCredentials:
    return VercelCredentials(access_token=TOKEN)


@pytest.fixture
def team_credentials() -> VercelCredentials:
    return VercelCredentials(access_token=TOKEN, team_id="team_42")


@pytest.fixture
def vercel_api():
    """respx router mocking the Vercel REST API."""
    with respx.mock(base_url=VERCEL_API, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
async def transport(credentials: VercelCredentials, vercel_api: respx.MockRouter):
    async with VercelTransport(credentials, base_url=VERCEL_API) as t:
        yield t


@pytest.fixture
async def team_transport(team_credentials: VercelCredentials, vercel_api: respx.MockRouter):
    async with VercelTransport(team_credentials, base_url=VERCEL_API) as t:
        yield t


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mock_existing_project(vercel_api: respx.MockRouter):
    """Routes for a project named ``my-site`` that already exists."""

    def _mock(name: str = "my-site", project_id: str = "prj_1") -> dict[str, respx.Route]:
        return {
            "list": vercel_api.get("/v9/projects").mock(
                return_value=httpx.Response(
                    200,
                    json={"projects": [{"id": project_id, "name": name}]},
                )
            ),
            "create": vercel_api.post("/v9/projects").mock(
                return_value=httpx.Response(200, json={"id": "prj_new", "name": name})
            ),
            "patch": vercel_api.patch(f"/v9/projects/{project_id}").mock(
                return_value=httpx.Response(200, json={"id": project_id})
            ),
        }

    return _mock


@pytest.fixture
async def client() -> AsyncClient:
    """Create an async test client for the API."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def html_file(tmp_path):
    """An HTML file on disk."""
    path = tmp_path / "index.html"
    path.write_text("<h1>hi</h1>", encoding="utf-8")
    return path
