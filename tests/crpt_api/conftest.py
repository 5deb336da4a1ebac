"""tests/conftest.py

Common fixtures for the entire test suite.
"""

import json

import httpx
import pytest
from typer.testing import CliRunner

from crpt_api.core.domain.models import Description, Document, Product


@pytest.fixture(scope="session")
def runner() -> CliRunner:
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """
    Keeps CRPT_API_* variables and any local .env file out of the tests.
    This fixture runs automatically for every test function.
    """
    import os

    for name in list(os.environ):
        if name.upper().startswith("CRPT_API_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


class FakeClock:
    """Manual monotonic clock: sleep() advances time instantly and is recorded."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sample_document() -> Document:
    return Document(
        description=Description(participant_inn="7700000000"),
        doc_id="doc-1",
        doc_status="DRAFT",
        doc_type="LP_INTRODUCE_GOODS",
        import_request=True,
        owner_inn="7711111111",
        participant_inn="7700000000",
        producer_inn="7722222222",
        production_date="2020-01-23",
        production_type="OWN_PRODUCTION",
        products=(
            Product(
                certificate_document="CONFORMITY_CERTIFICATE",
                certificate_document_date="2020-01-20",
                certificate_document_number="RU-123",
                owner_inn="7711111111",
                producer_inn="7722222222",
                production_date="2020-01-23",
                tnved_code="6201110000",
                uit_code="010463003407001221SxMGorvNuq6Wk91fgr92sdfsdfghfgjh",
                uitu_code="",
            ),
        ),
        reg_date="2020-01-24",
        reg_number="REG-42",
    )


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Returns a handler function that tests can use to register mock responses.
    Registered values may be an exception instance, which is raised instead.
    """
    responses = {}
    calls_log: list[httpx.Request] = []
    original_client = httpx.Client

    def add_response(
        url: str,
        method: str = "POST",
        status_code: int = 200,
        json_payload: dict | None = None,
        content: bytes | None = None,
        error: Exception | None = None,
        headers: dict[str, str] | None = None,
    ):
        """Register a mock response (or error) for a given URL and method."""
        if error is not None:
            responses[(method.upper(), url)] = error
            return
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = content if content is not None else b""
        responses[(method.upper(), url)] = (status_code, body, dict(headers or {}))

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        request.read()
        calls_log.append(request)
        key = (request.method, str(request.url))
        if key in responses:
            entry = responses[key]
            if isinstance(entry, Exception):
                raise entry
            status, body, extra_headers = entry
            return httpx.Response(status, content=body, headers={"Content-Length": str(len(body)), **extra_headers})

        return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")

    # Patch httpx.Client to always use our mock transport
    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    add_response.calls = calls_log  # type: ignore[attr-defined]
    return add_response
