"""
Test configuration and shared fixtures for the transaction gateway test suite.
"""
import pytest
import pytest_asyncio
import os
from typing import Any, AsyncGenerator, Callable, Dict, List
import httpx
from httpx import AsyncClient
from faker import Faker

# Set test environment before importing app modules
os.environ.setdefault("ENVIRONMENT", "test")
if os.path.exists(".env.test"):
    from dotenv import load_dotenv
    load_dotenv(".env.test")

os.environ.setdefault("ASTRA_DB_REST_ENDPOINT", "https://astra.test/api/rest/v2")
os.environ.setdefault("ASTRA_DB_REST_KEYSPACE", "ledger")
os.environ.setdefault("ASTRA_DB_REST_TOKEN", "AstraCS:test-token")

from transaction_gateway.core.config import Settings
from transaction_gateway.core.http_client import build_http_client
from transaction_gateway.main import create_application


# Configure Faker for consistent test data
fake = Faker()
fake.seed_instance(42)

ENDPOINT = "https://astra.test/api/rest/v2"
KEYSPACE = "ledger"
TOKEN = "AstraCS:test-token"


class RemoteDataAPI:
    """Stand-in for the Astra DB REST API behind an ``httpx.MockTransport``.
    
    Records every outbound request; ``responder`` decides the answer and may
    raise an ``httpx`` transport exception to simulate a failure.
    """
    
    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={"count": 0, "data": []})
        )
    
    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)
    
    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "remote data API was never called"
        return self.requests[-1]


@pytest.fixture
def settings() -> Settings:
    """Explicit settings, independent of the process environment."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        ASTRA_DB_REST_ENDPOINT=ENDPOINT,
        ASTRA_DB_REST_KEYSPACE=KEYSPACE,
        ASTRA_DB_REST_TOKEN=TOKEN,
        ASTRA_DB_REST_TIMEOUT_SECONDS=2.5,
        LOG_FORMAT="console",
    )


@pytest.fixture
def remote_api() -> RemoteDataAPI:
    return RemoteDataAPI()


@pytest_asyncio.fixture
async def outbound_client(settings: Settings, remote_api: RemoteDataAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Outbound client wired to the simulated remote data API."""
    client = build_http_client(settings, transport=httpx.MockTransport(remote_api))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def client(settings: Settings, outbound_client: httpx.AsyncClient) -> AsyncGenerator[AsyncClient, None]:
    """Create test client for the application."""
    app = create_application(settings=settings, http_client=outbound_client)
    
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def transaction_data_generator():
    """Generate inbound transaction payloads."""
    def generate_transaction(**overrides) -> Dict[str, Any]:
        data = {
            "amount": float(fake.pydecimal(left_digits=4, right_digits=2, positive=True)),
            "description": fake.sentence(nb_words=4),
        }
        data.update(overrides)
        return data
    
    return generate_transaction
