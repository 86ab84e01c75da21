import httpx

from transaction_gateway.core.config import Settings


def build_http_client(settings: Settings, **kwargs) -> httpx.AsyncClient:
    """Create the shared outbound client used for every Astra DB REST call.

    Every phase (connect, read, write, pool acquisition) is bounded by
    ``ASTRA_DB_REST_TIMEOUT_SECONDS``. Extra keyword arguments are passed
    through to ``httpx.AsyncClient``.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.ASTRA_DB_REST_TIMEOUT_SECONDS),
        headers={"Accept": "application/json"},
        **kwargs,
    )
