from typing import Any, Dict, Optional
from urllib.parse import quote
import httpx
import structlog

from transaction_gateway.core.config import Settings
from transaction_gateway.api.schemas.transaction import Transaction


logger = structlog.get_logger("astra_gateway")

TOKEN_HEADER = "X-Cassandra-Token"


class GatewayError(Exception):
    """Outbound call to the remote data API did not produce a response"""


class RemoteTimeoutError(GatewayError):
    """Remote data API did not answer within the configured timeout"""


class RemoteUnavailableError(GatewayError):
    """Remote data API could not be reached (connection, DNS, protocol)"""


class TransactionGateway:
    """Forwards transaction requests to the Astra DB REST API"""
    
    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.endpoint = settings.ASTRA_DB_REST_ENDPOINT
        self.keyspace = settings.ASTRA_DB_REST_KEYSPACE
        self._token = settings.ASTRA_DB_REST_TOKEN
        self.client = client
    
    def collection_url(self) -> str:
        return f"{self.endpoint}/keyspaces/{self.keyspace}/transactions"
    
    def record_url(self, transaction_id: str) -> str:
        # one path segment; "?", "#" and "/" stay part of the id
        segment = quote(transaction_id, safe="")
        return f"{self.collection_url()}/{segment}"
    
    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {TOKEN_HEADER: self._token}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers
    
    async def list_transactions(self) -> httpx.Response:
        """Fetch the whole transactions collection"""
        return await self._send("GET", self.collection_url(), headers=self._headers())
    
    async def create_transaction(self, transaction: Transaction) -> httpx.Response:
        """Post a new transaction; fields left unset are not sent"""
        return await self._send(
            "POST",
            self.collection_url(),
            headers=self._headers(json_body=True),
            json=transaction.model_dump(exclude_none=True),
        )
    
    async def get_transaction(self, transaction_id: str) -> httpx.Response:
        """Fetch a single transaction by its identifier"""
        return await self._send(
            "GET", self.record_url(transaction_id), headers=self._headers()
        )
    
    async def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        json: Optional[Any] = None,
    ) -> httpx.Response:
        """Issue one outbound call and return the remote response as-is.
        
        Non-2xx answers are returned, not raised; only failures to obtain a
        response at all become ``GatewayError``.
        """
        
        try:
            response = await self.client.request(method, url, headers=headers, json=json)
        except httpx.TimeoutException as e:
            logger.error("Astra DB request timed out", method=method, url=url, error=str(e))
            raise RemoteTimeoutError(f"{method} {url} timed out") from e
        except httpx.TransportError as e:
            logger.error("Astra DB request failed", method=method, url=url, error=str(e))
            raise RemoteUnavailableError(f"{method} {url} failed: {e}") from e
        
        logger.info(
            "Astra DB response relayed",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return response
