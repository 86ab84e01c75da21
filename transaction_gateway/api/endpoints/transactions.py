from fastapi import APIRouter, Depends, HTTPException, Response, status
import httpx
import structlog

from transaction_gateway.api.dependencies import get_gateway
from transaction_gateway.api.schemas import ErrorResponse, Transaction
from transaction_gateway.gateway import (
    RemoteTimeoutError,
    RemoteUnavailableError,
    TransactionGateway,
)


router = APIRouter()
logger = structlog.get_logger("transactions_api")

TRANSPORT_ERRORS = {
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse, "description": "Remote data API unreachable"},
    status.HTTP_504_GATEWAY_TIMEOUT: {"model": ErrorResponse, "description": "Remote data API timed out"},
}


def relay(upstream: httpx.Response) -> Response:
    """Return the remote status code and body unchanged"""
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type"),
    )


async def forward(call) -> Response:
    try:
        upstream = await call
    except RemoteTimeoutError as e:
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail="Remote data API timed out"
        ) from e
    except RemoteUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Remote data API unavailable"
        ) from e
    return relay(upstream)


@router.get("", responses=TRANSPORT_ERRORS)
async def get_all_transactions(gateway: TransactionGateway = Depends(get_gateway)):
    """List every transaction stored in the keyspace"""
    return await forward(gateway.list_transactions())


@router.post("", responses=TRANSPORT_ERRORS)
async def create_transaction(
    transaction: Transaction,
    gateway: TransactionGateway = Depends(get_gateway)
):
    """Create a transaction in the remote data API"""
    logger.info("Creating transaction", amount=transaction.amount, has_id=transaction.id is not None)
    return await forward(gateway.create_transaction(transaction))


@router.get("/{transaction_id}", responses=TRANSPORT_ERRORS)
async def get_transaction_by_id(
    transaction_id: str,
    gateway: TransactionGateway = Depends(get_gateway)
):
    """Get a single transaction; a remote 404 is returned as-is"""
    return await forward(gateway.get_transaction(transaction_id))
