from fastapi import APIRouter
from transaction_gateway.api.endpoints import transactions

# Create API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
