from .common import ErrorResponse, HealthCheckResponse
from .transaction import Transaction


__all__ = ["ErrorResponse", "HealthCheckResponse", "Transaction"]
