from fastapi import Request

from transaction_gateway.gateway import TransactionGateway


def get_gateway(request: Request) -> TransactionGateway:
    """Gateway built by the application factory"""
    return request.app.state.gateway
