from typing import Optional
from pydantic import BaseModel, Field


class Transaction(BaseModel):
    """Transaction record as exchanged with the remote data API"""
    id: Optional[str] = Field(None, description="Identifier, assigned by the remote service when absent")
    amount: float = Field(..., allow_inf_nan=False)
    description: str
