"""Pydantic schemas."""
from app.schemas.schemas import (
    PolicyPurchase, PurchaseResponse, PolicyCountResponse,
    GranteeRequest, GrantRequest, OperationResult,
    FieldValueResponse, AccessEventResponse, ErrorResponse
)

__all__ = [
    "PolicyPurchase", "PurchaseResponse", "PolicyCountResponse",
    "GranteeRequest", "GrantRequest", "OperationResult",
    "FieldValueResponse", "AccessEventResponse", "ErrorResponse"
]
