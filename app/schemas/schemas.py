"""Pydantic schemas for request/response validation."""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from app.models import MAX_STORED_INT, FieldTag, EventType


# --- Policy Schemas ---
class PolicyPurchase(BaseModel):
    limit: int = Field(..., le=MAX_STORED_INT)
    payment: int = Field(..., le=MAX_STORED_INT)  # amount attached to the purchase request


class PurchaseResponse(BaseModel):
    success: bool
    policy_id: int


class PolicyCountResponse(BaseModel):
    total_policies: int


# --- Grant Schemas ---
class GranteeRequest(BaseModel):
    grantee: str


class GrantRequest(GranteeRequest):
    field: FieldTag


class OperationResult(BaseModel):
    success: bool


# --- Field Read Schemas ---
class FieldValueResponse(BaseModel):
    policy_id: int
    field: FieldTag
    value: int


# --- Audit Schemas ---
class AccessEventResponse(BaseModel):
    id: int
    event_type: EventType
    policy_id: int
    caller: str
    grantee: Optional[str] = None
    field: FieldTag
    timestamp: Optional[datetime] = None

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    error: str
    detail: str
