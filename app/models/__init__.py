"""SQLAlchemy models."""
from app.models.models import (
    MAX_STORED_INT, FieldTag, EventType, InsurancePolicy, FieldGrant, StoreCounter, AccessEvent
)
from app.core.database import Base

__all__ = [
    "MAX_STORED_INT", "FieldTag", "EventType", "InsurancePolicy", "FieldGrant",
    "StoreCounter", "AccessEvent", "Base"
]
