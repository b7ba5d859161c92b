"""API dependencies."""
from fastapi import Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.security import get_caller_identity
from app.services.policy_store import PolicyStore
from app.services.access_controller import AccessController


def get_policy_store(db: Session = Depends(get_db)) -> PolicyStore:
    return PolicyStore(db)


def get_access_controller(store: PolicyStore = Depends(get_policy_store)) -> AccessController:
    """Access controller sharing the request's policy store."""
    return AccessController(store)


__all__ = ["get_db", "get_caller_identity", "get_policy_store", "get_access_controller"]
