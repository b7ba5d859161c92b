"""Audit API endpoints (grant and denial notifications)."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app import schemas
from app import crud
from app.api.deps import get_db
from app.core.security import verify_admin_key
from app.models import MAX_STORED_INT, EventType

router = APIRouter()


@router.get("/audit/events", response_model=List[schemas.AccessEventResponse])
def list_access_events_api(
    policy_id: Optional[int] = Query(None, ge=0, le=MAX_STORED_INT),
    event_type: Optional[EventType] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
    verified: bool = Depends(verify_admin_key)
):
    """Lists recorded grant and access-denied events. Requires Admin API Key."""
    return crud.get_access_events(db, policy_id=policy_id, event_type=event_type, skip=skip, limit=limit)
