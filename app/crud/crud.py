"""Database CRUD operations."""
from typing import Optional
from sqlalchemy.orm import Session
from app.models import (
    FieldTag, EventType, InsurancePolicy, FieldGrant, StoreCounter, AccessEvent
)

TOTAL_POLICIES = "total_policies"


def get_policy(db: Session, policy_id: int):
    """Get a policy by its identifier."""
    return db.get(InsurancePolicy, policy_id)


def put_policy(db: Session, policy_id: int, owner: str, limit: int, premium: int):
    """Install or overwrite a policy record and discard its grants.

    Does not commit; the caller owns the transaction.
    """
    db.query(FieldGrant).filter(FieldGrant.policy_id == policy_id).delete(
        synchronize_session=False
    )

    db_policy = db.get(InsurancePolicy, policy_id)
    if db_policy is None:
        db_policy = InsurancePolicy(policy_id=policy_id)
        db.add(db_policy)

    db_policy.owner = owner
    db_policy.limit = limit
    db_policy.premium = premium
    return db_policy


def increment_counter(db: Session, name: str) -> None:
    """Atomically add one to a named counter, creating it on first use."""
    updated = db.query(StoreCounter).filter(StoreCounter.name == name).update(
        {StoreCounter.value: StoreCounter.value + 1},
        synchronize_session=False
    )
    if not updated:
        db.add(StoreCounter(name=name, value=1))


def seed_counter(db: Session, name: str) -> None:
    """Create a counter at zero if it is missing, so increments never insert."""
    if db.get(StoreCounter, name) is None:
        db.add(StoreCounter(name=name, value=0))
        db.commit()


def get_counter(db: Session, name: str) -> int:
    counter = db.get(StoreCounter, name)
    return counter.value if counter else 0


def get_grant(db: Session, policy_id: int, grantee: str):
    """Get the single grant held by a grantee on a policy, if any."""
    return db.get(FieldGrant, (policy_id, grantee))


def put_grant(db: Session, policy_id: int, grantee: str, field: FieldTag, granted_by: str):
    """Set the grantee's field, replacing any previous one. Does not commit."""
    db_grant = get_grant(db, policy_id, grantee)
    if db_grant is None:
        db_grant = FieldGrant(policy_id=policy_id, grantee=grantee)
        db.add(db_grant)
    db_grant.field = field
    db_grant.granted_by = granted_by
    return db_grant


def add_access_event(
    db: Session,
    event_type: EventType,
    policy_id: int,
    caller: str,
    field: FieldTag,
    grantee: Optional[str] = None,
):
    """Stage an audit event. Does not commit."""
    db_event = AccessEvent(
        event_type=event_type,
        policy_id=policy_id,
        caller=caller,
        grantee=grantee,
        field=field,
    )
    db.add(db_event)
    return db_event


def get_access_events(
    db: Session,
    policy_id: Optional[int] = None,
    event_type: Optional[EventType] = None,
    skip: int = 0,
    limit: int = 100,
):
    """Retrieve audit events, oldest first."""
    query = db.query(AccessEvent)
    if policy_id is not None:
        query = query.filter(AccessEvent.policy_id == policy_id)
    if event_type is not None:
        query = query.filter(AccessEvent.event_type == event_type)
    return query.order_by(AccessEvent.id).offset(skip).limit(limit).all()
