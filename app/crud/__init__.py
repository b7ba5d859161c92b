"""Database CRUD operations."""
from app.crud.crud import (
    TOTAL_POLICIES,
    get_policy,
    put_policy,
    increment_counter,
    seed_counter,
    get_counter,
    get_grant,
    put_grant,
    add_access_event,
    get_access_events
)

__all__ = [
    "TOTAL_POLICIES",
    "get_policy",
    "put_policy",
    "increment_counter",
    "seed_counter",
    "get_counter",
    "get_grant",
    "put_grant",
    "add_access_event",
    "get_access_events"
]
