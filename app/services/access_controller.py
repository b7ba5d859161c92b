"""Field-level access control for policy records.

Each grantee holds at most one field grant per policy. A read succeeds only
when the caller's grant names exactly the requested field; every other read
is denied, logged and recorded as an access_denied audit event.

Note: grant() does not check that the caller owns the policy. Any caller
may grant read access on any existing policy.
"""
import re
from typing import Optional
from app import crud
from app.models import FieldTag, EventType, InsurancePolicy
from app.services.exceptions import AccessDenied, InvalidGrantee
from app.services.policy_store import PolicyStore
from app.core.logging_config import logger

# Empty, or a zero address such as "0", "0x0" or "0x000...0"
NULL_IDENTITY = re.compile(r"^\s*(0x)?0*\s*$", re.IGNORECASE)


def is_null_identity(identity: Optional[str]) -> bool:
    return identity is None or NULL_IDENTITY.match(identity) is not None


def field_value(policy: InsurancePolicy, field: FieldTag) -> int:
    if field == FieldTag.LIMIT:
        return policy.limit
    return policy.premium


class AccessController:
    def __init__(self, store: PolicyStore):
        self.store = store
        self.db = store.db

    def grant(self, policy_id: int, grantee: str, field: FieldTag, granter: str) -> bool:
        """Let grantee read one field of the policy, replacing any earlier grant."""
        if is_null_identity(grantee):
            logger.warning(f"Rejected grant on policy {policy_id} by {granter}: null grantee")
            raise InvalidGrantee("Grantee must be a non-null identity.")

        with self.store.locks.hold(policy_id):
            self.store.get(policy_id)
            try:
                crud.put_grant(self.db, policy_id, grantee, field, granted_by=granter)
                crud.add_access_event(
                    self.db, EventType.GRANTED, policy_id,
                    caller=granter, field=field, grantee=grantee
                )
                self.db.commit()
            except Exception as e:
                self.db.rollback()
                logger.error(f"Failed to grant {field.value} on policy {policy_id} to {grantee}: {e}")
                raise

        logger.info(f"Granted {field.value} on policy {policy_id} to {grantee} (by {granter})")
        return True

    def grant_limit(self, policy_id: int, grantee: str, granter: str) -> bool:
        return self.grant(policy_id, grantee, FieldTag.LIMIT, granter)

    def grant_premium(self, policy_id: int, grantee: str, granter: str) -> bool:
        return self.grant(policy_id, grantee, FieldTag.PREMIUM, granter)

    def read(self, policy_id: int, field: FieldTag, caller: str) -> int:
        """Return the field value if caller holds a grant for exactly that field.

        A missing grant and a grant for the other field fail the same way.
        """
        with self.store.locks.hold(policy_id):
            policy = self.store.get(policy_id)
            grant = crud.get_grant(self.db, policy_id, caller)
            if grant is not None and grant.field == field:
                logger.debug(f"Read of {field.value} on policy {policy_id} by {caller} allowed")
                return field_value(policy, field)

            try:
                crud.add_access_event(
                    self.db, EventType.ACCESS_DENIED, policy_id, caller=caller, field=field
                )
                self.db.commit()
            except Exception as e:
                self.db.rollback()
                logger.error(f"Failed to record denial on policy {policy_id}: {e}")
                raise

        logger.warning(f"AccessDenied: {caller} attempted to read {field.value} on policy {policy_id}")
        raise AccessDenied(f"Caller is not authorized to read {field.value} on policy {policy_id}.")

    def read_limit(self, policy_id: int, caller: str) -> int:
        return self.read(policy_id, FieldTag.LIMIT, caller)

    def read_premium(self, policy_id: int, caller: str) -> int:
        return self.read(policy_id, FieldTag.PREMIUM, caller)
