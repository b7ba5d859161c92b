"""Policy record store: purchase, lookup and count."""
from sqlalchemy.orm import Session
from app import crud
from app.models import MAX_STORED_INT, InsurancePolicy
from app.services.exceptions import InvalidParameters, PolicyNotFound
from app.services.locks import POLICY_LOCKS, PolicyLockRegistry
from app.core.logging_config import logger


class PolicyStore:
    """Owns the identifier -> policy mapping.

    A store wraps one database session; the records themselves live in the
    process-wide database. Pass the same store to the AccessController so
    both components work inside one transaction scope.
    """

    def __init__(self, db: Session, locks: PolicyLockRegistry = POLICY_LOCKS):
        self.db = db
        self.locks = locks

    def create(self, policy_id: int, limit: int, paid_amount: int, owner: str) -> bool:
        """Install or overwrite the policy at policy_id, owned by owner.

        Any grants on a previous policy under the same identifier are discarded.
        """
        if limit <= 0 or paid_amount <= 0:
            logger.warning(
                f"Rejected purchase of policy {policy_id} by {owner}: "
                f"limit={limit}, payment={paid_amount}"
            )
            raise InvalidParameters("Limit and payment must both be greater than zero.")
        if max(policy_id, limit, paid_amount) > MAX_STORED_INT or policy_id < 0:
            logger.warning(f"Rejected purchase of policy {policy_id} by {owner}: value out of range")
            raise InvalidParameters(f"Identifier, limit and payment must not exceed {MAX_STORED_INT}.")

        with self.locks.hold(policy_id):
            try:
                replaced = crud.get_policy(self.db, policy_id) is not None
                crud.put_policy(self.db, policy_id, owner=owner, limit=limit, premium=paid_amount)
                crud.increment_counter(self.db, crud.TOTAL_POLICIES)
                self.db.commit()
            except Exception as e:
                self.db.rollback()
                logger.error(f"Failed to create policy {policy_id}: {e}")
                raise

        if replaced:
            logger.info(f"Policy {policy_id} re-purchased by {owner}; previous grants discarded")
        else:
            logger.info(f"Policy {policy_id} purchased by {owner}")
        return True

    def get(self, policy_id: int) -> InsurancePolicy:
        # Out-of-range identifiers can never have been stored
        if not 0 <= policy_id <= MAX_STORED_INT:
            raise PolicyNotFound(policy_id)
        policy = crud.get_policy(self.db, policy_id)
        if policy is None:
            logger.debug(f"Policy lookup miss: {policy_id}")
            raise PolicyNotFound(policy_id)
        return policy

    def count(self) -> int:
        """Total successful purchases, re-purchases included."""
        return crud.get_counter(self.db, crud.TOTAL_POLICIES)
