"""SQLAlchemy database models."""
import enum
from sqlalchemy import Column, Integer, BigInteger, String, DateTime, ForeignKey, Enum
from sqlalchemy.sql import func
from app.core.database import Base

# Largest value a BigInteger column holds (signed 64-bit)
MAX_STORED_INT = 2**63 - 1


class FieldTag(str, enum.Enum):
    """Sensitive policy fields a grant can unlock."""
    LIMIT = "limit"
    PREMIUM = "premium"


class EventType(str, enum.Enum):
    GRANTED = "granted"
    ACCESS_DENIED = "access_denied"


# One insurance policy per externally supplied identifier.
# Fields:
# 1. policy_id: identifier chosen by the purchaser (not autoincremented)
# 2. owner: caller identity that purchased the policy
# 3. limit: coverage limit
# 4. premium: amount paid at purchase
#
# A row existing is what "the policy exists" means. Re-purchase overwrites it.
class InsurancePolicy(Base):
    __tablename__ = "insurance_policies"
    policy_id = Column(BigInteger, primary_key=True, autoincrement=False)
    owner = Column(String, nullable=False, index=True)
    limit = Column(BigInteger, nullable=False)
    premium = Column(BigInteger, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


# Single-field read capability for one grantee on one policy.
# Composite primary key (policy_id, grantee) keeps at most one field per grantee.
class FieldGrant(Base):
    __tablename__ = "field_grants"
    policy_id = Column(BigInteger, ForeignKey("insurance_policies.policy_id"), primary_key=True)
    grantee = Column(String, primary_key=True)
    field = Column(Enum(FieldTag), nullable=False)
    granted_by = Column(String, nullable=False)
    granted_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


# Named monotonically increasing counters (e.g. total_policies).
class StoreCounter(Base):
    __tablename__ = "store_counters"
    name = Column(String, primary_key=True)
    value = Column(BigInteger, nullable=False, default=0)


# Grant and denial notifications, kept for external auditing.
class AccessEvent(Base):
    __tablename__ = "access_events"
    id = Column(Integer, primary_key=True, index=True)
    event_type = Column(Enum(EventType), nullable=False, index=True)
    policy_id = Column(BigInteger, nullable=False, index=True)
    caller = Column(String, nullable=False)  # granter for grants, reader for denials
    grantee = Column(String, nullable=True)  # only set for grants
    field = Column(Enum(FieldTag), nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())
