"""Domain errors raised by the policy store and access controller."""
from fastapi import status


class PolicyAccessError(Exception):
    """Base exception for policy access errors."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def error(self) -> str:
        return type(self).__name__


class InvalidParameters(PolicyAccessError):
    """Raised when a purchase carries a non-positive limit or payment."""


class PolicyNotFound(PolicyAccessError):
    """Raised when an operation names a policy that was never purchased."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, policy_id: int):
        super().__init__(f"Policy {policy_id} not found.")
        self.policy_id = policy_id


class InvalidGrantee(PolicyAccessError):
    """Raised when a grant names the null identity."""


class AccessDenied(PolicyAccessError):
    """Raised when the caller holds no grant for the requested field."""
    status_code = status.HTTP_403_FORBIDDEN
