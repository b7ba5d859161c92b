"""Policy purchase and count API endpoints."""
from fastapi import APIRouter, Depends, Path
from app import schemas
from app.api.deps import get_caller_identity, get_policy_store
from app.models import MAX_STORED_INT
from app.services.policy_store import PolicyStore

router = APIRouter()


@router.get("/policies/count", response_model=schemas.PolicyCountResponse)
def get_policy_count(store: PolicyStore = Depends(get_policy_store)):
    """Total number of successful policy purchases."""
    return schemas.PolicyCountResponse(total_policies=store.count())


@router.post(
    "/policies/{policy_id}/purchase",
    response_model=schemas.PurchaseResponse,
    responses={400: {"model": schemas.ErrorResponse}},
)
def purchase_policy(
    purchase: schemas.PolicyPurchase,
    policy_id: int = Path(..., ge=0, le=MAX_STORED_INT),
    caller: str = Depends(get_caller_identity),
    store: PolicyStore = Depends(get_policy_store)
):
    """Purchase (or re-purchase) a policy. The caller becomes its owner."""
    success = store.create(policy_id, purchase.limit, purchase.payment, owner=caller)
    return schemas.PurchaseResponse(success=success, policy_id=policy_id)
