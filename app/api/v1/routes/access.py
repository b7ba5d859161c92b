"""Field grant and field read API endpoints."""
from fastapi import APIRouter, Depends, Path
from app import schemas
from app.api.deps import get_caller_identity, get_access_controller
from app.models import MAX_STORED_INT, FieldTag
from app.services.access_controller import AccessController

router = APIRouter()

GRANT_ERRORS = {400: {"model": schemas.ErrorResponse}, 404: {"model": schemas.ErrorResponse}}
READ_ERRORS = {403: {"model": schemas.ErrorResponse}, 404: {"model": schemas.ErrorResponse}}


@router.post("/policies/{policy_id}/grants", response_model=schemas.OperationResult, responses=GRANT_ERRORS)
def grant_access(
    request: schemas.GrantRequest,
    policy_id: int = Path(..., ge=0, le=MAX_STORED_INT),
    caller: str = Depends(get_caller_identity),
    controller: AccessController = Depends(get_access_controller)
):
    """Grant a grantee read access to one field, replacing any earlier grant."""
    return schemas.OperationResult(
        success=controller.grant(policy_id, request.grantee, request.field, granter=caller)
    )


@router.post("/policies/{policy_id}/grants/limit", response_model=schemas.OperationResult, responses=GRANT_ERRORS)
def grant_access_to_limit(
    request: schemas.GranteeRequest,
    policy_id: int = Path(..., ge=0, le=MAX_STORED_INT),
    caller: str = Depends(get_caller_identity),
    controller: AccessController = Depends(get_access_controller)
):
    return schemas.OperationResult(
        success=controller.grant_limit(policy_id, request.grantee, granter=caller)
    )


@router.post("/policies/{policy_id}/grants/premium", response_model=schemas.OperationResult, responses=GRANT_ERRORS)
def grant_access_to_premium(
    request: schemas.GranteeRequest,
    policy_id: int = Path(..., ge=0, le=MAX_STORED_INT),
    caller: str = Depends(get_caller_identity),
    controller: AccessController = Depends(get_access_controller)
):
    return schemas.OperationResult(
        success=controller.grant_premium(policy_id, request.grantee, granter=caller)
    )


@router.get("/policies/{policy_id}/limit", response_model=schemas.FieldValueResponse, responses=READ_ERRORS)
def access_policy_limit(
    policy_id: int = Path(..., ge=0, le=MAX_STORED_INT),
    caller: str = Depends(get_caller_identity),
    controller: AccessController = Depends(get_access_controller)
):
    """Read the coverage limit. Requires a limit grant for the caller."""
    value = controller.read_limit(policy_id, caller)
    return schemas.FieldValueResponse(policy_id=policy_id, field=FieldTag.LIMIT, value=value)


@router.get("/policies/{policy_id}/premium", response_model=schemas.FieldValueResponse, responses=READ_ERRORS)
def access_policy_premium(
    policy_id: int = Path(..., ge=0, le=MAX_STORED_INT),
    caller: str = Depends(get_caller_identity),
    controller: AccessController = Depends(get_access_controller)
):
    """Read the premium paid. Requires a premium grant for the caller."""
    value = controller.read_premium(policy_id, caller)
    return schemas.FieldValueResponse(policy_id=policy_id, field=FieldTag.PREMIUM, value=value)
