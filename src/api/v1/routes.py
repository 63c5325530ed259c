"""
API v1 routes.

Defines REST endpoints for the Event Registration API. The caller
identity comes from the X-Caller header; every operation acts on the
caller's own registration except the read-only lookups.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import get_call_context, get_registration_service
from src.api.models import (
    ConfigResponse,
    ErrorResponse,
    RegisterRequest,
    RegistrationResponse,
    UpdateConfigRequest,
)
from src.domain.exceptions import NotFound, Unauthorized, Unprocessable
from src.domain.models import CallContext, Registration
from src.domain.registration import RegistrationService

router = APIRouter(tags=["v1"])


def _to_response(registration: Registration) -> RegistrationResponse:
    return RegistrationResponse(address=registration.address, referrer=registration.referrer)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Registration not found")


@router.get(
    "/config",
    response_model=ConfigResponse,
    summary="Read service configuration",
)
async def read_config(
    service: RegistrationService = Depends(get_registration_service),
) -> ConfigResponse:
    """Return the admin identity and registration deadline."""
    config = service.config()
    return ConfigResponse(admin=config.admin, deadline=config.deadline)


@router.patch(
    "/config",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse, "description": "Caller is not the admin"}},
    summary="Change the registration deadline",
)
async def update_config(
    request_data: UpdateConfigRequest,
    ctx: CallContext = Depends(get_call_context),
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """
    Change the registration deadline.

    - **deadline**: New deadline in epoch milliseconds (not validated)

    Only the admin may call this.
    """
    try:
        service.update_config(ctx, request_data.deadline)
    except Unauthorized:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized",
        ) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/registrations/{address}",
    response_model=RegistrationResponse,
    responses={404: {"model": ErrorResponse, "description": "Registration not found"}},
    summary="Show a registration",
)
async def show(
    address: str,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """Look up the registration stored for an address."""
    try:
        registration = service.show(address)
    except NotFound:
        raise _not_found() from None
    return _to_response(registration)


@router.post(
    "/registrations",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {
            "model": ErrorResponse,
            "description": "Registration closed, self-referral or already registered",
        },
    },
    summary="Register the caller",
)
async def register(
    request_data: RegisterRequest,
    ctx: CallContext = Depends(get_call_context),
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """
    Register the caller.

    - **referrer**: Optional identity of whoever referred the caller
    """
    try:
        registration = service.register(ctx, request_data.referrer)
    except Unprocessable as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.reason,
        ) from None
    return _to_response(registration)


@router.patch(
    "/registrations",
    response_model=RegistrationResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Caller is not registered"},
        422: {"model": ErrorResponse, "description": "Self-referral"},
    },
    summary="Change the caller's referrer",
)
async def update(
    request_data: RegisterRequest,
    ctx: CallContext = Depends(get_call_context),
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """Replace the referrer on the caller's registration."""
    try:
        registration = service.update(ctx, request_data.referrer)
    except NotFound:
        raise _not_found() from None
    except Unprocessable as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.reason,
        ) from None
    return _to_response(registration)


@router.delete(
    "/registrations",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Caller is not registered"}},
    summary="Remove the caller's registration",
)
async def destroy(
    ctx: CallContext = Depends(get_call_context),
    service: RegistrationService = Depends(get_registration_service),
) -> Response:
    """Remove the caller's registration. Repeating the call returns 404."""
    try:
        service.destroy(ctx)
    except NotFound:
        raise _not_found() from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
