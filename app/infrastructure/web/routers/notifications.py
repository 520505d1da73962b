"""
Notifications router.
Handles booking confirmation/reminder emails and the manual test send.
"""

import json
import logging
from typing import Annotated, Any
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.application.dto.notification_dto import (
    ErrorResponseDTO,
    NotificationResponseDTO,
    TestEmailResponseDTO,
)
from app.application.use_cases.notification_use_cases import (
    SendBookingNotificationUseCase,
    SendTestEmailUseCase,
)
from app.domain.models.base import TransportError, ValidationError
from app.domain.models.booking import utc_timestamp
from app.infrastructure.web.dependencies import (
    get_send_notification_use_case,
    get_send_test_email_use_case,
)


logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_json_body(request: Request) -> Any:
    """Parsed JSON body, or None when the body is empty or not JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


@router.post(
    "/send-confirmation",
    response_model=NotificationResponseDTO,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={
        400: {"model": NotificationResponseDTO},
        429: {"model": ErrorResponseDTO},
        500: {"model": NotificationResponseDTO}
    }
)
async def send_confirmation(
    request: Request,
    use_case: Annotated[SendBookingNotificationUseCase, Depends(get_send_notification_use_case)]
):
    """
    Send a booking confirmation or reminder email.

    - **booking**: booking data; only `email` is required
    - **status**: `confirmed` sends the payment confirmation, anything else a reminder
    """
    logger.info(f"Received email request: {utc_timestamp()}")
    payload = await _read_json_body(request)

    try:
        result = await use_case.execute(payload)
    except ValidationError as e:
        logger.warning(f"Rejected email request: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "error": e.message}
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK if result.success else status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=result.to_dict()
    )


@router.get(
    "/test",
    response_model=TestEmailResponseDTO,
    response_model_exclude_none=True,
    responses={500: {"model": TestEmailResponseDTO}}
)
async def send_test_email(
    use_case: Annotated[SendTestEmailUseCase, Depends(get_send_test_email_use_case)]
):
    """
    Send the hardcoded test booking through the real rendering and delivery path.
    """
    try:
        recipient = await use_case.execute(None)
    except TransportError as e:
        logger.error(f"Test email failed: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": e.message}
        )

    return {
        "success": True,
        "message": "Test email sent successfully",
        "to": recipient
    }
