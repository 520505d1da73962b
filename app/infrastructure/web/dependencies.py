"""
FastAPI dependencies for the notification endpoints.
The transport and template loader are built once per application and kept on app.state.
"""

from typing import Annotated
from fastapi import Depends, Request

from app.config import Settings
from app.domain.services.mail_transport import MailTransport
from app.infrastructure.email.template_loader import EmailTemplateLoader
from app.application.use_cases.notification_use_cases import (
    SendBookingNotificationUseCase,
    SendTestEmailUseCase,
)


def get_app_settings(request: Request) -> Settings:
    """Dependency to get the settings the application was built with."""
    return request.app.state.settings


def get_mail_transport(request: Request) -> MailTransport:
    """Dependency to get the shared mail transport."""
    return request.app.state.mail_transport


def get_template_loader(request: Request) -> EmailTemplateLoader:
    """Dependency to get the email template loader."""
    return request.app.state.template_loader


def get_send_notification_use_case(
    transport: Annotated[MailTransport, Depends(get_mail_transport)],
    template_loader: Annotated[EmailTemplateLoader, Depends(get_template_loader)],
    settings: Annotated[Settings, Depends(get_app_settings)]
) -> SendBookingNotificationUseCase:
    return SendBookingNotificationUseCase(transport, template_loader, settings)


def get_send_test_email_use_case(
    transport: Annotated[MailTransport, Depends(get_mail_transport)],
    template_loader: Annotated[EmailTemplateLoader, Depends(get_template_loader)],
    settings: Annotated[Settings, Depends(get_app_settings)]
) -> SendTestEmailUseCase:
    return SendTestEmailUseCase(transport, template_loader, settings)
