# app/routers/inquiries.py
from fastapi import APIRouter, BackgroundTasks, Depends

from app.core.deps import get_notification_service
from app.core.errors import MissingFieldsError
from app.schemas.inquiry import ContactRequest, MessageResponse, QuoteRequest
from app.services.notification_service import NotificationService

router = APIRouter(tags=["Inquiries"])


@router.post("/contact", response_model=MessageResponse)
def submit_contact(
    payload: ContactRequest,
    background_tasks: BackgroundTasks,
    notifications: NotificationService = Depends(get_notification_service),
):
    """
    Contact form.

    - 400 if name, email or message is missing.
    - Responds right away; email delivery runs after the response and
      its outcome is only logged.
    """
    missing = payload.missing_fields()
    if missing:
        raise MissingFieldsError(missing)

    background_tasks.add_task(notifications.send_contact, payload)
    return MessageResponse(message="Email sent successfully")


@router.post("/quote", response_model=MessageResponse)
def submit_quote(
    payload: QuoteRequest,
    background_tasks: BackgroundTasks,
    notifications: NotificationService = Depends(get_notification_service),
):
    """
    B2B quote request form. Same delivery contract as /contact.
    """
    missing = payload.missing_fields()
    if missing:
        raise MissingFieldsError(missing)

    background_tasks.add_task(notifications.send_quote, payload)
    return MessageResponse(message="Quote request sent successfully")
