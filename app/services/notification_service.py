# app/services/notification_service.py
import logging
from collections.abc import Callable
from dataclasses import dataclass
from html import escape

from app.core.config import Settings
from app.core.email_client import send_email
from app.schemas.inquiry import ContactRequest, QuoteRequest

logger = logging.getLogger(__name__)

COMPANY_NAME = "Goodwill Global Exports"

CONTACT_REPLY_SUBJECT = "Thank you for contacting Goodwill Global Exports"
QUOTE_REPLY_SUBJECT = "We successfully received your Quote Request"


@dataclass
class OutgoingEmail:
    to_email: str
    subject: str
    html_body: str
    reply_to: str | None = None


def _e(value: str | None) -> str:
    return escape(value or "")


def contact_inquiry_html(data: ContactRequest) -> str:
    return f"""
      <h2>New Contact Form Submission</h2>
      <p><strong>Name:</strong> {_e(data.name)}</p>
      <p><strong>Email:</strong> {_e(data.email)}</p>
      <p><strong>Message:</strong></p>
      <blockquote style="background: #f9f9f9; padding: 10px; border-left: 5px solid #ccc;">
        {_e(data.message)}
      </blockquote>
    """


def quote_inquiry_html(data: QuoteRequest) -> str:
    extra = _e(data.additional_requirements) if data.additional_requirements else "None"
    return f"""
      <h2>New B2B Quote Request</h2>
      <h3>Corporate Information</h3>
      <ul>
        <li><strong>Company:</strong> {_e(data.company_name)}</li>
        <li><strong>Contact Person:</strong> {_e(data.contact_person)}</li>
        <li><strong>Email:</strong> {_e(data.email)}</li>
        <li><strong>Phone:</strong> {_e(data.phone)}</li>
      </ul>
      <h3>Logistics &amp; Supply</h3>
      <ul>
        <li><strong>Destination:</strong> {_e(data.country)}</li>
        <li><strong>Product:</strong> {_e(data.product_interest)}</li>
        <li><strong>Quantity:</strong> {_e(data.estimated_quantity)} MT</li>
        <li><strong>Frequency:</strong> {_e(data.frequency)}</li>
      </ul>
      <h3>Additional Details</h3>
      <p>{extra}</p>
    """


def auto_reply_html(name: str | None) -> str:
    return f"""
      <h3>Hello {_e(name)},</h3>
      <p>Thank you for reaching out to <strong>{COMPANY_NAME}</strong>.</p>
      <p>We have received your request and our team will review it shortly.
         You can expect a response within 24-48 business hours.</p>
      <br>
      <p>Best Regards,</p>
      <p><strong>{COMPANY_NAME} Team</strong></p>
      <p><em>Premium Quality. Global Reach.</em></p>
    """


class NotificationService:
    """
    Transactional email for the contact and quote forms.

    Contract:
      - one inquiry to the business inbox (Reply-To = submitter)
      - one auto-reply to the submitter
      - each send is attempted independently
      - failures are logged, never retried, never raised

    The `send_contact` / `send_quote` methods are meant to run as
    FastAPI background tasks after the HTTP response is produced.
    """

    def __init__(
        self,
        settings: Settings,
        sender: Callable[..., object] = send_email,
    ):
        self.settings = settings
        self.sender = sender

    # ----- Composition -----

    def compose_contact(self, data: ContactRequest) -> list[OutgoingEmail]:
        return [
            OutgoingEmail(
                to_email=self.settings.inbox_address or "",
                subject=f"New Contact Inquiry: {data.name}",
                html_body=contact_inquiry_html(data),
                reply_to=data.email,
            ),
            OutgoingEmail(
                to_email=data.email or "",
                subject=CONTACT_REPLY_SUBJECT,
                html_body=auto_reply_html(data.name),
            ),
        ]

    def compose_quote(self, data: QuoteRequest) -> list[OutgoingEmail]:
        return [
            OutgoingEmail(
                to_email=self.settings.inbox_address or "",
                subject=f"New Quote Request: {data.company_name}",
                html_body=quote_inquiry_html(data),
                reply_to=data.email,
            ),
            OutgoingEmail(
                to_email=data.email or "",
                subject=QUOTE_REPLY_SUBJECT,
                html_body=auto_reply_html(data.contact_person),
            ),
        ]

    # ----- Delivery -----

    def _deliver(self, email: OutgoingEmail, kind: str) -> bool:
        if not email.to_email:
            logger.error("Background email error (%s): no recipient for %r", kind, email.subject)
            return False
        try:
            self.sender(
                to_email=email.to_email,
                subject=email.subject,
                html_body=email.html_body,
                reply_to=email.reply_to,
                settings=self.settings,
            )
        except Exception:
            logger.exception("Background email error (%s): %r to %s", kind, email.subject, email.to_email)
            return False
        logger.info("Email sent (%s): %r to %s", kind, email.subject, email.to_email)
        return True

    def send_contact(self, data: ContactRequest) -> int:
        """Deliver contact emails; returns how many were sent."""
        return sum(self._deliver(m, "contact") for m in self.compose_contact(data))

    def send_quote(self, data: QuoteRequest) -> int:
        """Deliver quote emails; returns how many were sent."""
        return sum(self._deliver(m, "quote") for m in self.compose_quote(data))
