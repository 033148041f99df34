# app/core/email_client.py
from __future__ import annotations

"""
Email client utilities for the Goodwill Global Exports backend.

Responsibilities:
  - Read SMTP configuration from Settings.
  - Provide a single send_email(...) function for services to use.
  - Support both TLS (STARTTLS) and SSL connections.

Typical .env configuration (Gmail example with App Password):

    SMTP_HOST=smtp.gmail.com
    SMTP_PORT=465
    SMTP_USERNAME=exports@example.com
    SMTP_PASSWORD=<app password>
    SMTP_FROM_NAME=Goodwill Global Exports
    SMTP_USE_TLS=false
    SMTP_USE_SSL=true
    BUSINESS_EMAIL=sales@example.com
"""

import logging
import smtplib
from email.message import EmailMessage
from email.utils import make_msgid

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def _create_smtp_client(settings: Settings) -> smtplib.SMTP:
    """
    Create and return an SMTP client configured for TLS or SSL.

    Priority:
      - If SMTP_USE_SSL is True → use smtplib.SMTP_SSL (e.g., Gmail on 465).
      - Else → use smtplib.SMTP + optional STARTTLS if SMTP_USE_TLS is True.
    """
    if not settings.SMTP_HOST:
        raise RuntimeError("SMTP_HOST is not configured. Please set it in .env.")

    if settings.SMTP_USE_SSL:
        server: smtplib.SMTP = smtplib.SMTP_SSL(
            settings.SMTP_HOST, settings.SMTP_PORT, timeout=30
        )
    else:
        server = smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=30)
        if settings.SMTP_USE_TLS:
            server.starttls()

    return server


def build_message(
    settings: Settings,
    to_email: str,
    subject: str,
    html_body: str,
    text_body: str | None = None,
    reply_to: str | None = None,
) -> EmailMessage:
    """
    Build the MIME message: a plain-text part plus an HTML alternative.
    """
    msg = EmailMessage()

    sender = settings.sender_address
    msg["From"] = f"{settings.SMTP_FROM_NAME} <{sender}>" if sender else settings.SMTP_FROM_NAME
    msg["To"] = to_email
    msg["Subject"] = subject
    msg["Message-ID"] = make_msgid()
    if reply_to:
        msg["Reply-To"] = reply_to

    msg.set_content(text_body or "This message requires an HTML-capable email client.")
    msg.add_alternative(html_body, subtype="html")
    return msg


def send_email(
    to_email: str,
    subject: str,
    html_body: str,
    text_body: str | None = None,
    reply_to: str | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Send an email to a single recipient.

    Returns
    -------
    The Message-ID of the sent message.

    Raises
    ------
    RuntimeError:
        If required SMTP configuration is missing.
    smtplib.SMTPException:
        If the underlying SMTP connection or send fails.
    """
    settings = settings or get_settings()

    if not (settings.SMTP_HOST and settings.SMTP_USERNAME and settings.SMTP_PASSWORD):
        raise RuntimeError(
            "SMTP is not configured correctly. "
            "Please set SMTP_HOST, SMTP_USERNAME, and SMTP_PASSWORD in .env."
        )

    msg = build_message(settings, to_email, subject, html_body, text_body, reply_to)

    server = _create_smtp_client(settings)
    try:
        server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
        server.send_message(msg)
    finally:
        try:
            server.quit()
        except (smtplib.SMTPException, OSError):
            # Connection is being torn down anyway.
            logger.debug("SMTP quit failed", exc_info=True)

    return msg["Message-ID"]
