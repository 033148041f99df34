# send_test_email.py
import sys

from app.core.config import get_settings
from app.core.email_client import send_email


def main():
    settings = get_settings()
    to_email = sys.argv[1] if len(sys.argv) > 1 else settings.inbox_address
    if not to_email:
        sys.exit("Usage: python send_test_email.py <recipient> (or set BUSINESS_EMAIL)")

    print(f"Sending test email to {to_email} via {settings.SMTP_HOST}:{settings.SMTP_PORT}...")

    message_id = send_email(
        to_email=to_email,
        subject="[Goodwill Global Exports] Test Email",
        html_body="<h1>HTML Test Email</h1><p>This is a <b>test</b> email from the exports backend.</p>",
        text_body="This is a plain text test email from the exports backend.",
        settings=settings,
    )

    print(f"Email sent! Message-ID: {message_id}")


if __name__ == "__main__":
    main()
