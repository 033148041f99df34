# tests/test_notification_service.py
from app.core.config import Settings
from app.schemas.inquiry import ContactRequest, QuoteRequest
from app.services.notification_service import (
    CONTACT_REPLY_SUBJECT,
    QUOTE_REPLY_SUBJECT,
    NotificationService,
)


class FlakySender:
    """Fails the first call, accepts the rest."""

    def __init__(self):
        self.calls = 0
        self.delivered = []

    def __call__(self, **kwargs):
        self.calls += 1
        if self.calls == 1:
            raise OSError("connection reset")
        self.delivered.append(kwargs["to_email"])


def _settings(**overrides) -> Settings:
    values = {"SMTP_USERNAME": "exports@example.com", "SMTP_PASSWORD": "pw"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_inbox_falls_back_to_sender_address():
    service = NotificationService(_settings())
    messages = service.compose_contact(
        ContactRequest(name="A", email="a@example.com", message="hi")
    )

    assert messages[0].to_email == "exports@example.com"
    assert messages[1].subject == CONTACT_REPLY_SUBJECT


def test_user_input_is_html_escaped():
    service = NotificationService(_settings(BUSINESS_EMAIL="sales@example.com"))
    inquiry, _ = service.compose_contact(
        ContactRequest(name="<b>Eve</b>", email="e@example.com", message="<script>x</script>")
    )

    assert "<script>" not in inquiry.html_body
    assert "&lt;script&gt;" in inquiry.html_body
    assert "&lt;b&gt;Eve&lt;/b&gt;" in inquiry.html_body


def test_quote_composition_uses_camel_case_payload():
    data = QuoteRequest.model_validate(
        {
            "companyName": "Spice Co",
            "contactPerson": "Mia",
            "email": "mia@spice.example",
            "additionalRequirements": "Jute bags only",
        }
    )
    inquiry, reply = NotificationService(_settings()).compose_quote(data)

    assert inquiry.subject == "New Quote Request: Spice Co"
    assert "Jute bags only" in inquiry.html_body
    assert reply.subject == QUOTE_REPLY_SUBJECT
    assert reply.to_email == "mia@spice.example"


def test_each_send_is_attempted_independently():
    sender = FlakySender()
    service = NotificationService(_settings(BUSINESS_EMAIL="sales@example.com"), sender=sender)

    sent = service.send_contact(ContactRequest(name="A", email="a@example.com", message="hi"))

    assert sent == 1
    assert sender.calls == 2
    assert sender.delivered == ["a@example.com"]


def test_missing_inbox_is_logged_not_raised(caplog):
    service = NotificationService(Settings(_env_file=None), sender=lambda **kw: None)

    sent = service.send_contact(ContactRequest(name="A", email="a@example.com", message="hi"))

    assert sent == 1
    assert "no recipient" in caplog.text
