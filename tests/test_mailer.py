import pytest
from sib_api_v3_sdk.rest import ApiException

from GREENCROSS.core import config
from GREENCROSS.Preorder import mailer
from GREENCROSS.Preorder.mailer import MailRelayError, compose_preorder_email, send_preorder_email
from GREENCROSS.Preorder.models import PreorderRequest


@pytest.fixture
def preorder(preorder_payload):
    preorder_payload["items"].append(
        {"productId": "glass-pipe", "name": "Hand-Blown Glass Pipe", "price": 30, "quantity": 1, "lineTotal": 30}
    )
    preorder_payload["total"] = 120
    preorder_payload["customer"]["specialInstructions"] = "Call when ready"
    return PreorderRequest.model_validate(preorder_payload)


class FakeTransactionalApi:
    def __init__(self, error=None):
        self.sent = []
        self.error = error

    def send_transac_email(self, message):
        if self.error:
            raise self.error
        self.sent.append(message)


def test_compose_preorder_email(preorder):
    subject, text = compose_preorder_email(preorder)
    assert subject == "New GreenCross preorder - John Doe"
    assert text.splitlines() == [
        "New preorder from John Doe",
        "",
        "Phone: (713) 555-0123",
        "Email: john@example.com",
        "",
        "Pickup: GreenCross Midtown on 2026-10-20 at 12:00 PM",
        "",
        "Items:",
        "- Blue Dream x2 @ $45.00 = $90.00",
        "- Hand-Blown Glass Pipe x1 @ $30.00 = $30.00",
        "",
        "Total: $120.00",
        "",
        "Special instructions:",
        "Call when ready",
    ]


def test_compose_omits_optional_sections(preorder_payload):
    preorder_payload["customer"].update(email=None, specialInstructions=None)
    _, text = compose_preorder_email(PreorderRequest.model_validate(preorder_payload))
    assert "Email:" not in text
    assert "Special instructions" not in text
    assert text.endswith("Total: $90.00")


def test_send_requires_configuration(preorder, monkeypatch):
    monkeypatch.setattr(config, "BREVO_API_KEY", None)
    with pytest.raises(MailRelayError):
        send_preorder_email(preorder)


def test_send_goes_to_business_inbox(preorder, monkeypatch):
    api = FakeTransactionalApi()
    monkeypatch.setattr(config, "BREVO_API_KEY", "xkeysib-test")
    monkeypatch.setattr(config, "PREORDER_RECIPIENT", "orders@greencross.test")
    monkeypatch.setattr(mailer, "_transactional_api", lambda: api)

    send_preorder_email(preorder)

    [message] = api.sent
    assert message.to == [{"email": "orders@greencross.test"}]
    assert message.subject == "New GreenCross preorder - John Doe"
    assert "Total: $120.00" in message.text_content
    assert message.reply_to == {"email": "john@example.com", "name": "John Doe"}


def test_send_wraps_relay_errors(preorder, monkeypatch):
    api = FakeTransactionalApi(error=ApiException(status=401, reason="Unauthorized"))
    monkeypatch.setattr(config, "BREVO_API_KEY", "xkeysib-test")
    monkeypatch.setattr(mailer, "_transactional_api", lambda: api)

    with pytest.raises(MailRelayError):
        send_preorder_email(preorder)
