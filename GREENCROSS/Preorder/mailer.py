# Preorder/mailer.py
import logging
from typing import Tuple

import sib_api_v3_sdk
from sib_api_v3_sdk.rest import ApiException

from GREENCROSS.core import config
from GREENCROSS.Preorder.models import PreorderRequest

logger = logging.getLogger(__name__)


class MailRelayError(Exception):
    """The preorder email could not be handed to the relay."""


def _money(amount: float) -> str:
    return f"${amount:.2f}"


def compose_preorder_email(req: PreorderRequest) -> Tuple[str, str]:
    """
    Build (subject, plain-text body) for the business inbox.
    """
    customer = req.customer
    lines = [f"New preorder from {customer.fullName}", ""]
    lines.append(f"Phone: {customer.phoneNumber}")
    if customer.email:
        lines.append(f"Email: {customer.email}")
    lines.append("")
    lines.append(f"Pickup: {customer.pickupLocation} on {customer.pickupDate} at {customer.pickupTime}")
    lines.append("")
    lines.append("Items:")
    for item in req.items:
        lines.append(f"- {item.name} x{item.quantity} @ {_money(item.price)} = {_money(item.lineTotal)}")
    lines.append("")
    lines.append(f"Total: {_money(req.total)}")
    if customer.specialInstructions:
        lines.append("")
        lines.append("Special instructions:")
        lines.append(customer.specialInstructions)

    subject = f"New GreenCross preorder - {customer.fullName}"
    return subject, "\n".join(lines)


def _transactional_api() -> sib_api_v3_sdk.TransactionalEmailsApi:
    configuration = sib_api_v3_sdk.Configuration()
    configuration.api_key["api-key"] = config.BREVO_API_KEY
    return sib_api_v3_sdk.TransactionalEmailsApi(sib_api_v3_sdk.ApiClient(configuration))


def send_preorder_email(req: PreorderRequest) -> None:
    """
    Relay the preorder to the fixed business address through Brevo.
    Raises MailRelayError on any failure.
    """
    if not config.is_mail_relay_configured():
        raise MailRelayError("Mail relay is not configured")

    subject, text = compose_preorder_email(req)
    reply_to = None
    if req.customer.email:
        reply_to = {"email": str(req.customer.email), "name": req.customer.fullName}

    message = sib_api_v3_sdk.SendSmtpEmail(
        to=[{"email": config.PREORDER_RECIPIENT}],
        sender={"name": config.BREVO_SENDER_NAME, "email": config.BREVO_SENDER_EMAIL},
        subject=subject,
        text_content=text,
        reply_to=reply_to,
    )

    try:
        _transactional_api().send_transac_email(message)
    except ApiException as e:
        logger.error("Brevo rejected preorder email status=%s reason=%s", e.status, e.reason)
        raise MailRelayError(f"Email send failed: {e.reason}") from e
    except Exception as e:
        logger.exception("Unexpected error sending preorder email")
        raise MailRelayError(f"Email send failed: {e}") from e

    logger.info("Preorder email sent for %s (%d items)", req.customer.fullName, len(req.items))
