"""Best-effort email notifications.

A failed send is logged and swallowed; the operation that triggered it
still succeeds.
"""

import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


def notify(recipient: str, subject: str, body: str) -> bool:
    """Send one email, returning whether it went out."""
    if not recipient:
        logger.warning("Skipping notification %r: no recipient", subject)
        return False
    try:
        send_mail(
            subject=subject,
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient],
        )
    except (SMTPException, OSError):
        logger.exception("Failed to send notification %r to %s", subject, recipient)
        return False
    logger.info("Notification %r sent to %s", subject, recipient)
    return True
