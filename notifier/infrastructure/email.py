"""Mail transport that delivers notification emails via SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from notifier.config import Settings, get_settings
from notifier.domain.errors import TransportFailure

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                field = item.get("field")
                if message and field:
                    messages.append(f"{field}: {message}")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


class SendGridMailTransport:
    """Send single plain-text messages through the SendGrid REST API.

    Every way a message can fail to be accepted (missing configuration, an
    empty recipient, a client exception, a non-2xx response) surfaces as
    :class:`TransportFailure`.
    """

    def __init__(self, api_key: str | None, default_sender: str | None = None) -> None:
        self._api_key = api_key
        self._default_sender = default_sender

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SendGridMailTransport":
        settings = settings or get_settings()
        return cls(settings.sendgrid_api_key, settings.sendgrid_sender)

    def send(
        self, to: str, subject: str, body: str, *, sender: str | None = None
    ) -> None:
        from_email = sender or self._default_sender
        if not (self._api_key and from_email):
            raise TransportFailure("SendGrid configuration incomplete")

        recipient = (to or "").strip()
        if not recipient:
            raise TransportFailure("Recipient address is empty")

        message = Mail(
            from_email=from_email,
            to_emails=recipient,
            subject=subject,
            plain_text_content=body,
        )

        try:
            client = SendGridAPIClient(self._api_key)
            response = client.send(message)
        except Exception as exc:
            raise self._failure_from_exception(exc) from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            details = _extract_sendgrid_error_details(getattr(response, "body", None))
            if details:
                logger.error(
                    "SendGrid API responded with status %s: %s", status_code, details
                )
            else:
                logger.error("SendGrid API responded with status %s", status_code)
            raise TransportFailure(
                f"SendGrid API responded with status {status_code}",
                status_code=status_code if isinstance(status_code, int) else None,
                details=details,
            )

    @staticmethod
    def _failure_from_exception(exc: Exception) -> TransportFailure:
        status_code = getattr(exc, "status_code", None)
        details = _extract_sendgrid_error_details(getattr(exc, "body", None))

        if status_code and details:
            logger.error(
                "SendGrid API request failed with status %s: %s", status_code, details
            )
        elif status_code:
            logger.error("SendGrid API request failed with status %s", status_code)
        elif details:
            logger.error("SendGrid API request failed: %s", details)
        else:
            logger.error("Error sending email via SendGrid: %s", exc)

        return TransportFailure(
            f"SendGrid API request failed: {details or exc}",
            status_code=status_code if isinstance(status_code, int) else None,
            details=details,
        )


__all__ = ["SendGridMailTransport"]
