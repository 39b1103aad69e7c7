"""WhatsApp Cloud API client for promotional messages.

Documentation: https://developers.facebook.com/docs/whatsapp/cloud-api
"""

import logging
import re
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import httpx

logger = logging.getLogger(__name__)

GRAPH_API_URL = "https://graph.facebook.com"
DEFAULT_API_VERSION = "v18.0"
RETRYABLE_CODES = frozenset({429, 500, 503})


@dataclass(frozen=True)
class WhatsAppConfig:
    """Credentials for the WhatsApp Business phone number."""

    phone_number_id: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION


@dataclass(frozen=True)
class MessageResult:
    """Outcome of sending one message."""

    phone: str
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[int] = None
    error_type: Optional[str] = None
    retried: bool = False


def format_phone_number(phone: str) -> str:
    """Normalise a phone number to WhatsApp's digits-only form.

    A bare 10-digit Indian number gets the 91 country code:
    ``+91 98765 43210`` and ``9876543210`` both become ``919876543210``.
    """
    cleaned = re.sub(r"\D", "", phone)
    if not cleaned.startswith("91") and len(cleaned) == 10:
        return "91" + cleaned
    return cleaned


class WhatsAppClient:
    """Synchronous client for sending text messages."""

    def __init__(
        self,
        config: WhatsAppConfig,
        http_client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the client.

        Args:
            config: Account credentials
            http_client: Optional preconfigured httpx client
            sleep: Delay function used between and before retried sends
        """
        self.config = config
        self.http_client = http_client or httpx.Client(timeout=10.0)
        self.sleep = sleep

    @property
    def messages_url(self) -> str:
        return (
            f"{GRAPH_API_URL}/{self.config.api_version}/"
            f"{self.config.phone_number_id}/messages"
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.http_client.close()

    def __enter__(self) -> "WhatsAppClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def send_message(self, to: str, message: str) -> MessageResult:
        """Send one text message. Never raises on API or network errors."""
        formatted_phone = format_phone_number(to)
        if len(formatted_phone) < 10:
            return MessageResult(
                phone=to,
                success=False,
                error="Invalid phone number format",
                error_code=400,
                error_type="INVALID_PARAMETER",
            )

        payload = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": formatted_phone,
            "type": "text",
            "text": {"preview_url": False, "body": message},
        }

        try:
            response = self.http_client.post(
                self.messages_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.config.access_token}"},
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("WhatsApp send to %s failed: %s", formatted_phone, e)
            return MessageResult(
                phone=to,
                success=False,
                error=str(e) or "Unknown error occurred",
                error_code=500,
                error_type="NETWORK_ERROR",
            )

        if response.is_error:
            error = data.get("error", {}) if isinstance(data, dict) else {}
            logger.warning(
                "WhatsApp API rejected message to %s: %s",
                formatted_phone,
                error.get("message", response.status_code),
            )
            return MessageResult(
                phone=to,
                success=False,
                error=error.get("message", "Failed to send message"),
                error_code=error.get("code", response.status_code),
                error_type=error.get("type", "API_ERROR"),
            )

        messages = data.get("messages") or [{}]
        return MessageResult(phone=to, success=True, message_id=messages[0].get("id"))

    def send_bulk(
        self, recipients: Sequence[tuple[str, str]], delay: float = 1.0
    ) -> list[MessageResult]:
        """Send messages one by one, pausing ``delay`` seconds between them.

        A failure with a 429/500/503 code is retried once after ``2 * delay``.
        """
        results = []
        for index, (phone, message) in enumerate(recipients):
            result = self.send_message(phone, message)
            if not result.success and result.error_code in RETRYABLE_CODES:
                logger.info("Retrying message to %s after error %s", phone, result.error_code)
                self.sleep(delay * 2)
                retry = self.send_message(phone, message)
                result = MessageResult(
                    phone=retry.phone,
                    success=retry.success,
                    message_id=retry.message_id,
                    error=retry.error,
                    error_code=retry.error_code,
                    error_type=retry.error_type,
                    retried=True,
                )
            results.append(result)

            if index < len(recipients) - 1:
                self.sleep(delay)

        sent = sum(1 for r in results if r.success)
        logger.info("Bulk send finished: %d/%d delivered", sent, len(results))
        return results
