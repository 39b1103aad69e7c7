"""Outbound messaging for salontrack."""

from salontrack.messaging.whatsapp import (
    MessageResult,
    WhatsAppClient,
    WhatsAppConfig,
    format_phone_number,
)

__all__ = ["MessageResult", "WhatsAppClient", "WhatsAppConfig", "format_phone_number"]
