from urllib.parse import quote

from config import SOCIAL_LINKS, WHATSAPP_NUMBER
from formatters import format_contact_message

# Characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


def whatsapp_url(text, number=WHATSAPP_NUMBER):
    return f"https://wa.me/{number}?text={quote(text, safe=_URI_SAFE)}"


def order_url(cart_service, number=WHATSAPP_NUMBER):
    """Deep link carrying the checkout summary, or None for an empty cart."""
    summary = cart_service.checkout_summary()
    if summary is None:
        return None
    return whatsapp_url(summary.text, number)


def contact_url(name, email, message, number=WHATSAPP_NUMBER):
    """Deep link carrying a contact message, or None when a field is blank."""
    fields = [(v or '').strip() for v in (name, email, message)]
    if not all(fields):
        return None
    return whatsapp_url(format_contact_message(*fields), number)


def social_url(network):
    return SOCIAL_LINKS.get(network)
