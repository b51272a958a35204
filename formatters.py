from config import CURRENCY_SYMBOL


def format_price(amount):
    """Whole-currency amount with thousands separators, e.g. ₦19,200."""
    return f"{CURRENCY_SYMBOL}{int(amount):,}"


def format_order_message(lines, total):
    """Format the order text sent on checkout.

    `lines` is a sequence of (name, qty) pairs.
    """
    items = ', '.join(f"{name} x{qty}" for name, qty in lines)
    return f"Order: {items}\nTotal: {format_price(total)}"


def format_contact_message(name, email, message):
    return f"Name: {name}\nEmail: {email}\nMessage: {message}"
