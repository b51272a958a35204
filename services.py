#Cart service
import json
import logging
import math
from collections import namedtuple

from config import CART_KEY
from formatters import format_order_message
from models import Cart, CartLine
from products import get_product, get_product_by_name, list_products

logger = logging.getLogger(__name__)

CheckoutSummary = namedtuple('CheckoutSummary', ['lines', 'total', 'text'])


def coerce_qty(value):
    """Turn a persisted quantity into a usable positive integer.

    Missing, non-numeric, non-finite, zero and negative values all become 1.
    Numeric strings are accepted and fractions are truncated.
    """
    if value is None or isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return value if value >= 1 else 1
    try:
        qty = float(value)
    except (TypeError, ValueError, OverflowError):
        return 1
    if not math.isfinite(qty):
        return 1
    qty = int(qty)
    return qty if qty >= 1 else 1


class CartService:
    """Owns the cart and mirrors it into durable storage after every change.

    `storage` is anything with get_item(key) and set_item(key, value), such as
    database.DatabaseManager. Call load() once at startup.
    """

    def __init__(self, storage, catalog=None, key=CART_KEY):
        self.storage = storage
        self.catalog = list_products(catalog)
        self.key = key
        self.cart = Cart()

    # --- LOAD / PERSIST ---
    def load(self):
        raw = self.storage.get_item(self.key)
        records = []
        if raw is not None:
            try:
                parsed = json.loads(raw)
            except (TypeError, ValueError, RecursionError):
                logger.warning("Discarding unparsable cart data under %r", self.key)
                parsed = None
            if isinstance(parsed, list):
                records = parsed
            elif parsed is not None:
                logger.warning("Discarding cart data under %r: expected a list, got %s",
                               self.key, type(parsed).__name__)

        self.cart = Cart(self.normalize(records))
        self.persist()
        return self.cart.items

    def resolve(self, record):
        """Find the catalog product a raw record refers to: by id, then by name."""
        product = None
        if record.get('id') is not None:
            product = get_product(record['id'], self.catalog)
        if product is None and record.get('name'):
            product = get_product_by_name(record['name'], self.catalog)
        return product

    def normalize(self, records):
        lines = []
        by_id = {}
        for record in records:
            if not record or not isinstance(record, dict):
                continue

            product = self.resolve(record)
            if product is None:
                logger.info("Dropping cart entry with no matching product: id=%r name=%r",
                            record.get('id'), record.get('name'))
                continue

            raw_qty = record.get('qty')
            if raw_qty is None:
                raw_qty = record.get('quantity')
            qty = coerce_qty(raw_qty)

            existing = by_id.get(product.id)
            if existing is not None:
                existing.qty += qty
                continue

            img = record.get('img')
            if not isinstance(img, str):
                img = None
            line = CartLine.from_product(product, qty, img=img)
            by_id[product.id] = line
            lines.append(line)
        return lines

    def to_records(self):
        return [item.to_dict() for item in self.cart.items]

    def persist(self):
        ok = self.storage.set_item(self.key, json.dumps(self.to_records(), ensure_ascii=False))
        if ok is False:
            # The in-memory cart stays authoritative for the session.
            logger.warning("Cart could not be persisted; keeping it in memory only")
        return ok

    # --- MUTATIONS ---
    def add(self, product_id):
        product = get_product(product_id, self.catalog)
        if product is None:
            logger.info("Ignoring add of unknown product %r", product_id)
            return False
        self.cart.add(product, 1)
        self.persist()
        return True

    def update_qty(self, product_id, delta):
        # delta is a signed whole number of units
        if isinstance(delta, bool) or not isinstance(delta, int):
            logger.info("Ignoring non-integer quantity change %r", delta)
            return False
        if not self.cart.change_qty(product_id, delta):
            return False
        self.persist()
        return True

    def remove(self, product_id):
        if self.cart.get(product_id) is None:
            return False
        self.cart.remove(product_id)
        self.persist()
        return True

    def clear(self):
        if not self.cart.items:
            return False
        self.cart.clear()
        self.persist()
        return True

    # --- QUERIES ---
    def items(self):
        return list(self.cart.items)

    def is_empty(self):
        return len(self.cart) == 0

    def total_quantity(self):
        return self.cart.count

    def total_price(self):
        return self.cart.total

    def checkout_summary(self):
        """Describe the order for handoff, or None when there is nothing to order."""
        total = self.total_price()
        if total == 0:
            return None
        lines = [(item.name, item.qty) for item in self.cart.items]
        return CheckoutSummary(lines, total, format_order_message(lines, total))
