from dataclasses import dataclass


def same_id(a, b):
    """Product ids are numbers; bools and numeric strings never match."""
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if not isinstance(a, (int, float)) or not isinstance(b, (int, float)):
        return False
    return a == b


#product model
@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: int
    desc: str = ''
    img: str = ''
    rating: float = 0.0


#cart line model
class CartLine:
    def __init__(self, id, name, price, img='', qty=1):
        self.id = id
        self.name = name
        self.price = price
        self.img = img
        self.qty = qty

    @classmethod
    def from_product(cls, product, qty=1, img=None):
        """Snapshot the display fields of `product` into a new line."""
        return cls(product.id, product.name, product.price,
                   img if img is not None else (product.img or ''), qty)

    @property
    def total(self):
        return self.price * self.qty

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'img': self.img,
            'qty': self.qty,
        }

    def __repr__(self):
        return f"CartLine(id={self.id!r}, name={self.name!r}, qty={self.qty!r})"


#cart model
class Cart:
    def __init__(self, lines=None):
        self.items = list(lines or [])

    def get(self, product_id):
        for item in self.items:
            if same_id(item.id, product_id):
                return item
        return None

    def add(self, product, qty=1):
        existing = self.get(product.id)
        if existing:
            existing.qty += qty
            return existing

        line = CartLine.from_product(product, qty)
        self.items.append(line)
        return line

    def change_qty(self, product_id, delta):
        """Add `delta` to a line's quantity, dropping the line at zero or below.

        Returns False when there is no line for `product_id`.
        """
        item = self.get(product_id)
        if item is None:
            return False
        item.qty += delta
        if item.qty <= 0:
            self.remove(product_id)
        return True

    def remove(self, product_id):
        self.items = [item for item in self.items if not same_id(item.id, product_id)]

    def clear(self):
        self.items = []

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def count(self):
        return sum(item.qty for item in self.items)

    @property
    def total(self):
        return sum(item.total for item in self.items)
