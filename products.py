from models import Product, same_id

# Static catalog, the source of truth for product id, name, price and image.
PRODUCTS = (
    Product(1, 'Ofada Rice (5kg)', 8500, 'Premium local rice', 'Assets/Items/Ofada rice.JPG', 4.8),
    Product(2, 'Poundo Yam (2kg)', 6800, 'Fresh poundo yam', 'Assets/Items/Poundo yam.JPG', 4.6),
    Product(3, 'Ripe Plantain (Bunch)', 2200, 'Organic ripe plantain', 'Assets/Items/Ripe plantain.JPG', 4.7),
    Product(4, 'Honey Beans (3kg)', 7200, 'Quality honey beans', 'Assets/Items/Honey beans.JPG', 4.5),
    Product(5, 'Gari (5kg)', 8800, 'Premium quality gari', 'Assets/Items/Gari.jpg', 4.9),
    Product(6, 'Palm Oil (5L)', 11500, 'Pure palm oil', 'Assets/Items/palm oil.jpg', 4.7),
)


def list_products(catalog=None):
    return list(PRODUCTS if catalog is None else catalog)


def get_product(id, catalog=None):
    for product in (PRODUCTS if catalog is None else catalog):
        if same_id(product.id, id):
            return product
    return None


def get_product_by_name(name, catalog=None):
    # First match wins when names repeat
    if not name:
        return None
    for product in (PRODUCTS if catalog is None else catalog):
        if product.name == name:
            return product
    return None
