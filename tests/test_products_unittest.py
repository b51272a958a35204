import os
import unittest
import dataclasses
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import Product, Cart, CartLine, same_id
from products import PRODUCTS, get_product, get_product_by_name, list_products


class CatalogTests(unittest.TestCase):
    def test_ids_unique(self):
        ids = [p.id for p in PRODUCTS]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(len(list_products()), 6)

    def test_products_are_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            PRODUCTS[0].price = 1

    def test_get_product(self):
        self.assertEqual(get_product(5).name, 'Gari (5kg)')
        self.assertIsNone(get_product(99))
        self.assertIsNone(get_product('1'))
        self.assertIsNone(get_product(True))

    def test_get_product_by_name_first_match(self):
        catalog = [Product(7, 'Egusi', 100), Product(8, 'Egusi', 200)]
        self.assertEqual(get_product_by_name('Egusi', catalog).id, 7)
        self.assertIsNone(get_product_by_name('', catalog))
        self.assertEqual(get_product_by_name('Palm Oil (5L)').price, 11500)


class CartModelTests(unittest.TestCase):
    def test_add_change_remove(self):
        cart = Cart()
        rice = get_product(1)
        cart.add(rice)
        cart.add(rice, 2)
        self.assertEqual(len(cart), 1)
        self.assertEqual(cart.get(1).qty, 3)
        self.assertTrue(cart.change_qty(1, -3))
        self.assertIsNone(cart.get(1))
        self.assertFalse(cart.change_qty(1, 1))

    def test_cart_ignores_boolean_and_string_ids(self):
        cart = Cart()
        cart.add(get_product(1))
        self.assertIsNone(cart.get(True))
        self.assertIsNone(cart.get("1"))
        self.assertFalse(cart.change_qty(True, 5))
        cart.remove(True)
        self.assertEqual(cart.get(1).qty, 1)
        self.assertTrue(same_id(1, 1.0))
        self.assertFalse(same_id(1, True))

    def test_line_total_and_dict(self):
        line = CartLine.from_product(get_product(3), qty=2)
        self.assertEqual(line.total, 4400)
        self.assertEqual(line.to_dict(), {
            'id': 3, 'name': 'Ripe Plantain (Bunch)', 'price': 2200,
            'img': 'Assets/Items/Ripe plantain.JPG', 'qty': 2,
        })


if __name__ == '__main__':
    unittest.main()
