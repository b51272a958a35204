import os
import tempfile
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import DatabaseManager


class DatabaseTests(unittest.TestCase):
    def setUp(self):
        tf = tempfile.NamedTemporaryFile(delete=False)
        tf.close()
        self.db_path = tf.name
        self.mgr = DatabaseManager(db_name=self.db_path)

    def tearDown(self):
        for suffix in ('', '-wal', '-shm'):
            try:
                os.unlink(self.db_path + suffix)
            except OSError:
                pass

    def test_check_schema_creates_storage_table(self):
        conn = self.mgr.connect()
        cur = conn.cursor()
        cur.execute("SELECT name FROM sqlite_master WHERE type='table'")
        names = {r[0] for r in cur.fetchall()}
        conn.close()
        self.assertIn('storage', names)

    def test_get_missing_key(self):
        self.assertIsNone(self.mgr.get_item('cart'))

    def test_set_get_and_overwrite(self):
        self.assertTrue(self.mgr.set_item('cart', '[1]'))
        self.assertEqual(self.mgr.get_item('cart'), '[1]')
        self.mgr.set_item('cart', '[]')
        self.assertEqual(self.mgr.get_item('cart'), '[]')

    def test_value_survives_new_manager(self):
        self.mgr.set_item('cart', '[{"id": 1}]')
        other = DatabaseManager(db_name=self.db_path)
        self.assertEqual(other.get_item('cart'), '[{"id": 1}]')

    def test_remove_item(self):
        self.mgr.set_item('cart', '[]')
        self.assertTrue(self.mgr.remove_item('cart'))
        self.assertIsNone(self.mgr.get_item('cart'))

    def test_set_item_recreates_missing_table(self):
        conn = self.mgr.connect()
        conn.execute("DROP TABLE storage")
        conn.commit()
        conn.close()
        self.assertTrue(self.mgr.set_item('cart', '[]'))
        self.assertEqual(self.mgr.get_item('cart'), '[]')


if __name__ == '__main__':
    unittest.main()
