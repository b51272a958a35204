import logging

from PyQt5.QtWidgets import QMainWindow, QMessageBox, QLabel
from PyQt5.QtCore import QTimer, Qt, QUrl
from PyQt5.QtGui import QDesktopServices

from view import StorefrontMain, CartDialog, PreviewDialog, ContactDialog
from config import TOAST_MS
from handoff import order_url, contact_url, social_url
from products import get_product

logger = logging.getLogger(__name__)


def open_url(url):
    """Hand a link to the desktop (browser / WhatsApp)."""
    logger.info("Opening %s", url.split('?', 1)[0])
    return QDesktopServices.openUrl(QUrl(url))


class MainController(QMainWindow):
    def __init__(self, cart_service):
        super().__init__()
        self.setWindowTitle("My Foodshop")
        self.resize(1024, 768)

        # Data State
        self.cart_service = cart_service

        self.storefront = StorefrontMain()
        self.cart_dialog = CartDialog(self)
        self.preview = PreviewDialog(self)
        self.contact = ContactDialog(self)
        self.setCentralWidget(self.storefront)

        # Connect Signals
        self.storefront.item_added.connect(self.add_to_cart)
        self.storefront.preview_requested.connect(self.open_preview)
        self.storefront.cart_clicked.connect(self.open_cart)
        self.storefront.contact_clicked.connect(self.open_contact)
        self.storefront.social_clicked.connect(self.open_social)

        self.cart_dialog.update_qty.connect(self.update_cart_qty)
        self.cart_dialog.remove_item.connect(self.remove_from_cart)
        self.cart_dialog.clear_requested.connect(self.clear_cart)
        self.cart_dialog.checkout_requested.connect(self.checkout)

        self.preview.add_requested.connect(self.add_from_preview)
        self.contact.send_requested.connect(self.send_message)

        # Initial Load
        self.load_products()
        self.update_cart_ui()

    # --- DATA ---
    def load_products(self):
        self.storefront.populate_products(self.cart_service.catalog)

    def update_cart_ui(self):
        self.storefront.update_badge(self.cart_service.total_quantity())
        self.cart_dialog.update_cart_display(self.cart_service.items(), self.cart_service.total_price())

    # --- CART LOGIC ---
    def add_to_cart(self, product_id):
        if not self.cart_service.add(product_id):
            return
        self.update_cart_ui()
        self.show_toast("✓ Item added to cart")

    def add_from_preview(self, product_id):
        self.add_to_cart(product_id)
        self.preview.close()

    def update_cart_qty(self, product_id, change):
        if self.cart_service.update_qty(product_id, change):
            self.update_cart_ui()

    def remove_from_cart(self, product_id):
        if self.cart_service.remove(product_id):
            self.update_cart_ui()
            self.show_toast("✓ Item removed from cart")

    def clear_cart(self):
        if not self.cart_service.clear():
            return
        self.update_cart_ui()
        self.show_toast("✓ Cart cleared")

    # --- HANDOFF ---
    def checkout(self):
        url = order_url(self.cart_service)
        if url is None:
            self.show_toast("! Cart is empty")
            return
        open_url(url)
        self.show_toast("✓ Order sent to WhatsApp")

    def send_message(self, name, email, message):
        url = contact_url(name, email, message)
        if url is None:
            self.show_toast("! Please fill all fields")
            return
        open_url(url)
        self.contact.close()
        self.contact.clear_fields()
        self.show_toast("✓ Message sent")

    def open_social(self, network):
        url = social_url(network)
        if url:
            open_url(url)

    # --- NAV ---
    def open_cart(self):
        self.update_cart_ui()
        self.cart_dialog.show()

    def open_contact(self):
        self.contact.show()

    def open_preview(self, product_id):
        product = get_product(product_id, self.cart_service.catalog)
        if product is None:
            return
        self.preview.show_product(product)
        self.preview.show()

    def show_toast(self, message, duration_ms=TOAST_MS):
        """Show a temporary non-blocking toast label over the main window."""
        try:
            lbl = QLabel(message, self)
            lbl.setObjectName('ToastLabel')
            lbl.setStyleSheet("""
                QLabel#ToastLabel {
                    background-color: rgba(0,0,0,0.78);
                    color: white;
                    padding: 10px 14px;
                    border-radius: 8px;
                    font-size: 10pt;
                }
            """)
            lbl.setAttribute(Qt.WA_TransparentForMouseEvents)
            lbl.adjustSize()
            # bottom-right, above the footer
            x = max(10, self.width() - lbl.width() - 20)
            y = max(10, self.height() - lbl.height() - 100)
            lbl.move(x, y)
            lbl.show()
            lbl.raise_()

            def _hide():
                lbl.hide()
                lbl.deleteLater()

            QTimer.singleShot(duration_ms, _hide)
        except RuntimeError:
            # fallback to messagebox if toast fails
            QMessageBox.information(self, "Info", message)
