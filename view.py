from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGridLayout,
    QScrollArea, QFrame, QDialog, QLineEdit, QTextEdit, QFormLayout,
    QSizePolicy, QTableWidget, QTableWidgetItem, QHeaderView
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPixmap, QFont
import os

from config import BASE_DIR
from formatters import format_price


def load_pixmap(img_path):
    """Load a product image from an absolute or project-relative path. None if missing."""
    if not img_path or not isinstance(img_path, str):
        return None
    for candidate in (img_path, os.path.join(BASE_DIR, img_path)):
        if os.path.exists(candidate):
            pix = QPixmap(candidate)
            if not pix.isNull():
                return pix
    return None


# --- CUSTOM WIDGETS ---

class ClickableLabel(QLabel):
    clicked = pyqtSignal()

    def mousePressEvent(self, event):
        self.clicked.emit()
        super().mousePressEvent(event)


class ProductCard(QFrame):
    add_clicked = pyqtSignal(int)  # emits product id
    preview_clicked = pyqtSignal(int)

    def __init__(self, product):
        super().__init__()
        self.setObjectName("ProductCard")
        self.product_id = product.id
        self.setFixedSize(240, 340)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.img_lbl = ClickableLabel()
        self.img_lbl.setObjectName("ProductImage")
        self.img_lbl.setAlignment(Qt.AlignCenter)
        self.img_lbl.setFixedHeight(150)
        self.img_lbl.setCursor(Qt.PointingHandCursor)
        self.img_lbl.clicked.connect(lambda: self.preview_clicked.emit(self.product_id))
        pix = load_pixmap(product.img)
        if pix is not None:
            self.img_lbl.setPixmap(pix.scaled(240, 150, Qt.KeepAspectRatio, Qt.SmoothTransformation))
        else:
            self.img_lbl.setText(product.name)

        info_layout = QVBoxLayout()
        info_layout.setContentsMargins(10, 5, 10, 10)

        name_lbl = QLabel(product.name)
        name_lbl.setObjectName("ProductName")
        name_lbl.setWordWrap(True)

        desc_lbl = QLabel(product.desc)
        desc_lbl.setObjectName("ProductDesc")
        desc_lbl.setWordWrap(True)

        rating_lbl = QLabel(f"★ {product.rating}")
        rating_lbl.setObjectName("ProductRating")

        price_lbl = QLabel(format_price(product.price))
        price_lbl.setObjectName("ProductPrice")

        self.btn_add = QPushButton("Add to Cart")
        self.btn_add.setObjectName("AddToCartBtn")
        self.btn_add.setCursor(Qt.PointingHandCursor)
        self.btn_add.clicked.connect(lambda: self.add_clicked.emit(self.product_id))

        info_layout.addWidget(name_lbl)
        info_layout.addWidget(desc_lbl)
        info_layout.addWidget(rating_lbl)
        info_layout.addWidget(price_lbl)
        info_layout.addWidget(self.btn_add)

        layout.addWidget(self.img_lbl)
        layout.addLayout(info_layout)
        self.setLayout(layout)


# --- SCREENS ---

class StorefrontMain(QWidget):
    # Signals to Controller
    item_added = pyqtSignal(int)  # product id
    preview_requested = pyqtSignal(int)
    cart_clicked = pyqtSignal()
    contact_clicked = pyqtSignal()
    social_clicked = pyqtSignal(str)  # 'whatsapp' / 'facebook'

    def __init__(self):
        super().__init__()
        self.setObjectName("StorefrontMain")

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)

        # Top Bar
        top_bar = QWidget()
        top_bar.setObjectName("TopBar")
        top_layout = QHBoxLayout()

        title = QLabel("My Foodshop")
        title.setFont(QFont("Segoe UI", 18, QFont.Bold))

        self.btn_contact = QPushButton("Contact")
        self.btn_contact.clicked.connect(self.contact_clicked.emit)

        self.btn_cart = QPushButton("Cart (0)")
        self.btn_cart.setObjectName("CartBtn")
        self.btn_cart.clicked.connect(self.cart_clicked.emit)

        top_layout.addWidget(title)
        top_layout.addStretch(1)
        top_layout.addWidget(self.btn_contact)
        top_layout.addWidget(self.btn_cart)
        top_bar.setLayout(top_layout)

        # Product Grid
        self.grid_layout = QGridLayout()
        self.grid_layout.setSpacing(20)

        grid_widget = QWidget()
        grid_widget.setLayout(self.grid_layout)

        grid_scroll = QScrollArea()
        grid_scroll.setWidgetResizable(True)
        grid_scroll.setWidget(grid_widget)

        # Footer with social icons
        footer = QHBoxLayout()
        footer.addStretch(1)
        for network, label in (('whatsapp', 'WhatsApp'), ('facebook', 'Facebook')):
            btn = QPushButton(label)
            btn.setObjectName("SocialBtn")
            btn.setCursor(Qt.PointingHandCursor)
            btn.clicked.connect(lambda ch, n=network: self.social_clicked.emit(n))
            footer.addWidget(btn)

        main_layout.addWidget(top_bar)
        main_layout.addWidget(grid_scroll, 1)
        main_layout.addLayout(footer)
        self.setLayout(main_layout)

    def populate_products(self, products, columns=3):
        for i in reversed(range(self.grid_layout.count())):
            self.grid_layout.itemAt(i).widget().setParent(None)

        self.cards = []
        for index, product in enumerate(products):
            card = ProductCard(product)
            card.add_clicked.connect(self.item_added.emit)
            card.preview_clicked.connect(self.preview_requested.emit)
            self.grid_layout.addWidget(card, index // columns, index % columns)
            self.cards.append(card)

    def update_badge(self, count):
        self.btn_cart.setText(f"Cart ({count})")


class CartDialog(QDialog):
    update_qty = pyqtSignal(int, int)  # product id, change (+1/-1)
    remove_item = pyqtSignal(int)
    clear_requested = pyqtSignal()
    checkout_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("My Cart")
        self.setMinimumSize(520, 420)
        layout = QVBoxLayout()

        self.lbl_empty = QLabel("Your cart is empty")
        self.lbl_empty.setAlignment(Qt.AlignCenter)
        self.lbl_empty.setStyleSheet("color: #666; padding: 2em;")

        self.cart_table = QTableWidget()
        self.cart_table.setColumnCount(5)
        self.cart_table.setHorizontalHeaderLabels(["", "Item", "Qty", "Price", "Action"])
        self.cart_table.horizontalHeader().setSectionResizeMode(0, QHeaderView.Fixed)
        self.cart_table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)
        self.cart_table.setColumnWidth(0, 64)
        self.cart_table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeToContents)
        self.cart_table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeToContents)
        self.cart_table.horizontalHeader().setSectionResizeMode(4, QHeaderView.Fixed)
        self.cart_table.setColumnWidth(4, 90)
        self.cart_table.verticalHeader().setVisible(False)

        self.lbl_total = QLabel(f"Total: {format_price(0)}")
        self.lbl_total.setStyleSheet("font-size: 16pt; font-weight: bold; color: #27AE60;")

        btns = QHBoxLayout()
        self.btn_clear = QPushButton("Clear Cart")
        self.btn_clear.clicked.connect(self.clear_requested.emit)
        self.btn_checkout = QPushButton("Checkout")
        self.btn_checkout.setObjectName("CheckoutBtn")
        self.btn_checkout.clicked.connect(self.checkout_requested.emit)
        btn_close = QPushButton("Close")
        btn_close.clicked.connect(self.close)
        btns.addWidget(self.btn_clear)
        btns.addStretch(1)
        btns.addWidget(btn_close)
        btns.addWidget(self.btn_checkout)

        layout.addWidget(self.lbl_empty)
        layout.addWidget(self.cart_table)
        layout.addWidget(self.lbl_total)
        layout.addLayout(btns)
        self.setLayout(layout)

    @staticmethod
    def _thumbnail(img_path):
        lbl = QLabel()
        lbl.setObjectName("CartItemImage")
        lbl.setAlignment(Qt.AlignCenter)
        pix = load_pixmap(img_path)
        if pix is not None:
            lbl.setPixmap(pix.scaled(56, 56, Qt.KeepAspectRatio, Qt.SmoothTransformation))
        return lbl

    def update_cart_display(self, lines, total):
        self.cart_table.setRowCount(0)
        self.lbl_empty.setVisible(not lines)
        self.cart_table.setVisible(bool(lines))
        self.cart_table.setRowCount(len(lines))

        for row, line in enumerate(lines):
            self.cart_table.setCellWidget(row, 0, self._thumbnail(line.img))
            self.cart_table.setItem(row, 1, QTableWidgetItem(line.name))

            qty_widget = QWidget()
            qty_lay = QHBoxLayout()
            qty_lay.setContentsMargins(0, 0, 0, 0)
            btn_minus = QPushButton("-")
            btn_minus.setFixedSize(32, 32)
            btn_minus.clicked.connect(lambda ch, i=line.id: self.update_qty.emit(i, -1))
            lbl_q = QLabel(str(line.qty))
            lbl_q.setFixedWidth(36)
            lbl_q.setAlignment(Qt.AlignCenter)
            btn_plus = QPushButton("+")
            btn_plus.setFixedSize(32, 32)
            btn_plus.clicked.connect(lambda ch, i=line.id: self.update_qty.emit(i, 1))
            qty_lay.addWidget(btn_minus)
            qty_lay.addWidget(lbl_q)
            qty_lay.addWidget(btn_plus)
            qty_widget.setLayout(qty_lay)
            self.cart_table.setCellWidget(row, 2, qty_widget)

            self.cart_table.setItem(row, 3, QTableWidgetItem(format_price(line.total)))

            btn_rem = QPushButton("Remove")
            btn_rem.setStyleSheet("background-color: #E74C3C; color: white;")
            btn_rem.clicked.connect(lambda ch, i=line.id: self.remove_item.emit(i))
            self.cart_table.setCellWidget(row, 4, btn_rem)

        self.lbl_total.setText(f"Total: {format_price(total)}")


class PreviewDialog(QDialog):
    add_requested = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Product")
        self.setMinimumSize(380, 460)
        self.product_id = None
        layout = QVBoxLayout()

        self.img_lbl = QLabel()
        self.img_lbl.setAlignment(Qt.AlignCenter)
        self.img_lbl.setFixedHeight(220)
        self.lbl_title = QLabel()
        self.lbl_title.setFont(QFont("Segoe UI", 16, QFont.Bold))
        self.lbl_rating = QLabel()
        self.lbl_desc = QLabel()
        self.lbl_desc.setWordWrap(True)
        self.lbl_price = QLabel()
        self.lbl_price.setStyleSheet("font-size: 14pt; font-weight: bold;")

        btns = QHBoxLayout()
        self.btn_add = QPushButton("Add to Cart")
        self.btn_add.clicked.connect(self._on_add)
        btn_close = QPushButton("Close")
        btn_close.clicked.connect(self.close)
        btns.addWidget(btn_close)
        btns.addWidget(self.btn_add)

        layout.addWidget(self.img_lbl)
        layout.addWidget(self.lbl_title)
        layout.addWidget(self.lbl_rating)
        layout.addWidget(self.lbl_desc)
        layout.addWidget(self.lbl_price)
        layout.addLayout(btns)
        self.setLayout(layout)

    def show_product(self, product):
        self.product_id = product.id
        pix = load_pixmap(product.img)
        if pix is not None:
            self.img_lbl.setPixmap(pix.scaled(340, 220, Qt.KeepAspectRatio, Qt.SmoothTransformation))
        else:
            self.img_lbl.clear()
        self.lbl_title.setText(product.name)
        self.lbl_rating.setText(f"★ {product.rating}")
        self.lbl_desc.setText(product.desc)
        self.lbl_price.setText(format_price(product.price))

    def _on_add(self):
        if self.product_id:
            self.add_requested.emit(self.product_id)


class ContactDialog(QDialog):
    send_requested = pyqtSignal(str, str, str)  # name, email, message

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Contact Us")
        self.setMinimumSize(400, 340)
        layout = QVBoxLayout()

        form = QFormLayout()
        self.input_name = QLineEdit()
        self.input_email = QLineEdit()
        self.input_message = QTextEdit()
        form.addRow("Name:", self.input_name)
        form.addRow("Email:", self.input_email)
        form.addRow("Message:", self.input_message)

        btns = QHBoxLayout()
        btn_send = QPushButton("Send Message")
        btn_cancel = QPushButton("Cancel")
        btn_send.clicked.connect(self._on_send)
        btn_cancel.clicked.connect(self.close)
        btns.addWidget(btn_cancel)
        btns.addWidget(btn_send)

        layout.addLayout(form)
        layout.addLayout(btns)
        self.setLayout(layout)

    def _on_send(self):
        self.send_requested.emit(
            self.input_name.text(),
            self.input_email.text(),
            self.input_message.toPlainText(),
        )

    def clear_fields(self):
        self.input_name.clear()
        self.input_email.clear()
        self.input_message.clear()
