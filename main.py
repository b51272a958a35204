import sys
import os
import logging
from PyQt5.QtWidgets import QApplication

import config
from controller import MainController
from database import DatabaseManager
from services import CartService

# Enable logging
logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                    level=getattr(logging, config.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


def load_stylesheet(app):
    # Resolve relative to this script first, then cwd
    qss_path = os.path.join(os.path.dirname(__file__), "assets", "themes", "foodshop.qss")
    if not os.path.exists(qss_path):
        qss_path = os.path.join(os.getcwd(), "assets", "themes", "foodshop.qss")
    if not os.path.exists(qss_path):
        return
    try:
        with open(qss_path, 'r', encoding='utf-8') as fh:
            app.setStyleSheet(fh.read())
    except OSError:
        logger.warning("Could not read stylesheet %s", qss_path)


def build_cart_service(db_name=config.DB_NAME):
    """Open storage and load the persisted cart. Lives for the whole session."""
    storage = DatabaseManager(db_name=db_name)
    service = CartService(storage)
    service.load()
    logger.info("Cart loaded from %s: %d item(s)", db_name, service.total_quantity())
    return service


def main():
    app = QApplication(sys.argv)
    load_stylesheet(app)

    window = MainController(build_cart_service())
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
