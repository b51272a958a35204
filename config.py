import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Keep the storage file next to this module so the same cart is found
# regardless of the current working directory when launched.
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DB_NAME = os.getenv('FOODSHOP_DB', os.path.join(BASE_DIR, 'foodshop.db'))

# Storage key holding the serialized cart
CART_KEY = 'cart'

CURRENCY_SYMBOL = '₦'

# Order and contact messages go to this WhatsApp number
WHATSAPP_NUMBER = os.getenv('FOODSHOP_WHATSAPP', '2349131557676')

SOCIAL_LINKS = {
    'whatsapp': 'https://wa.me/+234913155667',
    'facebook': 'https://facebook.com/naijafoods',
}

LOG_LEVEL = os.getenv('FOODSHOP_LOG_LEVEL', 'INFO').upper()

try:
    TOAST_MS = int(os.getenv('FOODSHOP_TOAST_MS', '3000'))
except ValueError:
    TOAST_MS = 3000
