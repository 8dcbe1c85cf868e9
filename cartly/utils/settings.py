# cartly/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

SHOPIFY_DOMAIN = os.getenv("SHOPIFY_DOMAIN", "storecartly1.myshopify.com")
STOREFRONT_ACCESS_TOKEN = os.getenv("STOREFRONT_ACCESS_TOKEN", "")
STOREFRONT_API_VERSION = os.getenv("STOREFRONT_API_VERSION", "2025-04")
STOREFRONT_API_URL = os.getenv(
    "STOREFRONT_API_URL",
    f"https://{SHOPIFY_DOMAIN}/api/{STOREFRONT_API_VERSION}/graphql.json",
)
STOREFRONT_TIMEOUT = float(os.getenv("STOREFRONT_TIMEOUT", 10))
PRODUCTS_PAGE_SIZE = int(os.getenv("PRODUCTS_PAGE_SIZE", 20))

REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/1")
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")

CART_STORAGE_KEY = os.getenv("CART_STORAGE_KEY", "cartly-cart")
THEME_STORAGE_KEY = os.getenv("THEME_STORAGE_KEY", "cartly-darkMode")

NOTIFICATION_BASE_TIMEOUT_MS = int(os.getenv("NOTIFICATION_BASE_TIMEOUT_MS", 3000))
NOTIFICATION_STACK_DELAY_MS = int(os.getenv("NOTIFICATION_STACK_DELAY_MS", 500))
NOTIFICATION_MIN_TIMEOUT_MS = int(os.getenv("NOTIFICATION_MIN_TIMEOUT_MS", 1000))
MAX_NOTIFICATIONS = int(os.getenv("MAX_NOTIFICATIONS", 3))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
