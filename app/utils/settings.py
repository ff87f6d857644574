# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Storefront Service")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
SEED_CATALOG = os.getenv("SEED_CATALOG", "true").lower() in ("1", "true", "yes")
CHECKOUT_LOCK_TIMEOUT_SECONDS = float(os.getenv("CHECKOUT_LOCK_TIMEOUT_SECONDS", 5))
