# file: GREENCROSS/core/config.py
import os
import logging

logger = logging.getLogger("core.config")

# ==============================
# Mail relay (Brevo)
# ==============================
# ✅ In production, load from environment variables
BREVO_API_KEY = os.getenv("BREVO_API_KEY")
BREVO_SENDER_EMAIL = os.getenv("BREVO_SENDER_EMAIL", "no-reply@greencross.local")
BREVO_SENDER_NAME = os.getenv("BREVO_SENDER_NAME", "GreenCross Preorders")

# Fixed business inbox that receives every preorder
PREORDER_RECIPIENT = os.getenv("PREORDER_RECIPIENT", "greencrossmgmt@gmail.com")

# ==============================
# Rate limiting
# ==============================
PREORDER_RATE_LIMIT = os.getenv("PREORDER_RATE_LIMIT", "10/minute")

# ==============================
# HTTP
# ==============================
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

# Base URL the storefront client posts preorders to
API_BASE = os.getenv("API_BASE", "http://localhost:8000")
PREORDER_PATH = "/api/preorder"

# ==============================
# Client-side persistence
# ==============================
CART_STORAGE_PATH = os.getenv("CART_STORAGE_PATH", os.path.expanduser("~/.greencross/storage.json"))


def get_preorder_endpoint() -> str:
    """Full URL of the preorder endpoint, built from API_BASE."""
    return API_BASE.rstrip("/") + PREORDER_PATH


def is_mail_relay_configured() -> bool:
    if not BREVO_API_KEY:
        logger.warning("BREVO_API_KEY is not set; preorder emails cannot be sent")
        return False
    return True
