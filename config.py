# wastenot_service/config.py
import os

# --- Firestore ---
INVENTORY_COLLECTION = "inventory"
USERS_COLLECTION = "users"

# Path to the Firebase service account key, relative to the project root.
SERVICE_ACCOUNT_PATH = os.environ.get(
    "WASTENOT_SERVICE_ACCOUNT",
    os.path.join(os.path.dirname(__file__), "service-account.json"),
)

# --- Auth ---
# Stamped into audit fields when no user is signed in.
UNKNOWN_USER = "Unknown"

# --- Reminders ---
# Hours before the chosen reminder date that the notification fires.
DEFAULT_NOTIFICATION_LEAD_TIME = 24.0
MIN_NOTIFICATION_LEAD_TIME = 0.0
MAX_NOTIFICATION_LEAD_TIME = 168.0
SECONDS_PER_HOUR = 3600

# --- Inventory ---
CATEGORIES = ["Dairy", "Vegetables", "Frozen", "Bakery", "Meat", "Other"]
DEFAULT_CATEGORY = "Dairy"
MIN_QUANTITY = 1

# --- Avatar uploads (Cloudinary unsigned upload) ---
AVATAR_PUBLIC_ID_PREFIX = "avatars-"
CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME", "")
CLOUDINARY_UPLOAD_PRESET = os.environ.get("CLOUDINARY_UPLOAD_PRESET", "")
CLOUDINARY_UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"

# --- Reverse geocoding (Nominatim) ---
GEOCODING_URL = os.environ.get(
    "GEOCODING_URL", "https://nominatim.openstreetmap.org/reverse"
)
GEOCODING_USER_AGENT = "wastenot-service/0.1"

# --- Logging ---
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
