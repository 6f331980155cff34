"""Configuration: env, data file locations, image reference kind."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of tirthatlas package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so TIRTH_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("TIRTH_DATA_DIR", str(BASE_DIR / "data")))
ATTRIBUTES_PATH = DATA_DIR / os.getenv("TIRTH_ATTRIBUTES_FILE", "final.json")
IMAGE_MAPPING_PATH = DATA_DIR / os.getenv("TIRTH_IMAGE_MAPPING_FILE", "image_mapping.json")

# API
API_HOST = os.getenv("TIRTH_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("TIRTH_API_PORT", "8000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("TIRTH_CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("TIRTH_LOG_LEVEL", "INFO").upper()

# Image references in one deployment are either bundled asset handles or remote URLs.
# Plain strings in the mapping file are tagged with this kind unless they carry their own.
IMAGE_REF_KIND = os.getenv("TIRTH_IMAGE_REF_KIND", "url").lower()
if IMAGE_REF_KIND not in ("url", "asset"):
    IMAGE_REF_KIND = "url"

# Raw keys in the attribute sheet that identify a place rather than describe it
EXCLUDED_ROW_KEYS = frozenset(
    {
        "Formatted Text",
        "Original Value",
        "Tirth",
        "Name teerth",
        "Naam",
        "State",
        "Rajya",
    }
)
# Raw keys whose value names the state a row belongs to
STATE_ROW_KEYS = ("State", "Rajya")
# Raw keys (lower-cased) carrying coordinates; also hidden from display fields
LATITUDE_ROW_KEYS = frozenset({"latitude", "lat"})
LONGITUDE_ROW_KEYS = frozenset({"longitude", "lng", "long", "lon"})

# Structured records: identity-like keys dropped at every depth
EXCLUDED_RECORD_KEYS = frozenset({"id", "image", "name", "location"})

# Key inside a state's image entry holding that state's cover image
STATE_COVER_KEY = "image"
