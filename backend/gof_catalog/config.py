import logging
import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

CATALOG_LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "INFO")
PATTERN_CATALOG_PATH = os.getenv("PATTERN_CATALOG_PATH") or None
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]


def configure_logging(level: str = CATALOG_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
