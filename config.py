"""Application configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = Path(os.getenv("CATALOG_DATA_DIR", str(BASE_DIR / "data")))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# App settings
APP_TITLE = "Product Categories"
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
