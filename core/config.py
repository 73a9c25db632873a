import os
from dotenv import load_dotenv

# Load .env so settings can be overridden without touching the shell
load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")

# Path: project_root/data/clinic.db
DEFAULT_DATABASE_URL = f"sqlite:///{os.path.join(DATA_DIR, 'clinic.db')}"

DATABASE_URL = os.getenv("CLINIC_DATABASE_URL", DEFAULT_DATABASE_URL)

LOG_LEVEL = os.getenv("CLINIC_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("CLINIC_LOG_FILE") or None

EXPORT_DIR = os.getenv("CLINIC_EXPORT_DIR", os.path.join(DATA_DIR, "exports"))
