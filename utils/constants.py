import os

from dotenv import load_dotenv

load_dotenv()


MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "nearby_restaurants")
ENVIRONMENT = os.getenv("ENVIRONMENT", "production")
IS_DEVELOPMENT = ENVIRONMENT.lower() == "development"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT = int(os.getenv("PORT", "5000"))
API_PREFIX = os.getenv("API_PREFIX", "/api/v1")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{PORT}{API_PREFIX}")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

DEFAULT_RADIUS_KM = 2.0
MIN_RADIUS_KM = 0.1
MAX_RADIUS_KM = 50.0
DEFAULT_NEARBY_LIMIT = 50
DEFAULT_PAGE_LIMIT = 20
MAX_LIMIT = 100
