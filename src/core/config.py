from pathlib import Path
from decouple import config
from typing import List

# Environment
ENVIRONMENT = config("ENVIRONMENT", default="development")

# Cache
REDIS_URL = config("REDIS_URL", default="")

# Application settings
APP_NAME = config("APP_NAME", default="Public Defender Search")
APP_VERSION = config("APP_VERSION", default="0.1.0")
API_PREFIX = config("API_PREFIX", default="/api/v1")

# CORS Settings
CORS_ORIGINS = config("CORS_ORIGINS", default="http://localhost:5173").split(",")
CORS_METHODS = config("CORS_METHODS", default="GET,OPTIONS").split(",")
CORS_HEADERS = config("CORS_HEADERS", default="Content-Type,Accept,Accept-Language").split(",")

# Logging Settings
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
LOG_DIR = config("LOG_DIR", default="logs")
ACTIVITY_LOG_MAX_SIZE_MB = config("ACTIVITY_LOG_MAX_SIZE_MB", default=10, cast=int)
ACTIVITY_LOG_ROTATION = config("ACTIVITY_LOG_ROTATION", default="midnight")
ERROR_LOG_MAX_SIZE_MB = config("ERROR_LOG_MAX_SIZE_MB", default=10, cast=int)
ERROR_LOG_ROTATION = config("ERROR_LOG_ROTATION", default="midnight")

# Search Settings
SEARCH_DATA_DIR = config(
    "SEARCH_DATA_DIR",
    default=str(Path(__file__).resolve().parent.parent / "data")
)
SEARCH_DEFAULT_LIMIT = config("SEARCH_DEFAULT_LIMIT", default=20, cast=int)
SEARCH_MAX_LIMIT = config("SEARCH_MAX_LIMIT", default=50, cast=int)
SEARCH_MIN_QUERY_LENGTH = config("SEARCH_MIN_QUERY_LENGTH", default=2, cast=int)
SEARCH_MAX_QUERY_LENGTH = config("SEARCH_MAX_QUERY_LENGTH", default=100, cast=int)
SEARCH_CACHE_TTL = config("SEARCH_CACHE_TTL", default=3600, cast=int)
SEARCH_RATE_LIMIT = config("SEARCH_RATE_LIMIT", default=30, cast=int)
SEARCH_RATE_WINDOW = config("SEARCH_RATE_WINDOW", default=60, cast=int)

# Content Settings
DEFAULT_LANGUAGE = config("DEFAULT_LANGUAGE", default="en")

# Paths excluded from rate limiting and activity logging
UNTRACKED_PATHS = [
    "/docs",
    "/redoc",
    "/openapi.json",
    "/health",
]

# Settings class for FastAPI
class Settings:
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    api_prefix: str = API_PREFIX
    environment: str = ENVIRONMENT
    redis_url: str = REDIS_URL
    cors_origins: List[str] = CORS_ORIGINS
    cors_methods: List[str] = CORS_METHODS
    cors_headers: List[str] = CORS_HEADERS
    log_level: str = LOG_LEVEL
    log_dir: str = LOG_DIR
    activity_log_max_size_mb: int = ACTIVITY_LOG_MAX_SIZE_MB
    activity_log_rotation: str = ACTIVITY_LOG_ROTATION
    error_log_max_size_mb: int = ERROR_LOG_MAX_SIZE_MB
    error_log_rotation: str = ERROR_LOG_ROTATION
    search_data_dir: str = SEARCH_DATA_DIR
    search_default_limit: int = SEARCH_DEFAULT_LIMIT
    search_max_limit: int = SEARCH_MAX_LIMIT
    search_min_query_length: int = SEARCH_MIN_QUERY_LENGTH
    search_max_query_length: int = SEARCH_MAX_QUERY_LENGTH
    search_cache_ttl: int = SEARCH_CACHE_TTL
    search_rate_limit: int = SEARCH_RATE_LIMIT
    search_rate_window: int = SEARCH_RATE_WINDOW
    default_language: str = DEFAULT_LANGUAGE
    untracked_paths: List[str] = UNTRACKED_PATHS

# Create settings instance
settings = Settings()
